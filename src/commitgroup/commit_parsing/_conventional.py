# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

r"""Conventional-commit subject parser.

Subject line syntax::

    type(scope)!: description

- ``type`` is a word (``feat``, ``fix``, ``chore``, ...). It is kept
  exactly as written: matching against configured groups is
  case-sensitive.
- ``(scope)`` is optional. An empty ``()`` counts as no scope.
- ``!`` immediately before the colon marks a breaking change.
- ``": "`` (colon and whitespace) is mandatory.

Release markers have the fixed shape ``chore(release): <version>`` and
are recognised before the general pattern, since their type and scope
would otherwise make them an ordinary ``chore`` commit.

Parsing is permissive: any subject that does not match becomes
``type="misc"`` with the whole subject as description. Nothing here
raises.

Pure implementation: depends only on ``re`` and :mod:`._types`.
"""

from __future__ import annotations

import re

from commitgroup.commit_parsing._types import MISC_TYPE, CommitLine, ParsedSubject

# chore(release): 1.2.0
RELEASE_PATTERN: re.Pattern[str] = re.compile(
    r'^chore\(release\):\s+'
    r'(?P<version>\S.*?)\s*$',
)

# type(scope)!: description
CC_PATTERN: re.Pattern[str] = re.compile(
    r'^(?P<type>[A-Za-z][\w-]*)'  # type (e.g. feat, fix, chore)
    r'(?:\((?P<scope>[^)]*)\))?'  # optional scope in parens
    r'(?P<breaking>!)?'  # optional breaking change indicator
    r':\s+'  # colon + whitespace
    r'(?P<description>.*)$',  # description
)


def split_commit_line(line: str) -> CommitLine:
    """Split a ``<hash> <subject>`` line on its first whitespace run.

    A line without whitespace has no discernible hash; it is treated
    as a bare subject so that it still lands in ``misc``.

    Args:
        line: One line of a ``git log --format='%H %s'`` style listing.

    Returns:
        The :class:`CommitLine`; ``raw`` keeps ``line`` unmodified.
    """
    parts = line.strip().split(None, 1)
    if len(parts) == 2:
        return CommitLine(hash=parts[0], subject=parts[1], raw=line)
    return CommitLine(hash='', subject=parts[0] if parts else '', raw=line)


def parse_subject(subject: str) -> ParsedSubject:
    """Parse a commit subject into its conventional-commit parts.

    Args:
        subject: The commit subject (first line of the message).

    Returns:
        A :class:`ParsedSubject`. Release markers carry
        ``release_version``; non-conventional subjects get the ``misc``
        type and keep ``subject`` exactly as received as description.
    """
    text = subject.strip()

    release = RELEASE_PATTERN.match(text)
    if release:
        version = release.group('version')
        return ParsedSubject(
            type='chore',
            scope='release',
            description=version,
            release_version=version,
        )

    match = CC_PATTERN.match(text)
    if not match:
        return ParsedSubject(type=MISC_TYPE, description=subject)

    return ParsedSubject(
        type=match.group('type'),
        scope=match.group('scope') or None,
        breaking=bool(match.group('breaking')),
        description=match.group('description'),
    )
