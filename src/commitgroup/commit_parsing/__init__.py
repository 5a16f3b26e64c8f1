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

r"""Commit line and subject parsing.

Turns raw ``<hash> <subject>`` log lines into :class:`CommitLine`
values and their subjects into :class:`ParsedSubject` values.

Usage::

    from commitgroup.commit_parsing import parse_commit_line

    commit, parsed = parse_commit_line('a1b2c3 feat(api)!: drop v1')
    assert commit.hash == 'a1b2c3'
    assert parsed.type == 'feat'
    assert parsed.scope == 'api'
    assert parsed.breaking is True

    _, marker = parse_commit_line('d4e5f6 chore(release): 1.0.0')
    assert marker.is_release
    assert marker.release_version == '1.0.0'

    _, other = parse_commit_line('0a0b0c Merge branch main')
    assert other.type == 'misc'
"""

from commitgroup.commit_parsing._conventional import (
    CC_PATTERN,
    RELEASE_PATTERN,
    parse_subject,
    split_commit_line,
)
from commitgroup.commit_parsing._types import (
    CHANGELOG_SCOPE,
    MISC_TYPE,
    CommitLine,
    ParsedSubject,
)


def parse_commit_line(line: str) -> tuple[CommitLine, ParsedSubject]:
    """Split a raw log line and parse its subject.

    Args:
        line: A ``<hash> <subject>`` line.

    Returns:
        ``(commit, parsed)``.
    """
    commit = split_commit_line(line)
    return commit, parse_subject(commit.subject)


__all__ = [
    'CC_PATTERN',
    'CHANGELOG_SCOPE',
    'MISC_TYPE',
    'RELEASE_PATTERN',
    'CommitLine',
    'ParsedSubject',
    'parse_commit_line',
    'parse_subject',
    'split_commit_line',
]
