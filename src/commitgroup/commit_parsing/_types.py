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

"""Pure types for commit line parsing.

Frozen dataclasses only: no I/O, no logging, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'CHANGELOG_SCOPE',
    'MISC_TYPE',
    'CommitLine',
    'ParsedSubject',
]

# Type assigned to subjects that are not conventional commits.
MISC_TYPE = 'misc'

# Commits touching the changelog file itself are never listed in it.
CHANGELOG_SCOPE = 'changelog'


@dataclass(frozen=True)
class CommitLine:
    """One ``<hash> <subject>`` line from a newest-first log listing.

    Attributes:
        hash: The commit hash, opaque and passed through unmodified.
            Empty when the line had no whitespace.
        subject: The commit subject, parsed by
            :func:`~commitgroup.commit_parsing.parse_subject`.
        raw: The original line exactly as received. This is the text
            stored in release buckets.
    """

    hash: str
    subject: str
    raw: str


@dataclass(frozen=True)
class ParsedSubject:
    """Conventional-commit structure extracted from a subject.

    Attributes:
        type: The commit type (``"feat"``, ``"fix"``, ...), or
            ``"misc"`` when the subject is not a conventional commit.
        scope: The parenthesized scope, ``None`` when absent or empty.
        breaking: ``True`` when ``!`` precedes the colon.
        description: Free text after ``": "`` (the whole subject for
            non-conventional commits).
        release_version: The version of a ``chore(release): <version>``
            marker, ``None`` for every other subject.
    """

    type: str
    description: str
    scope: str | None = None
    breaking: bool = False
    release_version: str | None = None

    @property
    def is_release(self) -> bool:
        """``True`` if this subject is a release marker."""
        return self.release_version is not None

    @property
    def is_changelog(self) -> bool:
        """``True`` if this subject is changelog maintenance."""
        return self.scope == CHANGELOG_SCOPE
