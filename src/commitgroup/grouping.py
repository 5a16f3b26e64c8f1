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

r"""Group a newest-first commit history into release buckets.

Key Concepts::

    ┌─────────────────────┬────────────────────────────────────────────────┐
    │ Concept             │ Meaning                                        │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Release marker      │ A ``chore(release): <version>`` commit. It     │
    │                     │ closes the bucket collected so far and opens   │
    │                     │ the bucket of the release it marks.            │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Bucket              │ Commits between two release markers, keyed by  │
    │                     │ group (``feat``, ``fix``, ...), ``misc``,      │
    │                     │ ``breaking`` and ``release``.                  │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Excluded commit     │ Scope listed in ``ignored_scopes``, or scope   │
    │                     │ ``changelog``. Never shown anywhere.           │
    └─────────────────────┴────────────────────────────────────────────────┘

Example (input is ``git log`` order, newest first)::

    a1 chore!: drop node 16          ─┐ unreleased bucket
    b2 refactor: split parser         ─┘
    c3 chore(release): 1.0.0         ─┐ bucket of release 1.0.0
    d4 feat: add release command      │
    e5 chore(changelog): update       ─┘ (excluded)

    group_commits(lines) == [
        {'breaking': ['a1 chore!: drop node 16'],
         'misc': ['a1 chore!: drop node 16', 'b2 refactor: split parser']},
        {'release': 'c3 chore(release): 1.0.0',
         'feat': ['d4 feat: add release command']},
    ]

Every stored entry is the raw input line, unmodified.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias, cast

from commitgroup.commit_parsing import ParsedSubject, parse_commit_line
from commitgroup.config import GroupConfig
from commitgroup.logging import get_logger

__all__ = [
    'BREAKING_KEY',
    'MISC_KEY',
    'RELEASE_KEY',
    'ReleaseBucket',
    'classify',
    'group_commits',
    'group_commits_async',
    'is_bucket_empty',
    'is_excluded',
]

logger = get_logger(__name__)

RELEASE_KEY = 'release'
BREAKING_KEY = 'breaking'
MISC_KEY = 'misc'

# Group keys map to lists of lines; ``release`` maps to a single line.
ReleaseBucket: TypeAlias = dict[str, list[str] | str]


def is_excluded(parsed: ParsedSubject, ignored_scopes: frozenset[str] | set[str]) -> bool:
    """Return ``True`` if the commit must not appear in any bucket.

    Args:
        parsed: A non-release parsed subject.
        ignored_scopes: Configured scopes to drop.
    """
    if parsed.scope is None:
        return False
    return parsed.is_changelog or parsed.scope in ignored_scopes


def classify(parsed: ParsedSubject, config: GroupConfig) -> str:
    """Return the bucket key for a non-excluded, non-release commit.

    The first configured group containing the commit type wins;
    unmatched types go to ``misc``. Whether the commit is also listed
    under ``breaking`` is decided separately from ``parsed.breaking``.
    """
    group = config.match(parsed.type)
    return group.key if group is not None else MISC_KEY


def is_bucket_empty(bucket: ReleaseBucket) -> bool:
    """Return ``True`` if no key has been set on ``bucket``."""
    return not bucket


def _append(bucket: ReleaseBucket, key: str, line: str) -> None:
    cast(list[str], bucket.setdefault(key, [])).append(line)


def group_commits(lines: Sequence[str], config: GroupConfig | None = None) -> list[ReleaseBucket]:
    """Group raw commit lines into release buckets.

    Args:
        lines: ``<hash> <subject>`` lines, newest first.
        config: Groups and ignored scopes. Defaults to
            :class:`~commitgroup.config.GroupConfig` defaults.

    Returns:
        Buckets in input order; the first one holds the most recent
        commits. Empty buckets are never returned, so an empty or
        fully excluded history yields ``[]``.
    """
    if config is None:
        config = GroupConfig()

    buckets: list[ReleaseBucket] = []
    current: ReleaseBucket = {}

    for line in lines:
        if not line.strip():
            continue

        commit, parsed = parse_commit_line(line)

        if parsed.is_release:
            if not is_bucket_empty(current):
                buckets.append(current)
            current = {RELEASE_KEY: line}
            logger.debug('release_marker', hash=commit.hash, version=parsed.release_version)
            continue

        if is_excluded(parsed, config.ignored_scopes):
            logger.debug('commit_skipped', hash=commit.hash, scope=parsed.scope)
            continue

        key = classify(parsed, config)
        _append(current, key, line)
        if parsed.breaking:
            _append(current, BREAKING_KEY, line)

    if not is_bucket_empty(current):
        buckets.append(current)

    logger.debug('commits_grouped', commits=len(lines), buckets=len(buckets))
    return buckets


async def group_commits_async(lines: Sequence[str], config: GroupConfig | None = None) -> list[ReleaseBucket]:
    """Coroutine form of :func:`group_commits`.

    Lets callers await grouping alongside their git and file I/O. The
    work itself never suspends.
    """
    return group_commits(lines, config)
