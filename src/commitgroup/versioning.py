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

"""Release-version helpers around grouped buckets.

- :func:`define_version` turns a requested version (explicit semver or
  a ``major``/``minor``/``patch`` keyword) into the next version.
- :func:`release_version` reads the version back out of a bucket's
  release marker.
- :func:`suggest_bump` proposes a semver bump from a bucket's contents.
"""

from __future__ import annotations

import re
from enum import Enum

from commitgroup.commit_parsing import parse_commit_line
from commitgroup.config import GroupConfig
from commitgroup.errors import CommitGroupError
from commitgroup.grouping import BREAKING_KEY, RELEASE_KEY, ReleaseBucket

__all__ = [
    'SEMVER_PATTERN',
    'BumpType',
    'define_version',
    'release_version',
    'suggest_bump',
]

SEMVER_PATTERN: re.Pattern[str] = re.compile(
    r'^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)'
    r'(?:-(?P<prerelease>[0-9A-Za-z.-]+))?'
    r'(?:\+(?P<build>[0-9A-Za-z.-]+))?$',
)


class BumpType(Enum):
    """Semver bump types, ordered by precedence (highest first)."""

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'


def _bump(current: str, bump: BumpType) -> str:
    match = SEMVER_PATTERN.match(current)
    if not match:
        raise CommitGroupError(
            f"Current version '{current}' doesn't look right",
            hint='Expected MAJOR.MINOR.PATCH.',
        )
    major, minor, patch = (int(match.group(g)) for g in ('major', 'minor', 'patch'))
    if bump is BumpType.MAJOR:
        return f'{major + 1}.0.0'
    if bump is BumpType.MINOR:
        return f'{major}.{minor + 1}.0'
    # A prerelease of the same patch is released as-is.
    if match.group('prerelease'):
        return f'{major}.{minor}.{patch}'
    return f'{major}.{minor}.{patch + 1}'


def define_version(requested: str, current: str = '') -> str:
    """Resolve the version of the next release.

    Args:
        requested: An explicit version (``"1.4.0"``) or one of
            ``major``, ``minor``, ``patch``.
        current: The version currently in the manifest, required for
            bump keywords.

    Returns:
        The version string to release.

    Raises:
        CommitGroupError: If ``requested`` is empty, is neither semver
            nor a bump keyword, or ``current`` is not semver.

    >>> define_version('major', '3.3.3')
    '4.0.0'
    >>> define_version('3.3.3')
    '3.3.3'
    """
    requested = requested.strip()
    if not requested:
        raise CommitGroupError('Release requires a version')
    if SEMVER_PATTERN.match(requested):
        return requested
    keywords = {b.value: b for b in (BumpType.MAJOR, BumpType.MINOR, BumpType.PATCH)}
    if requested in keywords:
        return _bump(current.strip(), keywords[requested])
    raise CommitGroupError(
        f"Version '{requested}' doesn't look right",
        hint='Pass MAJOR.MINOR.PATCH or one of major, minor, patch.',
    )


def release_version(bucket: ReleaseBucket) -> str | None:
    """Return the version of a bucket's release marker.

    ``None`` for the unreleased bucket.
    """
    marker = bucket.get(RELEASE_KEY)
    if not isinstance(marker, str):
        return None
    return parse_commit_line(marker)[1].release_version


def _bucket_key(commit_type: str, config: GroupConfig) -> str | None:
    group = config.match(commit_type)
    return group.key if group is not None else None


def suggest_bump(bucket: ReleaseBucket, config: GroupConfig | None = None) -> BumpType:
    """Propose a semver bump for the commits in ``bucket``.

    Breaking entries force ``MAJOR``; otherwise entries in the group
    collecting ``feat`` commits give ``MINOR`` and entries in the group
    collecting ``fix`` commits give ``PATCH``.

    Args:
        bucket: One bucket returned by
            :func:`~commitgroup.grouping.group_commits`.
        config: The configuration the bucket was grouped with.
            Defaults to :class:`~commitgroup.config.GroupConfig`
            defaults.
    """
    if config is None:
        config = GroupConfig()
    if bucket.get(BREAKING_KEY):
        return BumpType.MAJOR
    minor_key = _bucket_key('feat', config)
    if minor_key is not None and bucket.get(minor_key):
        return BumpType.MINOR
    patch_key = _bucket_key('fix', config)
    if patch_key is not None and bucket.get(patch_key):
        return BumpType.PATCH
    return BumpType.NONE
