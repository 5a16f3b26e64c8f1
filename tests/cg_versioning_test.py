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

"""Tests for commitgroup.versioning."""

from __future__ import annotations

import pytest
from commitgroup.config import GroupConfig, GroupDef
from commitgroup.errors import CommitGroupError
from commitgroup.grouping import group_commits
from commitgroup.versioning import BumpType, define_version, release_version, suggest_bump


class TestDefineVersion:
    """Tests for define_version()."""

    def test_explicit_version(self) -> None:
        """Test explicit version."""
        assert define_version('3.3.3') == '3.3.3'

    def test_explicit_prerelease(self) -> None:
        """Test explicit prerelease."""
        assert define_version('1.0.0-rc.1+build.5') == '1.0.0-rc.1+build.5'

    @pytest.mark.parametrize(
        ('keyword', 'current', 'expected'),
        [
            ('major', '3.3.3', '4.0.0'),
            ('minor', '3.3.3', '3.4.0'),
            ('patch', '3.3.3', '3.3.4'),
            ('patch', '2.0.0-beta.1', '2.0.0'),
        ],
    )
    def test_bump_keywords(self, keyword: str, current: str, expected: str) -> None:
        """Test bump keywords."""
        assert define_version(keyword, current) == expected

    def test_missing_version(self) -> None:
        """Test missing version."""
        with pytest.raises(CommitGroupError, match='Release requires a version'):
            define_version('')

    def test_bad_version(self) -> None:
        """Test bad version."""
        with pytest.raises(CommitGroupError, match="Version 'version' doesn't look right"):
            define_version('version')

    def test_bad_current_version(self) -> None:
        """Test bad current version."""
        with pytest.raises(CommitGroupError, match="Current version 'x' doesn't look right"):
            define_version('major', 'x')


class TestReleaseVersion:
    """Tests for release_version()."""

    def test_released_and_unreleased(self) -> None:
        """Test released and unreleased."""
        unreleased, released = group_commits(['h1 fix: a', 'h2 chore(release): 1.2.0', 'h3 feat: b'])
        assert release_version(unreleased) is None
        assert release_version(released) == '1.2.0'


class TestSuggestBump:
    """Tests for suggest_bump()."""

    def test_breaking_is_major(self) -> None:
        """Test breaking is major."""
        assert suggest_bump({'misc': ['h chore!: x'], 'breaking': ['h chore!: x']}) is BumpType.MAJOR

    def test_feat_is_minor(self) -> None:
        """Test feat is minor."""
        assert suggest_bump({'feat': ['h feat: x'], 'fix': ['h fix: y']}) is BumpType.MINOR

    def test_fix_is_patch(self) -> None:
        """Test fix is patch."""
        assert suggest_bump({'fix': ['h fix: y']}) is BumpType.PATCH

    def test_custom_group_keys(self) -> None:
        """Bumps follow the groups that collect feat and fix commits."""
        cfg = GroupConfig(
            groups=(
                GroupDef(label='## Features', types=('feature', 'feat')),
                GroupDef(label='## Fixes', types=('bugfix', 'fix')),
            ),
        )
        assert suggest_bump({'feature': ['h feat: x']}, cfg) is BumpType.MINOR
        assert suggest_bump({'bugfix': ['h fix: y']}, cfg) is BumpType.PATCH

    def test_no_fix_group(self) -> None:
        """Without a group for fix commits nothing counts as a patch."""
        cfg = GroupConfig(groups=())
        assert suggest_bump({'misc': ['h fix: y']}, cfg) is BumpType.NONE

    def test_misc_only_is_none(self) -> None:
        """Test misc only is none."""
        assert suggest_bump({'misc': ['h docs: y']}) is BumpType.NONE
