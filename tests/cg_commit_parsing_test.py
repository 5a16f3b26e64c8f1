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

"""Tests for commitgroup.commit_parsing."""

from __future__ import annotations

import pytest
from commitgroup.commit_parsing import (
    MISC_TYPE,
    CommitLine,
    ParsedSubject,
    parse_commit_line,
    parse_subject,
    split_commit_line,
)


class TestSplitCommitLine:
    """Tests for split_commit_line()."""

    def test_hash_and_subject(self) -> None:
        """Hash and subject are split on the first space."""
        c = split_commit_line('b2f5901 fix: support other conventions')
        assert c == CommitLine(
            hash='b2f5901',
            subject='fix: support other conventions',
            raw='b2f5901 fix: support other conventions',
        )

    def test_whitespace_run(self) -> None:
        """A run of whitespace counts as one separator."""
        c = split_commit_line('abc \t  feat: x')
        assert c.hash == 'abc'
        assert c.subject == 'feat: x'

    def test_subject_keeps_colons_and_parens(self) -> None:
        """Only the first whitespace run splits; the rest stays in the subject."""
        c = split_commit_line('abc feat(api): map a: b (c)')
        assert c.subject == 'feat(api): map a: b (c)'

    def test_raw_is_unmodified(self) -> None:
        """The raw line is kept byte for byte."""
        line = 'abc fix: trailing  '
        assert split_commit_line(line).raw == line

    def test_no_whitespace_is_subject_only(self) -> None:
        """A line without whitespace becomes a bare subject."""
        c = split_commit_line('lonely')
        assert c.hash == ''
        assert c.subject == 'lonely'

    def test_empty_line(self) -> None:
        """An empty line has neither hash nor subject."""
        c = split_commit_line('')
        assert c.hash == ''
        assert c.subject == ''


class TestParseSubject:
    """Tests for parse_subject()."""

    def test_type_only(self) -> None:
        """Test type only."""
        p = parse_subject('fix: a bug')
        assert p == ParsedSubject(type='fix', description='a bug')

    def test_type_and_scope(self) -> None:
        """Test type and scope."""
        p = parse_subject('feat(auth): add OAuth2')
        assert p.type == 'feat'
        assert p.scope == 'auth'
        assert p.breaking is False
        assert p.description == 'add OAuth2'

    def test_breaking_without_scope(self) -> None:
        """Test breaking without scope."""
        p = parse_subject('chore!: generate changelog')
        assert p.type == 'chore'
        assert p.scope is None
        assert p.breaking is True

    def test_breaking_with_scope(self) -> None:
        """Test breaking with scope."""
        p = parse_subject('refactor(core)!: drop py2')
        assert p.scope == 'core'
        assert p.breaking is True

    def test_empty_scope_is_none(self) -> None:
        """Empty parentheses mean no scope."""
        assert parse_subject('fix(): x').scope is None

    def test_type_case_is_preserved(self) -> None:
        """Types are not normalised."""
        assert parse_subject('Feat: x').type == 'Feat'

    @pytest.mark.parametrize(
        'subject',
        [
            'Merge branch main',
            'fix:no space',
            '(scope): no type',
            'feat!(api): bang before scope',
            '',
        ],
    )
    def test_non_conventional_falls_back_to_misc(self, subject: str) -> None:
        """Non-conventional subjects become misc with the subject as description."""
        p = parse_subject(subject)
        assert p.type == MISC_TYPE
        assert p.scope is None
        assert p.breaking is False
        assert p.description == subject
        assert p.is_release is False

    def test_misc_description_is_subject_as_received(self) -> None:
        """The misc fallback keeps surrounding whitespace of the subject."""
        assert parse_subject('  WIP stuff ').description == '  WIP stuff '

    def test_release_marker(self) -> None:
        """chore(release) subjects are release markers."""
        p = parse_subject('chore(release): 0.1.0')
        assert p.is_release is True
        assert p.release_version == '0.1.0'
        assert p.type == 'chore'
        assert p.scope == 'release'
        assert p.breaking is False

    def test_release_marker_keeps_free_form_version(self) -> None:
        """Any non-empty version string is accepted."""
        assert parse_subject('chore(release): v2.0.0-rc.1 ').release_version == 'v2.0.0-rc.1'

    def test_other_chore_is_not_release(self) -> None:
        """Other chore scopes are ordinary commits."""
        p = parse_subject('chore(deps): bump x')
        assert p.is_release is False
        assert p.release_version is None

    def test_breaking_release_is_not_a_marker(self) -> None:
        """The marker shape has no breaking indicator."""
        p = parse_subject('chore(release)!: 1.0.0')
        assert p.is_release is False
        assert p.breaking is True

    def test_changelog_scope(self) -> None:
        """Changelog maintenance commits are flagged."""
        assert parse_subject('chore(changelog): update CHANGELOG').is_changelog is True
        assert parse_subject('docs: changelog wording').is_changelog is False


class TestParseCommitLine:
    """Tests for parse_commit_line()."""

    def test_returns_both_parts(self) -> None:
        """Test returns both parts."""
        commit, parsed = parse_commit_line('a1b2c3 feat(api)!: drop v1')
        assert commit.hash == 'a1b2c3'
        assert parsed.type == 'feat'
        assert parsed.scope == 'api'
        assert parsed.breaking is True
        assert parsed.description == 'drop v1'
