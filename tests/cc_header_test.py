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

"""Tests for the header line parser."""

from __future__ import annotations

import pytest
from conventional_commit_parser._header import Header, parse_header
from conventional_commit_parser._types import CommitType, CustomType
from conventional_commit_parser.errors import ParseError, ParseErrorKind

# ── Valid headers ────────────────────────────────────────────────────────


class TestValidHeaders:
    """Tests for headers that follow the grammar."""

    def test_type_and_summary(self) -> None:
        """Test type and summary."""
        assert parse_header('feat: toto va à la plage') == Header(
            commit_type=CommitType.FEATURE, summary='toto va à la plage'
        )

    def test_scope(self) -> None:
        """Test scope."""
        header = parse_header('fix(parser): the parser')
        assert header.scope == 'parser'
        assert header.breaking is False

    def test_breaking_marker(self) -> None:
        """Test breaking marker."""
        header = parse_header('feat!: toto')
        assert header.breaking is True
        assert header.scope is None

    def test_scope_and_breaking_marker(self) -> None:
        """Test scope and breaking marker."""
        assert parse_header('fix(parser)!: the parser') == Header(
            commit_type=CommitType.BUG_FIX, summary='the parser', scope='parser', breaking=True
        )

    def test_capitalized_type(self) -> None:
        """Types are matched case-insensitively."""
        assert parse_header('Feat: x').commit_type is CommitType.FEATURE

    def test_custom_type(self) -> None:
        """Test custom type."""
        assert parse_header('wip: x').commit_type == CustomType('wip')

    def test_hyphenated_custom_type(self) -> None:
        """Test hyphenated custom type."""
        assert parse_header('hot-fix: x').commit_type == CustomType('hot-fix')

    def test_scope_with_punctuation(self) -> None:
        """Test scope with punctuation."""
        assert parse_header('fix(core/api-v2): x').scope == 'core/api-v2'

    def test_summary_keeps_inner_colons(self) -> None:
        """Test summary keeps inner colons."""
        assert parse_header('docs: note: read this').summary == 'note: read this'

    def test_trailing_whitespace_trimmed(self) -> None:
        """Test trailing whitespace trimmed."""
        assert parse_header('fix: x  ').summary == 'x'


# ── Header failures ──────────────────────────────────────────────────────


class TestHeaderErrors:
    """Tests for header grammar violations."""

    @pytest.mark.parametrize(
        'line',
        [
            'feat toto va à la plage',
            'feat toto: va à la plage',
            'feat:toto va à la plage',
            'feat(toto):toto va à la plage',
            'feat(toto)!:toto va à la plage',
            'feat: ',
            'feat:   ',
            ': missing type',
            ' feat: leading space',
            '(scope): no type',
            'feat!!: x',
            'feat(a)(b): x',
        ],
    )
    def test_malformed_header(self, line: str) -> None:
        """Test malformed header."""
        with pytest.raises(ParseError) as exc_info:
            parse_header(line)
        assert exc_info.value.kind is ParseErrorKind.MALFORMED_HEADER

    @pytest.mark.parametrize(
        'line',
        [
            'feat(api core): x',
            'feat( api): x',
            'feat(): x',
            'fix((toto): the parser',
            'feat(\t): x',
        ],
    )
    def test_malformed_scope(self, line: str) -> None:
        """Test malformed scope."""
        with pytest.raises(ParseError) as exc_info:
            parse_header(line)
        assert exc_info.value.kind is ParseErrorKind.MALFORMED_SCOPE

    @pytest.mark.parametrize('line', ['feat(api: x', 'feat(', 'feat(api!: x'])
    def test_no_parenthesis(self, line: str) -> None:
        """Test no parenthesis."""
        with pytest.raises(ParseError) as exc_info:
            parse_header(line)
        assert exc_info.value.kind is ParseErrorKind.NO_PARENTHESIS

    def test_missing_separator_detail(self) -> None:
        """Test missing separator detail."""
        with pytest.raises(ParseError, match='missing `:`') as exc_info:
            parse_header('feat toto: x')
        assert exc_info.value.position == 4
        assert exc_info.value.fragment == 'feat toto: x'

    def test_missing_whitespace_detail(self) -> None:
        """Test missing whitespace detail."""
        with pytest.raises(ParseError, match='missing whitespace') as exc_info:
            parse_header('feat(toto):x')
        assert exc_info.value.position == 11

    def test_scope_whitespace_position(self) -> None:
        """The error points at the whitespace inside the scope."""
        with pytest.raises(ParseError) as exc_info:
            parse_header('feat(api core): x')
        assert exc_info.value.position == 8

    def test_empty_summary_detail(self) -> None:
        """Test empty summary detail."""
        with pytest.raises(ParseError, match='summary must not be empty'):
            parse_header('fix(x): ')
