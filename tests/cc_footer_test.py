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

"""Tests for the footer start-line scanner."""

from __future__ import annotations

import pytest
from conventional_commit_parser._footer import FooterStart, match_footer_start


class TestFooterStart:
    """Tests for lines that start a footer."""

    def test_colon_separator(self) -> None:
        """Test colon separator."""
        assert match_footer_start('Reviewed-by: Z') == FooterStart('Reviewed-by', ': ', 'Z')

    def test_hash_separator(self) -> None:
        """Test hash separator."""
        assert match_footer_start('Refs #133') == FooterStart('Refs', ' #', '133')

    def test_breaking_change_with_space(self) -> None:
        """Test breaking change with space."""
        assert match_footer_start('BREAKING CHANGE: removed v1') == FooterStart(
            'BREAKING CHANGE', ': ', 'removed v1'
        )

    def test_breaking_change_with_hyphen(self) -> None:
        """Test breaking change with hyphen."""
        start = match_footer_start('BREAKING-CHANGE: removed v1')
        assert start is not None
        assert start.token == 'BREAKING-CHANGE'

    def test_content_keeps_colons(self) -> None:
        """Test content keeps colons."""
        start = match_footer_start('See-also: https://example.com/a:b')
        assert start is not None
        assert start.content == 'https://example.com/a:b'

    def test_empty_content(self) -> None:
        """Test empty content."""
        assert match_footer_start('Token: ') == FooterStart('Token', ': ', '')

    def test_prose_with_single_word_prefix(self) -> None:
        """A ``Word: text`` prose line is indistinguishable from a footer."""
        assert match_footer_start('Note: see above') == FooterStart('Note', ': ', 'see above')


class TestNotFooterStart:
    """Tests for lines that do not start a footer."""

    @pytest.mark.parametrize(
        'line',
        [
            '',
            'plain body text',
            'invalid token : this is a token',
            'invalid token: this is a token',
            '  Indented: value',
            'Token:no-space',
            'Token:',
            'Token#133',
            'breaking change: oops',
            'https://example.com',
            ': no token',
            '-dash: leading hyphen',
        ],
    )
    def test_not_footer(self, line: str) -> None:
        """Test not footer."""
        assert match_footer_start(line) is None
