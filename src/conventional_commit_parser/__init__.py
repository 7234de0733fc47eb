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

r"""Conventional Commits message parser.

Turns a raw commit message into a :class:`ParsedCommit` with a typed
header, an optional body and an ordered tuple of :class:`Footer` entries.
Only syntax is checked; whether a scope or type means anything to a
project is up to the caller.

Usage::

    from conventional_commit_parser import CommitType, ConventionalCommitParser, Footer, parse

    commit = parse('fix(parser): handle CRLF\n\nRefs #133')
    assert commit.commit_type is CommitType.BUG_FIX
    assert commit.scope == 'parser'
    assert commit.footers == (Footer('Refs', '133'),)

    # Breaking changes via "!" or a footer:
    assert parse('feat!: drop v1').is_breaking
    assert parse('feat: x\n\nBREAKING CHANGE: y').is_breaking

    # Strict parsers reject custom types:
    parser = ConventionalCommitParser(strict=True)
    parser.parse('wip: later')  # ParseError(UNKNOWN_COMMIT_TYPE)
"""

from conventional_commit_parser._types import (
    BREAKING_CHANGE_TOKENS,
    FOOTER_HASH_SEPARATOR,
    FOOTER_SEPARATOR,
    AnyCommitType,
    CommitType,
    CustomType,
    Footer,
    ParsedCommit,
)
from conventional_commit_parser.config import ParserConfig, load_config
from conventional_commit_parser.errors import ConfigError, ParseError, ParseErrorKind
from conventional_commit_parser.parser import (
    CommitParser,
    ConventionalCommitParser,
    parse,
    parse_body,
    parse_footers,
    parse_summary,
)

__all__ = [
    'AnyCommitType',
    'BREAKING_CHANGE_TOKENS',
    'CommitParser',
    'CommitType',
    'ConfigError',
    'ConventionalCommitParser',
    'CustomType',
    'FOOTER_HASH_SEPARATOR',
    'FOOTER_SEPARATOR',
    'Footer',
    'ParseError',
    'ParseErrorKind',
    'ParsedCommit',
    'ParserConfig',
    'load_config',
    'parse',
    'parse_body',
    'parse_footers',
    'parse_summary',
]
