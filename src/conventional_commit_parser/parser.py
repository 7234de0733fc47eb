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

r"""Conventional Commits v1.0.0 parser.

Implements the `Conventional Commits v1.0.0
<https://www.conventionalcommits.org/en/v1.0.0/>`_ grammar:

**Header** (required)::

    type(scope)!: summary

**Body** (optional): free-form text, conventionally separated from the
header by one blank line.

**Footers** (optional): ``token: value`` or ``token #value`` trailers.
``BREAKING CHANGE`` (with a space) and ``BREAKING-CHANGE`` are the only
tokens with special meaning.

Pipeline::

    raw message
        │  _lines.split_message        normalize \r\n, split off header
        ▼
    header line ──→ _header.parse_header      type, scope, !, summary
    other lines ──→ _splitter.split_body_and_footers
        ▼
    ParsedCommit

Compliance notes:

- Types are case-insensitive; unknown types are kept as
  :class:`~conventional_commit_parser.CustomType` unless the parser is
  strict.
- ``BREAKING CHANGE`` must be uppercase.
- A footer value may span several lines; it ends at the next footer
  token/separator pair.

Pure implementation — no I/O, no logging, no side effects.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from conventional_commit_parser._footer import match_footer_start
from conventional_commit_parser._header import parse_header
from conventional_commit_parser._lines import normalize_newlines, split_message
from conventional_commit_parser._splitter import split_body_and_footers, trim_blank_lines
from conventional_commit_parser._types import CustomType, Footer, ParsedCommit
from conventional_commit_parser.config import ParserConfig
from conventional_commit_parser.errors import ParseError, ParseErrorKind

__all__ = [
    'CommitParser',
    'ConventionalCommitParser',
    'parse',
    'parse_body',
    'parse_footers',
    'parse_summary',
]


@runtime_checkable
class CommitParser(Protocol):
    """Protocol for commit message parsers.

    A parser receives a raw commit message and returns a
    :class:`ParsedCommit`, or raises :class:`ParseError`.
    """

    def parse(self, message: str) -> ParsedCommit:
        """Parse a full commit message."""
        ...


def parse(message: str) -> ParsedCommit:
    """Parse a commit message.

    Args:
        message: The full commit message. ``\\n`` and ``\\r\\n`` line
            endings are treated identically.

    Returns:
        The parsed commit.

    Raises:
        ParseError: If the message does not follow the grammar.
    """
    header_line, rest = split_message(message)
    header = parse_header(header_line)
    body, footers = split_body_and_footers(rest)
    return ParsedCommit(
        commit_type=header.commit_type,
        summary=header.summary,
        scope=header.scope,
        body=body,
        footers=footers,
        breaking_marker=header.breaking,
    )


def parse_summary(header: str) -> ParsedCommit:
    """Parse a header line on its own.

    The result has no body and no footers.

    Raises:
        ParseError: ``MALFORMED_HEADER`` if *header* spans more than one
            line, or any header grammar error.
    """
    header_line, rest = split_message(header)
    if any(line.strip() for line in rest):
        raise ParseError(
            ParseErrorKind.MALFORMED_HEADER, header_line, len(header_line), 'unexpected text after summary'
        )
    parsed = parse_header(header_line)
    return ParsedCommit(
        commit_type=parsed.commit_type,
        summary=parsed.summary,
        scope=parsed.scope,
        breaking_marker=parsed.breaking,
    )


def parse_body(text: str) -> str | None:
    """Validate a stand-alone commit body.

    Returns:
        The body with surrounding blank lines trimmed, or ``None`` if it
        is blank.

    Raises:
        ParseError: ``MALFORMED_FOOTER`` if a line would start a footer.
    """
    lines = normalize_newlines(text).split('\n')
    for line in lines:
        start = match_footer_start(line)
        if start is not None:
            raise ParseError(
                ParseErrorKind.MALFORMED_FOOTER, line, len(start.token), 'unexpected footer separator in body'
            )
    return trim_blank_lines(lines) or None


def parse_footers(text: str) -> tuple[Footer, ...]:
    """Parse a stand-alone footer block.

    Raises:
        ParseError: ``MALFORMED_FOOTER`` if the first non-blank line does
            not start a footer.
    """
    lines = normalize_newlines(text).split('\n')
    for line in lines:
        if not line.strip():
            continue
        if match_footer_start(line) is None:
            raise ParseError(ParseErrorKind.MALFORMED_FOOTER, line, 0, 'expected `token: value` or `token #value`')
        break
    # Only blank lines precede the first footer, so there is no body.
    _, footers = split_body_and_footers(lines)
    return footers


class ConventionalCommitParser:
    """Configurable commit parser.

    The default instance accepts any type token. A strict parser rejects
    custom types unless they are listed in ``extra_types``.

    Example::

        parser = ConventionalCommitParser(strict=True, extra_types=frozenset({'wip'}))
        parser.parse('wip: half done')       # accepted
        parser.parse('release: v1.2.0')      # ParseError(UNKNOWN_COMMIT_TYPE)
    """

    def __init__(self, *, strict: bool = False, extra_types: frozenset[str] = frozenset()) -> None:
        """Initialize the parser.

        Args:
            strict: Reject type tokens outside the canonical set.
            extra_types: Custom type tokens a strict parser still accepts.
                Compared case-insensitively.
        """
        self._strict = strict
        self._extra_types = frozenset(t.lower() for t in extra_types)

    @classmethod
    def from_config(cls, config: ParserConfig) -> ConventionalCommitParser:
        """Build a parser from a loaded :class:`ParserConfig`."""
        return cls(strict=config.strict, extra_types=config.extra_types)

    @property
    def strict(self) -> bool:
        """Whether custom types are rejected."""
        return self._strict

    def parse(self, message: str) -> ParsedCommit:
        """Parse *message*, enforcing the type allowlist in strict mode.

        Raises:
            ParseError: On any grammar error, or ``UNKNOWN_COMMIT_TYPE``
                for a disallowed custom type.
        """
        commit = parse(message)
        self._check_type(commit, message)
        return commit

    def _check_type(self, commit: ParsedCommit, message: str) -> None:
        commit_type = commit.commit_type
        if not self._strict or not isinstance(commit_type, CustomType):
            return
        if commit_type.token.lower() in self._extra_types:
            return
        header_line = normalize_newlines(message).split('\n', 1)[0]
        raise ParseError(
            ParseErrorKind.UNKNOWN_COMMIT_TYPE, header_line, 0, f'unknown commit type {commit_type.token!r}'
        )
