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

r"""Header line parser.

Grammar::

    header  = type ["(" scope ")"] ["!"] ":" " " summary
    type    = ALPHA *(ALPHA / DIGIT / "_" / "-")
    scope   = 1*(any character except whitespace, "(" and ")")
    summary = 1*(any character)

The header is scanned left to right with a single cursor so that each
failure can report the exact column where the grammar broke:

    ┌─────────────────────────────┬──────────────────────┐
    │ Input                       │ Failure              │
    ├─────────────────────────────┼──────────────────────┤
    │ ``feat toto: x``            │ MALFORMED_HEADER     │
    │ ``feat:x``                  │ MALFORMED_HEADER     │
    │ ``feat: ``                  │ MALFORMED_HEADER     │
    │ ``feat(api: x``             │ NO_PARENTHESIS       │
    │ ``feat(): x``               │ MALFORMED_SCOPE      │
    │ ``feat(api core): x``       │ MALFORMED_SCOPE      │
    │ ``feat((api): x``           │ MALFORMED_SCOPE      │
    └─────────────────────────────┴──────────────────────┘

Pure implementation — depends only on ``re`` and sibling modules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from conventional_commit_parser._types import AnyCommitType, CommitType
from conventional_commit_parser.errors import ParseError, ParseErrorKind

_TYPE_RE: re.Pattern[str] = re.compile(r'[A-Za-z][A-Za-z0-9_-]*')


@dataclass(frozen=True)
class Header:
    """Fields extracted from a header line."""

    commit_type: AnyCommitType
    summary: str
    scope: str | None = None
    breaking: bool = False


def _parse_scope(line: str, start: int) -> tuple[str, int]:
    """Parse ``(scope)`` where ``line[start] == '('``.

    Returns:
        ``(scope, end)`` where ``end`` is the index just past ``)``.
    """
    close = line.find(')', start + 1)
    if close == -1:
        raise ParseError(ParseErrorKind.NO_PARENTHESIS, line, start, 'missing closing `)` after scope')

    scope = line[start + 1 : close]
    if not scope:
        raise ParseError(ParseErrorKind.MALFORMED_SCOPE, line, start + 1, 'scope must not be empty')
    for offset, char in enumerate(scope):
        if char.isspace():
            raise ParseError(
                ParseErrorKind.MALFORMED_SCOPE, line, start + 1 + offset, 'scope must not contain whitespace'
            )
        if char == '(':
            raise ParseError(ParseErrorKind.MALFORMED_SCOPE, line, start + 1 + offset, 'unexpected `(` inside scope')
    return scope, close + 1


def parse_header(line: str) -> Header:
    """Parse a single header line.

    Args:
        line: The first line of a commit message, without its terminator.

    Returns:
        The extracted :class:`Header`.

    Raises:
        ParseError: On the first grammar violation.
    """
    match = _TYPE_RE.match(line)
    if match is None:
        raise ParseError(ParseErrorKind.MALFORMED_HEADER, line, 0, 'missing commit type')
    commit_type = CommitType.from_token(match.group())
    pos = match.end()

    scope: str | None = None
    if line.startswith('(', pos):
        scope, pos = _parse_scope(line, pos)

    breaking = line.startswith('!', pos)
    if breaking:
        pos += 1

    if not line.startswith(':', pos):
        raise ParseError(ParseErrorKind.MALFORMED_HEADER, line, pos, 'missing `:` after commit type')
    pos += 1
    if not line.startswith(' ', pos):
        raise ParseError(ParseErrorKind.MALFORMED_HEADER, line, pos, 'missing whitespace after `:` separator')
    pos += 1

    summary = line[pos:].rstrip()
    if not summary.strip():
        raise ParseError(ParseErrorKind.MALFORMED_HEADER, line, pos, 'summary must not be empty')

    return Header(commit_type=commit_type, summary=summary, scope=scope, breaking=breaking)
