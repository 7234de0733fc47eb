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

"""Error types for commit message parsing and configuration.

Every parse failure is a single :class:`ParseError` tagged with a
:class:`ParseErrorKind`. Parsing is fail-fast: the first violation
raises, and no partially built commit is ever returned.

Usage::

    from conventional_commit_parser import parse
    from conventional_commit_parser.errors import ParseError, ParseErrorKind

    try:
        parse('feat(api core): add endpoint')
    except ParseError as exc:
        assert exc.kind is ParseErrorKind.MALFORMED_SCOPE
        print(exc)
        # malformed scope at column 8: scope must not contain whitespace
        #   feat(api core): add endpoint
        #           ^
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    'ConfigError',
    'ParseError',
    'ParseErrorKind',
]


class ParseErrorKind(str, Enum):
    """Enumeration of parse failure categories."""

    MALFORMED_HEADER = 'malformed-header'
    MALFORMED_SCOPE = 'malformed-scope'
    NO_PARENTHESIS = 'no-parenthesis'
    UNKNOWN_COMMIT_TYPE = 'unknown-commit-type'
    MALFORMED_FOOTER = 'malformed-footer'


class ParseError(ValueError):
    """Raised when a commit message does not follow the grammar.

    Errors compare equal when all of their attributes match, so tests
    and callers can assert on a whole error value.

    Attributes:
        kind: The failure category.
        fragment: The offending line (or the whole input when empty).
        position: Column offset in *fragment* where the error was detected.
        detail: Human-readable description of the problem.
    """

    def __init__(self, kind: ParseErrorKind, fragment: str, position: int, detail: str) -> None:
        """Initialize with error kind, offending fragment, column, and detail message."""
        self.kind = kind
        self.fragment = fragment
        self.position = position
        self.detail = detail
        # Build a caret-style error message.
        marker = ' ' * position + '^'
        label = kind.value.replace('-', ' ')
        super().__init__(f'{label} at column {position}: {detail}\n  {fragment}\n  {marker}')

    def _key(self) -> tuple[ParseErrorKind, str, int, str]:
        return (self.kind, self.fragment, self.position, self.detail)

    def __eq__(self, other: object) -> bool:
        """Compare by kind, fragment, position, and detail."""
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        """Hash consistently with :meth:`__eq__`."""
        return hash(self._key())

    def __reduce__(self) -> tuple[type[ParseError], tuple[ParseErrorKind, str, int, str]]:
        """Support :mod:`copy` and :mod:`pickle` with the real constructor arguments."""
        return (self.__class__, self._key())


class ConfigError(Exception):
    """Raised when the parser configuration cannot be loaded.

    Args:
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the problem.
    """

    def __init__(self, message: str, hint: str = '') -> None:
        """Initialize with a message and an optional hint."""
        self.message = message
        self.hint = hint
        super().__init__(message)
