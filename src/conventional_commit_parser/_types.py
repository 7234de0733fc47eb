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

"""Pure types for parsed commit messages.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass, enum, or constant — no I/O, no
logging, no side effects.

Commit types form a small sum type::

    AnyCommitType = CommitType | CustomType

:class:`CommitType` is the closed set of canonical Conventional Commits
types. Anything else that is syntactically a type token becomes a
:class:`CustomType` carrying the token exactly as written. Both variants
share one canonical ordering (:attr:`CommitType.sort_key`) so consumers
can group and sort commits without special-casing custom types.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    'AnyCommitType',
    'BREAKING_CHANGE_TOKENS',
    'CommitType',
    'CustomType',
    'FOOTER_HASH_SEPARATOR',
    'FOOTER_SEPARATOR',
    'Footer',
    'ParsedCommit',
    'TYPE_PRECEDENCE',
]

# Separators between a footer token and its content.
FOOTER_SEPARATOR = ': '
FOOTER_HASH_SEPARATOR = ' #'

# Footer tokens that mark a breaking change. Matched case-sensitively.
BREAKING_CHANGE_TOKENS: frozenset[str] = frozenset({'BREAKING CHANGE', 'BREAKING-CHANGE'})


class CommitType(Enum):
    """Canonical Conventional Commits types.

    The value is the lowercase token used in a commit header.
    """

    FEATURE = 'feat'
    BUG_FIX = 'fix'
    CHORE = 'chore'
    REVERT = 'revert'
    PERFORMANCES = 'perf'
    DOCUMENTATION = 'docs'
    STYLE = 'style'
    REFACTORING = 'refactor'
    TEST = 'test'
    BUILD = 'build'
    CI = 'ci'

    @classmethod
    def from_token(cls, token: str) -> AnyCommitType:
        """Map a header type token to its commit type.

        >>> CommitType.from_token('Feat')
        <CommitType.FEATURE: 'feat'>
        >>> CommitType.from_token('wip')
        CustomType(token='wip')
        """
        try:
            return cls(token.lower())
        except ValueError:
            return CustomType(token)

    @property
    def token(self) -> str:
        """The header token for this type."""
        return self.value

    @property
    def sort_key(self) -> tuple[int, str]:
        """Position in the canonical ordering."""
        return (TYPE_PRECEDENCE.index(self), '')

    def __lt__(self, other: object) -> bool:
        return _compare(self, other, operator.lt)

    def __le__(self, other: object) -> bool:
        return _compare(self, other, operator.le)

    def __gt__(self, other: object) -> bool:
        return _compare(self, other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return _compare(self, other, operator.ge)

    def __str__(self) -> str:
        """Return the header token."""
        return self.value


@dataclass(frozen=True)
class CustomType:
    """A type token outside the canonical set, kept as written.

    Attributes:
        token: The literal type token from the header (e.g. ``"wip"``).
    """

    token: str

    @property
    def sort_key(self) -> tuple[int, str]:
        """Sorts after every canonical type, then by token."""
        return (len(TYPE_PRECEDENCE), self.token.lower())

    def __lt__(self, other: object) -> bool:
        return _compare(self, other, operator.lt)

    def __le__(self, other: object) -> bool:
        return _compare(self, other, operator.le)

    def __gt__(self, other: object) -> bool:
        return _compare(self, other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return _compare(self, other, operator.ge)

    def __str__(self) -> str:
        """Return the header token."""
        return self.token


AnyCommitType = CommitType | CustomType


def _compare(left: AnyCommitType, right: object, op: Callable[[object, object], bool]) -> bool:
    if not isinstance(right, (CommitType, CustomType)):
        return NotImplemented
    return op(left.sort_key, right.sort_key)


# Canonical ordering used for grouping (lower index sorts first).
TYPE_PRECEDENCE: list[CommitType] = [
    CommitType.FEATURE,
    CommitType.BUG_FIX,
    CommitType.PERFORMANCES,
    CommitType.REVERT,
    CommitType.REFACTORING,
    CommitType.DOCUMENTATION,
    CommitType.STYLE,
    CommitType.TEST,
    CommitType.BUILD,
    CommitType.CI,
    CommitType.CHORE,
]


@dataclass(frozen=True)
class Footer:
    """A single ``token: content`` or ``token #content`` trailer.

    Attributes:
        token: The footer token, case-sensitive as written
            (e.g. ``"Reviewed-by"``, ``"BREAKING CHANGE"``).
        content: The footer value. May span several lines.
        separator: The separator the footer was written with. Not part
            of equality, only used to re-serialize the footer.
    """

    token: str
    content: str
    separator: str = field(default=FOOTER_SEPARATOR, compare=False)

    @property
    def is_breaking_change(self) -> bool:
        """``True`` for ``BREAKING CHANGE`` / ``BREAKING-CHANGE`` footers."""
        return self.token in BREAKING_CHANGE_TOKENS

    def __str__(self) -> str:
        """Return ``token<separator>content``."""
        return f'{self.token}{self.separator}{self.content}'


@dataclass(frozen=True)
class ParsedCommit:
    """A commit message split into its Conventional Commits parts.

    Attributes:
        commit_type: The commit type (canonical or custom).
        summary: The header text after ``type(scope)!: ``. Never empty.
        scope: The header scope, or ``None``.
        body: Free text between the header and the footers, or ``None``.
        footers: Footers in source order. Duplicate tokens are kept.
        breaking_marker: Whether the header carries ``!`` before ``:``.
    """

    commit_type: AnyCommitType
    summary: str
    scope: str | None = None
    body: str | None = None
    footers: tuple[Footer, ...] = ()
    breaking_marker: bool = False

    @property
    def is_breaking(self) -> bool:
        """``True`` if the header has ``!`` or a breaking-change footer exists."""
        return self.breaking_marker or any(f.is_breaking_change for f in self.footers)

    @property
    def breaking_description(self) -> str:
        """Describe the breaking change.

        Returns the first breaking-change footer's content. When only the
        ``!`` marker was used the summary describes the change. Empty for
        non-breaking commits.
        """
        for footer in self.footers:
            if footer.is_breaking_change:
                return footer.content
        if self.breaking_marker:
            return self.summary
        return ''

    @property
    def header(self) -> str:
        """Re-serialize the header line."""
        scope = f'({self.scope})' if self.scope is not None else ''
        mark = '!' if self.breaking_marker else ''
        return f'{self.commit_type}{scope}{mark}: {self.summary}'

    def footer_values(self, token: str) -> list[str]:
        """Return the content of every footer named *token*, in order."""
        return [f.content for f in self.footers if f.token == token]

    def __str__(self) -> str:
        """Re-serialize the full commit message."""
        parts = [self.header]
        if self.body is not None:
            parts.append(self.body)
        if self.footers:
            parts.append('\n'.join(str(f) for f in self.footers))
        return '\n\n'.join(parts)
