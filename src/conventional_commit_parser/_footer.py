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

"""Footer start-line scanner.

A footer starts with a token at column zero followed by one of the two
git-trailer separators::

    Reviewed-by: Z          token "Reviewed-by", separator ": "
    Refs #133               token "Refs",        separator " #"
    BREAKING CHANGE: ...    token "BREAKING CHANGE" (the only token
                            allowed to contain a space)

Tokens use ``-`` in place of whitespace. A line whose would-be token
contains a space (``invalid token: x``) or starts with whitespace is not
a footer start.

Detection is greedy: a prose line such as ``Note: see above`` is a valid
footer start, and the first one found ends the body.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from conventional_commit_parser._types import FOOTER_HASH_SEPARATOR, FOOTER_SEPARATOR

_FOOTER_RE: re.Pattern[str] = re.compile(
    r'(?P<token>BREAKING[ -]CHANGE|\w[\w-]*)'  # token
    rf'(?P<separator>{re.escape(FOOTER_SEPARATOR)}|{re.escape(FOOTER_HASH_SEPARATOR)})'  # ": " or " #"
    r'(?P<content>.*)',  # first line of the value
)


@dataclass(frozen=True)
class FooterStart:
    """A recognized footer start line.

    Attributes:
        token: The footer token.
        separator: Either ``": "`` or ``" #"``.
        content: The text after the separator on this line.
    """

    token: str
    separator: str
    content: str


def match_footer_start(line: str) -> FooterStart | None:
    """Return the footer split of *line*, or ``None`` if it is not a footer start.

    >>> match_footer_start('Refs #133')
    FooterStart(token='Refs', separator=' #', content='133')
    >>> match_footer_start('a sentence: with a colon') is None
    True
    """
    m = _FOOTER_RE.fullmatch(line)
    if m is None:
        return None
    return FooterStart(token=m.group('token'), separator=m.group('separator'), content=m.group('content'))
