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

"""Split a raw commit message into its header line and remaining lines."""

from __future__ import annotations

from conventional_commit_parser.errors import ParseError, ParseErrorKind


def normalize_newlines(text: str) -> str:
    r"""Convert ``\r\n`` terminators to ``\n``.

    >>> normalize_newlines('a\r\nb\nc')
    'a\nb\nc'
    """
    return text.replace('\r\n', '\n')


def split_message(message: str) -> tuple[str, list[str]]:
    r"""Split *message* into ``(header_line, rest_lines)``.

    Line endings are normalized first, so every later stage only ever
    sees ``\n``.

    >>> split_message('fix: typo\r\n\r\nbody')
    ('fix: typo', ['', 'body'])

    Raises:
        ParseError: ``MALFORMED_HEADER`` if the message is empty or blank.
    """
    if not message.strip():
        raise ParseError(ParseErrorKind.MALFORMED_HEADER, message, 0, 'commit message is empty')

    header, _, rest = normalize_newlines(message).partition('\n')
    return header, rest.split('\n') if rest else []
