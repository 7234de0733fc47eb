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

"""Split the lines after the header into body and footers.

The splitter is a two-state machine fed one line at a time::

                 footer start
    ┌────────┐  ───────────────→  ┌───────────┐
    │ InBody │                    │ InFooters │ ──┐ footer start:
    └────────┘                    └───────────┘ ←─┘ close open footer,
     any other line:               any other line:   open a new one
     append to body                append to open footer

There is no transition back to the body: once the first footer starts,
every following line either starts another footer or continues the open
one. Blank lines never close a footer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from conventional_commit_parser._footer import match_footer_start
from conventional_commit_parser._types import Footer


def _is_blank(line: str) -> bool:
    return not line.strip()


def trim_blank_lines(lines: list[str]) -> str:
    """Join *lines* after dropping leading and trailing blank lines.

    Internal blank lines are kept.

    >>> trim_blank_lines(['', 'a', '', 'b', '', ''])
    'a\\n\\nb'
    """
    start, end = 0, len(lines)
    while start < end and _is_blank(lines[start]):
        start += 1
    while end > start and _is_blank(lines[end - 1]):
        end -= 1
    return '\n'.join(lines[start:end])


@dataclass
class _InBody:
    lines: list[str] = field(default_factory=list)


@dataclass
class _InFooters:
    token: str
    separator: str
    lines: list[str]

    def close(self) -> Footer:
        return Footer(token=self.token, content=trim_blank_lines(self.lines), separator=self.separator)


def split_body_and_footers(lines: list[str]) -> tuple[str | None, tuple[Footer, ...]]:
    """Split the lines following the header.

    Args:
        lines: Normalized lines after the header line.

    Returns:
        ``(body, footers)``. ``body`` is ``None`` when there is no body
        text before the first footer.
    """
    # One blank line conventionally separates the header from the rest.
    if lines and _is_blank(lines[0]):
        lines = lines[1:]

    body = _InBody()
    state: _InBody | _InFooters = body
    footers: list[Footer] = []

    for line in lines:
        start = match_footer_start(line)
        if start is not None:
            if isinstance(state, _InFooters):
                footers.append(state.close())
            state = _InFooters(token=start.token, separator=start.separator, lines=[start.content])
        else:
            state.lines.append(line)

    if isinstance(state, _InFooters):
        footers.append(state.close())

    return trim_blank_lines(body.lines) or None, tuple(footers)
