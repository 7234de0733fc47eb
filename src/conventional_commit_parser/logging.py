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

"""Structured logging for conventional_commit_parser.

Only the configuration loader logs, at debug level. The parser itself is
silent. A host application that wants to see those events calls
:func:`configure_logging` once::

    configure_logging(logging.DEBUG, json_log=True)

Events go to stderr as console lines or as one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

DEFAULT_LOGGER_NAME = 'conventional_commit_parser'


def configure_logging(level: int = logging.INFO, *, json_log: bool = False) -> None:
    """Send structlog events at *level* and above to stderr.

    Args:
        level: Minimum stdlib level number to emit.
        json_log: Render JSON instead of console lines.
    """
    renderer: structlog.typing.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> structlog.typing.FilteringBoundLogger:
    """Return a logger that tags each event with ``logger=name``."""
    return structlog.get_logger(logger=name)


__all__ = [
    'configure_logging',
    'get_logger',
]
