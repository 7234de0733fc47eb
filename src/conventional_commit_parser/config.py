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

"""Parser configuration read from ``pyproject.toml``.

Projects can tighten the parser under a ``[tool.conventional-commits]``
table::

    [tool.conventional-commits]
    strict = true                  # reject non-canonical types
    extra_types = ["wip", "deps"]  # ...except these

A missing file or table yields the permissive defaults.

Usage::

    from conventional_commit_parser import ConventionalCommitParser
    from conventional_commit_parser.config import load_config

    cfg = load_config(Path('.'))
    parser = ConventionalCommitParser.from_config(cfg)
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from conventional_commit_parser.errors import ConfigError
from conventional_commit_parser.logging import get_logger

logger = get_logger(__name__)

PYPROJECT_FILENAME = 'pyproject.toml'
TOOL_TABLE = 'conventional-commits'

_TYPE_MAP: dict[str, type] = {
    'strict': bool,
    'extra_types': list,
}

VALID_KEYS: frozenset[str] = frozenset(_TYPE_MAP)


@dataclass(frozen=True)
class ParserConfig:
    """Validated parser settings.

    Attributes:
        strict: Reject commit types outside the canonical set.
        extra_types: Custom type tokens accepted even in strict mode,
            lowercased.
        config_path: The file the settings were read from, if any.
    """

    strict: bool = False
    extra_types: frozenset[str] = frozenset()
    config_path: Path | None = None


def _suggest_key(unknown: str) -> str | None:
    """Return the closest valid key for a typo, or None."""
    matches = difflib.get_close_matches(unknown, VALID_KEYS, n=1, cutoff=0.6)
    return matches[0] if matches else None


def _validate(raw: dict[str, Any], config_path: Path) -> None:  # noqa: ANN401 — dynamic config
    context = f'[tool.{TOOL_TABLE}] in {config_path}'
    for key, value in raw.items():
        if key not in VALID_KEYS:
            suggestion = _suggest_key(key)
            raise ConfigError(
                f"Unknown key '{key}' in {context}",
                hint=f"Did you mean '{suggestion}'?" if suggestion else f'Valid keys: {", ".join(sorted(VALID_KEYS))}.',
            )
        expected = _TYPE_MAP[key]
        if not isinstance(value, expected):
            raise ConfigError(
                f"'{key}' must be {expected.__name__}, got {type(value).__name__}",
                hint=f'Check the value of {key} in {context}.',
            )
    for item in raw.get('extra_types', []):
        if not isinstance(item, str) or not item:
            raise ConfigError(
                f"'extra_types' entries must be non-empty strings, got {item!r}",
                hint=f'Check the value of extra_types in {context}.',
            )


def load_config(project_root: Path) -> ParserConfig:
    """Load parser settings from ``pyproject.toml`` under *project_root*.

    Args:
        project_root: Directory containing ``pyproject.toml``.

    Returns:
        A validated :class:`ParserConfig`.

    Raises:
        ConfigError: If the file cannot be read or contains invalid settings.
    """
    config_path = project_root / PYPROJECT_FILENAME

    if not config_path.is_file():
        logger.debug('no_pyproject', path=str(config_path))
        return ParserConfig()

    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as exc:
        raise ConfigError(f'Failed to read {config_path}: {exc}') from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise ConfigError(f'Failed to parse {config_path}: {exc}') from exc

    tool = doc.get('tool')
    section = tool.get(TOOL_TABLE) if isinstance(tool, dict) else None
    if section is None:
        logger.debug('no_parser_config', path=str(config_path))
        return ParserConfig(config_path=config_path)
    if not isinstance(section, dict):
        raise ConfigError(f'[tool.{TOOL_TABLE}] must be a table, got {type(section).__name__}')

    raw: dict[str, Any] = section.unwrap()  # noqa: ANN401
    _validate(raw, config_path)

    config = ParserConfig(
        strict=raw.get('strict', False),
        extra_types=frozenset(t.lower() for t in raw.get('extra_types', [])),
        config_path=config_path,
    )
    logger.debug(
        'parser_config_loaded',
        path=str(config_path),
        strict=config.strict,
        extra_types=sorted(config.extra_types),
    )
    return config
