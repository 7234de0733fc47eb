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

"""Tests for conventional_commit_parser.logging module.

Uses structlog.testing.capture_logs() for event assertions and capsys for
rendered output, since events do not pass through the stdlib logging module.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from conventional_commit_parser.config import load_config
from conventional_commit_parser.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode writes one object per event to stderr."""
        configure_logging(json_log=True)
        get_logger('cc').info('parsed', count=2)
        record = json.loads(capsys.readouterr().err)
        assert record['event'] == 'parsed'
        assert record['level'] == 'info'
        assert record['logger'] == 'cc'
        assert record['count'] == 2

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console mode renders the event name."""
        configure_logging()
        get_logger().warning('odd_footer')
        assert 'odd_footer' in capsys.readouterr().err

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events below the configured level are dropped."""
        configure_logging(logging.INFO, json_log=True)
        get_logger().debug('hidden')
        assert capsys.readouterr().err == ''

    def test_nothing_on_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test nothing on stdout."""
        configure_logging(logging.DEBUG)
        get_logger().debug('x')
        assert capsys.readouterr().out == ''


class TestConfigLoaderEvents:
    """Debug events emitted by load_config()."""

    def test_no_pyproject(self, tmp_path: Path) -> None:
        """Test no pyproject."""
        configure_logging(logging.DEBUG)
        with structlog.testing.capture_logs() as captured:
            load_config(tmp_path)
        assert [e['event'] for e in captured] == ['no_pyproject']

    def test_no_section(self, tmp_path: Path) -> None:
        """Test no section."""
        (tmp_path / 'pyproject.toml').write_text('[project]\nname = "x"\n', encoding='utf-8')
        configure_logging(logging.DEBUG)
        with structlog.testing.capture_logs() as captured:
            load_config(tmp_path)
        assert [e['event'] for e in captured] == ['no_parser_config']

    def test_loaded(self, tmp_path: Path) -> None:
        """Test loaded."""
        (tmp_path / 'pyproject.toml').write_text('[tool.conventional-commits]\nstrict = true\n', encoding='utf-8')
        configure_logging(logging.DEBUG)
        with structlog.testing.capture_logs() as captured:
            assert load_config(tmp_path).strict is True
        assert captured[-1]['event'] == 'parser_config_loaded'
        assert captured[-1]['log_level'] == 'debug'

    def test_debug_events_hidden_at_info(self, tmp_path: Path) -> None:
        """Test debug events hidden at info."""
        configure_logging(logging.INFO)
        with structlog.testing.capture_logs() as captured:
            load_config(tmp_path)
        assert captured == []
