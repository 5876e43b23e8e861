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

"""Tests for spdxkit.logging module."""

from __future__ import annotations

import json
import logging
import subprocess
import sys

import pytest
from spdxkit.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default logging level should be INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """Verbose flag should set DEBUG level."""
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_quiet_sets_warning(self) -> None:
        """Quiet flag should set WARNING level."""
        configure_logging(quiet=True)
        assert logging.root.level == logging.WARNING

    def test_quiet_wins_over_verbose(self) -> None:
        """Quiet takes precedence when both are given."""
        configure_logging(verbose=True, quiet=True)
        assert logging.root.level == logging.WARNING

    def test_json_log_emits_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode writes one JSON object per line to stderr."""
        configure_logging(json_log=True)
        get_logger('spdxkit.test').info('catalog_built', licenses=3)
        captured = capsys.readouterr()
        assert captured.out == ''
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event['event'] == 'catalog_built'
        assert event['licenses'] == 3
        assert event['level'] == 'info'
        assert event['logger'] == 'spdxkit.test'

    def test_reconfigure(self) -> None:
        """Calling configure_logging twice replaces the configuration."""
        configure_logging()
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG


class TestGetLogger:
    """Tests for get_logger()."""

    def test_logger_can_log(self) -> None:
        """Logger should be able to emit messages without crashing."""
        configure_logging(quiet=True)
        log = get_logger('test')
        log.info('test message', key='value')
        log.debug('debug message')
        log.warning('warning message')

    def test_default_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The default logger is named 'spdxkit'."""
        configure_logging(json_log=True)
        get_logger().warning('hello')
        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event['logger'] == 'spdxkit'


class TestUnconfiguredLibrary:
    """Tests for library use without configure_logging()."""

    def test_lookup_prints_nothing(self) -> None:
        """A plain lookup writes nothing but what the caller prints."""
        result = subprocess.run(
            [sys.executable, '-c', "import spdxkit; print(spdxkit.lookup_license('MIT').id, end='')"],
            capture_output=True,
            text=True,
            check=True,
        )
        assert result.stdout == 'MIT'
        assert 'catalog_built' not in result.stderr

    def test_warnings_go_to_stderr(self) -> None:
        """Warnings from an unconfigured logger never reach stdout."""
        code = "from spdxkit.logging import get_logger; get_logger('spdxkit.x').warning('catalog_record_invalid')"
        result = subprocess.run([sys.executable, '-c', code], capture_output=True, text=True, check=True)
        assert result.stdout == ''
        assert 'catalog_record_invalid' in result.stderr
