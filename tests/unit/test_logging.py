"""Unit tests for logging setup."""

import io
import json
import logging
from pathlib import PurePosixPath

from apkmatch.core.config import Config
from apkmatch.core.logging import ROOT_LOGGER_NAME, setup_logging
from apkmatch.services.matching import ApkMatcher


class TestSetupLogging:
    """Tests for structured logging configuration."""

    def test_json_events_written_to_stderr(self, monkeypatch, device_spec, build_apks_result):
        """Test that resolution events are rendered as JSON lines on stderr."""
        stderr = io.StringIO()
        monkeypatch.setattr("sys.stderr", stderr)
        setup_logging(json_output=True)

        ApkMatcher(device_spec).get_matching_apks(build_apks_result)

        events = [json.loads(line) for line in stderr.getvalue().splitlines()]
        resolved = [event for event in events if event["event"] == "Resolved matching APKs"]
        assert len(resolved) == 1
        assert resolved[0]["apk_count"] == 1
        assert resolved[0]["level"] == "info"

    def test_matching_after_stream_closed(self, monkeypatch, device_spec, build_apks_result):
        """Test that replacing and closing stderr after setup does not break matching.

        Verifies that records follow the current sys.stderr rather than the
        stream in place when logging was configured.
        """
        first = io.StringIO()
        monkeypatch.setattr("sys.stderr", first)
        setup_logging(json_output=True)
        matcher = ApkMatcher(device_spec)
        matcher.get_matching_apks(build_apks_result)
        first.close()

        second = io.StringIO()
        monkeypatch.setattr("sys.stderr", second)
        assert matcher.get_matching_apks(build_apks_result) == [
            PurePosixPath("splits/base-arm64_v8a_hdpi.apk")
        ]
        assert "Resolved matching APKs" in second.getvalue()

    def test_level_from_config(self, monkeypatch, device_spec, build_apks_result):
        """Test that events below the configured level are dropped."""
        stderr = io.StringIO()
        monkeypatch.setattr("sys.stderr", stderr)
        setup_logging(Config(log_level="WARNING"), json_output=True)

        ApkMatcher(device_spec).get_matching_apks(build_apks_result)
        assert stderr.getvalue() == ""

    def test_repeated_setup_keeps_one_handler(self):
        """Test that configuring twice replaces the handler instead of adding one."""
        setup_logging(json_output=True)
        setup_logging(json_output=False)
        assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1
