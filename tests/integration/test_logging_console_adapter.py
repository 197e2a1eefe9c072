"""Integration tests for ConsoleAdapter with real structlog.

Tests cover:
- JSON and human-readable output
- Level filtering
- Context binding
- Error details

Architecture:
- Integration tests with REAL structlog (not mocked)
- Output captured through the adapter's stream argument
- Fresh ConsoleAdapter instances per test (bypass singleton)
"""

import json
from io import StringIO

import pytest

from emailaddr.infrastructure.logging.console_adapter import ConsoleAdapter


def _json_lines(stream: StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


@pytest.mark.integration
class TestConsoleAdapterIntegration:
    """Integration tests for ConsoleAdapter with real structlog."""

    def test_json_mode_produces_valid_json(self):
        """Test JSON mode produces parseable JSON output."""
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        adapter.info("JSON test", operation="text_input", input_length=17)

        [log_data] = _json_lines(stream)
        assert log_data["event"] == "JSON test"
        assert log_data["operation"] == "text_input"
        assert log_data["input_length"] == 17
        assert log_data["level"] == "info"
        assert "timestamp" in log_data

    def test_console_mode_is_human_readable(self):
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=False, stream=stream)

        adapter.warning("Email address rejected", error_code="invalid_format")

        output = stream.getvalue()
        assert "Email address rejected" in output
        assert "invalid_format" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output)

    def test_level_filtering(self):
        """Test messages below the configured level are dropped."""
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, level="warning", stream=stream)

        adapter.debug("Debug message")
        adapter.info("Info message")
        adapter.warning("Warning message")
        adapter.error("Error message")

        events = [line["event"] for line in _json_lines(stream)]
        assert events == ["Warning message", "Error message"]

    def test_debug_level_keeps_everything(self):
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, level="DEBUG", stream=stream)

        adapter.debug("Email address accepted")

        assert _json_lines(stream)[0]["level"] == "debug"

    def test_bind_adds_context(self):
        """Test bound context appears on later messages without mutating parent."""
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, stream=stream)
        bound = adapter.bind(component="email_type")

        bound.info("Bound message")
        adapter.info("Parent message")

        bound_line, parent_line = _json_lines(stream)
        assert bound_line["component"] == "email_type"
        assert "component" not in parent_line

    def test_error_includes_exception_details(self):
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        adapter.error("Host callback failed", error=ValueError("bad payload"))

        [log_data] = _json_lines(stream)
        assert log_data["error_type"] == "ValueError"
        assert log_data["error_message"] == "bad payload"
