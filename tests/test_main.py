"""Tests for the process entry point: readiness log and exit codes."""

import logging

import pytest

import main


class FakeServer:
    def __init__(self, error=None):
        self.error = error
        self.transports = []

    def run(self, transport=None):
        self.transports.append(transport)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(main, "configure_logging", lambda: None)


class TestMain:
    def test_runs_on_stdio_and_logs_readiness(self, monkeypatch, caplog):
        server = FakeServer()
        monkeypatch.setattr(main, "create_server", lambda adapter: server)
        caplog.set_level(logging.INFO, logger="vectorize_mcp")

        assert main.main() == 0
        assert server.transports == ["stdio"]
        assert "Vectorize MCP server running on stdio" in caplog.text

    def test_keyboard_interrupt_exits_zero(self, monkeypatch):
        monkeypatch.setattr(main, "create_server", lambda adapter: FakeServer(KeyboardInterrupt()))

        assert main.main() == 0

    def test_startup_failure_exits_one(self, monkeypatch, caplog):
        def broken(adapter):
            raise RuntimeError("transport unavailable")

        monkeypatch.setattr(main, "create_server", broken)
        caplog.set_level(logging.INFO, logger="vectorize_mcp")

        assert main.main() == 1
        assert "Fatal error: transport unavailable" in caplog.text

    def test_failure_while_serving_exits_one(self, monkeypatch):
        monkeypatch.setattr(main, "create_server", lambda adapter: FakeServer(OSError("stdin closed")))

        assert main.main() == 1
