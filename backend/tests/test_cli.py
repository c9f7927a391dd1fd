"""CLI tests — --port flag handling without starting a server."""

import pytest
from typer.testing import CliRunner

from user_service import cli as cli_module


@pytest.fixture
def served(monkeypatch):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(cli_module.uvicorn, "run", fake_run)
    return calls


def test_default_port(served, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    cli_module.get_settings.cache_clear()
    result = CliRunner().invoke(cli_module.cli, [])
    assert result.exit_code == 0
    assert served["port"] == 8080


def test_port_flag_overrides_settings(served):
    result = CliRunner().invoke(cli_module.cli, ["--port", "9001"])
    assert result.exit_code == 0
    assert served["port"] == 9001
    assert served["app"].state.settings.port == 9001


def test_port_out_of_range_is_rejected(served):
    result = CliRunner().invoke(cli_module.cli, ["--port", "0"])
    assert result.exit_code != 0
    assert served == {}


def test_host_flag(served):
    result = CliRunner().invoke(cli_module.cli, ["--host", "127.0.0.1"])
    assert result.exit_code == 0
    assert served["host"] == "127.0.0.1"
