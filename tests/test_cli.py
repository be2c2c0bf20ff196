"""Tests for CLI entrypoint behavior."""

import importlib
import json

import pytest
from typer.testing import CliRunner

from cliauth import __version__
from cliauth.auth.types import AuthStatus
from cliauth.cli.main import app

runner = CliRunner()


@pytest.fixture
def checkers(monkeypatch):
    results = {
        "claude": AuthStatus(authenticated=True, identity="dev@example.com"),
        "cursor": AuthStatus(authenticated=True, identity="Logged in", raw_output="Logged in\n"),
        "codex": AuthStatus(authenticated=False, error="Codex not configured"),
    }
    for name, result in results.items():
        monkeypatch.setattr(f"cliauth.auth.check_{name}_status", lambda result=result: result)
    return results


def test_root_version_option():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"cliauth {__version__}"


def test_version_subcommand():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"cliauth {__version__}"


class TestStatusCommand:
    def test_all_providers_json(self, checkers):
        result = runner.invoke(app, ["status", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert set(data) == {"claude", "cursor", "codex"}
        assert data["claude"]["email"] == "dev@example.com"
        assert data["codex"]["error"] == "Codex not configured"
        assert "raw_output" not in data["cursor"]

    def test_raw_json_includes_output(self, checkers):
        result = runner.invoke(app, ["status", "cursor", "--json", "--raw"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["cursor"]["raw_output"] == "Logged in\n"

    def test_local_rows_use_server_field_names(self, checkers):
        result = runner.invoke(app, ["status", "--json", "--raw"])
        data = json.loads(result.stdout)
        assert data["claude"] == {"authenticated": True, "email": "dev@example.com", "error": None}
        assert data["codex"] == {"authenticated": False, "email": None, "error": "Codex not configured"}
        assert data["cursor"]["raw_output"] == "Logged in\n"

    def test_table_output(self, checkers):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "dev@example.com" in result.stdout
        assert "Codex not configured" in result.stdout

    def test_single_unauthenticated_provider_exits_1(self, checkers):
        result = runner.invoke(app, ["status", "codex"])
        assert result.exit_code == 1

    def test_unknown_provider_rejected(self, checkers):
        result = runner.invoke(app, ["status", "gemini"])
        assert result.exit_code != 0

    def test_remote_status(self, monkeypatch):
        class FakeClient:
            def __init__(self, url):
                self.url = url

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

            def get_status(self, provider):
                return {"authenticated": True, "email": "remote@example.com", "error": None, "method": "cli_status"}

        monkeypatch.setattr("cliauth.client.CliAuthClient", FakeClient)
        result = runner.invoke(app, ["status", "cursor", "--url", "http://server.test", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["cursor"]["email"] == "remote@example.com"

    def test_remote_unreachable(self):
        result = runner.invoke(app, ["status", "--url", "http://127.0.0.1:1"])
        assert result.exit_code == 1
        assert "Could not reach" in result.stdout


class TestDebugAuthCommand:
    def test_prints_diagnostics(self, home):
        result = runner.invoke(app, ["debug-auth"])
        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["resolution"]["source"] == "default"


class TestServeCommand:
    def test_runs_uvicorn(self, monkeypatch):
        calls = {}

        def fake_run(application, **kwargs):
            calls["app"] = application
            calls.update(kwargs)

        monkeypatch.setattr("uvicorn.run", fake_run)
        result = runner.invoke(app, ["serve", "--port", "4100", "--log-level", "debug"])
        assert result.exit_code == 0
        assert calls["port"] == 4100
        assert calls["log_level"] == "debug"
        assert calls["app"].title == "cliauth"

    def test_settings_from_environment(self, monkeypatch):
        calls = {}
        monkeypatch.setattr("uvicorn.run", lambda application, **kwargs: calls.update(kwargs))
        result = runner.invoke(app, ["serve"], env={"CLIAUTH_HOST": "0.0.0.0", "CLIAUTH_PORT": "4200"})
        assert result.exit_code == 0
        assert calls["host"] == "0.0.0.0"
        assert calls["port"] == 4200

    def test_invalid_port_environment_rejected(self, monkeypatch):
        monkeypatch.setattr("uvicorn.run", lambda application, **kwargs: None)
        result = runner.invoke(app, ["serve"], env={"CLIAUTH_PORT": "abc"})
        assert result.exit_code == 2

    def test_invalid_port_environment_does_not_break_import(self, monkeypatch):
        import cliauth.config

        monkeypatch.setenv("CLIAUTH_PORT", "abc")
        config = importlib.reload(cliauth.config)
        assert config.DEFAULT_PORT == 3001
