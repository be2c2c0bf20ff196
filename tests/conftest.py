"""Test configuration for cliauth tests."""

import base64
import json
import threading

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point the home directory at a temp dir and clear credential env vars."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv("CLAUDE_CREDENTIALS_PATH", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    return tmp_path


@pytest.fixture
def write_json():
    """Write a JSON document (or raw text) to a path, creating parent dirs."""

    def _write(path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


@pytest.fixture
def make_jwt():
    """Build an unsigned three-part JWT with the given claims."""

    def _make(claims):
        def encode(obj):
            raw = json.dumps(obj).encode()
            return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()

        return f"{encode({'alg': 'none', 'typ': 'JWT'})}.{encode(claims)}.signature"

    return _make


class FakeProcess:
    """Stand-in for subprocess.Popen with controllable exit behavior."""

    def __init__(self, stdout="", stderr="", returncode=0, hang=False, exit_on_kill=None, communicate_error=None):
        self._stdout = stdout
        self._stderr = stderr
        self._final_returncode = returncode
        self._hang = hang
        self._exit_on_kill = exit_on_kill
        self._communicate_error = communicate_error
        self._killed = threading.Event()
        self.returncode = None
        self.kill_calls = 0
        self.calls = []

    def communicate(self):
        if self._communicate_error:
            raise self._communicate_error
        if self._hang:
            # Never exits on its own; a kill makes it exit
            self._killed.wait(5)
            if self._exit_on_kill is not None:
                self.returncode, out = self._exit_on_kill
                return out, ""
            self.returncode = -9
            return "", ""
        self.returncode = self._final_returncode
        return self._stdout, self._stderr

    def kill(self):
        self.kill_calls += 1
        self._killed.set()


@pytest.fixture
def fake_popen(monkeypatch):
    """Make subprocess.Popen in the prober return a FakeProcess."""

    def _install(**kwargs):
        process = FakeProcess(**kwargs)

        def popen(command, **popen_kwargs):
            process.calls.append((command, popen_kwargs))
            return process

        monkeypatch.setattr("cliauth.auth.probe.subprocess.Popen", popen)
        return process

    return _install
