"""Run an external status command under a wall-clock timeout.

Three signals race to finish a probe: the child process exiting, the child
failing after spawn, and a timer. Each of them hands its value to a
:class:`ProbeResolver`; only the first one is kept, and only a winning timer
kills the child.
"""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from ..exceptions import ProcessNonZeroExit, ProcessSpawnFailed, ProcessTimeout

logger = logging.getLogger(__name__)

# Upper bound on waiting for pipes to close after a winner is chosen.
_WAITER_JOIN_SECONDS = 2.0

# The child runs in its own session so a timeout can kill its descendants,
# which may otherwise keep the output pipes open.
_KILL_GROUP = hasattr(os, "killpg")


class ProbeState(Enum):
    PENDING = "pending"
    RESOLVED = "resolved"


class ProbeResolver:
    """Thread-safe, single-assignment container for a probe result."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = ProbeState.PENDING
        self._value: Any = None
        self._resolved = threading.Event()

    @property
    def state(self) -> ProbeState:
        return self._state

    @property
    def value(self) -> Any:
        return self._value

    def resolve(self, value: Any) -> bool:
        """Store ``value`` if nothing was stored yet.

        Returns True for the single caller whose value was kept.
        """
        with self._lock:
            if self._state is ProbeState.RESOLVED:
                return False
            self._value = value
            self._state = ProbeState.RESOLVED
        self._resolved.set()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        return self._resolved.wait(timeout)


@dataclass
class ProbeOutcome:
    """Exit code and buffered output of a finished status command."""

    returncode: int
    stdout: str
    stderr: str

    def check_returncode(self) -> None:
        if self.returncode != 0:
            raise ProcessNonZeroExit(
                self.stderr or f"Command exited with code {self.returncode}",
                returncode=self.returncode,
            )


def _kill(process: subprocess.Popen) -> None:
    # Signal the group before the child can be reaped and its pid reused.
    pid = getattr(process, "pid", None)
    if _KILL_GROUP and pid:
        try:
            os.killpg(pid, signal.SIGKILL)
        except OSError:
            pass  # group already gone
    try:
        process.kill()
    except OSError:
        pass  # exited between the timer firing and the kill


def run_probe(command: Sequence[str], *, timeout: float) -> ProbeOutcome:
    """Run ``command`` and return its outcome once it exits.

    Raises:
        ProcessSpawnFailed: The executable is missing, not executable, or
            the OS failed to manage the process after spawning it.
        ProcessTimeout: The command was still running after ``timeout``
            seconds. The child and its process group have been killed.
    """
    command = list(command)
    name = command[0]
    resolver = ProbeResolver()

    try:
        process = subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            start_new_session=_KILL_GROUP,
        )
    except OSError as e:
        logger.info("Could not start %s: %s", name, e)
        raise ProcessSpawnFailed(f"Could not start {name}: {e}") from e

    def on_timeout() -> None:
        if not resolver.resolve(ProcessTimeout(f"{name} did not finish within {timeout}s")):
            return
        logger.warning("%s timed out after %ss, killing it", name, timeout)
        _kill(process)

    def wait_for_exit() -> None:
        try:
            stdout, stderr = process.communicate()
        except (OSError, ValueError) as e:
            resolver.resolve(ProcessSpawnFailed(f"{name} failed after start: {e}"))
            return
        resolver.resolve(ProbeOutcome(process.returncode, stdout or "", stderr or ""))

    timer = threading.Timer(timeout, on_timeout)
    timer.daemon = True
    waiter = threading.Thread(target=wait_for_exit, name=f"probe-{name}", daemon=True)

    timer.start()
    waiter.start()
    try:
        resolver.wait()
    finally:
        timer.cancel()
        waiter.join(timeout=_WAITER_JOIN_SECONDS)

    value = resolver.value
    if isinstance(value, Exception):
        raise value
    return value
