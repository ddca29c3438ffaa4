"""Tests for the PID file probe."""

import contextlib
import logging
import os
import signal
import subprocess
from collections.abc import Iterator
from pathlib import Path

import pytest

from ocf_haproxy.codes import OcfResult
from ocf_haproxy.config import AgentConfig
from ocf_haproxy.status import ProbeState, is_running, monitor, probe


def _dead_pid() -> int:
    """Return a PID guaranteed to be dead."""
    proc = subprocess.Popen(["true"])
    proc.wait()
    return proc.pid


def _config(pid_path: Path, binpath: str = "/bin/sleep") -> AgentConfig:
    """Config whose daemon is named like the ``sleep`` stand-in process."""
    return AgentConfig.resolve({"OCF_RESKEY_pidfile": str(pid_path), "OCF_RESKEY_binpath": binpath})


# -- Fixtures --


@pytest.fixture(autouse=True)
def _capture_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="ocf_haproxy")


@pytest.fixture()
def pid_file(tmp_path: Path) -> Path:
    """Path for a PID file inside the test's temp directory."""
    return tmp_path / "haproxy.pid"


@pytest.fixture()
def sleeper() -> Iterator[int]:
    """Spawn a sleep process standing in for the daemon, kill it on teardown."""
    proc = subprocess.Popen(
        ["sleep", "60"],
        start_new_session=True,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        stdin=subprocess.DEVNULL,
    )
    yield proc.pid
    with contextlib.suppress(ProcessLookupError):
        os.kill(proc.pid, signal.SIGKILL)
    proc.wait()


# -- Tests --


class TestProbe:
    """Tests for probe."""

    def test_missing_pid_file(self, pid_file: Path, caplog: pytest.LogCaptureFixture) -> None:
        """No PID file: not running."""
        assert probe(_config(pid_file)) is ProbeState.NOT_RUNNING
        assert "haproxy is not running" in caplog.text

    def test_dead_pid(self, pid_file: Path, caplog: pytest.LogCaptureFixture) -> None:
        """PID file naming a dead process is stale."""
        pid = _dead_pid()
        pid_file.write_text(f"{pid}\n")
        assert probe(_config(pid_file)) is ProbeState.STALE
        assert f"pid file exists but process {pid} is not running" in caplog.text

    def test_running(self, pid_file: Path, sleeper: int) -> None:
        """Live process with the daemon's command name is running."""
        pid_file.write_text(f"{sleeper}\n")
        assert probe(_config(pid_file)) is ProbeState.RUNNING

    def test_foreign_process(self, pid_file: Path, sleeper: int) -> None:
        """Live process with another command name doesn't count."""
        pid_file.write_text(f"{sleeper}\n")
        assert probe(_config(pid_file, binpath="/usr/sbin/haproxy")) is ProbeState.STALE

    def test_one_bad_entry_condemns_all(self, pid_file: Path, sleeper: int) -> None:
        """A single dead entry makes the file stale even next to a live one."""
        pid_file.write_text(f"{sleeper}\n{_dead_pid()}\n")
        assert probe(_config(pid_file)) is ProbeState.STALE

    def test_garbage_entry(self, pid_file: Path, sleeper: int) -> None:
        """Entries that aren't PIDs make the file stale."""
        pid_file.write_text(f"{sleeper}\nnot-a-pid\n")
        assert probe(_config(pid_file)) is ProbeState.STALE

    def test_oversized_pid(self, pid_file: Path, sleeper: int, caplog: pytest.LogCaptureFixture) -> None:
        """A number beyond the PID range is a bad entry, not a crash."""
        pid_file.write_text(f"{sleeper}\n99999999999999999999\n")
        assert probe(_config(pid_file)) is ProbeState.STALE
        assert "process 99999999999999999999 is not running" in caplog.text

    def test_unreadable_pid_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A PID file path that can't be read is stale rather than absent."""
        assert probe(_config(tmp_path)) is ProbeState.STALE
        assert "exists but can't be read" in caplog.text
        assert "haproxy is not running" not in caplog.text

    def test_multiple_live_entries(self, pid_file: Path, sleeper: int) -> None:
        """Every entry live and matching: running."""
        pid_file.write_text(f"{sleeper}\n{sleeper}\n")
        assert probe(_config(pid_file)) is ProbeState.RUNNING

    def test_empty_pid_file_is_running(self, pid_file: Path) -> None:
        """An empty PID file has no failing entry."""
        pid_file.write_text("")
        assert probe(_config(pid_file)) is ProbeState.RUNNING


class TestMonitor:
    """Tests for monitor and is_running."""

    def test_running(self, pid_file: Path, sleeper: int) -> None:
        """Running daemon reports success."""
        pid_file.write_text(f"{sleeper}\n")
        assert is_running(_config(pid_file)) is True
        assert monitor(_config(pid_file)) is OcfResult.SUCCESS

    def test_missing_pid_file(self, pid_file: Path) -> None:
        """No PID file reports not running."""
        assert is_running(_config(pid_file)) is False
        assert monitor(_config(pid_file)) is OcfResult.NOT_RUNNING

    def test_stale_pid_file(self, pid_file: Path) -> None:
        """Stale PID file reports not running and is left alone."""
        pid_file.write_text(f"{_dead_pid()}\n")
        assert monitor(_config(pid_file)) is OcfResult.NOT_RUNNING
        assert pid_file.exists()
