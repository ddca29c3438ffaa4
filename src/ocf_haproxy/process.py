"""Process utilities: PID file entries, liveness and identity checks, signals, commands."""

import logging
import os
import signal
import subprocess  # nosec B404
from pathlib import Path

logger = logging.getLogger(__name__)

# Upper bound of pid_max on Linux
PID_MAX = 2**22


def read_pid_entries(pid_path: Path) -> list[str] | None:
    """Read whitespace-separated entries from a PID file. Returns None if the file is missing.

    Raises:
        OSError: The path exists but can't be read as a file.

    """
    try:
        return pid_path.read_text(errors="replace").split()
    except FileNotFoundError:
        return None


def parse_pid(entry: str) -> int | None:
    """Parse a PID file entry. Returns None unless it is an integer in the platform PID range."""
    try:
        pid = int(entry)
    except ValueError:
        return None
    return pid if 0 < pid <= PID_MAX else None


def process_exists(pid: int) -> bool:
    """Check whether a process with this PID exists."""
    try:
        os.kill(pid, 0)
    except (ProcessLookupError, OverflowError):
        return False
    except PermissionError:
        # Process exists but owned by another user
        return True
    except OSError:
        return False
    return True


def process_name(pid: int) -> str | None:
    """Return the command name of a process (via ``ps -o comm=``), or None if it can't be determined."""
    try:
        # S603/S607: args are controlled literals, "ps" is a standard system utility
        result = subprocess.run(["ps", "-p", str(pid), "-o", "comm="], capture_output=True, text=True, check=False)  # noqa: S603, S607  # nosec B603, B607
    except OSError:
        return None
    name = result.stdout.strip()
    return name if result.returncode == 0 and name else None


def is_daemon_process(entry: str, daemon_name: str) -> bool:
    """Check that a PID file entry names a live process whose command name is ``daemon_name``."""
    pid = parse_pid(entry)
    if pid is None or not process_exists(pid):
        return False
    return process_name(pid) == daemon_name


def send_term(pid: int) -> bool:
    """Send SIGTERM without waiting for the process to exit. Returns True if the signal was delivered."""
    try:
        os.kill(pid, signal.SIGTERM)
    except OSError as e:
        logger.error("failed to send SIGTERM to pid %d: %s", pid, e)
        return False
    return True


def run_command(args: list[str], *, capture_output: bool = True) -> subprocess.CompletedProcess[str] | None:
    """Run a command to completion. Returns None if it could not be launched.

    Args:
        args: Command and arguments.
        capture_output: Capture stdout/stderr. Disable for commands that daemonize, since a
            forked child holding the pipes open would block until it exits.

    """
    logger.debug("running: %s", " ".join(args))
    try:
        # S603: args come from the resource configuration, which the cluster administrator controls
        return subprocess.run(args, capture_output=capture_output, text=True, check=False, stdin=subprocess.DEVNULL)  # noqa: S603  # nosec B603
    except OSError as e:
        logger.error("can't execute %s: %s", args[0], e)
        return None
