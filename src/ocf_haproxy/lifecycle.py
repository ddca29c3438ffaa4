"""Start and stop the daemon."""

import logging

from .codes import OcfResult
from .config import AgentConfig
from .process import parse_pid, process_exists, read_pid_entries, run_command, send_term
from .status import is_running

logger = logging.getLogger(__name__)


def launch_command(config: AgentConfig) -> list[str]:
    """Command line that starts the daemon in the background and makes it write the PID file."""
    return [str(config.binpath), "-D", *config.extra_args, "-f", str(config.conffile), "-p", str(config.pidfile)]


def start(config: AgentConfig) -> OcfResult:
    """Start the daemon unless it is already running.

    Success is reported as soon as the launch command exits 0; the daemon is not probed again.
    """
    if is_running(config):
        logger.info("haproxy is already running")
        return OcfResult.SUCCESS

    try:
        args = launch_command(config)
    except ValueError as e:
        logger.error("can't parse extraconf %r: %s", config.extraconf, e)
        return OcfResult.ERR_GENERIC

    result = run_command(args, capture_output=False)
    if result is None:
        return OcfResult.ERR_GENERIC
    if result.returncode != 0:
        logger.error("haproxy failed to start (exit code %d)", result.returncode)
        return OcfResult.ERR_GENERIC

    logger.info("haproxy started")
    return OcfResult.SUCCESS


def stop(config: AgentConfig) -> OcfResult:
    """Send SIGTERM to every live process in the PID file, then remove the file.

    A missing PID file means the daemon is already stopped. If any signal can't be
    delivered the PID file is kept. Processes are not waited for.
    """
    try:
        entries = read_pid_entries(config.pidfile)
    except OSError as e:
        logger.error("can't read pid file %s: %s", config.pidfile, e)
        return OcfResult.ERR_GENERIC
    if entries is None:
        logger.info("haproxy already stopped")
        return OcfResult.SUCCESS

    ok = True
    for entry in entries:
        pid = parse_pid(entry)
        if pid is None or not process_exists(pid):
            continue
        if send_term(pid):
            logger.info("sent SIGTERM to haproxy pid %d", pid)
        else:
            ok = False

    if not ok:
        logger.error("failed to stop haproxy")
        return OcfResult.ERR_GENERIC

    try:
        config.pidfile.unlink(missing_ok=True)
    except OSError as e:
        logger.error("can't remove pid file %s: %s", config.pidfile, e)
        return OcfResult.ERR_GENERIC

    logger.info("haproxy stopped")
    return OcfResult.SUCCESS
