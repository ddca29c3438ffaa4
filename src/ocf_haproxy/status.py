"""Daemon liveness from the PID file."""

import logging
from enum import StrEnum

from .codes import OcfResult
from .config import AgentConfig
from .process import is_daemon_process, read_pid_entries

logger = logging.getLogger(__name__)


class ProbeState(StrEnum):
    """Outcome of a PID file probe."""

    NOT_RUNNING = "not-running"
    STALE = "stale"
    RUNNING = "running"


def probe(config: AgentConfig) -> ProbeState:
    """Determine whether the daemon recorded in the PID file is running.

    Every entry must be a live process named like the daemon binary; a single dead,
    foreign or malformed entry makes the whole file stale. An empty PID file has no
    failing entry and therefore probes as running.
    """
    try:
        entries = read_pid_entries(config.pidfile)
    except OSError as e:
        logger.warning("haproxy pid file %s exists but can't be read: %s", config.pidfile, e)
        return ProbeState.STALE
    if entries is None:
        logger.info("haproxy is not running")
        return ProbeState.NOT_RUNNING

    for entry in entries:
        if not is_daemon_process(entry, config.daemon_name):
            logger.info("haproxy pid file exists but process %s is not running", entry)
            return ProbeState.STALE

    logger.debug("haproxy is running (pids %s)", " ".join(entries))
    return ProbeState.RUNNING


def is_running(config: AgentConfig) -> bool:
    """Collapse the probe to running / not running."""
    return probe(config) is ProbeState.RUNNING


def monitor(config: AgentConfig) -> OcfResult:
    """Health check used by both ``status`` and ``monitor``."""
    return OcfResult.SUCCESS if is_running(config) else OcfResult.NOT_RUNNING
