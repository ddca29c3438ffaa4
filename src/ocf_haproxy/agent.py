"""Action dispatch for the resource agent."""

import logging
from enum import StrEnum

from .codes import OcfResult
from .config import AgentConfig
from .lifecycle import start, stop
from .metadata import render_metadata
from .output import print_plain
from .status import monitor
from .validate import validate_all

logger = logging.getLogger(__name__)


class Action(StrEnum):
    """Actions the cluster manager may request."""

    START = "start"
    STOP = "stop"
    STATUS = "status"
    MONITOR = "monitor"
    VALIDATE_ALL = "validate-all"
    META_DATA = "meta-data"
    USAGE = "usage"

    @classmethod
    def parse(cls, value: str | None) -> "Action | None":
        """Return the action named ``value``, or None for a missing or unknown name."""
        try:
            return cls(value)
        except ValueError:
            return None


def usage_text(prog: str) -> str:
    """One-line usage listing every action."""
    return f"usage: {prog} {{{'|'.join(Action)}}}"


def run_action(action: Action, config: AgentConfig, *, prog: str = "haproxy") -> OcfResult:
    """Execute one action and return its result."""
    logger.debug("action %s, config %s", action, config.model_dump(exclude={"explicit"}))
    match action:
        case Action.START:
            return start(config)
        case Action.STOP:
            return stop(config)
        case Action.STATUS | Action.MONITOR:
            return monitor(config)
        case Action.VALIDATE_ALL:
            return validate_all(config)
        case Action.META_DATA:
            print_plain(render_metadata().rstrip("\n"))
            return OcfResult.SUCCESS
        case Action.USAGE:
            print_plain(usage_text(prog))
            return OcfResult.SUCCESS
