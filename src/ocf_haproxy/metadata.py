"""OCF meta-data document describing the agent's parameters and actions."""

from typing import NamedTuple

from .config import DEFAULT_BINPATH, DEFAULT_CONFFILE, DEFAULT_EXTRACONF, DEFAULT_PIDFILE


class Parameter(NamedTuple):
    name: str
    longdesc: str
    shortdesc: str
    default: str
    type: str = "string"


class ActionHint(NamedTuple):
    name: str
    timeout: int
    interval: int | None = None
    depth: int | None = None


PARAMETERS = (
    Parameter("binpath", "The HAProxy binary path. For example, \"/usr/sbin/haproxy\"", "The HAProxy binary path", str(DEFAULT_BINPATH)),
    Parameter(
        "conffile",
        "The HAProxy configuration file path. For example, \"/etc/haproxy/haproxy.cfg\"",
        "Configuration file path",
        str(DEFAULT_CONFFILE),
    ),
    Parameter("extraconf", "Extra command line arguments to pass to haproxy.", "Extra command line arguments", DEFAULT_EXTRACONF),
    Parameter(
        "pidfile",
        "The HAProxy PID file path. For example, \"/var/run/haproxy.pid\"",
        "The HAProxy PID file path",
        str(DEFAULT_PIDFILE),
    ),
)

ACTIONS = (
    ActionHint("start", timeout=20),
    ActionHint("stop", timeout=20),
    ActionHint("monitor", timeout=20, interval=10, depth=0),
    ActionHint("validate-all", timeout=20),
    ActionHint("meta-data", timeout=5),
)


def _render_parameter(param: Parameter) -> str:
    return (
        f'<parameter name="{param.name}" unique="0" required="0">\n'
        f'<longdesc lang="en">\n{param.longdesc}\n</longdesc>\n'
        f'<shortdesc lang="en">{param.shortdesc}</shortdesc>\n'
        f'<content type="{param.type}" default="{param.default}" />\n'
        "</parameter>\n"
    )


def _render_action(action: ActionHint) -> str:
    attrs = f'name="{action.name}"'
    if action.depth is not None:
        attrs += f' depth="{action.depth}"'
    attrs += f' timeout="{action.timeout}"'
    if action.interval is not None:
        attrs += f' interval="{action.interval}"'
    return f"<action {attrs} />\n"


def render_metadata() -> str:
    """Render the resource-agent XML the cluster manager reads on registration."""
    return (
        '<?xml version="1.0"?>\n'
        '<!DOCTYPE resource-agent SYSTEM "ra-api-1.dtd">\n'
        '<resource-agent name="haproxy">\n'
        "<version>1.0</version>\n"
        '<longdesc lang="en">\n'
        "This is an OCF resource agent for HAProxy. It manages the daemon lifecycle\n"
        "(start, stop, monitor) through its PID file and validates the configuration.\n"
        "</longdesc>\n"
        '<shortdesc lang="en">Manages an HAProxy daemon</shortdesc>\n'
        "<parameters>\n"
        + "".join(_render_parameter(p) for p in PARAMETERS)
        + "</parameters>\n"
        "<actions>\n"
        + "".join(_render_action(a) for a in ACTIONS)
        + "</actions>\n"
        "</resource-agent>\n"
    )
