"""Resource parameters passed by the cluster manager as ``OCF_RESKEY_*`` variables."""

import shlex
from collections.abc import Mapping
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "OCF_RESKEY_"

DEFAULT_BINPATH = Path("/usr/sbin/haproxy")
DEFAULT_CONFFILE = Path("/etc/haproxy/haproxy.cfg")
DEFAULT_EXTRACONF = ""
DEFAULT_PIDFILE = Path("/var/run/haproxy.pid")

# Linux keeps at most 15 characters of a process command name
COMM_MAX_LENGTH = 15


class AgentConfig(BaseModel):
    """Immutable configuration of one agent invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    binpath: Path = DEFAULT_BINPATH
    conffile: Path = DEFAULT_CONFFILE
    extraconf: str = DEFAULT_EXTRACONF
    pidfile: Path = DEFAULT_PIDFILE
    explicit: frozenset[str] = frozenset()
    """Parameters supplied with a non-empty value rather than defaulted."""

    @classmethod
    def resolve(cls, env: Mapping[str, str]) -> Self:
        """Build the configuration from an environment mapping.

        Never fails: a missing or empty parameter falls back to its default.
        Values are not checked here, see ``validate_all``.
        """
        supplied = {
            name: value for name in ("binpath", "conffile", "extraconf", "pidfile") if (value := env.get(ENV_PREFIX + name, ""))
        }
        return cls(**supplied, explicit=frozenset(supplied))

    def is_explicit(self, name: str) -> bool:
        """Whether the parameter was supplied rather than defaulted."""
        return name in self.explicit

    @property
    def extra_args(self) -> list[str]:
        """Extra daemon arguments split with shell quoting rules."""
        return shlex.split(self.extraconf)

    @property
    def daemon_name(self) -> str:
        """Command name a live daemon process reports, as seen by ``ps -o comm=``."""
        return self.binpath.name[:COMM_MAX_LENGTH]
