"""OCF resource agent for the HAProxy load balancer."""

from .agent import Action as Action
from .agent import run_action as run_action
from .codes import OcfResult as OcfResult
from .codes import exit_code as exit_code
from .config import AgentConfig as AgentConfig
from .lifecycle import start as start
from .lifecycle import stop as stop
from .metadata import render_metadata as render_metadata
from .status import ProbeState as ProbeState
from .status import monitor as monitor
from .status import probe as probe
from .validate import validate_all as validate_all
