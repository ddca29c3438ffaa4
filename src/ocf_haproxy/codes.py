"""OCF result codes and their translation to process exit statuses."""

import os
from collections.abc import Mapping
from enum import IntEnum


class OcfResult(IntEnum):
    """Result vocabulary of the OCF resource agent API, with the standard values."""

    SUCCESS = 0
    ERR_GENERIC = 1
    ERR_ARGS = 2
    ERR_UNIMPLEMENTED = 3
    ERR_PERM = 4
    ERR_INSTALLED = 5
    ERR_CONFIGURED = 6
    NOT_RUNNING = 7


def exit_code(result: OcfResult, env: Mapping[str, str] | None = None) -> int:
    """Translate a result into the integer the cluster manager expects.

    The execution context may define ``OCF_<NAME>`` (e.g. ``OCF_NOT_RUNNING``);
    a valid integer there overrides the standard value.
    """
    if env is None:
        env = os.environ
    raw = env.get(f"OCF_{result.name}", "").strip()
    try:
        return int(raw)
    except ValueError:
        return int(result)
