"""Configuration checks run by ``validate-all``."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from mm_result import Result

from .codes import OcfResult
from .config import AgentConfig
from .process import run_command

logger = logging.getLogger(__name__)

# error code -> OCF result reported for it
ERROR_RESULTS: dict[str, OcfResult] = {
    "binpath_not_executable": OcfResult.ERR_ARGS,
    "conffile_missing": OcfResult.ERR_ARGS,
    "pidfile_dir_not_writable": OcfResult.ERR_ARGS,
    "config_check_failed": OcfResult.ERR_GENERIC,
}


def check_binpath(config: AgentConfig) -> Result[Path]:
    """An explicitly supplied binary must be an executable file."""
    path = config.binpath
    if config.is_explicit("binpath") and not (path.is_file() and os.access(path, os.X_OK)):
        return Result.err("binpath_not_executable", context={"message": f"binpath {path} is not executable"})
    return Result.ok(path)


def check_conffile(config: AgentConfig) -> Result[Path]:
    """An explicitly supplied config file must exist."""
    path = config.conffile
    if config.is_explicit("conffile") and not path.exists():
        return Result.err("conffile_missing", context={"message": f"config file {path} does not exist"})
    return Result.ok(path)


def check_pidfile_dir(config: AgentConfig) -> Result[Path]:
    """The directory of an explicitly supplied PID file must be traversable and writable."""
    directory = config.pidfile.parent
    if config.is_explicit("pidfile") and not os.access(directory, os.X_OK | os.W_OK):
        return Result.err("pidfile_dir_not_writable", context={"message": f"pid file directory {directory} is not writable"})
    return Result.ok(directory)


def check_config_syntax(config: AgentConfig) -> Result[Path]:
    """The daemon must accept its config file in check mode (``-c``)."""
    result = run_command([str(config.binpath), "-c", "-f", str(config.conffile)])
    if result is None or result.returncode != 0:
        output = "" if result is None else (result.stderr or result.stdout).strip()
        message = f"haproxy rejected config file {config.conffile}"
        if output:
            message += f": {output}"
        return Result.err("config_check_failed", context={"message": message})
    return Result.ok(config.conffile)


CHECKS: tuple[Callable[[AgentConfig], Result[Path]], ...] = (
    check_binpath,
    check_conffile,
    check_pidfile_dir,
    check_config_syntax,
)


def validate_all(config: AgentConfig) -> OcfResult:
    """Run the checks in order and stop at the first failure."""
    for check in CHECKS:
        result = check(config)
        if result.is_err():
            message = result.context["message"] if result.context else str(result.error)
            logger.error("%s", message)
            return ERROR_RESULTS.get(str(result.error), OcfResult.ERR_GENERIC)
    return OcfResult.SUCCESS
