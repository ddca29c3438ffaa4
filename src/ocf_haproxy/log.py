"""Logging in the style of the OCF shell helpers' ``ocf_log``."""

import logging
import logging.handlers
import os
import sys
from collections.abc import Mapping

LOGGER_NAME = "ocf_haproxy"
SYSLOG_ADDRESS = "/dev/log"


def log_tag(env: Mapping[str, str]) -> str:
    """Tag prefixed to every record: ``HA_LOGTAG`` or ``haproxy(<resource instance>)``."""
    if tag := env.get("HA_LOGTAG"):
        return tag
    instance = env.get("OCF_RESOURCE_INSTANCE")
    return f"haproxy({instance})" if instance else "haproxy"


def setup_logging(env: Mapping[str, str] | None = None) -> logging.Logger:
    """Configure the package logger from the cluster manager's environment.

    Records go to stderr, and to syslog as well when ``HA_LOGFACILITY`` names a
    facility. ``HA_debug=1`` enables debug records. Calling again replaces the
    handlers installed by a previous call.
    """
    if env is None:
        env = os.environ

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if env.get("HA_debug") == "1" else logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    tag = log_tag(env).replace("%", "%%")
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(f"{tag}[%(process)d]: %(levelname)s: %(message)s"))
    logger.addHandler(stream_handler)

    facility_name = env.get("HA_LOGFACILITY", "").lower()
    facility = logging.handlers.SysLogHandler.facility_names.get(facility_name)
    if facility is not None:
        try:
            syslog_handler = logging.handlers.SysLogHandler(address=SYSLOG_ADDRESS, facility=facility)
        except OSError as e:
            logger.warning("can't connect to syslog at %s: %s", SYSLOG_ADDRESS, e)
        else:
            syslog_handler.setFormatter(logging.Formatter(f"{tag}[%(process)d]: %(levelname)s: %(message)s"))
            logger.addHandler(syslog_handler)

    return logger
