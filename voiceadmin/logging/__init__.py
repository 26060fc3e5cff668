"""Logging setup for voiceadmin."""

from __future__ import annotations

import logging
import sys

from voiceadmin.logging.adapters import TurnLoggerAdapter
from voiceadmin.logging.filters import StreamRoutingFilter
from voiceadmin.logging.formatters import StreamFormatter

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

QUIET_LOGGERS = ("botocore", "boto3", "urllib3")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install stdout/stderr handlers on the root logger.

    Parameters
    ----------
    level : str | int
        Root log level, as a name ('INFO') or number
    """
    if isinstance(level, str):
        level = level.upper()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(StreamFormatter(LOG_FORMAT))
    stdout_handler.addFilter(StreamRoutingFilter("stdout"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(StreamFormatter(LOG_FORMAT))
    stderr_handler.addFilter(StreamRoutingFilter("stderr"))

    logging.basicConfig(
        level=level,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )

    quiet_library_loggers()


def quiet_library_loggers() -> None:
    """Cap AWS SDK and HTTP library loggers at WARNING."""
    for module_name in QUIET_LOGGERS:
        logging.getLogger(module_name).setLevel(logging.WARNING)


__all__ = [
    "StreamFormatter",
    "StreamRoutingFilter",
    "TurnLoggerAdapter",
    "configure_logging",
    "quiet_library_loggers",
]
