"""AWS Lambda entry point for the voice skill."""

from __future__ import annotations

import logging
from typing import Any

from voiceadmin.app import VoiceAdmin
from voiceadmin.logging import quiet_library_loggers
from voiceadmin.skill.dispatcher import SkillProtocolError

logger = logging.getLogger(__name__)

_app: VoiceAdmin | None = None


def get_app() -> VoiceAdmin:
    """Return the process-wide app, creating it on first use.

    Lambda reuses the process between invocations, so configuration is
    read once per container.
    """
    global _app
    if _app is None:
        _app = VoiceAdmin()
        logging.getLogger().setLevel(_app.config["log_level"].upper())
        quiet_library_loggers()
    return _app


def reset_app() -> None:
    global _app
    _app = None


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any] | None:
    """Handle a voice platform invocation.

    Parameters
    ----------
    event : dict[str, Any]
        Voice platform request
    context : Any
        Lambda context object (unused)

    Returns
    -------
    dict[str, Any] | None
        Response envelope, or None when the session has ended

    Raises
    ------
    SkillProtocolError
        If the request cannot be dispatched; the invocation fails
    """
    try:
        return get_app().handle_event(event)
    except SkillProtocolError as e:
        logger.error("Rejected request: %s", e)
        raise
