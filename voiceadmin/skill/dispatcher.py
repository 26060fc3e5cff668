"""Routing of voice platform requests to intent handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from voiceadmin.core.interfaces import InventoryProvider
from voiceadmin.core.session import SessionState
from voiceadmin.logging import TurnLoggerAdapter
from voiceadmin.providers.aws.regions import RegionDirectory
from voiceadmin.skill.handlers import IntentHandlers
from voiceadmin.skill.response import SkillResponse

logger = logging.getLogger(__name__)

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"

INSTANCE_COUNT_INTENT = "InstanceCountIntent"
SET_REGION_INTENT = "SetRegionIntent"
GET_REGION_INTENT = "GetRegionIntent"
TERMINATE_UNTAGGED_INTENT = "TerminateUntaggedInstancesIntent"
HELP_INTENT = "AMAZON.HelpIntent"


class SkillProtocolError(Exception):
    """The request violates the skill's dispatch contract."""


class InvalidIntentError(SkillProtocolError):
    """The intent name is not one the skill handles."""

    def __init__(self, intent_name: str | None) -> None:
        super().__init__(f"Invalid intent: {intent_name!r}")
        self.intent_name = intent_name


class InvalidRequestError(SkillProtocolError):
    """The request type is not one the skill handles."""


class InvalidApplicationError(SkillProtocolError):
    """The request was addressed to a different skill application."""


class SkillDispatcher:
    """Route a voice platform event to the matching handler.

    Parameters
    ----------
    inventory_factory : Callable[[str], InventoryProvider]
        Creates an inventory provider for a region identifier
    region_directory : RegionDirectory | None
        Resolves spoken region names, built-in table if None
    application_id : str | None
        Expected skill application id; requests for other applications are
        rejected. No check is made when None.
    """

    def __init__(
        self,
        inventory_factory: Callable[[str], InventoryProvider],
        region_directory: RegionDirectory | None = None,
        application_id: str | None = None,
    ) -> None:
        self.region_directory = region_directory or RegionDirectory()
        self.application_id = application_id
        self.handlers = IntentHandlers(
            inventory_factory=inventory_factory,
            region_directory=self.region_directory,
        )
        self._intent_routes: dict[
            str, Callable[[dict[str, Any], SessionState, Any], SkillResponse]
        ] = {
            INSTANCE_COUNT_INTENT: self.handlers.instance_count,
            SET_REGION_INTENT: self.handlers.set_region,
            GET_REGION_INTENT: self.handlers.get_region,
            TERMINATE_UNTAGGED_INTENT: self.handlers.terminate_untagged,
            HELP_INTENT: self.handlers.welcome,
        }

    @property
    def intent_names(self) -> list[str]:
        return list(self._intent_routes)

    def dispatch(self, event: dict[str, Any]) -> dict[str, Any] | None:
        """Handle one voice turn.

        Parameters
        ----------
        event : dict[str, Any]
            Voice platform request with ``session`` and ``request`` sections

        Returns
        -------
        dict[str, Any] | None
            Response envelope, or None for SessionEndedRequest

        Raises
        ------
        InvalidApplicationError
            If the application id does not match the configured one
        InvalidRequestError
            If the request type is not supported
        InvalidIntentError
            If the intent name is not supported
        """
        session = event.get("session") or {}
        request = event.get("request") or {}
        request_type = request.get("type")

        turn_logger = TurnLoggerAdapter(
            logger,
            request_id=request.get("requestId"),
            session_id=session.get("sessionId"),
        )

        self._verify_application(session, turn_logger)

        if session.get("new"):
            turn_logger.info("Session started: %s", session.get("sessionId"))

        state = SessionState.from_session(session)

        if request_type == LAUNCH_REQUEST:
            turn_logger.info("Launch request")
            return self.handlers.welcome(None, state, turn_logger).to_envelope()

        if request_type == INTENT_REQUEST:
            return self.dispatch_intent(
                request.get("intent") or {}, state, turn_logger
            ).to_envelope()

        if request_type == SESSION_ENDED_REQUEST:
            turn_logger.info(
                "Session ended: %s (%s)", session.get("sessionId"), request.get("reason")
            )
            return None

        raise InvalidRequestError(f"Unsupported request type: {request_type!r}")

    def dispatch_intent(
        self,
        intent: dict[str, Any],
        state: SessionState,
        turn_logger: TurnLoggerAdapter | None = None,
    ) -> SkillResponse:
        """Run the handler registered for the intent's name.

        Raises
        ------
        InvalidIntentError
            If no handler is registered for the intent name
        """
        intent_name = intent.get("name")
        turn_logger = (turn_logger or TurnLoggerAdapter(logger)).bind(intent=intent_name)

        handler = self._intent_routes.get(intent_name)
        if handler is None:
            turn_logger.error("Invalid intent %r", intent_name)
            raise InvalidIntentError(intent_name)

        turn_logger.info("Handling intent %s", intent_name)
        return handler(intent, state, turn_logger)

    def _verify_application(
        self, session: dict[str, Any], turn_logger: TurnLoggerAdapter
    ) -> None:
        application_id = (session.get("application") or {}).get("applicationId")
        turn_logger.debug("applicationId=%s", application_id)

        if self.application_id is None:
            return

        if application_id != self.application_id:
            turn_logger.error("Rejected request for application %s", application_id)
            raise InvalidApplicationError(
                f"Request for application {application_id!r} does not match this skill"
            )
