"""Handlers producing the response for each supported intent."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from voiceadmin.core.interfaces import InventoryProvider
from voiceadmin.core.session import SessionState
from voiceadmin.inventory.cleanup import UntaggedInstanceCleanup
from voiceadmin.providers.aws.regions import RegionDirectory
from voiceadmin.providers.exceptions import ProviderError
from voiceadmin.skill import speech
from voiceadmin.skill.response import SkillResponse, build_speechlet_response

REGION_SLOT = "Region"

module_logger = logging.getLogger(__name__)


def _intent_name(intent: dict[str, Any]) -> str:
    return intent.get("name", "")


def _slot_value(intent: dict[str, Any], slot_name: str) -> str | None:
    slot = (intent.get("slots") or {}).get(slot_name)
    if not slot:
        return None
    value = slot.get("value")
    return value or None


class IntentHandlers:
    """Per-intent behaviour of the skill.

    Every handler takes the intent payload, the current session state and
    a logger bound to the turn, and returns a SkillResponse. Handlers never
    raise provider errors; those become spoken apologies.

    Parameters
    ----------
    inventory_factory : Callable[[str], InventoryProvider]
        Creates an inventory provider for a region identifier
    region_directory : RegionDirectory
        Resolves spoken region names
    """

    def __init__(
        self,
        inventory_factory: Callable[[str], InventoryProvider],
        region_directory: RegionDirectory,
    ) -> None:
        self.inventory_factory = inventory_factory
        self.region_directory = region_directory

    def welcome(
        self, intent: dict[str, Any] | None, session: SessionState, logger: Any = None
    ) -> SkillResponse:
        return SkillResponse(
            session=session,
            speechlet=build_speechlet_response(
                speech.CARD_TITLE, speech.WELCOME, speech.WELCOME_REPROMPT, False
            ),
        )

    def set_region(
        self, intent: dict[str, Any], session: SessionState, logger: Any = None
    ) -> SkillResponse:
        """Store the spoken region from the Region slot in the session."""
        logger = logger or module_logger
        selected_region = _slot_value(intent, REGION_SLOT)

        if selected_region is None:
            logger.info("SetRegionIntent without a Region value")
            return SkillResponse(
                session=session,
                speechlet=build_speechlet_response(
                    _intent_name(intent),
                    speech.REGION_UNKNOWN,
                    speech.REGION_UNKNOWN_REPROMPT,
                    False,
                ),
            )

        logger.info(
            "Region set to %s (%s)",
            selected_region,
            self.region_directory.resolve(selected_region),
        )
        return SkillResponse(
            session=session.with_region(selected_region),
            speechlet=build_speechlet_response(
                _intent_name(intent),
                speech.REGION_SET.format(region=selected_region),
                speech.REGION_SET_REPROMPT,
                False,
            ),
        )

    def get_region(
        self, intent: dict[str, Any], session: SessionState, logger: Any = None
    ) -> SkillResponse:
        if session.region:
            output = speech.CURRENT_REGION.format(region=session.region)
            should_end_session = True
        else:
            output = speech.NO_REGION_TO_REPORT
            should_end_session = False

        return SkillResponse(
            session=session,
            speechlet=build_speechlet_response(
                _intent_name(intent), output, None, should_end_session
            ),
        )

    def instance_count(
        self, intent: dict[str, Any], session: SessionState, logger: Any = None
    ) -> SkillResponse:
        """Report how many instances are running in the session's region."""
        logger = logger or module_logger

        if not session.region:
            output = speech.NO_REGION_SELECTED
        else:
            region_id = self.region_directory.resolve(session.region)
            logger.info("Using %s (%s) for this intent", session.region, region_id)

            try:
                count = self.inventory_factory(region_id).count_running_instances()
            except ProviderError as e:
                logger.warning("Failed to count running instances in %s: %s", region_id, e)
                output = speech.COUNT_FAILED
            else:
                output = speech.running_instances(count)

        return SkillResponse(
            session=session,
            speechlet=build_speechlet_response(_intent_name(intent), output, None, False),
        )

    def terminate_untagged(
        self, intent: dict[str, Any], session: SessionState, logger: Any = None
    ) -> SkillResponse:
        cleanup = UntaggedInstanceCleanup(
            inventory_factory=self.inventory_factory,
            region_directory=self.region_directory,
            logger=logger or module_logger,
        )
        outcome = cleanup.run(session.region)

        return SkillResponse(
            session=session,
            speechlet=build_speechlet_response(
                _intent_name(intent), outcome.message, None, False
            ),
        )
