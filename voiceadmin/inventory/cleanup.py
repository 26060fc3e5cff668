"""Find and terminate running instances that carry no identifying tags."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from voiceadmin.core.interfaces import Instance, InventoryProvider
from voiceadmin.inventory.tags import is_untagged
from voiceadmin.providers.aws.regions import RegionDirectory
from voiceadmin.providers.exceptions import ProviderError
from voiceadmin.skill import speech

module_logger = logging.getLogger(__name__)


class CleanupState(Enum):
    """Stages of an untagged-instance cleanup run."""

    AWAITING_REGION = "awaiting_region"
    LISTING = "listing"
    DECIDING = "deciding"
    TERMINATING = "terminating"
    DONE = "done"
    ERRORED = "errored"


@dataclass
class CleanupOutcome:
    """Result of one cleanup run.

    Attributes
    ----------
    state : CleanupState
        Terminal state, either DONE or ERRORED
    message : str
        Spoken text describing the outcome
    region_id : str | None
        Provider region the run operated on, None if no region was selected
    terminated_ids : list[str]
        Instances included in the terminate request, empty unless it succeeded
    """

    state: CleanupState
    message: str
    region_id: str | None = None
    terminated_ids: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state is CleanupState.DONE


class UntaggedInstanceCleanup:
    """Describe, classify and terminate untagged running instances.

    Each run lists the region exactly once and, only when untagged
    instances were found, issues exactly one bulk terminate request for
    them. Nothing is retried and nothing is kept between runs.

    Parameters
    ----------
    inventory_factory : Callable[[str], InventoryProvider]
        Creates an inventory provider for a region identifier
    region_directory : RegionDirectory | None
        Resolves spoken region names, built-in table if None
    logger : logging.Logger | logging.LoggerAdapter | None
        Logger receiving progress and failure records
    """

    def __init__(
        self,
        inventory_factory: Callable[[str], InventoryProvider],
        region_directory: RegionDirectory | None = None,
        logger: Any = None,
    ) -> None:
        self.inventory_factory = inventory_factory
        self.region_directory = region_directory or RegionDirectory()
        self.logger = logger or module_logger
        self.state = CleanupState.AWAITING_REGION

    def _transition(self, state: CleanupState) -> None:
        self.logger.debug("Cleanup state %s -> %s", self.state.value, state.value)
        self.state = state

    def _finish(
        self,
        state: CleanupState,
        message: str,
        region_id: str | None = None,
        terminated_ids: list[str] | None = None,
    ) -> CleanupOutcome:
        self._transition(state)
        return CleanupOutcome(
            state=state,
            message=message,
            region_id=region_id,
            terminated_ids=terminated_ids or [],
        )

    def select_untagged(self, instances: list[Instance]) -> list[str]:
        """Return ids of untagged instances, preserving provider order."""
        return [instance.instance_id for instance in instances if is_untagged(instance)]

    def find_untagged(self, region_id: str) -> list[str]:
        """List untagged running instances without terminating anything.

        Raises
        ------
        ProviderError
            If the listing fails
        """
        inventory = self.inventory_factory(region_id)
        return self.select_untagged(inventory.list_running_instances())

    def run(self, spoken_region: str | None) -> CleanupOutcome:
        """Terminate all untagged running instances in the selected region.

        Parameters
        ----------
        spoken_region : str | None
            Region name from the session, None if the user has not chosen one

        Returns
        -------
        CleanupOutcome
            Terminal state and spoken message; provider failures are
            reported here rather than raised
        """
        self.state = CleanupState.AWAITING_REGION

        if not spoken_region:
            return self._finish(CleanupState.DONE, speech.NO_REGION_SELECTED)

        region_id = self.region_directory.resolve(spoken_region)
        self.logger.info("Using %s (%s) for untagged cleanup", spoken_region, region_id)
        return self.run_in_region(region_id)

    def run_in_region(self, region_id: str) -> CleanupOutcome:
        """Run the cleanup against a provider region identifier.

        Parameters
        ----------
        region_id : str
            Provider region (e.g. 'us-west-2')

        Returns
        -------
        CleanupOutcome
            Terminal state and spoken message
        """
        self._transition(CleanupState.LISTING)

        try:
            inventory = self.inventory_factory(region_id)
            instances = inventory.list_running_instances()
        except ProviderError as e:
            self.logger.warning(
                "Failed to list running instances in %s (%s): %s",
                region_id,
                getattr(e, "error_code", None) or e.__class__.__name__,
                e,
            )
            return self._finish(CleanupState.ERRORED, speech.LIST_FAILED, region_id)

        self._transition(CleanupState.DECIDING)
        untagged_ids = self.select_untagged(instances)

        if not untagged_ids:
            self.logger.info(
                "No untagged instances among %d running in %s", len(instances), region_id
            )
            return self._finish(CleanupState.DONE, speech.NO_UNTAGGED_INSTANCES, region_id)

        self.logger.info("To terminate (IDs): %s", ", ".join(untagged_ids))
        self._transition(CleanupState.TERMINATING)

        try:
            inventory.terminate_instances(untagged_ids)
        except ProviderError as e:
            self.logger.warning(
                "Failed to terminate %d untagged instances in %s (%s): %s",
                len(untagged_ids),
                region_id,
                getattr(e, "error_code", None) or e.__class__.__name__,
                e,
            )
            return self._finish(CleanupState.ERRORED, speech.TERMINATE_FAILED, region_id)

        return self._finish(
            CleanupState.DONE,
            speech.untagged_terminated(len(untagged_ids)),
            region_id,
            untagged_ids,
        )
