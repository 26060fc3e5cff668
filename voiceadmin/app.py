"""Application wiring for voiceadmin."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

import boto3

from voiceadmin.core.config import ConfigLoader
from voiceadmin.core.interfaces import InventoryProvider
from voiceadmin.inventory.cleanup import CleanupOutcome, UntaggedInstanceCleanup
from voiceadmin.providers import get_provider
from voiceadmin.providers.aws.regions import RegionDirectory
from voiceadmin.skill.dispatcher import SkillDispatcher

logger = logging.getLogger(__name__)

REGION_ID_PATTERN = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")


class VoiceAdmin:
    """Voice administration front end for a compute fleet.

    Parameters
    ----------
    config : dict[str, Any] | None
        Configuration overriding the YAML file; loaded from
        VOICEADMIN_CONFIG / voiceadmin.yaml when None
    inventory_factory : Callable[[str], InventoryProvider] | None
        Optional factory creating inventory providers per region. If None,
        uses the configured provider's inventory class
    boto3_client_factory : Callable | None
        Optional factory for boto3 clients passed to the default provider
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        inventory_factory: Callable[[str], InventoryProvider] | None = None,
        boto3_client_factory: Callable | None = None,
    ) -> None:
        self._config_loader = ConfigLoader()
        self.config = self._config_loader.get_config(config)
        self._boto3_client_factory = boto3_client_factory or boto3.client
        self._inventory_factory_override = inventory_factory

        self.region_directory = RegionDirectory(
            extra_regions=self.config["regions"],
            default_region=self.config["default_region"],
        )
        self._dispatcher: SkillDispatcher | None = None

    @property
    def inventory_factory(self) -> Callable[[str], InventoryProvider]:
        """Get the inventory provider factory."""
        if self._inventory_factory_override is not None:
            return self._inventory_factory_override
        return self._create_inventory

    def _create_inventory(self, region: str) -> InventoryProvider:
        inventory_class = get_provider(self.config["provider"])["inventory"]
        return inventory_class(
            region=region,
            boto3_client_factory=self._boto3_client_factory,
            timeout=self.config["request_timeout"],
        )

    @property
    def dispatcher(self) -> SkillDispatcher:
        """Get the skill dispatcher instance."""
        if self._dispatcher is None:
            self._dispatcher = SkillDispatcher(
                inventory_factory=self.inventory_factory,
                region_directory=self.region_directory,
                application_id=self.config["application_id"],
            )
        return self._dispatcher

    def handle_event(self, event: dict[str, Any]) -> dict[str, Any] | None:
        """Handle one voice platform event."""
        return self.dispatcher.dispatch(event)

    def count(self, region: str) -> int:
        """Count running instances in a spoken or provider region.

        Raises
        ------
        ProviderError
            If the listing fails
        """
        return self.inventory_factory(self.resolve(region)).count_running_instances()

    def untagged(self, region: str) -> list[str]:
        """List untagged running instances without terminating them."""
        cleanup = UntaggedInstanceCleanup(
            inventory_factory=self.inventory_factory,
            region_directory=self.region_directory,
        )
        return cleanup.find_untagged(self.resolve(region))

    def terminate_untagged(self, region: str) -> CleanupOutcome:
        cleanup = UntaggedInstanceCleanup(
            inventory_factory=self.inventory_factory,
            region_directory=self.region_directory,
        )
        return cleanup.run_in_region(self.resolve(region))

    def resolve(self, region: str) -> str:
        """Accept either a spoken name ('Oregon') or a region id ('us-west-2')."""
        if region in self.region_directory.names():
            return self.region_directory.resolve(region)
        if REGION_ID_PATTERN.match(region):
            return region

        region_id = self.region_directory.resolve(region)
        logger.warning("Unknown region %r, using %s", region, region_id)
        return region_id
