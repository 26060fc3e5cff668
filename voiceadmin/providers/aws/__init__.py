"""AWS provider for voiceadmin."""

from __future__ import annotations

from voiceadmin.providers.aws.compute import EC2Inventory
from voiceadmin.providers.aws.regions import RegionDirectory, resolve_region

__all__ = ["EC2Inventory", "RegionDirectory", "resolve_region"]
