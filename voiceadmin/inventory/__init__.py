"""Inventory inspection and cleanup workflows."""

from __future__ import annotations

from voiceadmin.inventory.cleanup import (
    CleanupOutcome,
    CleanupState,
    UntaggedInstanceCleanup,
)
from voiceadmin.inventory.tags import is_untagged

__all__ = [
    "CleanupOutcome",
    "CleanupState",
    "UntaggedInstanceCleanup",
    "is_untagged",
]
