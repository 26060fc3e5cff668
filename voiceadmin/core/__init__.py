"""Core voiceadmin functionality."""

from __future__ import annotations

from voiceadmin.core.interfaces import Instance, InventoryProvider
from voiceadmin.core.session import SessionState

__all__ = [
    "Instance",
    "InventoryProvider",
    "SessionState",
]
