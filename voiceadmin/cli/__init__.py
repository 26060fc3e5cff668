"""CLI argument parsing and handling."""

from __future__ import annotations

from voiceadmin.cli.parsing import build_intent_event, load_event

__all__ = [
    "build_intent_event",
    "load_event",
]
