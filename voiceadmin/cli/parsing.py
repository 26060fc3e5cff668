"""CLI argument parsing and event file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def load_event(event_file: str) -> dict[str, Any]:
    """Load a voice platform event from a JSON or YAML file.

    Parameters
    ----------
    event_file : str
        Path to the event file; '.yaml' and '.yml' are read as YAML,
        anything else as JSON

    Returns
    -------
    dict[str, Any]
        Parsed event

    Raises
    ------
    ValueError
        If the file cannot be parsed or does not contain a mapping
    """
    path = Path(event_file)

    try:
        text = path.read_text()
    except OSError as e:
        raise ValueError(f"Cannot read event file {event_file}: {e}") from e

    try:
        if path.suffix in (".yaml", ".yml"):
            event = yaml.safe_load(text)
        else:
            event = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid event file {event_file}: {e}") from e

    if not isinstance(event, dict):
        raise ValueError(f"Event file {event_file} must contain a mapping")

    return event


def build_intent_event(
    intent_name: str,
    region: str | None = None,
    slots: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a minimal IntentRequest event for local invocation.

    Parameters
    ----------
    intent_name : str
        Intent to invoke (e.g. 'InstanceCountIntent')
    region : str | None
        Spoken region to place in the session attributes
    slots : dict[str, str] | None
        Slot values keyed by slot name

    Returns
    -------
    dict[str, Any]
        Event accepted by SkillDispatcher.dispatch
    """
    attributes = {"region": region} if region else {}
    return {
        "session": {
            "new": False,
            "sessionId": "local-session",
            "attributes": attributes,
        },
        "request": {
            "type": "IntentRequest",
            "requestId": "local-request",
            "intent": {
                "name": intent_name,
                "slots": {
                    name: {"name": name, "value": value}
                    for name, value in (slots or {}).items()
                },
            },
        },
    }
