"""Pytest configuration and fixtures for voiceadmin tests."""

import os
from collections.abc import Generator
from typing import Any

import pytest

from tests.unit.fakes import FakeInventoryFactory


@pytest.fixture
def aws_credentials() -> Generator[None, None, None]:
    """Fixture to set AWS credentials for testing with proper cleanup.

    Yields
    ------
    None
        Control back to test after setting credentials
    """
    old_values = {
        key: os.environ.get(key)
        for key in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_DEFAULT_REGION")
    }

    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"

    yield

    for key, value in old_values.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point VOICEADMIN_CONFIG at a file that does not exist."""
    monkeypatch.setenv("VOICEADMIN_CONFIG", str(tmp_path / "voiceadmin.yaml"))
    monkeypatch.delenv("VOICEADMIN_DEBUG", raising=False)


@pytest.fixture
def fake_inventory() -> FakeInventoryFactory:
    return FakeInventoryFactory()


@pytest.fixture
def make_event():
    """Return a builder for voice platform events."""

    def _make_event(
        request_type: str = "IntentRequest",
        intent_name: str | None = None,
        attributes: dict[str, Any] | None = None,
        slots: dict[str, Any] | None = None,
        new: bool = False,
        application_id: str = "amzn1.ask.skill.test",
    ) -> dict[str, Any]:
        request: dict[str, Any] = {"type": request_type, "requestId": "req-1"}
        if intent_name is not None:
            request["intent"] = {"name": intent_name, "slots": slots or {}}

        session: dict[str, Any] = {
            "new": new,
            "sessionId": "session-1",
            "application": {"applicationId": application_id},
        }
        if attributes is not None:
            session["attributes"] = attributes

        return {"version": "1.0", "session": session, "request": request}

    return _make_event
