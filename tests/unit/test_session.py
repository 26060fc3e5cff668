"""Tests for session state handling."""

import pytest

from voiceadmin.core.session import SessionState


class TestSessionState:
    def test_defaults_to_no_region(self) -> None:
        assert SessionState().region is None
        assert SessionState().to_attributes() == {}

    @pytest.mark.parametrize("attributes", [None, {}, {"region": ""}, {"region": 5}])
    def test_missing_or_invalid_region(self, attributes) -> None:
        assert SessionState.from_attributes(attributes).region is None

    def test_reads_region_and_ignores_other_keys(self) -> None:
        state = SessionState.from_attributes({"region": "Tokyo", "colour": "blue"})

        assert state.region == "Tokyo"
        assert state.to_attributes() == {"region": "Tokyo"}

    def test_from_session_without_attributes(self) -> None:
        assert SessionState.from_session({"sessionId": "s"}).region is None
        assert SessionState.from_session(None).region is None

    def test_from_session(self) -> None:
        session = {"sessionId": "s", "attributes": {"region": "Seoul"}}

        assert SessionState.from_session(session).region == "Seoul"

    def test_with_region_returns_new_state(self) -> None:
        original = SessionState(region="Oregon")
        updated = original.with_region("Virginia")

        assert original.region == "Oregon"
        assert updated.region == "Virginia"

    def test_is_immutable(self) -> None:
        state = SessionState(region="Oregon")

        with pytest.raises(AttributeError):
            state.region = "Tokyo"
