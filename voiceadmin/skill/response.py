"""Builders for the voice platform response envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from voiceadmin.constants import RESPONSE_VERSION
from voiceadmin.core.session import SessionState

SPEECH_TYPE = "PlainText"
CARD_TYPE = "Simple"
CARD_PREFIX = "SessionSpeechlet - "


def build_speechlet_response(
    title: str,
    output: str,
    reprompt_text: str | None,
    should_end_session: bool,
) -> dict[str, Any]:
    """Build the ``response`` part of the envelope.

    Parameters
    ----------
    title : str
        Card title, usually the intent name
    output : str
        Text to speak and show on the card
    reprompt_text : str | None
        Text spoken if the user stays silent; None disables the reprompt
    should_end_session : bool
        Whether the platform should close the session after speaking

    Returns
    -------
    dict[str, Any]
        Speechlet response with outputSpeech, card, reprompt and shouldEndSession
    """
    return {
        "outputSpeech": {"type": SPEECH_TYPE, "text": output},
        "card": {
            "type": CARD_TYPE,
            "title": f"{CARD_PREFIX}{title}",
            "content": f"{CARD_PREFIX}{output}",
        },
        "reprompt": {"outputSpeech": {"type": SPEECH_TYPE, "text": reprompt_text}},
        "shouldEndSession": should_end_session,
    }


def build_response(
    session_attributes: dict[str, Any], speechlet_response: dict[str, Any]
) -> dict[str, Any]:
    return {
        "version": RESPONSE_VERSION,
        "sessionAttributes": session_attributes,
        "response": speechlet_response,
    }


@dataclass(frozen=True)
class SkillResponse:
    """What a handler hands back to the dispatcher.

    Attributes
    ----------
    session : SessionState
        Session state to carry into the next turn
    speechlet : dict[str, Any]
        Output of build_speechlet_response
    """

    session: SessionState
    speechlet: dict[str, Any]

    @property
    def text(self) -> str:
        return self.speechlet["outputSpeech"]["text"]

    def to_envelope(self) -> dict[str, Any]:
        return build_response(self.session.to_attributes(), self.speechlet)
