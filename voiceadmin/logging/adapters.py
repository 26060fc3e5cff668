"""Logger adapter binding voice turn identifiers to records."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any


class TurnLoggerAdapter(logging.LoggerAdapter):
    """Attach request id, session id and intent name to every record.

    Parameters
    ----------
    logger : logging.Logger
        Underlying logger
    request_id : str | None
        Voice platform request identifier
    session_id : str | None
        Voice platform session identifier
    intent : str | None
        Intent name being handled, if any
    """

    def __init__(
        self,
        logger: logging.Logger,
        request_id: str | None = None,
        session_id: str | None = None,
        intent: str | None = None,
    ) -> None:
        super().__init__(
            logger,
            {"request_id": request_id, "session_id": session_id, "intent": intent},
        )

    def bind(self, **context: Any) -> TurnLoggerAdapter:
        """Return a new adapter with extra context merged in."""
        merged = {**self.extra, **context}
        return TurnLoggerAdapter(
            self.logger,
            request_id=merged.get("request_id"),
            session_id=merged.get("session_id"),
            intent=merged.get("intent"),
        )

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs
