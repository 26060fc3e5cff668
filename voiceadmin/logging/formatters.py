"""Logging formatters for turn context."""

import logging


class StreamFormatter(logging.Formatter):
    """Logging formatter that prepends the voice turn context when present."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with request, session and intent prefix if present.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message with optional context prefix
        """
        msg = super().format(record)
        context = [
            getattr(record, name, None) for name in ("request_id", "session_id", "intent")
        ]
        prefix = "".join(f"[{value}] " for value in context if value)

        return f"{prefix}{msg}"
