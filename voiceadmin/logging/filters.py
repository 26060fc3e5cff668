"""Logging filters for stdout/stderr routing."""

import logging


class StreamRoutingFilter(logging.Filter):
    """Pass only records destined for one output stream.

    Records carrying a ``stream`` extra go to that stream. Otherwise
    WARNING and above go to stderr and everything else to stdout.

    Parameters
    ----------
    stream : str
        Either 'stdout' or 'stderr'
    """

    def __init__(self, stream: str) -> None:
        super().__init__()
        if stream not in ("stdout", "stderr"):
            raise ValueError(f"stream must be 'stdout' or 'stderr', got '{stream}'")
        self.stream = stream

    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "stream", None)

        if target is None:
            target = "stderr" if record.levelno >= logging.WARNING else "stdout"

        return target == self.stream
