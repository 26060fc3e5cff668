"""Utility functions for voiceadmin."""

import logging
import sys
from typing import Any


def log_and_print_error(message: str, *args: Any) -> None:
    """Log error message and print to stderr.

    Parameters
    ----------
    message : str
        Error message with optional format placeholders
    *args : Any
        Format arguments for message
    """
    logging.error(message, *args)
    formatted_msg = message % args if args else message
    print(f"Error: {formatted_msg}", file=sys.stderr)
