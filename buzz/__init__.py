"""buzz - structured, emoji-decorated error values.

Raise a ``Buzz`` with a numeric code, a bee label and a message; the
rendered text is built once and carried as the exception message.
"""

from buzz.core.exceptions import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    Bee,
    Buzz,
    error_context,
    error_handler,
    error_tracker,
    format_buzz,
)

__version__ = "0.1.0"

__all__ = [
    "ANSI_GREEN",
    "ANSI_RED",
    "ANSI_RESET",
    "Bee",
    "Buzz",
    "error_context",
    "error_handler",
    "error_tracker",
    "format_buzz",
]
