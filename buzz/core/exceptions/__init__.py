"""Exception handling module."""

from buzz.core.exceptions.base import ANSI_GREEN, ANSI_RED, ANSI_RESET, Buzz, format_buzz
from buzz.core.exceptions.codes import DEFAULT_CODES, Bee, default_code
from buzz.core.exceptions.handler import (
    ErrorContextManager,
    ErrorHandler,
    ErrorTracker,
    error_context,
    error_handler,
    error_tracker,
    get_error_context,
    get_error_handler,
    get_error_tracker,
)
from buzz.core.exceptions.messages import ErrorMessageTemplate, as_buzz, format_error_response

__all__ = [
    "ANSI_GREEN",
    "ANSI_RED",
    "ANSI_RESET",
    "Buzz",
    "format_buzz",
    "Bee",
    "DEFAULT_CODES",
    "default_code",
    "ErrorMessageTemplate",
    "as_buzz",
    "format_error_response",
    "ErrorHandler",
    "ErrorTracker",
    "ErrorContextManager",
    "error_handler",
    "error_tracker",
    "error_context",
    "get_error_handler",
    "get_error_tracker",
    "get_error_context",
]
