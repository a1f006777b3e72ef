"""Common bee labels and their default codes."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class Bee(StrEnum):
    """Labels used by the error handler when wrapping foreign exceptions."""

    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


DEFAULT_CODES: Final[dict[Bee, int]] = {
    Bee.INVALID_ARGUMENT: 400,
    Bee.FORBIDDEN: 403,
    Bee.NOT_FOUND: 404,
    Bee.TIMEOUT: 408,
    Bee.INTERNAL_ERROR: 500,
    Bee.CONNECTION_ERROR: 503,
}


def default_code(bee: Bee) -> int:
    """Return the default code for ``bee``, falling back to the internal error code."""
    return DEFAULT_CODES.get(bee, DEFAULT_CODES[Bee.INTERNAL_ERROR])
