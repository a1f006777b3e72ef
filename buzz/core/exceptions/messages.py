"""Standard messages and error response payloads."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from buzz.core.exceptions.base import Buzz
from buzz.core.exceptions.codes import Bee, default_code


class ErrorMessageTemplate:
    """Default messages for wrapped exceptions that carry no text of their own."""

    _templates: dict[Bee, str] = {
        Bee.NOT_FOUND: "Resource not found: {resource}",
        Bee.FORBIDDEN: "Access denied",
        Bee.INVALID_ARGUMENT: "Invalid argument in {operation}",
        Bee.TIMEOUT: "Operation {operation} timed out",
        Bee.CONNECTION_ERROR: "Connection failed during {operation}",
        Bee.INTERNAL_ERROR: "Internal error",
    }

    @classmethod
    def get_message(cls, bee: Bee, **kwargs: Any) -> str:
        """Return the standard message for ``bee``.

        Args:
            bee: the label whose template is used
            **kwargs: template variables

        Returns:
            The formatted message, or the generic internal error text tagged
            with the bee when a template variable is missing.
        """
        template = cls._templates.get(bee, cls._templates[Bee.INTERNAL_ERROR])
        try:
            return template.format(**kwargs)
        except KeyError:
            return f"{cls._templates[Bee.INTERNAL_ERROR]} ({bee.value})"


def as_buzz(
    error: BaseException,
    bee: Bee = Bee.INTERNAL_ERROR,
    template_vars: Mapping[str, Any] | None = None,
) -> Buzz:
    """Return ``error`` itself if it is a Buzz, otherwise a Buzz wrapping it as cause."""
    if isinstance(error, Buzz):
        return error
    message = str(error) or ErrorMessageTemplate.get_message(bee, **dict(template_vars or {}))
    return Buzz(default_code(bee), bee.value, message, error)


def format_error_response(error: BaseException, **details: Any) -> dict[str, Any]:
    """Build the standard error response for ``error``.

    Args:
        error: the failure; anything that is not a Buzz is wrapped first
        **details: extra fields reported under ``details``

    Returns:
        A dict with a single ``error`` key.
    """
    payload = as_buzz(error).to_payload()
    return {
        "error": {
            "code": payload["code"],
            "hex": payload["hex"],
            "bee": payload["bee"],
            "message": payload["message"],
            "rendered": payload["rendered"],
            "details": details,
            "timestamp": datetime.now(UTC).isoformat(),
        }
    }
