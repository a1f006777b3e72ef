"""The Buzz error value and its renderer."""

from __future__ import annotations

import traceback
from typing import Any, ClassVar, Final

ANSI_RESET: Final[str] = "\u001b[0m"
ANSI_RED: Final[str] = "\u001b[31m"
ANSI_GREEN: Final[str] = "\u001b[32m"

_INT32_MASK: Final[int] = 0xFFFFFFFF
_INT32_SIGN: Final[int] = 0x80000000


def _to_int32(code: int) -> int:
    """Wrap ``code`` to a signed 32-bit value."""
    code &= _INT32_MASK
    return code - (_INT32_MASK + 1) if code & _INT32_SIGN else code


def _or_null(value: Any) -> Any:
    return "null" if value is None else value


class Buzz(RuntimeError):
    """Structured failure carrying a code, a bee label, a message and an optional cause.

    The display text is rendered once, at construction, from ``(code, bee, message)``
    and becomes the exception message. The cause never takes part in rendering.
    """

    ANSI_RESET: ClassVar[str] = ANSI_RESET
    ANSI_RED: ClassVar[str] = ANSI_RED
    ANSI_GREEN: ClassVar[str] = ANSI_GREEN

    __BUGS: ClassVar[tuple[str, ...]] = ("🐞", "🐜", "🦗", "🕷", "🦟", "🐝", "🪲", "🐛", "🦕", "🌵")

    def __init__(
        self,
        code: int,
        bee: str | None,
        message: str | None,
        cause: BaseException | None = None,
    ) -> None:
        """Render and store the error.

        Args:
            code: 32-bit error code; wider ints keep their low 32 bits
            bee: category label, may be None
            message: human-readable description, may be None
            cause: the exception being wrapped, if any
        """
        rendered = Buzz.format(code, bee, message)
        super().__init__(rendered)
        self._code = _to_int32(code)
        self._bee = bee
        self._detail = message
        self._cause = cause
        self._rendered = rendered
        self._stack_trace = traceback.StackSummary.from_list(traceback.extract_stack()[:-1])
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._rendered

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def stack_trace(self) -> traceback.StackSummary:
        """Call stack captured when the Buzz was created."""
        return self._stack_trace

    @property
    def code(self) -> int:
        return self._code

    @property
    def bee(self) -> str | None:
        return self._bee

    @property
    def detail(self) -> str | None:
        """The raw message argument, before rendering."""
        return self._detail

    @staticmethod
    def hex_code(code: int) -> str:
        """Return ``code`` as ``0x`` plus its uppercase 32-bit two's complement hex."""
        return f"0x{code & _INT32_MASK:X}"

    @staticmethod
    def format(code: int, bee: str | None, message: str | None) -> str:
        """Render the canonical display text for ``(code, bee, message)``.

        Missing ``bee`` or ``message`` values are rendered as ``null``.
        """
        bugs = Buzz.__BUGS
        return (
            f"{ANSI_RED}{bugs[0]} {Buzz.hex_code(code)}{ANSI_RESET} "
            f"{bugs[5]} {ANSI_GREEN}{_or_null(bee)}{ANSI_RESET} "
            f"{bugs[8]} {_or_null(message)} {bugs[9]}"
        )

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self._code,
            "hex": Buzz.hex_code(self._code),
            "bee": self._bee,
            "message": self._detail,
            "rendered": self._rendered,
            "cause": None if self._cause is None else repr(self._cause),
        }

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._code, self._bee, self._detail, self._cause))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code}, bee={self._bee!r}, message={self._detail!r})"


format_buzz = Buzz.format
