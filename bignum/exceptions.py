"""Error types raised by the arithmetic core and the text adapters."""

from __future__ import annotations

from typing import Any


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a division, modulo or reciprocal has a zero divisor."""

    def __init__(self, dividend: Any) -> None:
        self.dividend = dividend
        super().__init__(f"division by zero: {dividend} / 0")


class MalformedInputError(ValueError):
    """Raised when a token does not match the accepted number grammar."""

    def __init__(self, token: str, reason: str = "") -> None:
        self.token = token
        self.reason = reason
        message = f"Malformed number token: {token!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
