from __future__ import annotations

from typing import Protocol


class HasMessage(Protocol):
    """Anything carrying a human-readable ``message`` string."""

    message: str


class UserNotAuthenticatedError(Exception):
    """Raised when a request carries no authenticated identity."""

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)
        self.message = message


class InvalidAccountIdError(ValueError):
    """Raised when an account id has no leading integer to parse."""

    def __init__(
        self, message: str = "Invalid account ID format. Must be a valid number"
    ) -> None:
        super().__init__(message)
        self.message = message
