from .schemas import (
    AccountContextResponse,
    CurrentUser,
    ErrorResponse,
    PlatformResponse,
)

__all__ = [
    "AccountContextResponse",
    "CurrentUser",
    "ErrorResponse",
    "PlatformResponse",
]
