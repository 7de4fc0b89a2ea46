"""Helpers shared by route handlers that act on a user's connected accounts.

These never catch their own errors. Callers let them propagate and map them
to a response status with :func:`get_error_status`.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from fastapi import Request
from pydantic import ValidationError

from ..core.errors import HasMessage, InvalidAccountIdError, UserNotAuthenticatedError


# Leading whitespace (not the \x1c-\x1f or \x85 separators), optional sign,
# then as many ASCII digits as possible.
_LEADING_INT = re.compile(
    r"[ \t\n\v\f\r\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"
    r"([+-]?[0-9]+)"
)

# Checked in order, first match wins. "invalid token" must stay a 401.
_STATUS_RULES: tuple[tuple[int, tuple[str, ...]], ...] = (
    (401, ("token", "not authenticated", "user not found")),
    (404, ("not found",)),
    (400, ("invalid", "required")),
)
_DEFAULT_STATUS = 500


def get_user_id_from_request(request: Request) -> str:
    """Return the id of the user attached to ``request.state`` by auth middleware."""
    identity = getattr(request.state, "user", None)
    if isinstance(identity, Mapping):
        user_id = identity.get("id")
    else:
        user_id = getattr(identity, "id", None)
    if not user_id:
        raise UserNotAuthenticatedError()
    return str(user_id)


def extract_access_token(request: Request) -> str | None:
    auth_header = request.headers.get("authorization")
    if auth_header is None:
        return None
    return auth_header.replace("Bearer ", "", 1) or None


def parse_account_id(account_id: str) -> int:
    """Parse the leading base-10 integer of ``account_id``.

    Trailing characters are ignored, so ``"42abc"`` gives ``42``. Raises
    :class:`InvalidAccountIdError` when there is no leading integer at all.
    """
    match = _LEADING_INT.match(str(account_id))
    if match is None:
        raise InvalidAccountIdError()
    return int(match.group(1))


def _coerce_account_id(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidAccountIdError()
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return parse_account_id(value)
    raise InvalidAccountIdError()


def normalize_account_ids(account_ids: Any) -> list[int]:
    """Turn the loose shapes clients send for account ids into a list of ints.

    Accepts a JSON array string, a single numeric string, an int, a mapping
    (its integer values are kept) or a list. Anything else yields ``[]``.
    """
    if isinstance(account_ids, str):
        try:
            parsed = json.loads(account_ids)
        except json.JSONDecodeError:
            return [parse_account_id(account_ids)]
        if isinstance(parsed, list):
            return [_coerce_account_id(item) for item in parsed]
        return [parse_account_id(account_ids)]

    if isinstance(account_ids, int) and not isinstance(account_ids, bool):
        return [account_ids]

    if isinstance(account_ids, Mapping):
        return [
            value
            for value in account_ids.values()
            if isinstance(value, int) and not isinstance(value, bool)
        ]

    if isinstance(account_ids, (list, tuple)):
        return [_coerce_account_id(item) for item in account_ids]

    return []


def format_validation_errors(error: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in detail["loc"]),
            "message": detail["msg"],
        }
        for detail in error.errors()
    ]


def get_error_status(error: HasMessage | BaseException) -> int:
    """Pick an HTTP status for ``error`` by matching words in its message.

    Matching is plain substring search on the lower-cased message, so a change
    in upstream wording changes the status.
    """
    message = getattr(error, "message", None)
    if not isinstance(message, str):
        message = str(error)
    message = message.lower()

    for status_code, needles in _STATUS_RULES:
        if any(needle in message for needle in needles):
            return status_code
    return _DEFAULT_STATUS


__all__ = [
    "extract_access_token",
    "format_validation_errors",
    "get_error_status",
    "get_user_id_from_request",
    "normalize_account_ids",
    "parse_account_id",
]
