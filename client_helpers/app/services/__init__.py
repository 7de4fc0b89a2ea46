from .account import (
    extract_access_token,
    format_validation_errors,
    get_error_status,
    get_user_id_from_request,
    normalize_account_ids,
    parse_account_id,
)
from .platform import Platform, get_platform, is_mobile_app

__all__ = [
    "Platform",
    "extract_access_token",
    "format_validation_errors",
    "get_error_status",
    "get_platform",
    "get_user_id_from_request",
    "is_mobile_app",
    "normalize_account_ids",
    "parse_account_id",
]
