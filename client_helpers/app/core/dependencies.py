from fastapi import Request

from ..services import get_user_id_from_request, parse_account_id

def get_current_user_id(request: Request) -> str:
    return get_user_id_from_request(request)

def get_account_id(account_id: str) -> int:
    return parse_account_id(account_id)
