from fastapi import APIRouter, Depends, Request

from ..core.dependencies import get_account_id, get_current_user_id
from ..models import AccountContextResponse, PlatformResponse
from ..services import get_platform, is_mobile_app


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.get("/{account_id}", response_model=AccountContextResponse)
def get_account_context(
    user_id: str = Depends(get_current_user_id),
    parsed_account_id: int = Depends(get_account_id),
) -> AccountContextResponse:
    return AccountContextResponse(user_id=user_id, account_id=parsed_account_id)

client_router = APIRouter(prefix="/client", tags=["client"])

@client_router.get("/platform", response_model=PlatformResponse)
def read_platform(request: Request) -> PlatformResponse:
    return PlatformResponse(
        platform=get_platform(request),
        is_mobile_app=is_mobile_app(request),
    )

__all__ = ["router", "client_router"]
