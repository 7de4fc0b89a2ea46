from typing import Literal

from pydantic import BaseModel, Field

class CurrentUser(BaseModel):
    id: str = Field(..., min_length=1, description="Opaque user identifier set by auth middleware")

class PlatformResponse(BaseModel):
    platform: Literal["mobile", "web"]
    is_mobile_app: bool

class AccountContextResponse(BaseModel):
    user_id: str
    account_id: int

class ErrorResponse(BaseModel):
    success: Literal[False] = False
    message: str
    error: str = Field(..., description="Raw error message, or 'Unknown error'")
