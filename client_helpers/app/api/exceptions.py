from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import InvalidAccountIdError, UserNotAuthenticatedError
from ..models import ErrorResponse
from ..services import get_error_status


logger = logging.getLogger(__name__)


def error_response(
    error: BaseException,
    context: str,
    default_message: str = "Internal server error",
) -> JSONResponse:
    """Log ``error`` and render it as the standard failure envelope."""
    message = str(error)
    status_code = get_error_status(error)
    logger.error(
        "request.error",
        extra={"context": context, "status_code": status_code, "error": message},
    )
    payload = ErrorResponse(
        message=message or default_message,
        error=message or "Unknown error",
    )
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(UserNotAuthenticatedError)
    async def not_authenticated_handler(
        request: Request, exc: UserNotAuthenticatedError
    ) -> JSONResponse:
        return error_response(exc, request.url.path)

    @app.exception_handler(InvalidAccountIdError)
    async def invalid_account_id_handler(
        request: Request, exc: InvalidAccountIdError
    ) -> JSONResponse:
        return error_response(exc, request.url.path)
