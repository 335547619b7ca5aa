import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...domain.errors import (
    AccountError,
    AddressNotFoundOrNotOwned,
    ConfigurationError,
    DuplicateEmail,
    InvalidCode,
    InvalidOrExpiredToken,
    InvalidPassword,
    StorageFailure,
    UserBanned,
    UserNotFound,
    UserNotVerified,
    ValidationFailure,
)
from .schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: Dict[Type[AccountError], int] = {
    DuplicateEmail: status.HTTP_409_CONFLICT,
    UserNotFound: status.HTTP_404_NOT_FOUND,
    InvalidPassword: status.HTTP_401_UNAUTHORIZED,
    InvalidCode: status.HTTP_400_BAD_REQUEST,
    InvalidOrExpiredToken: status.HTTP_401_UNAUTHORIZED,
    UserNotVerified: status.HTTP_403_FORBIDDEN,
    UserBanned: status.HTTP_403_FORBIDDEN,
    AddressNotFoundOrNotOwned: status.HTTP_404_NOT_FOUND,
    ValidationFailure: status.HTTP_400_BAD_REQUEST,
    StorageFailure: status.HTTP_503_SERVICE_UNAVAILABLE,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: AccountError) -> int:
    for cls in type(exc).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure with the same ``success: false`` envelope."""

    @app.exception_handler(AccountError)
    async def handle_account_error(request: Request, exc: AccountError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(message=exc.message, error=exc.code).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                **ErrorResponse(
                    message=ValidationFailure.default_message,
                    error=ValidationFailure.code,
                ).model_dump(),
                "details": jsonable_encoder(exc.errors()),
            },
        )
