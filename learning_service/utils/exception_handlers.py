import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from learning_service.schemas.generic import ApiResponse
from learning_service.utils.exceptions import (
    LearningServiceException,
    BadRequestException,
    UnauthorizedException,
    AccessDeniedException,
    ResourceNotFoundException,
    ConflictException,
)

logger = logging.getLogger(__name__)

EXCEPTION_STATUS_CODES = {
    BadRequestException: status.HTTP_400_BAD_REQUEST,
    UnauthorizedException: status.HTTP_401_UNAUTHORIZED,
    AccessDeniedException: status.HTTP_403_FORBIDDEN,
    ResourceNotFoundException: status.HTTP_404_NOT_FOUND,
    ConflictException: status.HTTP_409_CONFLICT,
}


def _error_response(code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content=ApiResponse.error(code=code, message=message).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI):
    """
    Register global exception handlers for the FastAPI app.
    Every error is rendered as an ApiResponse envelope; unexpected failures
    never leak their details to the caller.
    """

    @app.exception_handler(LearningServiceException)
    async def service_exception_handler(request: Request, exc: LearningServiceException):
        code = EXCEPTION_STATUS_CODES.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        logger.warning(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}"
        )
        return _error_response(code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
            request: Request, exc: RequestValidationError
    ):
        errors = []
        for error in exc.errors():
            field = (
                ".".join(str(x) for x in error["loc"]) if error["loc"] else "unknown"
            )
            errors.append(f"{field}: {error['msg']}")

        message = ", ".join(errors)
        logger.warning(f"Validation error on {request.url.path}: {message}")
        return _error_response(
            status.HTTP_400_BAD_REQUEST, f"Validation Error: {message}"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"HTTPException: {exc.detail}")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled Exception: {str(exc)}", exc_info=True)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )
