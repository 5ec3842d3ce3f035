from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import OtpRelayError
from app.core.logging import get_logger
from app.schemas.response import ErrorResponse
from utils.constants import MSG_INTERNAL_ERROR

logger = get_logger(__name__)


def error_response(status_code: int, error: str, code: str, details=None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, code=code, details=details).model_dump(exclude_none=True),
        headers=headers,
    )


def add_exception_handlers(app: FastAPI, cors_headers: dict):
    """
    Registers exception handlers with the FastAPI app.

    Every error body is {error, code, details?} and carries the CORS
    headers so browser callers can read it.
    """
    @app.exception_handler(OtpRelayError)
    async def otp_relay_exception_handler(request: Request, exc: OtpRelayError):
        if exc.status_code >= 500:
            logger.error(f"{exc.code}: {exc.message} ({exc.details})")
        else:
            logger.info(f"{exc.code}: {exc.message}")
        return error_response(exc.status_code, exc.message, exc.code, exc.details, cors_headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Handles standard HTTP exceptions (404, 405, etc.)
        """
        return error_response(exc.status_code, str(exc.detail), "HTTP_ERROR", headers=cors_headers)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catch-all for unhandled exceptions.
        """
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else "unknown"
            },
            exc_info=True
        )
        return error_response(500, MSG_INTERNAL_ERROR, "INTERNAL_ERROR", str(exc), cors_headers)
