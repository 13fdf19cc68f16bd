import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PaginationError(Exception):
    """Base error for rejected pagination parameters."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "INVALID_PAGINATION"

    def __init__(self, message: str, param: str) -> None:
        self.message = message
        self.param = param
        super().__init__(message)


class InvalidIntegerError(PaginationError):
    error_code = "INVALID_INTEGER"

    def __init__(self, param: str) -> None:
        super().__init__(f"{param} parameter must be an integer", param)


class InvalidRangeError(PaginationError):
    error_code = "INVALID_RANGE"


class NegativePageError(InvalidRangeError):
    def __init__(self, param: str) -> None:
        super().__init__(f"{param} number must be positive", param)


class PageSizeOutOfBoundsError(InvalidRangeError):
    def __init__(self, param: str, min_page_size: int, max_page_size: int) -> None:
        self.min_page_size = min_page_size
        self.max_page_size = max_page_size
        super().__init__(
            f"{param} must be between {min_page_size} and {max_page_size}", param
        )


def error_response(exc: PaginationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def log_rejection(exc: PaginationError, path: str) -> None:
    logger.warning(
        exc.error_code,
        extra={
            "error_code": exc.error_code,
            "status_code": exc.status_code,
            "path": path,
            "param": exc.param,
            "detail": exc.message,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PaginationError)
    async def pagination_exception_handler(
        request: Request, exc: PaginationError
    ) -> JSONResponse:
        log_rejection(exc, request.url.path)
        return error_response(exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            exc_info=True,
            extra={"path": request.url.path, "exc_type": type(exc).__name__},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
