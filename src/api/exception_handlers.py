"""Exception handlers for the FastAPI application.

Every failure body carries a short ``msg`` (or an ``errors`` array);
error codes and details are logged, never returned.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import AppException, ErrorCode, StoreFailureError

logger = structlog.get_logger()


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        log = logger.error if isinstance(exc, StoreFailureError) else logger.warning
        log(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
            details=exc.details,
        )
        content: dict[str, object]
        if exc.as_errors_list:
            content = {"errors": [{"msg": exc.message}]}
        else:
            content = {"msg": exc.message}
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions from FastAPI/Starlette."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors as a 400 with one entry per field."""
        logger.info(
            "validation_error",
            error_code=ErrorCode.VALIDATION_ERROR.value,
            errors=exc.errors(),
        )
        return JSONResponse(
            status_code=400,
            content={
                "errors": [
                    {
                        "msg": error["msg"],
                        "param": str(error["loc"][-1]) if error["loc"] else "",
                        "location": str(error["loc"][0]) if error["loc"] else "",
                        "type": error["type"],
                    }
                    for error in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"msg": "Server error"},
        )
