import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from security_service.errors import SecurityError
from security_service.models.common import ErrorResponse

logger = logging.getLogger("security-service")


async def security_error_handler(request: Request, exc: SecurityError) -> JSONResponse:
    logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.urn.value)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.urn.value,
            detail=exc.message,
            token=getattr(exc, "token", None),
        ).model_dump(exclude_none=True),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error: %s", exc)
            return JSONResponse(
                status_code=500,
                content={"error": "internal_error", "detail": str(exc)},
            )
