import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from handyhub.common.logging import get_logger

logger = get_logger("middleware")

DURATION_HEADER = "X-Request-Duration-Ms"


class RequestAuditMiddleware(BaseHTTPMiddleware):
    """One access line per request: who called, how long it took, which error category came back."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        error_category = getattr(request.state, "error_category", None)
        logger.log(
            logging.WARNING if response.status_code >= 400 else logging.INFO,
            "%s %s %d %.1fms actor=%s role=%s code=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.headers.get("x-actor-id", "-"),
            request.headers.get("x-actor-role", "-"),
            error_category or "-",
        )

        response.headers[DURATION_HEADER] = f"{elapsed_ms:.1f}"
        return response
