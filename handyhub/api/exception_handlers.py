from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from handyhub.common.exceptions import HandyHubException
from handyhub.common.logging import get_logger
from handyhub.config import settings
from handyhub.core.errors.domain import DomainError
from handyhub.core.errors.mapper import map_domain_error_to_external_error, to_http_exception
from handyhub.core.errors.schemas import ExternalError

logger = get_logger("api.errors")


def _error_response(request: Request, status_code: int, external: ExternalError) -> JSONResponse:
    # Read back by RequestAuditMiddleware for the access log line.
    request.state.error_category = external.category.value
    return JSONResponse(
        status_code=status_code,
        content={"detail": external.message, "code": external.category.value},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    external = map_domain_error_to_external_error(exc)
    http_exc = to_http_exception(external)
    logger.info(
        "%s %s -> %s (%s)",
        request.method,
        request.url.path,
        external.category.value,
        type(exc).__name__,
    )
    return _error_response(request, http_exc.status_code, external)


async def handyhub_exception_handler(request: Request, exc: HandyHubException) -> JSONResponse:
    return _error_response(
        request,
        exc.status_code,
        ExternalError(category=exc.category, message=str(exc.detail)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    external = map_domain_error_to_external_error(
        exc, expose_internal_messages=settings.EXPOSE_INTERNAL_ERRORS
    )
    return _error_response(request, to_http_exception(external).status_code, external)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(HandyHubException, handyhub_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
