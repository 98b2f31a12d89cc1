"""Translation of domain errors into the externally visible error contract.

This is the only place that knows both the internal error taxonomy and the
API's error categories. The mapping never raises: whatever reaches it, the
caller gets back a valid ``ExternalError``.
"""

from __future__ import annotations

from collections.abc import Mapping

from fastapi import status

from handyhub.common.enums import ErrorCategory
from handyhub.common.exceptions import (
    BadRequestError,
    ConflictError,
    HandyHubException,
    PermissionDeniedError,
)
from handyhub.common.logging import get_logger
from handyhub.config import settings
from handyhub.core.errors.domain import (
    ChatClosedError,
    ChatForbiddenError,
    DomainError,
    InvalidBookingStateError,
    InvalidOrderStateError,
    OrderNotCompletedError,
    OrderNotFoundError,
    ReviewAlreadyExistsError,
    UnauthorizedOrderActionError,
    UnauthorizedReviewActionError,
)
from handyhub.core.errors.schemas import ExternalError

logger = get_logger("errors.mapper")

ERROR_CATEGORIES: Mapping[type[DomainError], ErrorCategory] = {
    OrderNotCompletedError: ErrorCategory.INVALID_REQUEST,
    ReviewAlreadyExistsError: ErrorCategory.CONFLICT,
    UnauthorizedReviewActionError: ErrorCategory.FORBIDDEN,
    InvalidOrderStateError: ErrorCategory.INVALID_REQUEST,
    UnauthorizedOrderActionError: ErrorCategory.FORBIDDEN,
    OrderNotFoundError: ErrorCategory.NOT_FOUND,
    ChatForbiddenError: ErrorCategory.FORBIDDEN,
    ChatClosedError: ErrorCategory.INVALID_REQUEST,
    InvalidBookingStateError: ErrorCategory.INVALID_REQUEST,
}


def _message_of(error: object) -> str | None:
    if error is None:
        return None

    message = getattr(error, "message", None)
    if message is None and isinstance(error, Mapping):
        message = error.get("message")
    if isinstance(message, str) and message.strip():
        return message

    if isinstance(error, BaseException):
        text = str(error)
        if text.strip():
            return text
    return None


def _category_of(error: object) -> ErrorCategory:
    for error_type, category in ERROR_CATEGORIES.items():
        if isinstance(error, error_type):
            return category
    return ErrorCategory.INTERNAL


def map_domain_error_to_external_error(
    error: object, *, expose_internal_messages: bool = True
) -> ExternalError:
    """Map any failure to ``(category, message)``.

    Known domain errors keep their message. Anything else is ``INTERNAL`` and
    keeps its own message when it has one (unless ``expose_internal_messages``
    is off); otherwise the generic message is used.
    """
    generic = settings.GENERIC_ERROR_MESSAGE
    try:
        category = _category_of(error)
        if category == ErrorCategory.INTERNAL and not expose_internal_messages:
            return ExternalError(category=category, message=generic)
        return ExternalError(category=category, message=_message_of(error) or generic)
    except Exception:
        # Last line of defence before a response goes out.
        logger.exception("Failed to map error of type %s", type(error).__name__)
        return ExternalError(category=ErrorCategory.INTERNAL, message=generic)


def to_http_exception(external: ExternalError) -> HandyHubException:
    if external.category == ErrorCategory.INVALID_REQUEST:
        return BadRequestError(external.message)
    if external.category == ErrorCategory.FORBIDDEN:
        return PermissionDeniedError(external.message)
    if external.category == ErrorCategory.CONFLICT:
        return ConflictError(external.message)
    if external.category == ErrorCategory.NOT_FOUND:
        return HandyHubException(
            detail=external.message,
            status_code=status.HTTP_404_NOT_FOUND,
            category=ErrorCategory.NOT_FOUND,
        )
    return HandyHubException(detail=external.message)
