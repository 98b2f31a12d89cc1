import json
from unittest.mock import MagicMock

import pytest

from handyhub.api.exception_handlers import unhandled_exception_handler
from handyhub.common.enums import ErrorCategory
from handyhub.config import settings
from handyhub.core.errors.domain import (
    ChatClosedError,
    ChatForbiddenError,
    InvalidBookingStateError,
    InvalidOrderStateError,
    OrderNotCompletedError,
    OrderNotFoundError,
    ReviewAlreadyExistsError,
    UnauthorizedOrderActionError,
    UnauthorizedReviewActionError,
)
from handyhub.core.errors.mapper import map_domain_error_to_external_error, to_http_exception


@pytest.mark.parametrize(
    "error,category",
    [
        (OrderNotCompletedError("not done"), ErrorCategory.INVALID_REQUEST),
        (ReviewAlreadyExistsError("dup"), ErrorCategory.CONFLICT),
        (UnauthorizedReviewActionError("nope"), ErrorCategory.FORBIDDEN),
        (InvalidOrderStateError("bad state"), ErrorCategory.INVALID_REQUEST),
        (UnauthorizedOrderActionError("nope"), ErrorCategory.FORBIDDEN),
        (OrderNotFoundError("missing"), ErrorCategory.NOT_FOUND),
        (ChatForbiddenError("not yours"), ErrorCategory.FORBIDDEN),
        (ChatClosedError("closed"), ErrorCategory.INVALID_REQUEST),
        (InvalidBookingStateError("bad booking"), ErrorCategory.INVALID_REQUEST),
    ],
)
def test_domain_errors_map_to_categories(error, category):
    external = map_domain_error_to_external_error(error)
    assert external.category == category
    assert external.message == error.message


def test_order_not_found_passes_message_through():
    external = map_domain_error_to_external_error(OrderNotFoundError("x"))
    assert external.category == ErrorCategory.NOT_FOUND
    assert external.message == "x"


def test_factory_messages():
    assert OrderNotFoundError.for_order("o-1").message == "Order 'o-1' not found"
    assert "DRAFT" in InvalidOrderStateError.for_transition("DRAFT", "PAID").message


def test_plain_exception_is_internal_with_its_message():
    external = map_domain_error_to_external_error(RuntimeError("db timeout"))
    assert external.category == ErrorCategory.INTERNAL
    assert external.message == "db timeout"


def test_object_with_message_attribute():
    class Weird:
        message = "weird failure"

    external = map_domain_error_to_external_error(Weird())
    assert external.category == ErrorCategory.INTERNAL
    assert external.message == "weird failure"


def test_mapping_with_message_key():
    external = map_domain_error_to_external_error({"message": "from dict"})
    assert external.message == "from dict"


@pytest.mark.parametrize("error", [None, object(), ValueError(), 42, "", {"code": 1}])
def test_unrecognized_input_falls_back_to_generic(error):
    external = map_domain_error_to_external_error(error)
    assert external.category == ErrorCategory.INTERNAL
    assert external.message == settings.GENERIC_ERROR_MESSAGE


def test_message_property_that_raises_does_not_escape():
    class Exploding:
        @property
        def message(self):
            raise RuntimeError("boom")

    external = map_domain_error_to_external_error(Exploding())
    assert external.category == ErrorCategory.INTERNAL
    assert external.message == settings.GENERIC_ERROR_MESSAGE


def test_internal_messages_can_be_hidden():
    external = map_domain_error_to_external_error(
        RuntimeError("password=hunter2"), expose_internal_messages=False
    )
    assert external.message == settings.GENERIC_ERROR_MESSAGE

    # Domain messages are always part of the contract.
    external = map_domain_error_to_external_error(ChatClosedError("closed"), expose_internal_messages=False)
    assert external.message == "closed"


@pytest.mark.parametrize(
    "error,status_code",
    [
        (InvalidOrderStateError("x"), 400),
        (UnauthorizedOrderActionError("x"), 403),
        (OrderNotFoundError("x"), 404),
        (ReviewAlreadyExistsError("x"), 409),
        (RuntimeError("x"), 500),
    ],
)
def test_http_status_codes(error, status_code):
    http_exc = to_http_exception(map_domain_error_to_external_error(error))
    assert http_exc.status_code == status_code
    assert http_exc.detail == "x"


def _boom_request():
    request = MagicMock()
    request.method = "GET"
    request.url.path = "/boom"
    return request


@pytest.mark.asyncio
async def test_unhandled_exception_handler_hides_internal_text_by_default():
    response = await unhandled_exception_handler(_boom_request(), KeyError("secret_column"))
    assert response.status_code == 500
    assert json.loads(response.body) == {"detail": settings.GENERIC_ERROR_MESSAGE, "code": "INTERNAL"}
    assert b"secret_column" not in response.body


@pytest.mark.asyncio
async def test_unhandled_exception_handler_exposes_text_when_enabled(monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_INTERNAL_ERRORS", True)
    response = await unhandled_exception_handler(_boom_request(), RuntimeError("db timeout"))
    assert json.loads(response.body) == {"detail": "db timeout", "code": "INTERNAL"}
