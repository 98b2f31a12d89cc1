"""Domain errors raised by order, booking, review and chat rules.

Each error carries a human-readable ``message``. None of them know about HTTP;
``handyhub.core.errors.mapper`` translates them at the API boundary.
"""

from __future__ import annotations


class DomainError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OrderNotCompletedError(DomainError):
    @classmethod
    def for_order(cls, order_id: str, status: str) -> OrderNotCompletedError:
        return cls(f"Order '{order_id}' is not completed (status: {status})")


class ReviewAlreadyExistsError(DomainError):
    @classmethod
    def for_order(cls, order_id: str) -> ReviewAlreadyExistsError:
        return cls(f"A review already exists for order '{order_id}'")


class UnauthorizedReviewActionError(DomainError):
    @classmethod
    def for_action(cls, action: str, reason: str) -> UnauthorizedReviewActionError:
        return cls(f"Unauthorized to {action}: {reason}")


class InvalidOrderStateError(DomainError):
    @classmethod
    def for_transition(cls, current: str, target: str) -> InvalidOrderStateError:
        return cls(f"Invalid order state transition from {current} to {target}")


class UnauthorizedOrderActionError(DomainError):
    @classmethod
    def for_action(cls, action: str, reason: str) -> UnauthorizedOrderActionError:
        return cls(f"Unauthorized to {action}: {reason}")


class OrderNotFoundError(DomainError):
    @classmethod
    def for_order(cls, order_id: str) -> OrderNotFoundError:
        return cls(f"Order '{order_id}' not found")


class ChatForbiddenError(DomainError):
    @classmethod
    def for_order(cls, order_id: str) -> ChatForbiddenError:
        return cls(f"Not a participant of the chat for order '{order_id}'")


class ChatClosedError(DomainError):
    @classmethod
    def for_order(cls, order_id: str) -> ChatClosedError:
        return cls(f"Chat for order '{order_id}' is closed")


class InvalidBookingStateError(DomainError):
    @classmethod
    def for_transition(cls, current: str, target: str) -> InvalidBookingStateError:
        return cls(f"Invalid booking state transition from {current} to {target}")
