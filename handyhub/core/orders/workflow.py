from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Literal

from handyhub.common.enums import BookingStatus, OrderStatus, Role
from handyhub.config import settings
from handyhub.core.errors.domain import (
    ChatClosedError,
    ChatForbiddenError,
    InvalidBookingStateError,
    InvalidOrderStateError,
    OrderNotCompletedError,
    ReviewAlreadyExistsError,
    UnauthorizedOrderActionError,
    UnauthorizedReviewActionError,
)
from handyhub.core.orders.schemas import Actor, OrderSnapshot

ORDER_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.DRAFT: (OrderStatus.PENDING_PRO_CONFIRMATION,),
    OrderStatus.PENDING_PRO_CONFIRMATION: (OrderStatus.ACCEPTED, OrderStatus.CANCELED),
    OrderStatus.ACCEPTED: (OrderStatus.CONFIRMED, OrderStatus.CANCELED),
    OrderStatus.CONFIRMED: (OrderStatus.IN_PROGRESS, OrderStatus.CANCELED),
    OrderStatus.IN_PROGRESS: (OrderStatus.AWAITING_CLIENT_APPROVAL,),
    OrderStatus.AWAITING_CLIENT_APPROVAL: (OrderStatus.COMPLETED, OrderStatus.DISPUTED),
    OrderStatus.COMPLETED: (OrderStatus.PAID,),
    OrderStatus.DISPUTED: (OrderStatus.COMPLETED, OrderStatus.CANCELED),
    OrderStatus.PAID: (),
    OrderStatus.CANCELED: (),
}

BOOKING_TRANSITIONS: dict[BookingStatus, tuple[BookingStatus, ...]] = {
    BookingStatus.PENDING_PAYMENT: (BookingStatus.PENDING, BookingStatus.CANCELLED),
    BookingStatus.PENDING: (
        BookingStatus.ACCEPTED,
        BookingStatus.REJECTED,
        BookingStatus.CANCELLED,
    ),
    BookingStatus.ACCEPTED: (BookingStatus.ON_MY_WAY, BookingStatus.CANCELLED),
    BookingStatus.ON_MY_WAY: (BookingStatus.ARRIVED, BookingStatus.CANCELLED),
    BookingStatus.ARRIVED: (BookingStatus.COMPLETED,),
    BookingStatus.REJECTED: (),
    BookingStatus.COMPLETED: (),
    BookingStatus.CANCELLED: (),
}

REVIEWABLE_ORDER_STATUSES = (OrderStatus.COMPLETED, OrderStatus.PAID)
ANONYMOUS_CLIENT_NAME = "Cliente"


# ---------- State machines ----------


def allowed_order_transitions(current: OrderStatus) -> tuple[OrderStatus, ...]:
    return ORDER_TRANSITIONS.get(current, ())


def allowed_booking_transitions(current: BookingStatus) -> tuple[BookingStatus, ...]:
    return BOOKING_TRANSITIONS.get(current, ())


def validate_order_transition(current: OrderStatus, target: OrderStatus) -> None:
    if target not in allowed_order_transitions(current):
        raise InvalidOrderStateError.for_transition(current.value, target.value)


def validate_booking_transition(current: BookingStatus, target: BookingStatus) -> None:
    if target not in allowed_booking_transitions(current):
        raise InvalidBookingStateError.for_transition(current.value, target.value)


# ---------- Authorization ----------


def authorize_client_action(actor: Actor, order: OrderSnapshot, action: str) -> None:
    if actor.role == Role.ADMIN:
        return
    if actor.role != Role.CLIENT:
        raise UnauthorizedOrderActionError.for_action(action, "Only clients can perform this action")
    if order.client_user_id != actor.id:
        raise UnauthorizedOrderActionError.for_action(action, "Order does not belong to this client")


def authorize_pro_action(actor: Actor, order: OrderSnapshot, action: str) -> None:
    if actor.role == Role.ADMIN:
        return
    if actor.role != Role.PRO:
        raise UnauthorizedOrderActionError.for_action(action, "Only pros can perform this action")
    if not actor.pro_profile_id:
        raise UnauthorizedOrderActionError.for_action(action, "Pro profile not found")
    if order.pro_profile_id != actor.pro_profile_id:
        raise UnauthorizedOrderActionError.for_action(action, "Order is not assigned to this pro")


# ---------- Chat ----------


def resolve_participant(actor: Actor, order: OrderSnapshot) -> Literal["client", "pro"] | None:
    if order.client_user_id == actor.id:
        return "client"
    if order.pro_user_id and order.pro_user_id == actor.id:
        return "pro"
    return None


def is_chat_open(order: OrderSnapshot, now: datetime | None = None) -> bool:
    """Chat stays open until the order is canceled or a grace period after completion."""
    if order.status == OrderStatus.CANCELED or order.canceled_at:
        return False
    if not order.completed_at:
        return True

    now = now or datetime.now(timezone.utc)
    completed_at = order.completed_at
    if completed_at.tzinfo is None:
        completed_at = completed_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    close_at = completed_at + timedelta(hours=settings.CHAT_CLOSE_HOURS_AFTER_COMPLETED)
    return now <= close_at


def assert_chat_writable(
    actor: Actor, order: OrderSnapshot, now: datetime | None = None
) -> Literal["client", "pro"]:
    participant = resolve_participant(actor, order)
    if participant is None:
        raise ChatForbiddenError.for_order(order.id)
    if not is_chat_open(order, now):
        raise ChatClosedError.for_order(order.id)
    return participant


# ---------- Reviews ----------


def assert_reviewable(actor: Actor, order: OrderSnapshot, has_existing_review: bool) -> None:
    if actor.role != Role.CLIENT:
        raise UnauthorizedReviewActionError.for_action("create review", "Only clients can review orders")
    if order.client_user_id != actor.id:
        raise UnauthorizedReviewActionError.for_action(
            "create review", "Order does not belong to this client"
        )
    if order.status not in REVIEWABLE_ORDER_STATUSES:
        raise OrderNotCompletedError.for_order(order.id, order.status.value)
    if has_existing_review:
        raise ReviewAlreadyExistsError.for_order(order.id)


# ---------- Display ----------


def mask_display_name(full_name: str | None) -> str:
    """``"Juan Pérez"`` -> ``"Juan P."``; shown to pros before they accept an order."""
    parts = (full_name or "").split()
    if not parts:
        return ANONYMOUS_CLIENT_NAME
    if len(parts) == 1:
        return parts[0]
    return f"{parts[0]} {parts[-1][0].upper()}."
