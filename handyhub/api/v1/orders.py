from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from handyhub.api.deps import get_current_actor
from handyhub.common.enums import BookingStatus, EntityType, OrderStatus
from handyhub.common.exceptions import BadRequestError
from handyhub.core.orders.schemas import Actor, OrderSnapshot
from handyhub.core.orders.workflow import (
    allowed_booking_transitions,
    allowed_order_transitions,
    assert_chat_writable,
    assert_reviewable,
    authorize_client_action,
    authorize_pro_action,
    mask_display_name,
    validate_booking_transition,
    validate_order_transition,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


# ---------- Schemas ----------


class TransitionRequest(BaseModel):
    entity_type: EntityType = EntityType.ORDER
    current_status: str
    target_status: str


class TransitionResponse(BaseModel):
    entity_type: EntityType
    current_status: str
    target_status: str
    next_statuses: list[str]


class ActionRequest(BaseModel):
    order: OrderSnapshot
    action: str
    performed_as: Literal["client", "pro"]


class ActionResponse(BaseModel):
    order_id: str
    action: str
    authorized: bool


class ChatCheckRequest(BaseModel):
    order: OrderSnapshot


class ChatCheckResponse(BaseModel):
    order_id: str
    participant: Literal["client", "pro"]


class ReviewCheckRequest(BaseModel):
    order: OrderSnapshot
    has_existing_review: bool = False


class ReviewCheckResponse(BaseModel):
    order_id: str
    reviewable: bool


class DisplayNameResponse(BaseModel):
    display_name: str


# ---------- Endpoints ----------


@router.post("/transitions", response_model=TransitionResponse)
async def check_transition(body: TransitionRequest):
    if body.entity_type == EntityType.ORDER:
        current = _parse_status(OrderStatus, body.current_status)
        target = _parse_status(OrderStatus, body.target_status)
        validate_order_transition(current, target)
        next_statuses = allowed_order_transitions(target)
    elif body.entity_type == EntityType.BOOKING:
        current = _parse_status(BookingStatus, body.current_status)
        target = _parse_status(BookingStatus, body.target_status)
        validate_booking_transition(current, target)
        next_statuses = allowed_booking_transitions(target)
    else:
        raise BadRequestError(f"{body.entity_type.value} statuses have no transition rules")

    return TransitionResponse(
        entity_type=body.entity_type,
        current_status=current.value,
        target_status=target.value,
        next_statuses=[s.value for s in next_statuses],
    )


@router.post("/actions/authorize", response_model=ActionResponse)
async def authorize_action(
    body: ActionRequest,
    actor: Actor = Depends(get_current_actor),
):
    if body.performed_as == "client":
        authorize_client_action(actor, body.order, body.action)
    else:
        authorize_pro_action(actor, body.order, body.action)
    return ActionResponse(order_id=body.order.id, action=body.action, authorized=True)


@router.post("/chat/check", response_model=ChatCheckResponse)
async def check_chat(
    body: ChatCheckRequest,
    actor: Actor = Depends(get_current_actor),
):
    # Closed chats surface as ChatClosedError (400), so a 200 means writable.
    participant = assert_chat_writable(actor, body.order)
    return ChatCheckResponse(order_id=body.order.id, participant=participant)


@router.post("/reviews/check", response_model=ReviewCheckResponse)
async def check_review(
    body: ReviewCheckRequest,
    actor: Actor = Depends(get_current_actor),
):
    assert_reviewable(actor, body.order, body.has_existing_review)
    return ReviewCheckResponse(order_id=body.order.id, reviewable=True)


@router.get("/display-name", response_model=DisplayNameResponse)
async def display_name(full_name: str = ""):
    return DisplayNameResponse(display_name=mask_display_name(full_name))


# ---------- Helpers ----------


def _parse_status(status_enum, value: str):
    try:
        return status_enum(value.upper())
    except ValueError:
        raise BadRequestError(f"Unknown {status_enum.__name__} '{value}'")
