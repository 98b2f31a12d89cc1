from datetime import datetime

from pydantic import BaseModel

from handyhub.common.enums import OrderStatus, Role


class Actor(BaseModel):
    id: str
    role: Role
    pro_profile_id: str | None = None


class OrderSnapshot(BaseModel):
    """The slice of an order the workflow rules need."""

    id: str
    status: OrderStatus
    client_user_id: str
    pro_profile_id: str | None = None
    pro_user_id: str | None = None
    completed_at: datetime | None = None
    canceled_at: datetime | None = None
