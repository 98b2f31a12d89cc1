from pydantic import BaseModel

from handyhub.common.enums import BadgeVariant


class StatusDescriptor(BaseModel):
    entity_type: str
    status: str
    label: str
    variant: BadgeVariant
    known: bool = True


class BreakdownEntry(BaseModel):
    status: str
    label: str
    variant: BadgeVariant
    count: int
    percentage: float  # 0-100, one decimal


class StatusBreakdown(BaseModel):
    entity_type: str
    total: int
    entries: list[BreakdownEntry]
