from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from handyhub.api.deps import require_role
from handyhub.common.enums import EntityType, Role
from handyhub.common.exceptions import NotFoundError
from handyhub.core.orders.schemas import Actor
from handyhub.core.statuses.registry import describe, list_statuses, status_breakdown
from handyhub.core.statuses.schemas import StatusBreakdown, StatusDescriptor

router = APIRouter(prefix="/statuses", tags=["Statuses"])


# ---------- Schemas ----------


class StatusListResponse(BaseModel):
    entity_type: EntityType
    statuses: list[StatusDescriptor]


class BreakdownRequest(BaseModel):
    counts: dict[str, int] = Field(default_factory=dict)


# ---------- Endpoints ----------


@router.get("/{entity_type}", response_model=StatusListResponse)
async def get_statuses(entity_type: str):
    entity = _parse_entity_type(entity_type)
    return StatusListResponse(entity_type=entity, statuses=list_statuses(entity))


@router.get("/{entity_type}/{status}", response_model=StatusDescriptor)
async def get_status(entity_type: str, status: str):
    # Unknown statuses fall back to their raw code rather than 404.
    return describe(_parse_entity_type(entity_type), status)


@router.post("/{entity_type}/breakdown", response_model=StatusBreakdown)
async def get_breakdown(
    entity_type: str,
    body: BreakdownRequest,
    actor: Actor = Depends(require_role(Role.ADMIN)),
):
    return status_breakdown(_parse_entity_type(entity_type), body.counts)


# ---------- Helpers ----------


def _parse_entity_type(value: str) -> EntityType:
    try:
        return EntityType(value.upper())
    except ValueError:
        raise NotFoundError("Entity type", value)
