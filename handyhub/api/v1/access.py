from fastapi import APIRouter

from handyhub.core.access.guard import decide_route_access
from handyhub.core.access.schemas import RouteGuardDecision, RouteGuardRequest

router = APIRouter(prefix="/access", tags=["Access"])


@router.post("/decision", response_model=RouteGuardDecision)
async def route_decision(body: RouteGuardRequest):
    return decide_route_access(body)
