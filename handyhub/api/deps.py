from fastapi import Depends, Header

from handyhub.common.enums import Role
from handyhub.common.exceptions import PermissionDeniedError
from handyhub.core.orders.schemas import Actor


async def get_current_actor(
    x_actor_id: str = Header(..., description="User id resolved by the identity gateway"),
    x_actor_role: str = Header(..., description="CLIENT, PRO or ADMIN"),
    x_pro_profile_id: str | None = Header(None),
) -> Actor:
    if not x_actor_id.strip():
        raise PermissionDeniedError("Missing actor id")

    try:
        role = Role(x_actor_role.strip().upper())
    except ValueError:
        raise PermissionDeniedError(f"Unknown role '{x_actor_role}'")

    return Actor(id=x_actor_id.strip(), role=role, pro_profile_id=x_pro_profile_id)


def require_role(*roles: Role):
    async def role_checker(actor: Actor = Depends(get_current_actor)) -> Actor:
        if actor.role not in roles:
            raise PermissionDeniedError(
                f"This action requires one of the following roles: {', '.join(r.value for r in roles)}"
            )
        return actor

    return role_checker
