import uuid

import pytest
from httpx import ASGITransport, AsyncClient

from handyhub.common.enums import OrderStatus, Role


@pytest.fixture
async def client():
    from handyhub.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def _actor_headers(role: Role, actor_id: str | None = None, pro_profile_id: str | None = None) -> dict:
    headers = {
        "X-Actor-Id": actor_id or f"user-{uuid.uuid4().hex[:8]}",
        "X-Actor-Role": role.value,
    }
    if pro_profile_id:
        headers["X-Pro-Profile-Id"] = pro_profile_id
    return headers


@pytest.fixture
def client_user_id():
    return f"client-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def pro_user_id():
    return f"pro-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def client_headers(client_user_id):
    return _actor_headers(Role.CLIENT, client_user_id)


@pytest.fixture
def pro_headers(pro_user_id):
    return _actor_headers(Role.PRO, pro_user_id, pro_profile_id="profile-1")


@pytest.fixture
def admin_headers():
    return _actor_headers(Role.ADMIN)


@pytest.fixture
def order_payload(client_user_id, pro_user_id):
    return {
        "id": f"order-{uuid.uuid4().hex[:8]}",
        "status": OrderStatus.IN_PROGRESS.value,
        "client_user_id": client_user_id,
        "pro_profile_id": "profile-1",
        "pro_user_id": pro_user_id,
    }
