from fastapi import APIRouter

from handyhub.api.v1.access import router as access_router
from handyhub.api.v1.orders import router as orders_router
from handyhub.api.v1.statuses import router as statuses_router

v1_router = APIRouter()

v1_router.include_router(statuses_router)
v1_router.include_router(access_router)
v1_router.include_router(orders_router)
