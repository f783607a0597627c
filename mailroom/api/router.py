from fastapi import APIRouter

from mailroom.api.health.router import router as health_router
from mailroom.api.organization.router import router as organization_router

# V1 API router
v1_router = APIRouter(prefix="/v1")

v1_router.include_router(organization_router)

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)
