from __future__ import annotations

from fastapi import APIRouter

from bookingboost.api.channels import router as channels_router
from bookingboost.api.health import router as health_router
from bookingboost.api.marketing import router as marketing_router
from bookingboost.api.performance import router as performance_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(channels_router)
api_router.include_router(performance_router)
api_router.include_router(marketing_router)
