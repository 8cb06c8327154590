from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

from bookingboost.shared.response import ResponseEnvelope, build_meta


router = APIRouter(tags=["health"])


def _alive() -> ResponseEnvelope[Dict[str, str]]:
    return ResponseEnvelope(data={"status": "ok"}, meta=build_meta(source="system", time_window="now"))


@router.get("/health")
def health_check() -> ResponseEnvelope[Dict[str, str]]:
    return _alive()


@router.get("/healthz")
def health_check_liveness() -> ResponseEnvelope[Dict[str, str]]:
    return _alive()
