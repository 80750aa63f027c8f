from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

from mandataire_crm.core.config import get_settings


router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> Dict[str, str]:
    settings = get_settings()
    return {"status": "ok", "app": settings.app_name, "environment": settings.environment}
