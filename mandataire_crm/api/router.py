from __future__ import annotations

from fastapi import APIRouter

from mandataire_crm.api.catalog import router as catalog_router
from mandataire_crm.api.clients import router as clients_router
from mandataire_crm.api.dashboard import router as dashboard_router
from mandataire_crm.api.health import router as health_router
from mandataire_crm.api.prospects import router as prospects_router
from mandataire_crm.api.sales import router as sales_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(dashboard_router)
api_router.include_router(prospects_router)
api_router.include_router(clients_router)
api_router.include_router(catalog_router)
api_router.include_router(sales_router)
