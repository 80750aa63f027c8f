from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from mandataire_crm.api.dependencies import get_dashboard_service
from mandataire_crm.schemas.dashboard import (
    DASHBOARD_CALCULATION_VERSION,
    DashboardFilters,
    DashboardSummary,
    normalize_optional_filter,
)
from mandataire_crm.services.dashboard_service import DashboardService
from mandataire_crm.shared.time import MAX_REPORTING_YEAR, MIN_REPORTING_YEAR


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_filters(
    view: str = Query(default="monthly", pattern="^(monthly|yearly)$"),
    year: Optional[int] = Query(default=None, ge=MIN_REPORTING_YEAR, le=MAX_REPORTING_YEAR),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    service_id: Optional[str] = Query(default=None, alias="serviceId"),
    client_id: Optional[str] = Query(default=None, alias="clientId"),
) -> DashboardFilters:
    return DashboardFilters(
        view=view,
        year=year,
        month=month if view == "monthly" else None,
        service_id=normalize_optional_filter(service_id),
        client_id=normalize_optional_filter(client_id),
    )


@router.get("/summary")
def dashboard_summary(
    response: Response,
    filters: DashboardFilters = Depends(get_dashboard_filters),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSummary:
    response.headers["X-Calculation-Version"] = DASHBOARD_CALCULATION_VERSION
    return service.get_summary(filters)
