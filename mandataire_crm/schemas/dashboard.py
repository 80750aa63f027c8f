from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import Field, field_validator

from mandataire_crm.models.dashboard import DashboardView
from mandataire_crm.shared.base import BaseSchema, FrozenSchema


DASHBOARD_CALCULATION_VERSION = "v1"

# Presentation-layer value meaning "no filter" for serviceId / clientId.
ALL_FILTER_SENTINEL = "all"


def normalize_optional_filter(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    if not stripped or stripped.lower() == ALL_FILTER_SENTINEL:
        return None
    return stripped


class DashboardFilters(BaseSchema):
    view: DashboardView = "monthly"
    year: Optional[int] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)
    service_id: Optional[str] = None
    client_id: Optional[str] = None

    @field_validator("service_id", "client_id", mode="before")
    @classmethod
    def _drop_all_sentinel(cls, value: Optional[str]) -> Optional[str]:
        return normalize_optional_filter(value)


class ServiceBreakdownRow(FrozenSchema):
    service_id: str
    service_name: str
    total_cents: int
    commission_cents: int


class ClientBreakdownRow(FrozenSchema):
    client_id: str
    client_name: str
    total_cents: int
    commission_cents: int


class DashboardPoint(FrozenSchema):
    period: str
    total_cents: int = 0
    commission_cents: int = 0


class DashboardSummary(FrozenSchema):
    total_cents: int = 0
    total_commission_cents: int = 0
    currency: Literal["EUR"] = "EUR"
    breakdown_by_service: Tuple[ServiceBreakdownRow, ...] = ()
    breakdown_by_client: Tuple[ClientBreakdownRow, ...] = ()
    points: Tuple[DashboardPoint, ...] = ()
