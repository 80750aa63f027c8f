from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional

from pydantic import ConfigDict, Field

from mandataire_crm.shared.base import BaseSchema, UpdateSchema


class ClientService(BaseSchema):
    id: str
    client_id: str
    service_id: str
    amount_cents: int
    currency: str
    occurred_at: datetime
    notes: Optional[str] = None
    commission_rate_percent: float
    commission_amount_cents_override: Optional[int] = None
    is_split: bool = False
    split_ratio: float
    partner_name: Optional[str] = None
    commission_cents: int
    created_at: Optional[datetime] = None


class ClientServiceCreateRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    client_id: str = Field(min_length=1)
    service_id: str = Field(min_length=1)
    amount_cents: int = Field(ge=0)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    occurred_at: datetime
    notes: Optional[str] = Field(default=None, max_length=4000)
    # None means "use the configured default rate".
    commission_rate_percent: Optional[Decimal] = Field(default=None, ge=0, le=100)
    commission_amount_cents_override: Optional[int] = Field(default=None, ge=0)
    is_split: bool = False
    split_ratio: Decimal = Field(default=Decimal("1"), ge=0, le=1)
    partner_name: Optional[str] = Field(default=None, max_length=200)


class ClientServiceUpdateRequest(UpdateSchema):
    non_nullable_fields: ClassVar[FrozenSet[str]] = frozenset(
        {
            "client_id",
            "service_id",
            "amount_cents",
            "currency",
            "occurred_at",
            "commission_rate_percent",
            "is_split",
            "split_ratio",
        }
    )

    client_id: Optional[str] = Field(default=None, min_length=1)
    service_id: Optional[str] = Field(default=None, min_length=1)
    amount_cents: Optional[int] = Field(default=None, ge=0)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    occurred_at: Optional[datetime] = None
    notes: Optional[str] = Field(default=None, max_length=4000)
    commission_rate_percent: Optional[Decimal] = Field(default=None, ge=0, le=100)
    commission_amount_cents_override: Optional[int] = Field(default=None, ge=0)
    is_split: Optional[bool] = None
    split_ratio: Optional[Decimal] = Field(default=None, ge=0, le=1)
    partner_name: Optional[str] = Field(default=None, max_length=200)


class ClientServiceListFilters(BaseSchema):
    client_id: Optional[str] = None
    service_id: Optional[str] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
