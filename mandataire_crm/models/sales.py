from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class SaleRecord(BaseModel):
    id: str
    client_id: str
    service_id: str
    amount_cents: int
    currency: str = "EUR"
    occurred_at: datetime
    notes: Optional[str] = None
    commission_rate_percent: Decimal = Decimal("3.5")
    commission_amount_cents_override: Optional[int] = None
    is_split: bool = False
    split_ratio: Decimal = Decimal("1")
    partner_name: Optional[str] = None
    created_at: Optional[datetime] = None


class SalesFilter(BaseModel):
    """Half-open ``[start, end)`` window on ``occurred_at`` plus optional id filters.

    The same value renders the PostgREST query and re-checks rows in memory,
    so every dashboard view is computed from one filtered set.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
    service_id: Optional[str] = None
    client_id: Optional[str] = None

    def to_query_filters(self) -> List[Tuple[str, str]]:
        filters = [
            ("occurred_at", f"gte.{self.start.isoformat()}"),
            ("occurred_at", f"lt.{self.end.isoformat()}"),
        ]
        if self.service_id is not None:
            filters.append(("service_id", f"eq.{self.service_id}"))
        if self.client_id is not None:
            filters.append(("client_id", f"eq.{self.client_id}"))
        return filters

    def matches(self, sale: SaleRecord) -> bool:
        occurred_at = sale.occurred_at
        if occurred_at.tzinfo is None and self.start.tzinfo is not None:
            occurred_at = occurred_at.replace(tzinfo=self.start.tzinfo)
        if not self.start <= occurred_at < self.end:
            return False
        if self.service_id is not None and sale.service_id != self.service_id:
            return False
        if self.client_id is not None and sale.client_id != self.client_id:
            return False
        return True
