from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple

from mandataire_crm.core.config import get_settings
from mandataire_crm.core.supabase import SupabaseClient
from mandataire_crm.models.sales import SaleRecord, SalesFilter
from mandataire_crm.shared.time import start_of_day


SALE_COLUMNS = (
    "id,client_id,service_id,amount_cents,currency,occurred_at,notes,"
    "commission_rate_percent,commission_amount_cents_override,is_split,split_ratio,"
    "partner_name,created_at"
)


class SalesRepository:
    table = "client_services"

    def __init__(self) -> None:
        self.client = SupabaseClient()
        self.page_size = get_settings().record_store_page_size

    def list_sales(
        self,
        client_id: Optional[str] = None,
        service_id: Optional[str] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[SaleRecord]:
        filters: List[Tuple[str, str]] = []
        if client_id:
            filters.append(("client_id", f"eq.{client_id}"))
        if service_id:
            filters.append(("service_id", f"eq.{service_id}"))
        if from_date:
            filters.append(("occurred_at", f"gte.{start_of_day(from_date).isoformat()}"))
        if to_date:
            # Inclusive calendar day: everything before the next midnight.
            filters.append(
                ("occurred_at", f"lt.{start_of_day(to_date + timedelta(days=1)).isoformat()}")
            )
        return self._select_all(filters, order="occurred_at.desc,id.asc")

    def list_sales_in_range(self, sales_filter: SalesFilter) -> List[SaleRecord]:
        return self._select_all(sales_filter.to_query_filters(), order="occurred_at.asc,id.asc")

    def _select_all(self, filters: List[Tuple[str, str]], order: str) -> List[SaleRecord]:
        # PostgREST caps each response, so walk the result in stable pages.
        records: List[SaleRecord] = []
        offset = 0
        while True:
            rows = self.client.select(
                table=self.table,
                select=SALE_COLUMNS,
                filters=filters,
                limit=self.page_size,
                offset=offset,
                order=order,
            )
            records.extend(SaleRecord.model_validate(row) for row in rows)
            if len(rows) < self.page_size:
                return records
            offset += self.page_size

    def get_sale(self, sale_id: str) -> Optional[SaleRecord]:
        rows = self.client.select(
            table=self.table,
            select=SALE_COLUMNS,
            filters=[("id", f"eq.{sale_id}")],
            limit=1,
        )
        if not rows:
            return None
        return SaleRecord.model_validate(rows[0])

    def create_sale(self, payload: Dict[str, Any]) -> SaleRecord:
        rows = self.client.insert(table=self.table, payload=payload)
        return SaleRecord.model_validate(rows[0])

    def update_sale(self, sale_id: str, payload: Dict[str, Any]) -> Optional[SaleRecord]:
        rows = self.client.update(
            table=self.table, payload=payload, filters=[("id", f"eq.{sale_id}")]
        )
        if not rows:
            return None
        return SaleRecord.model_validate(rows[0])

    def delete_sale(self, sale_id: str) -> bool:
        rows = self.client.delete(table=self.table, filters=[("id", f"eq.{sale_id}")])
        return bool(rows)
