from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from mandataire_crm.core.supabase import SupabaseClient, batched, in_filter
from mandataire_crm.models.catalog import ServiceRecord


SERVICE_COLUMNS = "id,name,description,is_active,created_at"


class CatalogRepository:
    table = "services"

    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_services(self, active: Optional[bool] = None) -> List[ServiceRecord]:
        filters = []
        if active is not None:
            filters.append(("is_active", f"eq.{str(active).lower()}"))
        rows = self.client.select(
            table=self.table,
            select=SERVICE_COLUMNS,
            filters=filters,
            order="name.asc",
        )
        return [ServiceRecord.model_validate(row) for row in rows]

    def list_services_by_ids(self, service_ids: Iterable[str]) -> List[ServiceRecord]:
        records: List[ServiceRecord] = []
        for batch in batched(sorted(set(service_ids))):
            rows = self.client.select(
                table=self.table,
                select=SERVICE_COLUMNS,
                filters=[("id", in_filter(batch))],
            )
            records.extend(ServiceRecord.model_validate(row) for row in rows)
        return records

    def get_service(self, service_id: str) -> Optional[ServiceRecord]:
        rows = self.client.select(
            table=self.table,
            select=SERVICE_COLUMNS,
            filters=[("id", f"eq.{service_id}")],
            limit=1,
        )
        if not rows:
            return None
        return ServiceRecord.model_validate(rows[0])

    def create_service(self, payload: Dict[str, Any]) -> ServiceRecord:
        rows = self.client.insert(table=self.table, payload=payload)
        return ServiceRecord.model_validate(rows[0])

    def update_service(self, service_id: str, payload: Dict[str, Any]) -> Optional[ServiceRecord]:
        rows = self.client.update(
            table=self.table, payload=payload, filters=[("id", f"eq.{service_id}")]
        )
        if not rows:
            return None
        return ServiceRecord.model_validate(rows[0])

    def delete_service(self, service_id: str) -> bool:
        rows = self.client.delete(table=self.table, filters=[("id", f"eq.{service_id}")])
        return bool(rows)
