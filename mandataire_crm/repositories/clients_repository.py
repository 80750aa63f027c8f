from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from mandataire_crm.core.supabase import SupabaseClient, batched, in_filter, search_filter
from mandataire_crm.models.clients import ClientRecord


CLIENT_COLUMNS = (
    "id,first_name,last_name,phone,profession,recommended_by,notes,is_archived,created_at"
)
CLIENT_SEARCH_COLUMNS = ["first_name", "last_name", "phone", "profession", "recommended_by"]


class ClientsRepository:
    table = "clients"

    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_clients(
        self, q: Optional[str] = None, archived: Optional[bool] = None
    ) -> List[ClientRecord]:
        filters: List[Tuple[str, str]] = []
        if archived is not None:
            filters.append(("is_archived", f"eq.{str(archived).lower()}"))
        if q and q.strip():
            filters.append(search_filter(CLIENT_SEARCH_COLUMNS, q))
        rows = self.client.select(
            table=self.table,
            select=CLIENT_COLUMNS,
            filters=filters,
            order="created_at.desc",
        )
        return [ClientRecord.model_validate(row) for row in rows]

    def list_clients_by_ids(self, client_ids: Iterable[str]) -> List[ClientRecord]:
        records: List[ClientRecord] = []
        for batch in batched(sorted(set(client_ids))):
            rows = self.client.select(
                table=self.table,
                select=CLIENT_COLUMNS,
                filters=[("id", in_filter(batch))],
            )
            records.extend(ClientRecord.model_validate(row) for row in rows)
        return records

    def get_client(self, client_id: str) -> Optional[ClientRecord]:
        rows = self.client.select(
            table=self.table,
            select=CLIENT_COLUMNS,
            filters=[("id", f"eq.{client_id}")],
            limit=1,
        )
        if not rows:
            return None
        return ClientRecord.model_validate(rows[0])

    def create_client(self, payload: Dict[str, Any]) -> ClientRecord:
        rows = self.client.insert(table=self.table, payload=payload)
        return ClientRecord.model_validate(rows[0])

    def update_client(self, client_id: str, payload: Dict[str, Any]) -> Optional[ClientRecord]:
        rows = self.client.update(
            table=self.table, payload=payload, filters=[("id", f"eq.{client_id}")]
        )
        if not rows:
            return None
        return ClientRecord.model_validate(rows[0])

    def delete_client(self, client_id: str) -> bool:
        rows = self.client.delete(table=self.table, filters=[("id", f"eq.{client_id}")])
        return bool(rows)
