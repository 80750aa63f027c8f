from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from mandataire_crm.core.supabase import SupabaseClient, search_filter
from mandataire_crm.models.prospects import ProspectRecord


PROSPECT_COLUMNS = "id,first_name,last_name,phone,profession,recommended_by,is_archived,created_at"
PROSPECT_SEARCH_COLUMNS = ["first_name", "last_name", "phone", "profession", "recommended_by"]


class ProspectsRepository:
    table = "prospects"

    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_prospects(
        self, q: Optional[str] = None, archived: Optional[bool] = None
    ) -> List[ProspectRecord]:
        filters: List[Tuple[str, str]] = []
        if archived is not None:
            filters.append(("is_archived", f"eq.{str(archived).lower()}"))
        if q and q.strip():
            filters.append(search_filter(PROSPECT_SEARCH_COLUMNS, q))
        rows = self.client.select(
            table=self.table,
            select=PROSPECT_COLUMNS,
            filters=filters,
            order="created_at.desc",
        )
        return [ProspectRecord.model_validate(row) for row in rows]

    def get_prospect(self, prospect_id: str) -> Optional[ProspectRecord]:
        rows = self.client.select(
            table=self.table,
            select=PROSPECT_COLUMNS,
            filters=[("id", f"eq.{prospect_id}")],
            limit=1,
        )
        if not rows:
            return None
        return ProspectRecord.model_validate(rows[0])

    def create_prospect(self, payload: Dict[str, Any]) -> ProspectRecord:
        rows = self.client.insert(table=self.table, payload=payload)
        return ProspectRecord.model_validate(rows[0])

    def update_prospect(self, prospect_id: str, payload: Dict[str, Any]) -> Optional[ProspectRecord]:
        rows = self.client.update(
            table=self.table, payload=payload, filters=[("id", f"eq.{prospect_id}")]
        )
        if not rows:
            return None
        return ProspectRecord.model_validate(rows[0])

    def delete_prospect(self, prospect_id: str) -> bool:
        rows = self.client.delete(table=self.table, filters=[("id", f"eq.{prospect_id}")])
        return bool(rows)
