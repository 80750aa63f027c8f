from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ClientRecord(BaseModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    profession: Optional[str] = None
    recommended_by: Optional[str] = None
    notes: Optional[str] = None
    is_archived: bool = False
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
