from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ProspectRecord(BaseModel):
    id: str
    first_name: str
    last_name: str
    phone: str
    profession: Optional[str] = None
    recommended_by: Optional[str] = None
    is_archived: bool = False
    created_at: Optional[datetime] = None
