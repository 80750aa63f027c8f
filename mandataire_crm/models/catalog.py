from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ServiceRecord(BaseModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
