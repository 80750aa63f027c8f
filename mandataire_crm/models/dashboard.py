from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict


DashboardView = Literal["monthly", "yearly"]


class ReportingPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    view: DashboardView
    year: int
    month: Optional[int] = None
    start: datetime
    end: datetime
    bucket_labels: List[str]
