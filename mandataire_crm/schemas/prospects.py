from __future__ import annotations

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import ConfigDict, Field

from mandataire_crm.shared.base import BaseSchema, UpdateSchema


class Prospect(BaseSchema):
    id: str
    first_name: str
    last_name: str
    phone: str
    profession: Optional[str] = None
    recommended_by: Optional[str] = None
    is_archived: bool = False
    created_at: Optional[datetime] = None


class ProspectCreateRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    phone: str = Field(min_length=1, max_length=40)
    profession: Optional[str] = Field(default=None, max_length=120)
    recommended_by: Optional[str] = Field(default=None, max_length=120)
    is_archived: bool = False


class ProspectUpdateRequest(UpdateSchema):
    non_nullable_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"first_name", "last_name", "phone", "is_archived"}
    )

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=40)
    profession: Optional[str] = Field(default=None, max_length=120)
    recommended_by: Optional[str] = Field(default=None, max_length=120)
    is_archived: Optional[bool] = None
