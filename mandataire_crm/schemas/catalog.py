from __future__ import annotations

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import ConfigDict, Field

from mandataire_crm.shared.base import BaseSchema, UpdateSchema


class Service(BaseSchema):
    id: str
    name: str
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None


class ServiceCreateRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    is_active: bool = True


class ServiceUpdateRequest(UpdateSchema):
    non_nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"name", "is_active"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    is_active: Optional[bool] = None


class ServiceListFilters(BaseSchema):
    active: Optional[bool] = None
