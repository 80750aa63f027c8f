from __future__ import annotations

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, model_validator
from pydantic.config import ConfigDict


def to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class BaseSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenSchema(BaseSchema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class UpdateSchema(BaseSchema):
    """Partial update body: omitted fields are left untouched."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    non_nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self) -> "UpdateSchema":
        for field_name in self.model_fields_set & self.non_nullable_fields:
            if getattr(self, field_name) is None:
                raise ValueError(f"{to_camel(field_name)} cannot be null")
        return self

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)
