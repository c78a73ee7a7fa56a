from datetime import datetime
from typing import Optional
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel, PartialUpdateModel


class TypeBase(EmptyStringModel):
    name: str


class TypeCreate(TypeBase):
    pass


class TypeUpdate(PartialUpdateModel):
    non_nullable_fields = ("name",)

    name: Optional[str] = None


class TypeOut(TypeBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
