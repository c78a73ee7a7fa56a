from datetime import datetime
from typing import Optional
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel, PartialUpdateModel


class WorkspaceBase(EmptyStringModel):
    name: str
    owner_id: str


class WorkspaceCreate(WorkspaceBase):
    pass


class WorkspaceUpdate(PartialUpdateModel):
    non_nullable_fields = ("name", "owner_id")

    name: Optional[str] = None
    owner_id: Optional[str] = None


class WorkspaceOut(WorkspaceBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
