from datetime import datetime
from typing import Optional
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel, PartialUpdateModel


class LocationBase(EmptyStringModel):
    workspace_id: str
    name: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class LocationCreate(LocationBase):
    pass


class LocationUpdate(PartialUpdateModel):
    non_nullable_fields = ("workspace_id", "name")

    workspace_id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class LocationOut(LocationBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
