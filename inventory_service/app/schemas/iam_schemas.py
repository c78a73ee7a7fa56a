from datetime import datetime
from typing import Optional
from shared.utils.enums import IamRole
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel, PartialUpdateModel


class IamBase(EmptyStringModel):
    workspace_id: str
    tag: Optional[str] = None
    role: IamRole = IamRole.USER


class IamCreate(IamBase):
    password: str


class IamUpdate(PartialUpdateModel):
    non_nullable_fields = ("workspace_id", "role")

    workspace_id: Optional[str] = None
    tag: Optional[str] = None
    role: Optional[IamRole] = None
    password: Optional[str] = None


# password hash never leaves the service
class IamOut(IamBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
