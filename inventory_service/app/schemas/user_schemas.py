from datetime import datetime
from typing import Optional
from pydantic import EmailStr
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel, PartialUpdateModel


class UserBase(EmptyStringModel):
    name: Optional[str] = None
    email: EmailStr


class UserCreate(UserBase):
    password: str


class UserUpdate(PartialUpdateModel):
    non_nullable_fields = ("email",)

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class UserOut(UserBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
