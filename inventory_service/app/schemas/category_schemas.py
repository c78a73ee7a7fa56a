from datetime import datetime
from typing import Optional
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel, PartialUpdateModel


class CategoryBase(EmptyStringModel):
    workspace_id: str
    name: str
    description: Optional[str] = None


class CategoryCreate(CategoryBase):
    # placed as the last child of this category, or as a new root when absent
    parent_id: Optional[str] = None


class CategoryUpdate(PartialUpdateModel):
    non_nullable_fields = ("name",)

    name: Optional[str] = None
    description: Optional[str] = None


class CategoryOut(CategoryBase):
    id: str
    lft: int
    rgt: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
