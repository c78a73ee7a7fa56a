from datetime import datetime
from typing import Optional
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel, PartialUpdateModel


class ItemBase(EmptyStringModel):
    workspace_id: str
    category_id: str
    type_id: str
    location_id: Optional[str] = None

    name: str
    description: Optional[str] = None
    quantity: int

    wholesale_price: Optional[float] = None
    retail_price: Optional[float] = None
    indicative_wholesale_price: Optional[float] = None
    indicative_retail_price: Optional[float] = None

    width: Optional[float] = None
    height: Optional[float] = None
    depth: Optional[float] = None
    weight: Optional[float] = None

    for_sale: bool
    barcode: Optional[str] = None
    serial_number: Optional[str] = None


class ItemCreate(ItemBase):
    pass


class ItemUpdate(PartialUpdateModel):
    non_nullable_fields = (
        "workspace_id", "category_id", "type_id", "name", "quantity", "for_sale")

    workspace_id: Optional[str] = None
    category_id: Optional[str] = None
    type_id: Optional[str] = None
    location_id: Optional[str] = None

    name: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None

    wholesale_price: Optional[float] = None
    retail_price: Optional[float] = None
    indicative_wholesale_price: Optional[float] = None
    indicative_retail_price: Optional[float] = None

    width: Optional[float] = None
    height: Optional[float] = None
    depth: Optional[float] = None
    weight: Optional[float] = None

    for_sale: Optional[bool] = None
    barcode: Optional[str] = None
    serial_number: Optional[str] = None


class ItemOut(ItemBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
