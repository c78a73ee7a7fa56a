from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..schemas.item_schemas import ItemCreate, ItemOut, ItemUpdate
from ..services import item_service as service

router = APIRouter(
    prefix="/api/item",
    tags=["items"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("", response_model=List[ItemOut])
@router.get("/", response_model=List[ItemOut], include_in_schema=False)
def read_items(db: Session = Depends(get_db)):
    return service.get_items(db)


@router.get("/workspace/{workspace_id}", response_model=List[ItemOut])
def read_items_by_workspace(workspace_id: str, db: Session = Depends(get_db)):
    items = service.get_items_by_workspace(db, workspace_id)
    if not items:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return items


@router.get("/{item_id}", response_model=ItemOut)
def read_item(item_id: str, db: Session = Depends(get_db)):
    item = service.get_item_by_id(db, item_id)
    if item is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return item


@router.post("", response_model=ItemOut)
@router.post("/", response_model=ItemOut, include_in_schema=False)
def create_item(item: ItemCreate, db: Session = Depends(get_db)):
    return service.create_item(db, item)


@router.put("/{item_id}", response_model=ItemOut)
def update_item(item_id: str, item: ItemUpdate, db: Session = Depends(get_db)):
    updated = service.update_item(db, item_id, item)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{item_id}", response_model=ItemOut)
def delete_item(item_id: str, db: Session = Depends(get_db)):
    deleted = service.delete_item(db, item_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return deleted
