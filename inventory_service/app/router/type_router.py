from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..schemas.type_schemas import TypeCreate, TypeOut, TypeUpdate
from ..services import type_service as service

router = APIRouter(
    prefix="/api/type",
    tags=["types"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("", response_model=List[TypeOut])
@router.get("/", response_model=List[TypeOut], include_in_schema=False)
def read_types(db: Session = Depends(get_db)):
    return service.get_types(db)


@router.get("/name/{name}", response_model=TypeOut)
def read_type_by_name(name: str, db: Session = Depends(get_db)):
    item_type = service.get_type_by_name(db, name)
    if item_type is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return item_type


@router.get("/{type_id}", response_model=TypeOut)
def read_type(type_id: str, db: Session = Depends(get_db)):
    item_type = service.get_type_by_id(db, type_id)
    if item_type is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return item_type


@router.post("", response_model=TypeOut)
@router.post("/", response_model=TypeOut, include_in_schema=False)
def create_type(item_type: TypeCreate, db: Session = Depends(get_db)):
    return service.create_type(db, item_type)


@router.put("/{type_id}", response_model=TypeOut)
def update_type(type_id: str, item_type: TypeUpdate, db: Session = Depends(get_db)):
    updated = service.update_type(db, type_id, item_type)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{type_id}", response_model=TypeOut)
def delete_type(type_id: str, db: Session = Depends(get_db)):
    deleted = service.delete_type(db, type_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return deleted
