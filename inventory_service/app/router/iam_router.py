from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..schemas.iam_schemas import IamCreate, IamOut, IamUpdate
from ..services import iam_service as service

router = APIRouter(
    prefix="/api/iam",
    tags=["iam"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("", response_model=List[IamOut])
@router.get("/", response_model=List[IamOut], include_in_schema=False)
def read_iam_entries(db: Session = Depends(get_db)):
    return service.get_iam_entries(db)


@router.get("/workspace/{workspace_id}", response_model=List[IamOut])
def read_iam_entries_by_workspace(workspace_id: str, db: Session = Depends(get_db)):
    entries = service.get_iam_entries_by_workspace(db, workspace_id)
    if not entries:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return entries


@router.get("/{iam_id}", response_model=IamOut)
def read_iam(iam_id: str, db: Session = Depends(get_db)):
    entry = service.get_iam_by_id(db, iam_id)
    if entry is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return entry


@router.post("", response_model=IamOut)
@router.post("/", response_model=IamOut, include_in_schema=False)
def create_iam(iam: IamCreate, db: Session = Depends(get_db)):
    return service.create_iam(db, iam)


@router.put("/{iam_id}", response_model=IamOut)
def update_iam(iam_id: str, iam: IamUpdate, db: Session = Depends(get_db)):
    updated = service.update_iam(db, iam_id, iam)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{iam_id}", response_model=IamOut)
def delete_iam(iam_id: str, db: Session = Depends(get_db)):
    deleted = service.delete_iam(db, iam_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return deleted
