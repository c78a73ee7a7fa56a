from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..schemas.user_schemas import UserCreate, UserOut, UserUpdate
from ..services import user_service as service

router = APIRouter(
    prefix="/api/user",
    tags=["users"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("", response_model=List[UserOut])
@router.get("/", response_model=List[UserOut], include_in_schema=False)
def read_users(db: Session = Depends(get_db)):
    return service.get_users(db)


@router.get("/{user_id}", response_model=UserOut)
def read_user(user_id: str, db: Session = Depends(get_db)):
    user = service.get_user_by_id(db, user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.post("", response_model=UserOut)
@router.post("/", response_model=UserOut, include_in_schema=False)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    return service.create_user(db, user)


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: str, user: UserUpdate, db: Session = Depends(get_db)):
    updated = service.update_user(db, user_id, user)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{user_id}", response_model=UserOut)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    deleted = service.delete_user(db, user_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return deleted
