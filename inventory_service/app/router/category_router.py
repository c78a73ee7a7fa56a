from typing import List
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.helpers.exception_handler import INVALID_BODY_MESSAGE
from ..schemas.category_schemas import CategoryCreate, CategoryOut, CategoryUpdate
from ..services import category_service as service

router = APIRouter(
    prefix="/api/category",
    tags=["categories"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("", response_model=List[CategoryOut])
@router.get("/", response_model=List[CategoryOut], include_in_schema=False)
def read_categories(db: Session = Depends(get_db)):
    return service.get_categories(db)


@router.get("/workspace/{workspace_id}", response_model=List[CategoryOut])
def read_categories_by_workspace(workspace_id: str, db: Session = Depends(get_db)):
    categories = service.get_categories_by_workspace(db, workspace_id)
    if not categories:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return categories


@router.get("/{category_id}/descendants", response_model=List[CategoryOut])
def read_category_descendants(category_id: str, db: Session = Depends(get_db)):
    descendants = service.get_category_descendants(db, category_id)
    if descendants is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return descendants


@router.get("/{category_id}/ancestors", response_model=List[CategoryOut])
def read_category_ancestors(category_id: str, db: Session = Depends(get_db)):
    ancestors = service.get_category_ancestors(db, category_id)
    if ancestors is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return ancestors


@router.get("/{category_id}", response_model=CategoryOut)
def read_category(category_id: str, db: Session = Depends(get_db)):
    category = service.get_category_by_id(db, category_id)
    if category is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return category


@router.post("", response_model=CategoryOut)
@router.post("/", response_model=CategoryOut, include_in_schema=False)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    created = service.create_category(db, category)
    # parentId unknown or from another workspace
    if created is None:
        return JSONResponse(
            content={"message": INVALID_BODY_MESSAGE},
            status_code=status.HTTP_400_BAD_REQUEST
        )
    return created


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: str, category: CategoryUpdate, db: Session = Depends(get_db)):
    updated = service.update_category(db, category_id, category)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{category_id}", response_model=CategoryOut)
def delete_category(category_id: str, db: Session = Depends(get_db)):
    deleted = service.delete_category(db, category_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return deleted
