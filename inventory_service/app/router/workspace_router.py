from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..schemas.workspace_schemas import WorkspaceCreate, WorkspaceOut, WorkspaceUpdate
from ..services import workspace_service as service

router = APIRouter(
    prefix="/api/workspace",
    tags=["workspaces"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("", response_model=List[WorkspaceOut])
@router.get("/", response_model=List[WorkspaceOut], include_in_schema=False)
def read_workspaces(db: Session = Depends(get_db)):
    return service.get_workspaces(db)


@router.get("/user/{user_id}", response_model=List[WorkspaceOut])
def read_workspaces_by_owner(user_id: str, db: Session = Depends(get_db)):
    workspaces = service.get_workspaces_by_owner(db, user_id)
    if not workspaces:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return workspaces


@router.get("/{workspace_id}", response_model=WorkspaceOut)
def read_workspace(workspace_id: str, db: Session = Depends(get_db)):
    workspace = service.get_workspace_by_id(db, workspace_id)
    if workspace is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return workspace


@router.post("", response_model=WorkspaceOut)
@router.post("/", response_model=WorkspaceOut, include_in_schema=False)
def create_workspace(workspace: WorkspaceCreate, db: Session = Depends(get_db)):
    return service.create_workspace(db, workspace)


@router.put("/{workspace_id}", response_model=WorkspaceOut)
def update_workspace(workspace_id: str, workspace: WorkspaceUpdate, db: Session = Depends(get_db)):
    updated = service.update_workspace(db, workspace_id, workspace)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{workspace_id}", response_model=WorkspaceOut)
def delete_workspace(workspace_id: str, db: Session = Depends(get_db)):
    deleted = service.delete_workspace(db, workspace_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return deleted
