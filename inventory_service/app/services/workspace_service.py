import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.workspaces import Workspace
from ..schemas.workspace_schemas import WorkspaceCreate, WorkspaceOut, WorkspaceUpdate

logger = logging.getLogger(__name__)


def get_workspaces(db: Session) -> List[Workspace]:
    return db.query(Workspace).all()


def get_workspace_by_id(db: Session, workspace_id: str) -> Optional[Workspace]:
    return db.query(Workspace).filter(Workspace.id == workspace_id).first()


def get_workspaces_by_owner(db: Session, owner_id: str) -> List[Workspace]:
    return db.query(Workspace).filter(Workspace.owner_id == owner_id).all()


def create_workspace(db: Session, workspace: WorkspaceCreate) -> Workspace:
    db_workspace = Workspace(**workspace.model_dump())
    db.add(db_workspace)
    db.commit()
    db.refresh(db_workspace)
    logger.info("Created workspace %s for user %s",
                db_workspace.id, db_workspace.owner_id)
    return db_workspace


def update_workspace(db: Session, workspace_id: str, workspace: WorkspaceUpdate) -> Optional[Workspace]:
    db_workspace = get_workspace_by_id(db, workspace_id)
    if db_workspace is None:
        return None

    for field, value in workspace.model_dump(exclude_unset=True).items():
        setattr(db_workspace, field, value)

    db.commit()
    db.refresh(db_workspace)
    return db_workspace


def delete_workspace(db: Session, workspace_id: str) -> Optional[WorkspaceOut]:
    db_workspace = get_workspace_by_id(db, workspace_id)
    if db_workspace is None:
        return None

    deleted = WorkspaceOut.model_validate(db_workspace)
    db.delete(db_workspace)
    db.commit()
    logger.info("Deleted workspace %s", workspace_id)
    return deleted
