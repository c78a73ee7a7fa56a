import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.iam import Iam
from ..schemas.iam_schemas import IamCreate, IamOut, IamUpdate

logger = logging.getLogger(__name__)


def get_iam_entries(db: Session) -> List[Iam]:
    return db.query(Iam).all()


def get_iam_by_id(db: Session, iam_id: str) -> Optional[Iam]:
    return db.query(Iam).filter(Iam.id == iam_id).first()


def get_iam_entries_by_workspace(db: Session, workspace_id: str) -> List[Iam]:
    return db.query(Iam).filter(Iam.workspace_id == workspace_id).all()


def create_iam(db: Session, iam: IamCreate) -> Iam:
    db_iam = Iam(**iam.model_dump(exclude={"password"}))
    db_iam.set_password(iam.password)
    db.add(db_iam)
    db.commit()
    db.refresh(db_iam)
    logger.info("Created %s access entry %s in workspace %s",
                db_iam.role.value, db_iam.id, db_iam.workspace_id)
    return db_iam


def update_iam(db: Session, iam_id: str, iam: IamUpdate) -> Optional[Iam]:
    db_iam = get_iam_by_id(db, iam_id)
    if db_iam is None:
        return None

    update_data = iam.model_dump(exclude_unset=True)
    password = update_data.pop("password", None)
    for field, value in update_data.items():
        setattr(db_iam, field, value)
    if password:
        db_iam.set_password(password)

    db.commit()
    db.refresh(db_iam)
    return db_iam


def delete_iam(db: Session, iam_id: str) -> Optional[IamOut]:
    db_iam = get_iam_by_id(db, iam_id)
    if db_iam is None:
        return None

    deleted = IamOut.model_validate(db_iam)
    db.delete(db_iam)
    db.commit()
    logger.info("Deleted access entry %s", iam_id)
    return deleted
