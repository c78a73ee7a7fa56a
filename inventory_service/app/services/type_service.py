import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.item_types import Type
from ..schemas.type_schemas import TypeCreate, TypeOut, TypeUpdate

logger = logging.getLogger(__name__)


def get_types(db: Session) -> List[Type]:
    return db.query(Type).all()


def get_type_by_id(db: Session, type_id: str) -> Optional[Type]:
    return db.query(Type).filter(Type.id == type_id).first()


def get_type_by_name(db: Session, name: str) -> Optional[Type]:
    return db.query(Type).filter(Type.name == name).first()


def create_type(db: Session, item_type: TypeCreate) -> Type:
    db_type = Type(**item_type.model_dump())
    db.add(db_type)
    db.commit()
    db.refresh(db_type)
    logger.info("Created type %s", db_type.id)
    return db_type


def update_type(db: Session, type_id: str, item_type: TypeUpdate) -> Optional[Type]:
    db_type = get_type_by_id(db, type_id)
    if db_type is None:
        return None

    for field, value in item_type.model_dump(exclude_unset=True).items():
        setattr(db_type, field, value)

    db.commit()
    db.refresh(db_type)
    return db_type


def delete_type(db: Session, type_id: str) -> Optional[TypeOut]:
    db_type = get_type_by_id(db, type_id)
    if db_type is None:
        return None

    deleted = TypeOut.model_validate(db_type)
    db.delete(db_type)
    db.commit()
    logger.info("Deleted type %s", type_id)
    return deleted
