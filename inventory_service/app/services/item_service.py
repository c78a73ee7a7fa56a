import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.items import Item
from ..schemas.item_schemas import ItemCreate, ItemOut, ItemUpdate

logger = logging.getLogger(__name__)


def get_items(db: Session) -> List[Item]:
    return db.query(Item).all()


def get_item_by_id(db: Session, item_id: str) -> Optional[Item]:
    return db.query(Item).filter(Item.id == item_id).first()


def get_items_by_workspace(db: Session, workspace_id: str) -> List[Item]:
    return db.query(Item).filter(Item.workspace_id == workspace_id).all()


def create_item(db: Session, item: ItemCreate) -> Item:
    db_item = Item(**item.model_dump())
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    logger.info("Created item %s in workspace %s",
                db_item.id, db_item.workspace_id)
    return db_item


def update_item(db: Session, item_id: str, item: ItemUpdate) -> Optional[Item]:
    db_item = get_item_by_id(db, item_id)
    if db_item is None:
        return None

    for field, value in item.model_dump(exclude_unset=True).items():
        setattr(db_item, field, value)

    db.commit()
    db.refresh(db_item)
    return db_item


def delete_item(db: Session, item_id: str) -> Optional[ItemOut]:
    db_item = get_item_by_id(db, item_id)
    if db_item is None:
        return None

    deleted = ItemOut.model_validate(db_item)
    db.delete(db_item)
    db.commit()
    logger.info("Deleted item %s", item_id)
    return deleted
