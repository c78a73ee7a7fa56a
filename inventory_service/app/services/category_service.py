"""Category service.

Categories of a workspace form a forest stored as a nested set: every node
owns the interval ``[lft, rgt]`` and a node's descendants are exactly the
nodes whose intervals fall strictly inside it. Intervals are numbered per
workspace, so two workspaces never interfere with each other.

Inserts open a gap of two at the insertion point, deletes close it again.
Deleting a node promotes its children to the node's parent instead of
removing the whole subtree.

Tree writes lock the owning workspace row first, so concurrent inserts and
deletes in one workspace run one after the other.
"""
import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.categories import Category
from ..models.workspaces import Workspace
from ..schemas.category_schemas import CategoryCreate, CategoryOut, CategoryUpdate

logger = logging.getLogger(__name__)


def workspace_lock_query(db: Session, workspace_id: str):
    return (
        db.query(Workspace)
        .filter(Workspace.id == workspace_id)
        .with_for_update()
    )


def _lock_workspace(db: Session, workspace_id: str) -> Optional[Workspace]:
    # SELECT ... FOR UPDATE; a no-op on SQLite, which serializes writers itself
    return workspace_lock_query(db, workspace_id).first()


def get_categories(db: Session) -> List[Category]:
    return db.query(Category).all()


def get_category_by_id(db: Session, category_id: str) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def get_categories_by_workspace(db: Session, workspace_id: str) -> List[Category]:
    return (
        db.query(Category)
        .filter(Category.workspace_id == workspace_id)
        .order_by(Category.lft)
        .all()
    )


def get_category_descendants(db: Session, category_id: str) -> Optional[List[Category]]:
    node = get_category_by_id(db, category_id)
    if node is None:
        return None

    return (
        db.query(Category)
        .filter(
            Category.workspace_id == node.workspace_id,
            Category.lft > node.lft,
            Category.rgt < node.rgt
        )
        .order_by(Category.lft)
        .all()
    )


def get_category_ancestors(db: Session, category_id: str) -> Optional[List[Category]]:
    """Path from the root down to the node's parent."""
    node = get_category_by_id(db, category_id)
    if node is None:
        return None

    return (
        db.query(Category)
        .filter(
            Category.workspace_id == node.workspace_id,
            Category.lft < node.lft,
            Category.rgt > node.rgt
        )
        .order_by(Category.lft)
        .all()
    )


def create_category(db: Session, category: CategoryCreate) -> Optional[Category]:
    """Insert a category as the last child of ``parent_id`` or as a new root.

    Returns None when the parent does not exist or lives in another workspace.
    """
    category_data = category.model_dump(exclude={"parent_id"})
    workspace_id = category.workspace_id
    _lock_workspace(db, workspace_id)

    if category.parent_id is not None:
        parent = get_category_by_id(db, category.parent_id)
        if parent is None or parent.workspace_id != workspace_id:
            return None

        insert_at = parent.rgt
        # rgt before lft keeps lft < rgt true row by row
        (
            db.query(Category)
            .filter(Category.workspace_id == workspace_id, Category.rgt >= insert_at)
            .update({Category.rgt: Category.rgt + 2}, synchronize_session=False)
        )
        (
            db.query(Category)
            .filter(Category.workspace_id == workspace_id, Category.lft > insert_at)
            .update({Category.lft: Category.lft + 2}, synchronize_session=False)
        )
    else:
        max_rgt = (
            db.query(func.max(Category.rgt))
            .filter(Category.workspace_id == workspace_id)
            .scalar()
        )
        insert_at = (max_rgt or 0) + 1

    db_category = Category(**category_data, lft=insert_at, rgt=insert_at + 1)
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    logger.info("Created category %s [%s, %s] in workspace %s",
                db_category.id, db_category.lft, db_category.rgt, workspace_id)
    return db_category


def update_category(db: Session, category_id: str, category: CategoryUpdate) -> Optional[Category]:
    db_category = get_category_by_id(db, category_id)
    if db_category is None:
        return None

    # tree position is not editable here
    for field, value in category.model_dump(exclude_unset=True).items():
        setattr(db_category, field, value)

    db.commit()
    db.refresh(db_category)
    return db_category


def delete_category(db: Session, category_id: str) -> Optional[CategoryOut]:
    db_category = get_category_by_id(db, category_id)
    if db_category is None:
        return None

    _lock_workspace(db, db_category.workspace_id)
    # bounds may have shifted while waiting for the lock
    db.refresh(db_category)

    deleted = CategoryOut.model_validate(db_category)
    workspace_id, lft, rgt = db_category.workspace_id, db_category.lft, db_category.rgt

    db.delete(db_category)
    db.flush()

    # children move up one level
    (
        db.query(Category)
        .filter(
            Category.workspace_id == workspace_id,
            Category.lft > lft,
            Category.rgt < rgt
        )
        .update(
            {Category.lft: Category.lft - 1, Category.rgt: Category.rgt - 1},
            synchronize_session=False
        )
    )
    # close the gap; lft before rgt keeps lft < rgt true row by row
    (
        db.query(Category)
        .filter(Category.workspace_id == workspace_id, Category.lft > rgt)
        .update({Category.lft: Category.lft - 2}, synchronize_session=False)
    )
    (
        db.query(Category)
        .filter(Category.workspace_id == workspace_id, Category.rgt > rgt)
        .update({Category.rgt: Category.rgt - 2}, synchronize_session=False)
    )

    db.commit()
    logger.info("Deleted category %s", category_id)
    return deleted
