import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.users import User
from ..schemas.user_schemas import UserCreate, UserOut, UserUpdate

logger = logging.getLogger(__name__)


def get_users(db: Session) -> List[User]:
    return db.query(User).all()


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, user: UserCreate) -> User:
    user_data = user.model_dump(exclude={"password"})
    db_user = User(**user_data)
    db_user.set_password(user.password)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Created user %s", db_user.id)
    return db_user


def update_user(db: Session, user_id: str, user: UserUpdate) -> Optional[User]:
    db_user = get_user_by_id(db, user_id)
    if db_user is None:
        return None

    update_data = user.model_dump(exclude_unset=True)
    password = update_data.pop("password", None)
    for field, value in update_data.items():
        setattr(db_user, field, value)
    if password:
        db_user.set_password(password)

    db.commit()
    db.refresh(db_user)
    return db_user


def delete_user(db: Session, user_id: str) -> Optional[UserOut]:
    db_user = get_user_by_id(db, user_id)
    if db_user is None:
        return None

    deleted = UserOut.model_validate(db_user)
    db.delete(db_user)
    db.commit()
    logger.info("Deleted user %s", user_id)
    return deleted
