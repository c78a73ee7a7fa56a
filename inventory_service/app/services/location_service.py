import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.locations import Location
from ..schemas.location_schemas import LocationCreate, LocationOut, LocationUpdate

logger = logging.getLogger(__name__)


def get_locations(db: Session) -> List[Location]:
    return db.query(Location).all()


def get_location_by_id(db: Session, location_id: str) -> Optional[Location]:
    return db.query(Location).filter(Location.id == location_id).first()


def get_location_by_name(db: Session, name: str) -> Optional[Location]:
    return db.query(Location).filter(Location.name == name).first()


def get_locations_by_workspace(db: Session, workspace_id: str) -> List[Location]:
    return db.query(Location).filter(Location.workspace_id == workspace_id).all()


def create_location(db: Session, location: LocationCreate) -> Location:
    db_location = Location(**location.model_dump())
    db.add(db_location)
    db.commit()
    db.refresh(db_location)
    logger.info("Created location %s in workspace %s",
                db_location.id, db_location.workspace_id)
    return db_location


def update_location(db: Session, location_id: str, location: LocationUpdate) -> Optional[Location]:
    db_location = get_location_by_id(db, location_id)
    if db_location is None:
        return None

    for field, value in location.model_dump(exclude_unset=True).items():
        setattr(db_location, field, value)

    db.commit()
    db.refresh(db_location)
    return db_location


def delete_location(db: Session, location_id: str) -> Optional[LocationOut]:
    db_location = get_location_by_id(db, location_id)
    if db_location is None:
        return None

    deleted = LocationOut.model_validate(db_location)
    db.delete(db_location)
    db.commit()
    logger.info("Deleted location %s", location_id)
    return deleted
