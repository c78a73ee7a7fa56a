from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..schemas.location_schemas import LocationCreate, LocationOut, LocationUpdate
from ..services import location_service as service

router = APIRouter(
    prefix="/api/location",
    tags=["locations"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("", response_model=List[LocationOut])
@router.get("/", response_model=List[LocationOut], include_in_schema=False)
def read_locations(db: Session = Depends(get_db)):
    return service.get_locations(db)


# Static prefixes stay above the parameterized /{location_id} routes

@router.get("/workspace/{workspace_id}", response_model=List[LocationOut])
def read_locations_by_workspace(workspace_id: str, db: Session = Depends(get_db)):
    locations = service.get_locations_by_workspace(db, workspace_id)
    # an empty workspace answers 404, same as an unknown one
    if not locations:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return locations


@router.get("/name/{name}", response_model=LocationOut)
def read_location_by_name(name: str, db: Session = Depends(get_db)):
    location = service.get_location_by_name(db, name)
    if location is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return location


@router.get("/{location_id}", response_model=LocationOut)
def read_location(location_id: str, db: Session = Depends(get_db)):
    location = service.get_location_by_id(db, location_id)
    if location is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return location


@router.post("", response_model=LocationOut)
@router.post("/", response_model=LocationOut, include_in_schema=False)
def create_location(location: LocationCreate, db: Session = Depends(get_db)):
    return service.create_location(db, location)


@router.put("/{location_id}", response_model=LocationOut)
def update_location(location_id: str, location: LocationUpdate, db: Session = Depends(get_db)):
    updated = service.update_location(db, location_id, location)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{location_id}", response_model=LocationOut)
def delete_location(location_id: str, db: Session = Depends(get_db)):
    deleted = service.delete_location(db, location_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return deleted
