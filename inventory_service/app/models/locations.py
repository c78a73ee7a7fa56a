import uuid
from sqlalchemy import TIMESTAMP, Column, Float, ForeignKey, String, Text, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    workspace_id = Column(String(36), ForeignKey(
        "workspaces.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    address = Column(Text, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    workspace = relationship("Workspace", back_populates="locations")
    items = relationship("Item", back_populates="location",
                          passive_deletes="all")
