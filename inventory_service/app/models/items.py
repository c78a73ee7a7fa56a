import uuid
from sqlalchemy import TIMESTAMP, Boolean, Column, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Item(Base):
    __tablename__ = "items"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    workspace_id = Column(String(36), ForeignKey(
        "workspaces.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False)
    type_id = Column(String(36), ForeignKey("types.id"), nullable=False)
    location_id = Column(String(36), ForeignKey("locations.id"), nullable=True)

    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=False)

    # prices
    wholesale_price = Column(Float, nullable=True)
    retail_price = Column(Float, nullable=True)
    indicative_wholesale_price = Column(Float, nullable=True)
    indicative_retail_price = Column(Float, nullable=True)

    # dimensions
    width = Column(Float, nullable=True)
    height = Column(Float, nullable=True)
    depth = Column(Float, nullable=True)
    weight = Column(Float, nullable=True)

    for_sale = Column(Boolean, nullable=False)
    barcode = Column(String(128), nullable=True)
    serial_number = Column(String(128), nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    workspace = relationship("Workspace", back_populates="items")
    category = relationship("Category", back_populates="items")
    type = relationship("Type", back_populates="items")
    location = relationship("Location", back_populates="items")
