import uuid
from sqlalchemy import TIMESTAMP, Column, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Type(Base):
    __tablename__ = "types"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    items = relationship("Item", back_populates="type",
                          passive_deletes="all")
