import uuid
from sqlalchemy import TIMESTAMP, Column, ForeignKey, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Workspace(Base):
    __tablename__ = "workspaces"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="workspaces")
    categories = relationship("Category", back_populates="workspace",
                          passive_deletes="all")
    locations = relationship("Location", back_populates="workspace",
                          passive_deletes="all")
    items = relationship("Item", back_populates="workspace",
                          passive_deletes="all")
    iam_entries = relationship("Iam", back_populates="workspace",
                          passive_deletes="all")
