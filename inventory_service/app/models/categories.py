import uuid
from sqlalchemy import TIMESTAMP, CheckConstraint, Column, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Category(Base):
    """Category node; lft/rgt are nested-set bounds scoped to the workspace."""
    __tablename__ = "categories"
    __table_args__ = (
        CheckConstraint("lft < rgt", name="ck_categories_lft_rgt"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    workspace_id = Column(String(36), ForeignKey(
        "workspaces.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    lft = Column(Integer, nullable=False)
    rgt = Column(Integer, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    workspace = relationship("Workspace", back_populates="categories")
    items = relationship("Item", back_populates="category",
                          passive_deletes="all")
