import uuid
from sqlalchemy import TIMESTAMP, Column, Enum, ForeignKey, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base
from shared.helpers.password_helper import hash_password
from shared.utils.enums import IamRole


class Iam(Base):
    """Workspace-scoped credential, independent from the global user account."""
    __tablename__ = "iam"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    workspace_id = Column(String(36), ForeignKey("workspaces.id"), nullable=False)
    password = Column(String(255), nullable=False)
    tag = Column(String(100), nullable=True)
    role = Column(Enum(IamRole, name="iam_role"),
                  nullable=False, default=IamRole.USER)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    workspace = relationship("Workspace", back_populates="iam_entries")

    def set_password(self, password: str):
        self.password = hash_password(password)
