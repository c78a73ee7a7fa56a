import uuid
from sqlalchemy import TIMESTAMP, Column, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base
from shared.helpers.password_helper import hash_password, verify_password


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), unique=True, nullable=True)
    email = Column(String(200), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    workspaces = relationship("Workspace", back_populates="owner",
                          passive_deletes="all")

    def set_password(self, password: str):
        self.password = hash_password(password)

    def verify_password(self, password: str) -> bool:
        return verify_password(password, self.password)
