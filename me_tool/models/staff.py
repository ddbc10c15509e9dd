import uuid

from sqlalchemy import Column, DateTime, Enum, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from me_tool.models.base import Base
from me_tool.models.enums import Role


def _new_staff_id() -> str:
    return str(uuid.uuid4())


class Staff(Base):
    """Staff member able to sign in. Identified by a UUID string."""
    __tablename__ = "staff"

    id = Column(String(36), primary_key=True, default=_new_staff_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    role = Column(Enum(Role), default=Role.STAFF, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    teams_created = relationship("Team", back_populates="created_by")

    def verify_password(self, password: str) -> bool:
        from me_tool.core.security import verify_password
        return verify_password(password, self.password)

    def __repr__(self) -> str:
        return f"<Staff(id={self.id}, email='{self.email}', role='{self.role}')>"
