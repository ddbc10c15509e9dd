import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from me_tool.core.exceptions import ValidationFailed
from me_tool.core.security import get_password_hash
from me_tool.crud.base import CRUDBase
from me_tool.models.staff import Staff
from me_tool.schemas.staff import StaffCreate

logger = logging.getLogger(__name__)


class CRUDStaff(CRUDBase[Staff, StaffCreate]):
    """Staff accounts. Passwords are hashed on the way in and never read back out."""

    def get_by_email(self, db: Session, email: str) -> Optional[Staff]:
        return (
            db.query(Staff)
            .filter(func.lower(Staff.email) == email.strip().lower())
            .first()
        )

    def create(self, db: Session, *, obj_in: StaffCreate) -> Staff:
        if self.get_by_email(db, obj_in.email):
            raise ValidationFailed.single("email", "A staff member with this email already exists")
        db_obj = Staff(
            name=obj_in.name,
            email=obj_in.email,
            role=obj_in.role,
            password=get_password_hash(obj_in.password),
        )
        return self.save(db, db_obj)

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[Staff]:
        staff = self.get_by_email(db, email)
        if not staff:
            logger.info("Login failed: no staff member with that email")
            return None
        if not staff.verify_password(password):
            logger.info("Login failed: wrong password for staff %s", staff.id)
            return None
        return staff


staff = CRUDStaff(Staff)
