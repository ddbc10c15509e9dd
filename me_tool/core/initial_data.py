"""
Seeds the first administrator so a fresh database can be signed into.
"""

import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from me_tool.core.config import Settings, get_settings
from me_tool.core.security import get_password_hash
from me_tool.crud.staff import staff as staff_crud
from me_tool.models.enums import Role
from me_tool.models.staff import Staff

logger = logging.getLogger(__name__)


def seed_initial_admin(session_factory: sessionmaker, settings: Settings) -> Optional[Staff]:
    """Creates the configured ADMIN account unless it already exists."""
    email = (settings.INITIAL_ADMIN_EMAIL or "").strip()
    password = settings.INITIAL_ADMIN_PASSWORD or ""
    if not email or not password:
        return None

    db = session_factory()
    try:
        existing = staff_crud.get_by_email(db, email)
        if existing:
            return None
        admin = Staff(
            name=settings.INITIAL_ADMIN_NAME,
            email=email,
            role=Role.ADMIN,
            password=get_password_hash(password),
        )
        admin = staff_crud.save(db, admin)
        logger.info("Created initial admin %s", admin.email)
        return admin
    finally:
        db.close()


def main() -> None:
    from me_tool.core.log import configure_logging
    from me_tool.database import build_engine, build_session_factory, init_db

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings.DATABASE_URL)
    init_db(engine)
    if seed_initial_admin(build_session_factory(engine), settings) is None:
        logger.info("No admin created: INITIAL_ADMIN_EMAIL/INITIAL_ADMIN_PASSWORD unset or already present")


if __name__ == "__main__":
    main()
