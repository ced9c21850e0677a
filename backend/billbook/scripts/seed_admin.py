"""
Seed script: create the admin account from ENV if it does not exist.
Run: python -m billbook.scripts.seed_admin
"""
from typing import Optional
import structlog
from sqlalchemy.engine import Engine
from sqlmodel import Session, select
from billbook.core.config import Settings
from billbook.core.logging import configure_logging
from billbook.core.security import hash_password
from billbook.db.session import create_db_engine, create_tables, transaction
from billbook.models.user import User, UserRole

logger = structlog.get_logger(__name__)


def seed_admin(engine: Engine, settings: Settings) -> Optional[User]:
    """Create the admin if no user holds its username or phone yet"""
    admin_username = settings.ADMIN_USERNAME
    admin_phone = settings.ADMIN_PHONE
    admin_password = settings.ADMIN_PASSWORD

    if not admin_password or not admin_username or not admin_phone:
        logger.warning("ADMIN_USERNAME, ADMIN_PHONE or ADMIN_PASSWORD not set, skipping admin seed")
        return None

    with Session(engine) as session:
        stmt = select(User).where(
            (User.username == admin_username) | (User.phone == admin_phone)
        )
        existing = session.exec(stmt).first()

        if existing:
            logger.info("Admin already exists", username=existing.username)
            return None

        admin = User(
            username=admin_username,
            phone=admin_phone,
            password_hash=hash_password(admin_password),
            role=UserRole.ADMIN
        )
        with transaction(session):
            session.add(admin)
        session.refresh(admin)
        logger.info("Admin created", username=admin_username)
        return admin


def main():
    settings = Settings()
    configure_logging(settings)
    engine = create_db_engine(settings.DATABASE_URL)
    logger.info("Creating tables")
    create_tables(engine)
    seed_admin(engine, settings)


if __name__ == "__main__":
    main()
