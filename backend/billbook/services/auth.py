from typing import Optional
import structlog
from fastapi_jwt import JwtAccessBearer, JwtAuthorizationCredentials
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
from billbook.core.errors import Conflict, Unauthorized
from billbook.core.security import hash_password, verify_password
from billbook.db.session import transaction
from billbook.models.user import User, UserRole

logger = structlog.get_logger(__name__)


def signup(db: Session, username: str, phone: str, password: str) -> dict:
    """Register a USER account; username and phone must both be unused."""
    if db.exec(select(User).where(User.phone == phone)).first():
        raise Conflict("User already exists with this phone")

    if db.exec(select(User).where(User.username == username)).first():
        raise Conflict("Username is already taken")

    user = User(
        username=username,
        phone=phone,
        password_hash=hash_password(password),
        role=UserRole.USER,
    )
    try:
        with transaction(db):
            db.add(user)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same username/phone
        logger.info("Signup rejected by unique constraint", username=username)
        raise Conflict("User already exists with this phone or username")

    logger.info("User signed up", user_id=user.id, username=username)
    return {"message": "User created successfully"}


def login(db: Session, access_security: JwtAccessBearer, phone: str, password: str) -> dict:
    user = db.exec(select(User).where(User.phone == phone)).first()

    if not user or not verify_password(password, user.password_hash):
        logger.info("Login failed", phone=phone)
        raise Unauthorized("Invalid phone or password")

    subject = {"id": user.id}
    token = access_security.create_access_token(subject=subject)
    logger.info("User logged in", user_id=user.id)
    return {"token": token, "authority": user.role}


def authenticate(db: Session, credentials: Optional[JwtAuthorizationCredentials]) -> User:
    """Resolve verified token credentials to the user they were issued for.

    ``credentials`` is None when the token was missing, malformed, expired
    or signed with another key.
    """
    if credentials is None:
        raise Unauthorized("Not authorized, no valid token")

    user_id = credentials.subject.get("id") if isinstance(credentials.subject, dict) else None
    if user_id is None:
        raise Unauthorized("Invalid token")

    try:
        user = db.get(User, int(user_id))
    except (TypeError, ValueError):
        raise Unauthorized("Invalid token")

    if not user:
        raise Unauthorized("User not found")

    return user
