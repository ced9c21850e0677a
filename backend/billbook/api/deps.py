from typing import Optional
from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi_jwt import JwtAccessBearer, JwtAuthorizationCredentials
from sqlmodel import Session
from billbook.core.errors import Forbidden
from billbook.models.user import User, UserRole
from billbook.services.auth import authenticate

bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request):
    with Session(request.app.state.engine) as session:
        yield session


def get_access_security(request: Request) -> JwtAccessBearer:
    return request.app.state.access_security


async def get_credentials(
    bearer: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    access_security: JwtAccessBearer = Depends(get_access_security)
) -> Optional[JwtAuthorizationCredentials]:
    # Yields None for a missing, malformed or expired token
    return await access_security(bearer)


def get_current_user(
    credentials: Optional[JwtAuthorizationCredentials] = Depends(get_credentials),
    db: Session = Depends(get_db)
) -> User:
    return authenticate(db, credentials)


def require_role(role: UserRole):
    async def checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role:
            raise Forbidden("Admin access required" if role == UserRole.ADMIN else "Access denied")
        return current_user

    return checker


admin_required = require_role(UserRole.ADMIN)
