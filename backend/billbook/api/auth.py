from fastapi import APIRouter, Depends, status
from fastapi_jwt import JwtAccessBearer
from sqlmodel import Session
from pydantic import BaseModel, Field
from billbook.api.deps import get_db, get_access_security
from billbook.models.user import UserRole
from billbook.schemas.user import MessageResponse
from billbook.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


# === Schemas ===

class SignupRequest(BaseModel):
    username: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    phone: str
    password: str


class LoginResponse(BaseModel):
    token: str
    authority: UserRole


# === Routes ===

@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    return auth_service.signup(db, data.username, data.phone, data.password)


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    access_security: JwtAccessBearer = Depends(get_access_security)
):
    return auth_service.login(db, access_security, data.phone, data.password)
