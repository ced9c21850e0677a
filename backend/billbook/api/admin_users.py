from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List
from billbook.api.deps import get_db, admin_required
from billbook.models.user import User
from billbook.schemas.user import UserResponse
from billbook.services import admin as admin_service

router = APIRouter(prefix="/api/admin/users", tags=["admin-users"])


@router.get("", response_model=List[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    """Customer accounts, alphabetical"""
    return [UserResponse.model_validate(user) for user in admin_service.list_users(db)]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    return UserResponse.model_validate(admin_service.user_detail(db, user_id))
