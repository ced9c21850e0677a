from fastapi import APIRouter, Depends
from billbook.api.deps import get_current_user
from billbook.models.user import User
from billbook.schemas.user import ProfileResponse

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/profile", response_model=ProfileResponse)
def profile(current_user: User = Depends(get_current_user)):
    """Current user, without the password hash"""
    return ProfileResponse.model_validate(current_user)
