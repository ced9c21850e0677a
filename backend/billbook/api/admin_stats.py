from fastapi import APIRouter, Depends
from sqlmodel import Session
from billbook.api.deps import get_db, admin_required
from billbook.models.user import User
from billbook.schemas.user import StatsResponse
from billbook.services import admin as admin_service

router = APIRouter(prefix="/api/admin/stats", tags=["admin-stats"])


@router.get("", response_model=StatsResponse)
def get_stats(
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    return StatsResponse(**admin_service.stats(db))
