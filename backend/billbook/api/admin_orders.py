from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Optional, List
from billbook.api.deps import get_db, admin_required
from billbook.models.user import User
from billbook.schemas.order import OrderResponse, UndeliveredOrderResponse
from billbook.schemas.user import MessageResponse
from billbook.services import admin as admin_service

router = APIRouter(prefix="/api/admin/orders", tags=["admin-orders"])


@router.get("/undelivered", response_model=List[UndeliveredOrderResponse])
def list_undelivered(
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    orders = admin_service.undelivered_orders(db)
    return [UndeliveredOrderResponse.model_validate(order) for order in orders]


@router.put("/{billno}/deliver", response_model=MessageResponse)
def deliver(
    billno: int,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    return admin_service.mark_delivered(db, billno)


@router.get("", response_model=List[OrderResponse])
def orders_for_user(
    user_id: Optional[int] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    """A user's orders from the last 30 days"""
    orders = admin_service.orders_for_user(db, user_id)
    return [OrderResponse.model_validate(order) for order in orders]
