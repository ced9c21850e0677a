from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import Optional, List
from datetime import date
from billbook.api.deps import get_db, get_current_user
from billbook.models.user import User
from billbook.schemas.order import OrderCreate, OrderResponse
from billbook.services.orders import create_order, list_orders

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=List[OrderResponse])
def get_my_orders(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """My orders, newest first, optionally limited to a range of days"""
    orders = list_orders(db, current_user.id, start_date, end_date)
    return [OrderResponse.model_validate(order) for order in orders]


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_new_order(
    data: OrderCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    order = create_order(db, current_user.id, data.items)
    return OrderResponse.model_validate(order)
