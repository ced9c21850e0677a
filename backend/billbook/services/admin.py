from datetime import datetime
from typing import List, Optional
import structlog
from sqlmodel import Session, select, func
from billbook.core.dates import recent_cutoff, recent_days
from billbook.core.errors import BadRequest, NotFound
from billbook.db.session import transaction
from billbook.models.order import Order
from billbook.models.user import User, UserRole
from billbook.services.orders import select_orders

logger = structlog.get_logger(__name__)


def stats(db: Session, now: Optional[datetime] = None) -> dict:
    """Dashboard counters: customer accounts and orders of the last 30 days."""
    user_count = db.exec(
        select(func.count(User.id)).where(User.role == UserRole.USER)
    ).one() or 0

    recent_order_count = db.exec(
        select(func.count(Order.billno)).where(Order.created_at >= recent_cutoff(now))
    ).one() or 0

    return {"user_count": user_count, "recent_order_count": recent_order_count}


def undelivered_orders(db: Session) -> List[Order]:
    stmt = (
        select(Order)
        .where(Order.status == False)  # noqa: E712
        .order_by(Order.created_at.desc(), Order.billno.desc())
    )
    return list(db.exec(stmt).all())


def mark_delivered(db: Session, billno: int) -> dict:
    order = db.get(Order, billno)
    if not order:
        raise NotFound("Order not found")

    if not order.status:
        with transaction(db):
            order.status = True
            db.add(order)
        logger.info("Order marked delivered", billno=billno)

    return {"message": f"Order {billno} marked as delivered"}


def list_users(db: Session) -> List[User]:
    stmt = select(User).where(User.role == UserRole.USER).order_by(User.username)
    return list(db.exec(stmt).all())


def user_detail(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return user


def orders_for_user(db: Session, user_id: Optional[int], now: Optional[datetime] = None) -> List[Order]:
    """Orders a user placed over the last 30 calendar days, newest first."""
    if user_id is None:
        raise BadRequest("userId query parameter is required")

    start, end = recent_days(now)
    return list(db.exec(select_orders(user_id, start, end)).all())
