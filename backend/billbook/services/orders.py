from datetime import date
from typing import Any, List, Optional
import structlog
from pydantic import ValidationError
from sqlmodel import Session, select
from billbook.core.dates import day_bounds
from billbook.core.errors import BadRequest
from billbook.db.session import transaction
from billbook.models.order import Order, OrderItem
from billbook.schemas.order import OrderItemCreate

logger = structlog.get_logger(__name__)

ITEMS_REQUIRED = 'Request must include a non-empty "items" array'
ITEM_FIELDS_REQUIRED = "Each item must include category, color, and a positive integer quantity."


def parse_item(raw: Any) -> OrderItemCreate:
    if not isinstance(raw, dict):
        raise BadRequest(ITEM_FIELDS_REQUIRED)
    try:
        return OrderItemCreate.model_validate(raw)
    except ValidationError:
        raise BadRequest(ITEM_FIELDS_REQUIRED)


def create_order(db: Session, user_id: int, items: Any) -> Order:
    """Create an order and all of its items as one unit.

    The order row is written first so its billno can be stamped on the
    items; a bad item anywhere in the list rolls the order back with it.
    """
    if not items or not isinstance(items, list):
        raise BadRequest(ITEMS_REQUIRED)

    try:
        with transaction(db):
            order = Order(status=False, user_id=user_id)
            db.add(order)
            db.flush()

            for raw in items:
                item_data = parse_item(raw)
                db.add(OrderItem(order_billno=order.billno, **item_data.model_dump()))
    except BadRequest:
        logger.info("Order rejected, rolled back", user_id=user_id, item_count=len(items))
        raise

    db.refresh(order)
    logger.info("Order created", billno=order.billno, user_id=user_id, item_count=len(items))
    return order


def select_orders(user_id: int, start: Optional[date] = None, end: Optional[date] = None):
    """Newest-first query for one user's orders, bounded by whole days."""
    start_at, end_at = day_bounds(start, end)

    stmt = select(Order).where(Order.user_id == user_id)
    if start_at:
        stmt = stmt.where(Order.created_at >= start_at)
    if end_at:
        stmt = stmt.where(Order.created_at <= end_at)

    return stmt.order_by(Order.created_at.desc(), Order.billno.desc())


def list_orders(
    db: Session,
    user_id: int,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[Order]:
    return list(db.exec(select_orders(user_id, start, end)).all())
