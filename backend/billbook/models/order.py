from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from billbook.core.dates import utcnow
from billbook.db.types import UTCDateTime

if TYPE_CHECKING:
    from .user import User


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    billno: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime(), index=True)

    # False until an admin marks the order delivered; never reset
    status: bool = Field(default=False, index=True)

    user_id: int = Field(foreign_key="users.id", index=True)

    # Relationships
    user: Optional["User"] = Relationship(back_populates="orders")
    items: List["OrderItem"] = Relationship(
        back_populates="order",
        sa_relationship_kwargs={"order_by": "OrderItem.id"},
    )


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_billno: int = Field(foreign_key="orders.billno", index=True)

    category: str
    color: str
    quantity: int

    # Relationships
    order: Optional["Order"] = Relationship(back_populates="items")
