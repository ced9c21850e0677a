from .user import User, UserRole
from .order import Order, OrderItem

__all__ = [
    "User", "UserRole",
    "Order", "OrderItem",
]
