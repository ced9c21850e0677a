from .order import OrderItemCreate, OrderCreate, OrderItemResponse, OrderResponse, UndeliveredOrderResponse
from .user import UserSummary, UserResponse, ProfileResponse, StatsResponse, MessageResponse

__all__ = [
    "OrderItemCreate", "OrderCreate", "OrderItemResponse", "OrderResponse", "UndeliveredOrderResponse",
    "UserSummary", "UserResponse", "ProfileResponse", "StatsResponse", "MessageResponse",
]
