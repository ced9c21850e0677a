from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, List
from datetime import datetime
from .user import UserSummary


class OrderItemCreate(BaseModel):
    category: str = Field(min_length=1)
    color: str = Field(min_length=1)
    # Upper bound is the INTEGER column range
    quantity: int = Field(gt=0, le=2_147_483_647)

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_not_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("quantity must be an integer")
        return value


class OrderCreate(BaseModel):
    # Checked item by item inside the order transaction
    items: Any = None


class OrderItemResponse(BaseModel):
    id: int
    category: str
    color: str
    quantity: int
    order_billno: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class OrderResponse(BaseModel):
    billno: int
    created_at: datetime
    status: bool
    user_id: int
    items: List[OrderItemResponse] = []

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class UndeliveredOrderResponse(OrderResponse):
    user: UserSummary
