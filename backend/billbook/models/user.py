from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from enum import Enum

if TYPE_CHECKING:
    from .order import Order


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True)
    phone: str = Field(unique=True, index=True)
    password_hash: str

    role: UserRole = Field(default=UserRole.USER)

    # Relationships
    orders: List["Order"] = Relationship(back_populates="user")
