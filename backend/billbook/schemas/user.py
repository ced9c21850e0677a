from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from billbook.models.user import UserRole


class UserSummary(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    id: int
    username: str
    phone: str

    class Config:
        from_attributes = True


class ProfileResponse(UserResponse):
    role: UserRole


class StatsResponse(BaseModel):
    user_count: int
    recent_order_count: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MessageResponse(BaseModel):
    message: str
