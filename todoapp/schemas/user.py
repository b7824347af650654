from typing import Literal

from pydantic import BaseModel

Role = Literal["user", "admin"]


class UserPublic(BaseModel):
    id: str
    email: str
    name: str
    role: Role = "user"

    class Config:
        from_attributes = True


class UserRecord(UserPublic):
    """Stored user, including the password hash. Never returned to clients."""

    password_hash: str


def to_public(user: UserRecord) -> UserPublic:
    return UserPublic(id=user.id, email=user.email, name=user.name, role=user.role)
