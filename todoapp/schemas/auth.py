
from pydantic import BaseModel, EmailStr, Field, field_validator
from todoapp.schemas.user import UserPublic

class RegisterIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=256)
    name: str = Field(min_length=1, max_length=120)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

class LoginIn(BaseModel):
    email: EmailStr
    password: str

class ProfileUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=120)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

class AuthOut(BaseModel):
    token: str
    user: UserPublic
