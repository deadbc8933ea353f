"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field

from .user import UserRead


class Token(BaseModel):
    access_token: str
    token_type: str
    role: str


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)


class RegisterResponse(BaseModel):
    message: str
    user: UserRead
