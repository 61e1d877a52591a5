from pydantic import BaseModel, EmailStr, Field, validator
from typing import Literal
from datetime import datetime

Role = Literal["user", "admin"]


def normalize_email(value):
    # Addresses are stored lowercase so lookups and the unique index ignore case
    if isinstance(value, str):
        return value.strip().lower()
    return value

class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr

    @validator("email", pre=True)
    def lowercase_email(cls, v):
        return normalize_email(v)

class UserCreate(UserBase):
    password: str = Field(..., min_length=6, max_length=72)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @validator("email", pre=True)
    def lowercase_email(cls, v):
        return normalize_email(v)

class User(BaseModel):
    id: int
    name: str
    email: EmailStr
    role: Role

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    message: str
    user: User
    token: str

# Decoded bearer token payload
class TokenClaims(BaseModel):
    id: int
    name: str
    email: str
    role: Role
    iat: datetime
    exp: datetime
