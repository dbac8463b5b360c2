"""
Pydantic schemas for token authentication and registration.
"""

from pydantic import BaseModel, EmailStr, Field, StrictStr
from pydantic.alias_generators import to_camel


class UserRegisterRequest(BaseModel):
    """Request schema for user registration. New users are never admins."""
    username: StrictStr = Field(..., min_length=1, max_length=25)
    password: StrictStr = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: StrictStr = Field(..., min_length=1, max_length=25)
    last_name: StrictStr = Field(..., min_length=1, max_length=25)
    email: EmailStr

    class Config:
        alias_generator = to_camel
        extra = "forbid"


class UserLoginRequest(BaseModel):
    """Request schema for requesting a token."""
    username: StrictStr = Field(..., min_length=1)
    password: StrictStr = Field(..., min_length=1)

    class Config:
        extra = "forbid"


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str
