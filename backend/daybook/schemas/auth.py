"""Auth Schemas — register/login/PIN payloads.

Invariants:
    - Length rules are re-checked by IdentityService; schemas only bound sizes
    - Tokens never echoed outside LoginResponse
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Register and login body."""
    username: str = Field(max_length=50)
    password: str = Field(max_length=256)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    has_pin: bool
    created_at: datetime


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse


class PinRequest(BaseModel):
    pin: str = Field(max_length=16)


class MessageResponse(BaseModel):
    message: str
