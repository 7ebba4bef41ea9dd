"""Authentication schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "user1@mail.com", "password": "P4ssword"},
        },
    )


class LoginResponse(BaseModel):
    """Issued bearer token with the identity it belongs to."""

    id: int
    username: str
    token: str
