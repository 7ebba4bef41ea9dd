"""Schemas for user account endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from userhub.application.dtos import UserPage, UserSummary


class RegisterRequest(BaseModel):
    """Registration payload.

    Fields are optional here; missing or empty values are reported by the
    field validator with translated messages.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "user1",
                "email": "user1@mail.com",
                "password": "P4ssword",
            },
        },
    )


class UserUpdateRequest(BaseModel):
    username: Optional[str] = None


class UserResponse(BaseModel):
    """Public user representation."""

    id: int
    username: str
    email: str

    @classmethod
    def from_summary(cls, summary: UserSummary) -> "UserResponse":
        return cls(id=summary.id, username=summary.username, email=summary.email)


class UserPageResponse(BaseModel):
    """One page of active users."""

    content: list[UserResponse]
    page: int = Field(..., description="Zero-based page number")
    size: int = Field(..., description="Page size (1-25)")
    total_pages: int = Field(..., alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_page(cls, page: UserPage) -> "UserPageResponse":
        return cls(
            content=[UserResponse.from_summary(item) for item in page.content],
            page=page.page,
            size=page.size,
            total_pages=page.total_pages,
        )
