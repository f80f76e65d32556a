"""User collection schema."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """User collection model."""
    username: str = Field("", description="Free-form display name, not unique")


class UserResponse(BaseModel):
    """User as returned by the API."""
    id: str = Field(..., description="User identifier")
    username: str = Field(..., description="Display name")
