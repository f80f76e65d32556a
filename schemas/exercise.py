"""Exercise collection schema."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Exercise(BaseModel):
    """Exercise collection model."""
    user_id: str = Field(..., description="Identifier of the owning user")
    description: str = Field("", description="What was done")
    duration: Optional[int] = Field(None, description="Duration in minutes, None when unparseable")
    date: datetime = Field(..., description="When the exercise happened (UTC)")


class ExerciseResponse(BaseModel):
    """Exercise as returned by the API, merged with its user."""
    id: str = Field(..., description="User identifier")
    username: str = Field(..., description="Display name")
    description: str
    duration: Optional[int]
    date: str = Field(..., description="Display date, e.g. 'Mon Jan 01 2024'")
