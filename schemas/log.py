"""Log collection schema."""

from typing import List, Optional
from pydantic import BaseModel, Field


class LogEntry(BaseModel):
    """One appended exercise inside a user's log."""
    description: str = ""
    duration: Optional[int] = None
    date: str = Field(..., description="Display date, e.g. 'Mon Jan 01 2024'")


class LogResponse(BaseModel):
    """Filtered log as returned by the API."""
    id: str = Field(..., description="User identifier")
    username: str = Field(..., description="Display name")
    count: int = Field(..., description="Number of entries in this response")
    log: List[LogEntry]
