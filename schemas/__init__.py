"""Collection schemas organized by collection type."""

from schemas.user import User, UserResponse
from schemas.exercise import Exercise, ExerciseResponse
from schemas.log import LogEntry, LogResponse

__all__ = [
    "User",
    "UserResponse",
    "Exercise",
    "ExerciseResponse",
    "LogEntry",
    "LogResponse",
]
