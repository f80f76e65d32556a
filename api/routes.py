"""REST API routes for users, exercises and logs."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Form, HTTPException, Query
from models.database import Database, get_database
from schemas import ExerciseResponse, LogResponse, UserResponse
from services.tracker_service import TrackerService
from utils.exceptions import InvalidDateError, LogNotFoundError, UserNotFoundError
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def get_tracker_service(db: Database = Depends(get_database)) -> TrackerService:
    return TrackerService(db)


@router.post("/users", response_model=UserResponse)
async def create_user(
    username: str = Form(""),
    service: TrackerService = Depends(get_tracker_service),
):
    """Create a new user."""
    try:
        return await service.create_user(username)
    except Exception as e:
        logger.error(f"Error creating user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Could not create user")


@router.get("/users", response_model=List[UserResponse])
async def list_users(service: TrackerService = Depends(get_tracker_service)):
    """Get every user in insertion order."""
    try:
        return await service.list_users()
    except Exception as e:
        logger.error(f"Error fetching users: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Could not find users")


@router.post("/users/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    description: str = Form(""),
    duration: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    service: TrackerService = Depends(get_tracker_service),
):
    """Log an exercise for a user and append it to their log."""
    try:
        return await service.add_exercise(user_id, description, duration, date)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Error saving exercise for user {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save exercise")


@router.get("/users/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    from_date: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive"),
    to_date: Optional[str] = Query(None, alias="to", description="Latest date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    service: TrackerService = Depends(get_tracker_service),
):
    """
    Get a user's exercise log.
    Entries are filtered to [from, to] and then truncated to the first `limit`.
    """
    try:
        return await service.get_logs(user_id, from_date, to_date, limit)
    except (LogNotFoundError, UserNotFoundError) as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching logs for user {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to retrieve logs")
