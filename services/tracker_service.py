"""Exercise tracking service backed by MongoDB."""

from datetime import datetime, timezone
from typing import List, Optional
from bson import ObjectId
from models.database import Database
from schemas import Exercise, ExerciseResponse, LogEntry, LogResponse, User, UserResponse
from utils.exceptions import CorruptLogError, InvalidDateError, LogNotFoundError, UserNotFoundError
from utils.helpers import EPOCH, parse_date, parse_int, to_date_string, utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)


def _object_id(value: str) -> Optional[ObjectId]:
    """Convert a path id to an ObjectId, None if it can't be one."""
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def user_serializer(user: dict) -> UserResponse:
    """Serialize MongoDB user document."""
    return UserResponse(id=str(user["_id"]), username=user.get("username") or "")


class TrackerService:
    """Users, exercises and per-user logs over one database handle."""

    def __init__(self, db: Database):
        self.db = db

    async def create_user(self, username: str) -> UserResponse:
        user = User(username=username or "")
        result = await self.db.users.insert_one(user.model_dump())
        logger.info(f"Created user {result.inserted_id}")
        return UserResponse(id=str(result.inserted_id), username=user.username)

    async def list_users(self) -> List[UserResponse]:
        users = await self.db.users.find({}).to_list(length=None)
        return [user_serializer(user) for user in users]

    async def get_user(self, user_id: str) -> dict:
        oid = _object_id(user_id)
        user = await self.db.users.find_one({"_id": oid}) if oid else None
        if not user:
            raise UserNotFoundError()
        return user

    async def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: Optional[str],
        date: Optional[str] = None,
    ) -> ExerciseResponse:
        """Store an exercise and append it to the user's log.

        The log is upserted with $inc/$push so the first exercise creates it
        with count 1, and count always matches the number of entries.
        """
        user = await self.get_user(user_id)
        exercise_date = parse_date(date) if date else utcnow()

        exercise = Exercise(
            user_id=str(user["_id"]),
            description=description or "",
            duration=parse_int(duration),
            date=exercise_date,
        )
        result = await self.db.exercises.insert_one({
            "userId": user["_id"],
            "description": exercise.description,
            "duration": exercise.duration,
            "date": exercise.date,
        })

        entry = LogEntry(
            description=exercise.description,
            duration=exercise.duration,
            date=to_date_string(exercise.date),
        )
        try:
            await self.append_log_entry(user["_id"], entry)
        except Exception:
            logger.error(f"Exercise {result.inserted_id} saved but log for user {user_id} was not updated")
            raise

        logger.info(f"Added exercise {result.inserted_id} for user {user_id}")
        return ExerciseResponse(
            id=str(user["_id"]),
            username=user.get("username") or "",
            description=entry.description,
            duration=entry.duration,
            date=entry.date,
        )

    async def append_log_entry(self, user_oid: ObjectId, entry: LogEntry) -> None:
        """Append to the user's log, creating it on first use."""
        await self.db.logs.update_one(
            {"userId": user_oid},
            {
                "$inc": {"count": 1},
                "$push": {"log": entry.model_dump()},
            },
            upsert=True,
        )

    async def get_logs(
        self,
        user_id: str,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> LogResponse:
        """Return the user's log entries dated within [from, to], oldest-appended first.

        A zero, negative or non-numeric limit yields an empty log.
        """
        oid = _object_id(user_id)
        log = await self.db.logs.find_one({"userId": oid}) if oid else None
        if not log:
            raise LogNotFoundError()

        user = await self.get_user(user_id)

        start = parse_date(from_date) if from_date else EPOCH
        end = parse_date(to_date) if to_date else utcnow()
        entries = filter_entries(log.get("log", []), start, end)

        if limit:
            entries = entries[:max(parse_int(limit) or 0, 0)]

        return LogResponse(
            id=str(user["_id"]),
            username=user.get("username") or "",
            count=len(entries),
            log=entries,
        )


def filter_entries(raw_entries: List[dict], start: datetime, end: datetime) -> List[LogEntry]:
    """Keep entries whose date lies in [start, end], in stored order."""
    entries = []
    for raw in raw_entries:
        entry_date = _entry_date(raw["date"])
        if start <= entry_date <= end:
            entries.append(LogEntry(
                description=raw.get("description") or "",
                duration=raw.get("duration"),
                date=to_date_string(entry_date),
            ))
    return entries


def _entry_date(value) -> datetime:
    # Entries hold display strings; older documents may hold BSON dates.
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    try:
        return parse_date(value)
    except InvalidDateError:
        raise CorruptLogError(f"Stored log entry has an unreadable date: {value!r}")
