"""Exceptions raised by the tracker service.

Routes translate these into HTTP errors; anything else coming out of the
service is treated as a persistence failure.
"""


class TrackerError(Exception):
    """Base class for expected, client-facing failures."""

    message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class UserNotFoundError(TrackerError):
    message = "User not found"


class LogNotFoundError(TrackerError):
    message = "No logs found for this user"


class InvalidDateError(TrackerError):
    message = "Invalid date"

    def __init__(self, value: str):
        self.value = value
        super().__init__()


class CorruptLogError(Exception):
    """A stored log entry could not be read back; not the client's fault."""
