"""Errors raised by the workout repository and mapped to HTTP responses."""


class WorkoutLogError(Exception):
    """Base class for errors that end a request with an ``{"error": ...}`` body."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(WorkoutLogError):
    """Malformed workout id or missing/invalid workout data."""

    status_code = 400


class NotFound(WorkoutLogError):
    """No workout matches the given id."""

    status_code = 404


class StorageFailure(WorkoutLogError):
    """The persistence layer failed; the message is generic, the cause is only logged."""

    status_code = 500
