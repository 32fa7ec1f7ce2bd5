# backend/habit_tracker/errors.py


class HabitTrackerError(Exception):
    """Base for errors that map onto an HTTP status at the request boundary."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"message": self.message}


class ValidationError(HabitTrackerError):
    status_code = 400


class AuthError(HabitTrackerError):
    status_code = 401


class ForbiddenError(HabitTrackerError):
    status_code = 403


class NotFoundError(HabitTrackerError):
    status_code = 404


class ConflictError(HabitTrackerError):
    status_code = 409


class StorageError(HabitTrackerError):
    status_code = 500
