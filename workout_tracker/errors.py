"""Exception hierarchy for the workout tracker."""

from typing import Iterable, Optional


class WorkoutTrackerError(Exception):
    """Base class for all workout tracker errors."""


class ValidationError(WorkoutTrackerError):
    """Raised when submitted form input is not a usable workout."""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.fields = list(fields or [])


class LocationUnavailable(WorkoutTrackerError):
    """Raised when the user's location could not be acquired."""


class PersistenceUnavailable(WorkoutTrackerError):
    """Raised when the persistent key-value store cannot be written."""


class CorruptWorkoutData(WorkoutTrackerError):
    """Raised when a persisted workout record is malformed."""


class UnknownWorkoutType(WorkoutTrackerError, ValueError):
    """Raised for a workout type other than running or cycling."""


class FormNotOpen(WorkoutTrackerError):
    """Raised when a form is submitted before a map location was picked."""
