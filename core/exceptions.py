"""
Custom exceptions for FitTracker.

Per-frame sensing problems (missing or low-confidence landmarks) are never
raised; they are reported through the classification result. The exceptions
below cover caller-side mistakes only.
"""


class FitTrackerError(Exception):
    """Base exception for all FitTracker errors."""
    pass


class UnknownExerciseError(FitTrackerError):
    """Requested exercise identifier is not in the catalog."""

    def __init__(self, exercise_id):
        self.exercise_id = exercise_id
        super().__init__(f"Unknown exercise: {exercise_id!r}")


class SessionNotFoundError(FitTrackerError):
    """Requested workout session does not exist."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Workout session not found: {session_id}")


class SessionLimitError(FitTrackerError):
    """The session store has reached its configured capacity."""
    pass
