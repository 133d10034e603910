from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.exceptions import UnknownExerciseError

class ExerciseType(str, Enum):
    """
    Exercises supported by the classification engine.
    
    The value is the catalog identifier used by the API and the registry.
    """
    PUSHUPS = "pushups"
    SQUATS = "squats"
    PLANKS = "planks"
    SITUPS = "situps"
    LUNGES = "lunges"
    JUMPING_JACKS = "jumpingjacks"


class Phase(str, Enum):
    """State machine phases shared by the classifiers."""
    UP = "up"
    DOWN = "down"
    OPEN = "open"
    CLOSED = "closed"
    HOLDING = "holding"
    IDLE = "idle"


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of classifying one pose frame.
    
    Attributes:
        rep_completed: True only on the frame that completes a repetition
        feedback: Short coaching message shown to the user verbatim
        hold_seconds: Elapsed hold time for timed exercises, None otherwise
    """
    rep_completed: bool
    feedback: str
    hold_seconds: Optional[float] = None


def resolve_exercise(exercise_id) -> ExerciseType:
    """
    Convert a catalog identifier into an ExerciseType.
    
    Raises:
        UnknownExerciseError: If the identifier is not in the catalog
    """
    if isinstance(exercise_id, ExerciseType):
        return exercise_id
    try:
        return ExerciseType(exercise_id)
    except ValueError:
        raise UnknownExerciseError(exercise_id) from None
