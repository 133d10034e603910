import logging
from typing import Callable, Dict, List, Optional, Type

from core.exceptions import UnknownExerciseError
from .classifiers import (
    ExerciseClassifier,
    JumpingJackClassifier,
    LungeClassifier,
    PlankClassifier,
    PushUpClassifier,
    SitUpClassifier,
    SquatClassifier,
)
from .types import ExerciseType, resolve_exercise

logger = logging.getLogger(__name__)

CLASSIFIER_TYPES: Dict[ExerciseType, Type[ExerciseClassifier]] = {
    ExerciseType.PUSHUPS: PushUpClassifier,
    ExerciseType.SQUATS: SquatClassifier,
    ExerciseType.PLANKS: PlankClassifier,
    ExerciseType.SITUPS: SitUpClassifier,
    ExerciseType.LUNGES: LungeClassifier,
    ExerciseType.JUMPING_JACKS: JumpingJackClassifier,
}


class ClassifierRegistry:
    """
    ClassifierRegistry owns one classifier per catalog exercise for a session.

    Responsibilities:
    - Creating every classifier once, up front
    - Looking classifiers up by exercise identifier
    - Resetting classifiers between sets without reallocating them

    A registry is not shared between sessions; create one per workout.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Initialize the registry.

        Args:
            clock: Time source handed to timed classifiers (plank)
        """
        self._classifiers: Dict[ExerciseType, ExerciseClassifier] = {}

        for exercise, classifier_cls in CLASSIFIER_TYPES.items():
            if classifier_cls.timed:
                self._classifiers[exercise] = classifier_cls(clock=clock)
            else:
                self._classifiers[exercise] = classifier_cls()

    @property
    def exercises(self) -> List[ExerciseType]:
        return list(self._classifiers.keys())

    def __contains__(self, exercise_id) -> bool:
        try:
            return resolve_exercise(exercise_id) in self._classifiers
        except UnknownExerciseError:
            return False

    def get(self, exercise_id) -> ExerciseClassifier:
        """
        Get the classifier for an exercise.

        Args:
            exercise_id: ExerciseType or its catalog identifier

        Returns:
            The registry's classifier instance for that exercise

        Raises:
            UnknownExerciseError: If the identifier is not in the catalog
        """
        try:
            return self._classifiers[resolve_exercise(exercise_id)]
        except UnknownExerciseError:
            logger.warning(f"Requested unknown exercise {exercise_id!r}")
            raise

    def reset(self, exercise_id) -> None:
        """Reset a single exercise's classifier."""
        self.get(exercise_id).reset()

    def reset_all(self) -> None:
        """Reset every classifier in the registry."""
        for classifier in self._classifiers.values():
            classifier.reset()
