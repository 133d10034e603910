import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from core.exceptions import SessionLimitError, SessionNotFoundError
from .classifiers import ExerciseClassifier
from .pose import Pose
from .registry import ClassifierRegistry
from .types import ExerciseType, resolve_exercise

logger = logging.getLogger(__name__)

READY_FEEDBACK = "Get Ready!"


@dataclass(frozen=True)
class SessionSnapshot:
    """What the front end needs to render after each frame."""
    session_id: str
    exercise: ExerciseType
    rep_completed: bool
    feedback: str
    reps: int
    hold_seconds: Optional[float]
    best_hold_seconds: Optional[float]
    frames_processed: int


class WorkoutSession:
    """
    A single user's workout.

    The session owns its classifier registry, so two sessions never share
    classifier state. It keeps the running rep total and hold times for the
    active exercise.
    """

    def __init__(self, exercise, registry: Optional[ClassifierRegistry] = None,
                 session_id: Optional[str] = None):
        """
        Initialize a workout session.

        Args:
            exercise: ExerciseType or catalog identifier to start with
            registry: Classifier registry to use (a fresh one by default)
            session_id: Identifier for the session (random UUID by default)

        Raises:
            UnknownExerciseError: If the exercise is not in the catalog
        """
        self.session_id = session_id or str(uuid.uuid4())
        self.registry = registry or ClassifierRegistry()
        self.exercise = resolve_exercise(exercise)
        self._start_exercise()

    def _start_exercise(self) -> None:
        self.registry.reset(self.exercise)
        self.reps = 0
        self.frames_processed = 0
        self.hold_seconds: Optional[float] = 0.0 if self.classifier.timed else None
        self.best_hold_seconds: Optional[float] = self.hold_seconds
        self.feedback = READY_FEEDBACK

    @property
    def classifier(self) -> ExerciseClassifier:
        return self.registry.get(self.exercise)

    def process(self, pose: Optional[Pose]) -> SessionSnapshot:
        """
        Classify one frame for the active exercise.

        Args:
            pose: Pose for the frame, or None if the estimator found nobody

        Returns:
            SessionSnapshot after this frame
        """
        result = self.classifier.update(pose)
        self.frames_processed += 1
        self.feedback = result.feedback

        if result.rep_completed:
            self.reps += 1
            logger.debug(f"Session {self.session_id}: {self.exercise.value} rep {self.reps}")

        if result.hold_seconds is not None:
            self.hold_seconds = result.hold_seconds
            self.best_hold_seconds = max(self.best_hold_seconds or 0.0, result.hold_seconds)

        return self.snapshot(rep_completed=result.rep_completed)

    def select(self, exercise) -> None:
        """Switch to another exercise, starting its counters from zero."""
        self.exercise = resolve_exercise(exercise)
        self._start_exercise()
        logger.info(f"Session {self.session_id} switched to {self.exercise.value}")

    def reset(self) -> None:
        """Restart the active exercise."""
        self._start_exercise()

    def snapshot(self, rep_completed: bool = False) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.session_id,
            exercise=self.exercise,
            rep_completed=rep_completed,
            feedback=self.feedback,
            reps=self.reps,
            hold_seconds=self.hold_seconds,
            best_hold_seconds=self.best_hold_seconds,
            frames_processed=self.frames_processed,
        )


class SessionStore:
    """
    In-memory collection of live workout sessions.

    The HTTP layer serves requests from a thread pool, so the mapping is guarded
    by a lock. Each session is still meant to receive its frames one at a time.
    """

    def __init__(self, max_sessions: int = 100,
                 clock: Optional[Callable[[], float]] = None):
        self.max_sessions = max_sessions
        self._clock = clock
        self._sessions: Dict[str, WorkoutSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self, exercise) -> WorkoutSession:
        """
        Start a new session.

        Raises:
            UnknownExerciseError: If the exercise is not in the catalog
            SessionLimitError: If the store is full
        """
        session = WorkoutSession(exercise, registry=ClassifierRegistry(clock=self._clock))

        with self._lock:
            if len(self._sessions) >= self.max_sessions:
                raise SessionLimitError(f"Session limit of {self.max_sessions} reached")
            self._sessions[session.session_id] = session

        logger.info(f"Created session {session.session_id} for {session.exercise.value}")
        return session

    def get(self, session_id: str) -> WorkoutSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def remove(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"Closed session {session_id} after {session.frames_processed} frames")
