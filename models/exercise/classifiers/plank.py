import logging
import time
from typing import Callable, Optional

from ..geometry import inclination, midpoint
from ..pose import Pose, PoseLandmark
from ..types import ClassificationResult, ExerciseType, Phase
from .base import NO_POSE_FEEDBACK, ExerciseClassifier, Landmarks

logger = logging.getLogger(__name__)


class PlankClassifier(ExerciseClassifier):
    """
    Times a plank hold.

    A hold lasts while the shoulder-hip line stays within 15 degrees of
    horizontal and every visible elbow sits below its shoulder. The first frame
    that fails either check ends the hold and drops the duration to zero; there
    is no hysteresis here, unlike the rep classifiers.
    """

    exercise = ExerciseType.PLANKS
    initial_phase = Phase.IDLE
    required_landmarks = (
        PoseLandmark.LEFT_SHOULDER, PoseLandmark.RIGHT_SHOULDER,
        PoseLandmark.LEFT_HIP, PoseLandmark.RIGHT_HIP,
    )
    reposition_feedback = "Get in plank position"
    timed = True

    MAX_BODY_TILT = 15.0  # degrees away from horizontal
    GREAT_FORM_SECONDS = 10.0
    AMAZING_SECONDS = 30.0

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Initialize the plank classifier.

        Args:
            clock: Returns the current time in seconds; defaults to time.time
        """
        self.clock = clock or time.time
        super().__init__()

    @property
    def hold_seconds(self) -> float:
        return self.state.hold_seconds

    def update(self, pose: Optional[Pose]) -> ClassificationResult:
        state = self.state

        if pose is None:
            return ClassificationResult(False, NO_POSE_FEEDBACK, hold_seconds=state.hold_seconds)

        points = self._required_points(pose)
        if points is None:
            return ClassificationResult(False, self.reposition_feedback, hold_seconds=state.hold_seconds)

        state.frame_count += 1

        issue = self._form_issue(points, pose)
        if issue:
            self._end_hold()
            return ClassificationResult(False, issue, hold_seconds=0.0)

        now = self.clock()
        if state.phase != Phase.HOLDING:
            state.phase = Phase.HOLDING
            state.hold_start = now
            state.last_transition_frame = state.frame_count
            logger.debug(f"planks: hold started at frame {state.frame_count}")

        state.hold_seconds = max(0.0, now - state.hold_start)
        return ClassificationResult(False, self._hold_feedback(state.hold_seconds),
                                    hold_seconds=state.hold_seconds)

    def _form_issue(self, points: Landmarks, pose: Pose) -> Optional[str]:
        shoulders = midpoint(points[PoseLandmark.LEFT_SHOULDER], points[PoseLandmark.RIGHT_SHOULDER])
        hips = midpoint(points[PoseLandmark.LEFT_HIP], points[PoseLandmark.RIGHT_HIP])
        body = inclination(shoulders, hips)

        if self.MAX_BODY_TILT <= body <= 180.0 - self.MAX_BODY_TILT:
            return "Straighten your body"

        # Elbows are optional; only the visible ones are checked
        for elbow_index, shoulder_index in ((PoseLandmark.LEFT_ELBOW, PoseLandmark.LEFT_SHOULDER),
                                            (PoseLandmark.RIGHT_ELBOW, PoseLandmark.RIGHT_SHOULDER)):
            elbow = pose.get(elbow_index)
            if elbow is not None and elbow.y <= points[shoulder_index].y:
                return "Keep your elbows under your shoulders"

        return None

    def _end_hold(self) -> None:
        state = self.state
        if state.phase == Phase.HOLDING:
            logger.debug(f"planks: hold ended after {state.hold_seconds:.1f}s at frame {state.frame_count}")
            state.last_transition_frame = state.frame_count

        state.phase = Phase.IDLE
        state.hold_start = None
        state.hold_seconds = 0.0

    def _hold_feedback(self, seconds: float) -> str:
        elapsed = int(seconds)
        if seconds < self.GREAT_FORM_SECONDS:
            return f"Hold that plank! {elapsed}s"
        if seconds < self.AMAZING_SECONDS:
            return f"Great form! Keep holding! {elapsed}s"
        return f"Amazing! {elapsed}s and counting!"
