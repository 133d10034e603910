import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..pose import Landmark, Pose, PoseLandmark
from ..types import ClassificationResult, ExerciseType, Phase

logger = logging.getLogger(__name__)

NO_POSE_FEEDBACK = "No pose detected"

Landmarks = Dict[PoseLandmark, Landmark]


@dataclass
class ClassifierState:
    """
    Mutable per-instance state of an exercise classifier.

    Everything a classifier remembers between frames lives here, so memory use
    stays constant however long a session runs.
    """
    phase: Phase
    frame_count: int = 0
    last_transition_frame: int = 0
    last_rep_frame: int = 0
    outward_frames: int = 0
    return_frames: int = 0
    rep_count: int = 0
    # Timed exercises only
    hold_start: Optional[float] = None
    hold_seconds: float = 0.0


@dataclass(frozen=True)
class FrameReading:
    """Per-frame features a rep classifier feeds into its state machine."""
    outward: bool
    returned: bool
    value: Optional[float] = None
    form_issue: Optional[str] = None


class ExerciseClassifier(ABC):
    """
    Contract shared by all exercise classifiers.

    Responsibilities:
    - Own the state machine for one exercise
    - Turn one pose frame into one ClassificationResult

    This class does NOT handle:
    - Pose estimation
    - Session bookkeeping (rep totals across exercises)
    - Presentation
    """

    exercise: ExerciseType
    initial_phase: Phase
    required_landmarks: Tuple[PoseLandmark, ...] = ()
    reposition_feedback: str = "Position yourself in camera view"
    timed: bool = False

    def __init__(self):
        self.state = self._initial_state()

    def _initial_state(self) -> ClassifierState:
        return ClassifierState(phase=self.initial_phase)

    def reset(self) -> None:
        """Return to the initial phase with every counter and timer zeroed."""
        self.state = self._initial_state()

    @abstractmethod
    def update(self, pose: Optional[Pose]) -> ClassificationResult:
        """
        Classify one pose frame.

        Args:
            pose: Landmarks for the current frame, or None if no person was found

        Returns:
            ClassificationResult for this frame
        """

    def _required_points(self, pose: Optional[Pose]) -> Optional[Landmarks]:
        """Required landmarks keyed by index, or None if any is unknown."""
        if pose is None:
            return None

        landmarks = pose.require(self.required_landmarks)
        if landmarks is None:
            return None

        return dict(zip(self.required_landmarks, landmarks))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(phase={self.state.phase.value}, frame={self.state.frame_count})"


class RepClassifier(ExerciseClassifier):
    """
    Base for exercises counted in repetitions.

    Each frame goes through the same pipeline:
    1. Landmark gate: missing landmarks leave the state untouched
    2. Feature computation (``evaluate``, exercise specific)
    3. Hysteresis: one counter per target phase, incremented while its
       condition holds and decremented (floored at 0) otherwise
    4. Debounce: a transition needs ``required_frames`` of evidence; completing
       a rep also needs ``min_rep_gap`` frames since the previous rep
    5. A rep is counted only on the transition back to the rest phase
    """

    outward_phase: Phase
    required_frames: int = 8
    min_rep_gap: int = 15

    outward_feedback: str = "Good!"
    rep_feedback: str = "Rep completed!"

    @property
    def rest_phase(self) -> Phase:
        return self.initial_phase

    @abstractmethod
    def evaluate(self, points: Landmarks) -> FrameReading:
        """Compute this frame's features from the required landmarks."""

    @abstractmethod
    def progress_feedback(self, reading: FrameReading) -> str:
        """Feedback for frames that do not trigger a transition."""

    def update(self, pose: Optional[Pose]) -> ClassificationResult:
        if pose is None:
            return ClassificationResult(rep_completed=False, feedback=NO_POSE_FEEDBACK)

        points = self._required_points(pose)
        if points is None:
            return ClassificationResult(rep_completed=False, feedback=self.reposition_feedback)

        state = self.state
        state.frame_count += 1

        reading = self.evaluate(points)

        if reading.form_issue:
            # Bad form counts as evidence for neither phase
            self._accumulate(outward=False, returned=False)
            return ClassificationResult(rep_completed=False, feedback=reading.form_issue)

        self._accumulate(outward=reading.outward, returned=reading.returned)

        if state.phase == self.rest_phase and state.outward_frames >= self.required_frames:
            self._transition(self.outward_phase)
            return ClassificationResult(rep_completed=False, feedback=self.outward_feedback)

        if (state.phase == self.outward_phase
                and state.return_frames >= self.required_frames
                and state.frame_count - state.last_rep_frame >= self.min_rep_gap):
            self._transition(self.rest_phase)
            state.rep_count += 1
            state.last_rep_frame = state.frame_count
            logger.debug(f"{self.exercise.value}: rep {state.rep_count} completed at frame {state.frame_count}")
            return ClassificationResult(rep_completed=True, feedback=self.rep_feedback)

        return ClassificationResult(rep_completed=False, feedback=self.progress_feedback(reading))

    def _accumulate(self, outward: bool, returned: bool) -> None:
        state = self.state
        state.outward_frames = self._step_counter(state.outward_frames, outward)
        state.return_frames = self._step_counter(state.return_frames, returned)

    def _step_counter(self, counter: int, satisfied: bool) -> int:
        if satisfied:
            return min(counter + 1, self.required_frames)
        return max(counter - 1, 0)

    def _transition(self, phase: Phase) -> None:
        state = self.state
        logger.debug(
            f"{self.exercise.value}: {state.phase.value} -> {phase.value} at frame {state.frame_count}"
        )
        state.phase = phase
        state.last_transition_frame = state.frame_count
        state.outward_frames = 0
        state.return_frames = 0
