from dataclasses import dataclass

from ..geometry import distance
from ..pose import PoseLandmark
from ..types import ExerciseType, Phase
from .base import FrameReading, Landmarks, RepClassifier


@dataclass(frozen=True)
class JackReading(FrameReading):
    arms_up: bool = False
    feet_apart: bool = False


class JumpingJackClassifier(RepClassifier):
    """
    Counts jumping jacks.

    Open means both wrists above their shoulders and the ankles more than
    1.5 shoulder-widths apart; closed means neither holds. The movement is
    quick, so it needs less evidence per transition than the other exercises.
    """

    exercise = ExerciseType.JUMPING_JACKS
    initial_phase = Phase.CLOSED
    outward_phase = Phase.OPEN
    required_landmarks = (
        PoseLandmark.LEFT_WRIST, PoseLandmark.RIGHT_WRIST,
        PoseLandmark.LEFT_ANKLE, PoseLandmark.RIGHT_ANKLE,
        PoseLandmark.LEFT_SHOULDER, PoseLandmark.RIGHT_SHOULDER,
    )
    required_frames = 5
    min_rep_gap = 8

    reposition_feedback = "Stand in full view"
    outward_feedback = "Arms up, feet apart!"
    rep_feedback = "Jumping jack completed!"

    FEET_APART_RATIO = 1.5

    def evaluate(self, points: Landmarks) -> JackReading:
        arms_up = (points[PoseLandmark.LEFT_WRIST].y < points[PoseLandmark.LEFT_SHOULDER].y
                   and points[PoseLandmark.RIGHT_WRIST].y < points[PoseLandmark.RIGHT_SHOULDER].y)

        shoulder_width = distance(points[PoseLandmark.LEFT_SHOULDER], points[PoseLandmark.RIGHT_SHOULDER])
        feet_width = distance(points[PoseLandmark.LEFT_ANKLE], points[PoseLandmark.RIGHT_ANKLE])
        feet_apart = feet_width > self.FEET_APART_RATIO * shoulder_width

        return JackReading(
            outward=arms_up and feet_apart,
            returned=not arms_up and not feet_apart,
            value=feet_width,
            arms_up=arms_up,
            feet_apart=feet_apart,
        )

    def progress_feedback(self, reading: JackReading) -> str:
        if self.state.phase == Phase.OPEN:
            return "Jump back to center"
        # Half-open positions: say which half is missing
        if reading.arms_up and not reading.feet_apart:
            return "Jump your feet wider"
        if reading.feet_apart and not reading.arms_up:
            return "Raise your arms overhead"
        return "Jump with arms up!"
