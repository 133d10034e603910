from ..geometry import angle
from ..pose import PoseLandmark
from ..types import ExerciseType, Phase
from .base import FrameReading, Landmarks, RepClassifier


class LungeClassifier(RepClassifier):
    """Counts lunges from the asymmetry between the two knee angles."""

    exercise = ExerciseType.LUNGES
    initial_phase = Phase.UP
    outward_phase = Phase.DOWN
    required_landmarks = (
        PoseLandmark.LEFT_HIP, PoseLandmark.RIGHT_HIP,
        PoseLandmark.LEFT_KNEE, PoseLandmark.RIGHT_KNEE,
        PoseLandmark.LEFT_ANKLE, PoseLandmark.RIGHT_ANKLE,
    )
    required_frames = 8
    min_rep_gap = 15

    reposition_feedback = "Stand in view"
    outward_feedback = "Good lunge depth!"
    rep_feedback = "Lunge completed!"

    LUNGE_DIFFERENCE = 40.0
    LUNGE_MAX_KNEE = 110.0
    STAND_DIFFERENCE = 25.0
    STAND_MIN_KNEE = 150.0

    def evaluate(self, points: Landmarks) -> FrameReading:
        left_knee = angle(points[PoseLandmark.LEFT_HIP], points[PoseLandmark.LEFT_KNEE],
                          points[PoseLandmark.LEFT_ANKLE])
        right_knee = angle(points[PoseLandmark.RIGHT_HIP], points[PoseLandmark.RIGHT_KNEE],
                           points[PoseLandmark.RIGHT_ANKLE])

        difference = abs(left_knee - right_knee)
        bent_knee = min(left_knee, right_knee)

        return FrameReading(
            outward=difference > self.LUNGE_DIFFERENCE and bent_knee < self.LUNGE_MAX_KNEE,
            returned=difference < self.STAND_DIFFERENCE and bent_knee > self.STAND_MIN_KNEE,
            value=bent_knee,
        )

    def progress_feedback(self, reading: FrameReading) -> str:
        if self.state.phase == Phase.DOWN:
            return "Return to standing"
        return "Step into lunge position"
