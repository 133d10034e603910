from ..geometry import angle, distance
from ..pose import PoseLandmark
from ..types import ExerciseType, Phase
from .base import FrameReading, Landmarks, RepClassifier


class SquatClassifier(RepClassifier):
    """Counts squats from the average knee angle, gated on stance width."""

    exercise = ExerciseType.SQUATS
    initial_phase = Phase.UP
    outward_phase = Phase.DOWN
    required_landmarks = (
        PoseLandmark.LEFT_HIP, PoseLandmark.RIGHT_HIP,
        PoseLandmark.LEFT_KNEE, PoseLandmark.RIGHT_KNEE,
        PoseLandmark.LEFT_ANKLE, PoseLandmark.RIGHT_ANKLE,
    )
    required_frames = 8
    min_rep_gap = 15

    reposition_feedback = "Stand facing the camera"
    outward_feedback = "Squatting down"
    rep_feedback = "Great squat!"

    DOWN_ANGLE = 120.0
    UP_ANGLE = 160.0
    MIN_STANCE = 0.15
    MAX_STANCE = 0.4

    def evaluate(self, points: Landmarks) -> FrameReading:
        left_knee = angle(points[PoseLandmark.LEFT_HIP], points[PoseLandmark.LEFT_KNEE],
                          points[PoseLandmark.LEFT_ANKLE])
        right_knee = angle(points[PoseLandmark.RIGHT_HIP], points[PoseLandmark.RIGHT_KNEE],
                           points[PoseLandmark.RIGHT_ANKLE])
        avg_knee = (left_knee + right_knee) / 2

        stance = distance(points[PoseLandmark.LEFT_ANKLE], points[PoseLandmark.RIGHT_ANKLE])
        if stance < self.MIN_STANCE:
            return FrameReading(outward=False, returned=False, value=avg_knee,
                                form_issue="Widen your stance")
        if stance > self.MAX_STANCE:
            return FrameReading(outward=False, returned=False, value=avg_knee,
                                form_issue="Bring your feet closer together")

        return FrameReading(
            outward=avg_knee < self.DOWN_ANGLE,
            returned=avg_knee > self.UP_ANGLE,
            value=avg_knee,
        )

    def progress_feedback(self, reading: FrameReading) -> str:
        if self.state.phase == Phase.DOWN:
            return "Stand up to complete"
        if reading.value <= self.UP_ANGLE:
            return "Go lower"
        return "Stand ready"
