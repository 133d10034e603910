from ..geometry import angle, inclination, midpoint
from ..pose import PoseLandmark
from ..types import ExerciseType, Phase
from .base import FrameReading, Landmarks, RepClassifier


class PushUpClassifier(RepClassifier):
    """Counts push-ups from the average elbow angle."""

    exercise = ExerciseType.PUSHUPS
    initial_phase = Phase.UP
    outward_phase = Phase.DOWN
    required_landmarks = (
        PoseLandmark.LEFT_SHOULDER, PoseLandmark.RIGHT_SHOULDER,
        PoseLandmark.LEFT_ELBOW, PoseLandmark.RIGHT_ELBOW,
        PoseLandmark.LEFT_WRIST, PoseLandmark.RIGHT_WRIST,
        PoseLandmark.LEFT_HIP, PoseLandmark.RIGHT_HIP,
    )
    required_frames = 8
    min_rep_gap = 15

    reposition_feedback = "Position yourself in camera view"
    outward_feedback = "Going down - good!"
    rep_feedback = "Rep completed!"

    DOWN_ANGLE = 90.0
    UP_ANGLE = 160.0
    MAX_TORSO_TILT = 20.0  # degrees away from horizontal

    def evaluate(self, points: Landmarks) -> FrameReading:
        left_elbow = angle(points[PoseLandmark.LEFT_SHOULDER], points[PoseLandmark.LEFT_ELBOW],
                           points[PoseLandmark.LEFT_WRIST])
        right_elbow = angle(points[PoseLandmark.RIGHT_SHOULDER], points[PoseLandmark.RIGHT_ELBOW],
                            points[PoseLandmark.RIGHT_WRIST])
        avg_elbow = (left_elbow + right_elbow) / 2

        shoulders = midpoint(points[PoseLandmark.LEFT_SHOULDER], points[PoseLandmark.RIGHT_SHOULDER])
        hips = midpoint(points[PoseLandmark.LEFT_HIP], points[PoseLandmark.RIGHT_HIP])
        torso = inclination(shoulders, hips)

        # Sagging or piked hips tilt the shoulder-hip line away from horizontal
        if self.MAX_TORSO_TILT <= torso <= 180.0 - self.MAX_TORSO_TILT:
            return FrameReading(outward=False, returned=False, value=avg_elbow,
                                form_issue="Keep your body in a straight line")

        return FrameReading(
            outward=avg_elbow < self.DOWN_ANGLE,
            returned=avg_elbow > self.UP_ANGLE,
            value=avg_elbow,
        )

    def progress_feedback(self, reading: FrameReading) -> str:
        if self.state.phase == Phase.DOWN:
            return "Push up to complete rep"
        if self.DOWN_ANGLE <= reading.value <= self.UP_ANGLE:
            return "Lower down more"
        return "Good form!"
