from ..geometry import inclination, midpoint
from ..pose import PoseLandmark
from ..types import ExerciseType, Phase
from .base import FrameReading, Landmarks, RepClassifier


class SitUpClassifier(RepClassifier):
    """
    Counts sit-ups from the torso's angle against horizontal.

    The feature is the magnitude of the hip-to-shoulder direction in degrees
    (0 to 180). Below 45 counts as up, above 70 as down. The rest phase is
    down, so a rep completes on the return to down.
    """

    exercise = ExerciseType.SITUPS
    initial_phase = Phase.DOWN
    outward_phase = Phase.UP
    required_landmarks = (
        PoseLandmark.NOSE,
        PoseLandmark.LEFT_SHOULDER, PoseLandmark.RIGHT_SHOULDER,
        PoseLandmark.LEFT_HIP, PoseLandmark.RIGHT_HIP,
    )
    required_frames = 10
    min_rep_gap = 15

    reposition_feedback = "Lie down to start"
    outward_feedback = "Sit up complete!"
    rep_feedback = "Good! Now sit up again"

    UP_ANGLE = 45.0
    DOWN_ANGLE = 70.0

    def evaluate(self, points: Landmarks) -> FrameReading:
        shoulders = midpoint(points[PoseLandmark.LEFT_SHOULDER], points[PoseLandmark.RIGHT_SHOULDER])
        hips = midpoint(points[PoseLandmark.LEFT_HIP], points[PoseLandmark.RIGHT_HIP])
        torso = inclination(hips, shoulders)

        return FrameReading(
            outward=torso < self.UP_ANGLE,
            returned=torso > self.DOWN_ANGLE,
            value=torso,
        )

    def progress_feedback(self, reading: FrameReading) -> str:
        if self.state.phase == Phase.UP:
            return "Lower back down"
        return "Sit up!"
