import math
from typing import Dict, Optional, Tuple

import pytest

from models.exercise.pose import Landmark, Pose, PoseLandmark, POSE_LANDMARK_COUNT

L = PoseLandmark


class FakeClock:
    """Manually advanced clock for timed classifiers."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class PoseFactory:
    """
    Builds synthetic poses with exact joint angles.

    Only the landmarks an exercise needs are placed; every other index is absent.
    """

    visibility = 0.9

    def build(self, points: Dict[PoseLandmark, Tuple[float, float]]) -> Pose:
        landmarks = [None] * POSE_LANDMARK_COUNT
        for index, (x, y) in points.items():
            landmarks[int(index)] = Landmark(x=x, y=y, visibility=self.visibility)
        return Pose(landmarks)

    def without(self, pose: Pose, *indices: PoseLandmark) -> Pose:
        landmarks = list(pose)
        for index in indices:
            landmarks[int(index)] = None
        return Pose(landmarks, pose.min_visibility)

    def dimmed(self, pose: Pose, *indices: PoseLandmark, visibility: float = 0.3) -> Pose:
        landmarks = list(pose)
        for index in indices:
            lm = landmarks[int(index)]
            landmarks[int(index)] = Landmark(x=lm.x, y=lm.y, visibility=visibility)
        return Pose(landmarks, pose.min_visibility)

    # Legs: ankles fixed on the floor, knee straight above, hip placed so the
    # knee angle is exact. Stance is the ankle-to-ankle distance.
    def _leg(self, points, hip, knee, ankle, ankle_x, knee_angle, side):
        theta = math.radians(knee_angle)
        points[ankle] = (ankle_x, 0.9)
        points[knee] = (ankle_x, 0.7)
        points[hip] = (ankle_x + side * 0.2 * math.sin(theta), 0.7 + 0.2 * math.cos(theta))

    def legs(self, left_knee: float, right_knee: float, stance: float = 0.25) -> Pose:
        points = {}
        self._leg(points, L.LEFT_HIP, L.LEFT_KNEE, L.LEFT_ANKLE, 0.5 - stance / 2, left_knee, 1)
        self._leg(points, L.RIGHT_HIP, L.RIGHT_KNEE, L.RIGHT_ANKLE, 0.5 + stance / 2, right_knee, -1)
        return self.build(points)

    def squat(self, knee_angle: float, stance: float = 0.25) -> Pose:
        return self.legs(knee_angle, knee_angle, stance)

    def lunge(self, front_knee: float, back_knee: float) -> Pose:
        return self.legs(front_knee, back_knee)

    def pushup(self, elbow_angle: float, torso_tilt: float = 0.0) -> Pose:
        theta = math.radians(elbow_angle)
        tilt = math.radians(torso_tilt)
        points = {}
        for shoulder, elbow, wrist, hip, offset in (
                (L.LEFT_SHOULDER, L.LEFT_ELBOW, L.LEFT_WRIST, L.LEFT_HIP, 0.0),
                (L.RIGHT_SHOULDER, L.RIGHT_ELBOW, L.RIGHT_WRIST, L.RIGHT_HIP, 0.01)):
            sx, sy = 0.3 + offset, 0.5
            points[shoulder] = (sx, sy)
            points[elbow] = (sx, sy + 0.1)
            points[wrist] = (sx + 0.1 * math.sin(theta), sy + 0.1 - 0.1 * math.cos(theta))
            points[hip] = (sx + 0.3 * math.cos(tilt), sy + 0.3 * math.sin(tilt))
        return self.build(points)

    def situp(self, torso_angle: float) -> Pose:
        """``torso_angle`` is atan2 of the hip-to-shoulder direction, in degrees."""
        phi = math.radians(torso_angle)
        hip = (0.5, 0.7)
        direction = (math.cos(phi), math.sin(phi))
        shoulder = (hip[0] + 0.25 * direction[0], hip[1] + 0.25 * direction[1])
        nose = (hip[0] + 0.35 * direction[0], hip[1] + 0.35 * direction[1])
        return self.build({
            L.LEFT_HIP: hip, L.RIGHT_HIP: hip,
            L.LEFT_SHOULDER: shoulder, L.RIGHT_SHOULDER: shoulder,
            L.NOSE: nose,
        })

    def jumping_jack(self, arms_up: bool, feet_apart: bool) -> Pose:
        wrist_y = 0.15 if arms_up else 0.5
        ankle_offset = 0.15 if feet_apart else 0.02
        return self.build({
            L.LEFT_SHOULDER: (0.45, 0.3), L.RIGHT_SHOULDER: (0.55, 0.3),
            L.LEFT_WRIST: (0.35, wrist_y), L.RIGHT_WRIST: (0.65, wrist_y),
            L.LEFT_ANKLE: (0.5 - ankle_offset, 0.9), L.RIGHT_ANKLE: (0.5 + ankle_offset, 0.9),
        })

    def plank(self, body_angle: float = 0.0, elbows: Optional[str] = "below") -> Pose:
        """``elbows`` is "below", "above" or None (not visible)."""
        a = math.radians(body_angle)
        shoulder = (0.3, 0.5)
        hip = (0.3 + 0.35 * math.cos(a), 0.5 + 0.35 * math.sin(a))
        points = {
            L.LEFT_SHOULDER: shoulder, L.RIGHT_SHOULDER: shoulder,
            L.LEFT_HIP: hip, L.RIGHT_HIP: hip,
        }
        if elbows is not None:
            elbow_y = 0.6 if elbows == "below" else 0.4
            points[L.LEFT_ELBOW] = (0.3, elbow_y)
            points[L.RIGHT_ELBOW] = (0.3, elbow_y)
        return self.build(points)

    @staticmethod
    def to_payload(pose: Pose) -> dict:
        return {"landmarks": [
            None if lm is None else {"x": lm.x, "y": lm.y, "visibility": lm.visibility}
            for lm in pose
        ]}

    @staticmethod
    def to_row(pose: Pose) -> dict:
        row = {}
        for i, lm in enumerate(pose):
            if lm is not None:
                row[f"lm{i}_x"] = lm.x
                row[f"lm{i}_y"] = lm.y
                row[f"lm{i}_visibility"] = lm.visibility
        return row


@pytest.fixture
def poses() -> PoseFactory:
    return PoseFactory()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
