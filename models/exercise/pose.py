from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from core.config import settings

POSE_LANDMARK_COUNT = 33


class PoseLandmark(IntEnum):
    """Body landmark indices in the 33-point BlazePose topology."""
    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


@dataclass(frozen=True)
class Point2D:
    """A position in normalized image coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class Landmark:
    """A single tracked body point with its detection confidence."""
    x: float
    y: float
    visibility: float = 1.0
    z: Optional[float] = None

    @property
    def point(self) -> Point2D:
        return Point2D(self.x, self.y)


class Pose:
    """
    One frame of landmark data.

    Landmarks are stored by ``PoseLandmark`` index. Lookups return None for
    landmarks that are absent or whose visibility is below ``min_visibility``,
    so callers never mistake an undetected point for the image origin.
    """

    def __init__(self, landmarks: Sequence[Optional[Landmark]],
                 min_visibility: Optional[float] = None):
        """
        Initialize a pose.

        Args:
            landmarks: Landmarks in index order; None marks an absent landmark.
                Shorter sequences are padded with absent landmarks.
            min_visibility: Visibility below which a landmark counts as absent
                (settings.MIN_LANDMARK_VISIBILITY by default)

        Raises:
            ValueError: If more than 33 landmarks are supplied
        """
        landmarks = list(landmarks)
        if len(landmarks) > POSE_LANDMARK_COUNT:
            raise ValueError(
                f"A pose holds at most {POSE_LANDMARK_COUNT} landmarks, got {len(landmarks)}"
            )

        landmarks.extend([None] * (POSE_LANDMARK_COUNT - len(landmarks)))
        self._landmarks: Tuple[Optional[Landmark], ...] = tuple(landmarks)
        self.min_visibility = settings.MIN_LANDMARK_VISIBILITY if min_visibility is None else min_visibility

    @classmethod
    def from_landmarks(cls, landmarks, min_visibility: Optional[float] = None) -> "Pose":
        """
        Build a pose from estimator output.

        Accepts a sequence of objects exposing ``x``, ``y`` and optionally
        ``visibility`` and ``z`` (MediaPipe ``NormalizedLandmark`` works as is),
        a container with a ``landmark`` attribute holding such a sequence, or
        plain ``(x, y[, visibility])`` tuples.

        Args:
            landmarks: Landmark data from the pose estimator
            min_visibility: Visibility below which a landmark counts as absent

        Returns:
            Pose instance
        """
        if hasattr(landmarks, 'landmark'):
            landmarks = landmarks.landmark

        return cls([_coerce_landmark(item) for item in landmarks], min_visibility)

    def __len__(self) -> int:
        return POSE_LANDMARK_COUNT

    def __iter__(self):
        return iter(self._landmarks)

    def raw(self, index: PoseLandmark) -> Optional[Landmark]:
        """Landmark at ``index`` regardless of its visibility."""
        return self._landmarks[int(index)]

    def get(self, index: PoseLandmark) -> Optional[Landmark]:
        """Landmark at ``index``, or None if absent or not visible enough."""
        landmark = self._landmarks[int(index)]
        if landmark is None or landmark.visibility < self.min_visibility:
            return None
        return landmark

    def is_visible(self, index: PoseLandmark) -> bool:
        return self.get(index) is not None

    def require(self, indices: Iterable[PoseLandmark]) -> Optional[List[Landmark]]:
        """
        Look up several landmarks at once.

        Returns:
            Landmarks in the order requested, or None if any of them is unknown
        """
        found = []
        for index in indices:
            landmark = self.get(index)
            if landmark is None:
                return None
            found.append(landmark)
        return found

    def visible_indices(self) -> List[PoseLandmark]:
        return [PoseLandmark(i) for i in range(POSE_LANDMARK_COUNT) if self.get(PoseLandmark(i)) is not None]


def _coerce_landmark(item) -> Optional[Landmark]:
    """Convert one estimator landmark into a ``Landmark``."""
    if item is None or isinstance(item, Landmark):
        return item

    if hasattr(item, 'x') and hasattr(item, 'y'):
        return Landmark(
            x=float(item.x),
            y=float(item.y),
            visibility=float(getattr(item, 'visibility', 1.0)),
            z=getattr(item, 'z', None),
        )

    if isinstance(item, (list, tuple)) and len(item) >= 2:
        visibility = float(item[2]) if len(item) >= 3 else 1.0
        return Landmark(x=float(item[0]), y=float(item[1]), visibility=visibility)

    # Anything unrecognizable is treated as an undetected landmark
    return None
