"""
Per-exercise classifiers turning pose frames into reps, holds and feedback.
"""

from .base import ClassifierState, ExerciseClassifier, FrameReading, RepClassifier
from .jumping_jack import JumpingJackClassifier
from .lunge import LungeClassifier
from .plank import PlankClassifier
from .pushup import PushUpClassifier
from .situp import SitUpClassifier
from .squat import SquatClassifier

__all__ = [
    'ClassifierState',
    'ExerciseClassifier',
    'FrameReading',
    'RepClassifier',
    'PushUpClassifier',
    'SquatClassifier',
    'PlankClassifier',
    'SitUpClassifier',
    'LungeClassifier',
    'JumpingJackClassifier'
]
