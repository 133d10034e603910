"""
Exercise classification: pose frames in, reps, hold times and coaching feedback out.
"""

from .classifiers import ExerciseClassifier, PlankClassifier, RepClassifier
from .geometry import angle, distance
from .instructions import ExerciseInfo, ExerciseInstructions, get_instructions, list_exercises
from .pose import Landmark, Point2D, Pose, PoseLandmark
from .registry import ClassifierRegistry
from .session import SessionSnapshot, SessionStore, WorkoutSession
from .types import ClassificationResult, ExerciseType, Phase

__all__ = [
    'ExerciseClassifier',
    'RepClassifier',
    'PlankClassifier',
    'angle',
    'distance',
    'ExerciseInfo',
    'ExerciseInstructions',
    'get_instructions',
    'list_exercises',
    'Landmark',
    'Point2D',
    'Pose',
    'PoseLandmark',
    'ClassifierRegistry',
    'SessionSnapshot',
    'SessionStore',
    'WorkoutSession',
    'ClassificationResult',
    'ExerciseType',
    'Phase'
]
