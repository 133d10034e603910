#!/usr/bin/env python
"""
Exercise Replay CLI

Feeds a recorded landmark CSV through an exercise classifier and reports the
reps counted (or the plank hold achieved), frame by frame if requested.

Expected columns: an optional ``timestamp`` (seconds) and, for each landmark
index i in 0..32, ``lm{i}_x``, ``lm{i}_y`` and optionally ``lm{i}_visibility``.
Missing columns and empty cells are treated as undetected landmarks.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from core.config import settings
from core.exceptions import UnknownExerciseError
from models.exercise import ClassifierRegistry, ExerciseType, Landmark, Pose
from models.exercise.pose import POSE_LANDMARK_COUNT

logger = logging.getLogger(__name__)


class ReplayClock:
    """Clock driven by the recording's timestamps instead of wall time."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


def load_pose_frames(csv_path: str, fps: float = 30.0,
                     min_visibility: float = settings.MIN_LANDMARK_VISIBILITY) -> Tuple[np.ndarray, List[Pose]]:
    """
    Load a landmark recording.

    Args:
        csv_path: Path to the CSV file
        fps: Frame rate used to derive timestamps when the file has none
        min_visibility: Visibility below which a landmark counts as absent

    Returns:
        Tuple of (timestamps, poses)
    """
    frames_df = pd.read_csv(csv_path)

    if 'timestamp' in frames_df.columns:
        timestamps = frames_df['timestamp'].to_numpy(dtype=float)
    else:
        timestamps = np.arange(len(frames_df), dtype=float) / fps

    poses = []
    for _, row in frames_df.iterrows():
        landmarks = []
        for i in range(POSE_LANDMARK_COUNT):
            x = row.get(f"lm{i}_x", np.nan)
            y = row.get(f"lm{i}_y", np.nan)
            if pd.isna(x) or pd.isna(y):
                landmarks.append(None)
                continue

            visibility = row.get(f"lm{i}_visibility", 1.0)
            if pd.isna(visibility):
                visibility = 0.0
            landmarks.append(Landmark(x=float(x), y=float(y), visibility=float(visibility)))

        poses.append(Pose(landmarks, min_visibility=min_visibility))

    return timestamps, poses


def replay(exercise, timestamps: np.ndarray, poses: List[Pose]) -> pd.DataFrame:
    """
    Run recorded poses through the classifier for ``exercise``.

    Returns:
        DataFrame with one row per frame: timestamp, rep_completed, reps,
        feedback and hold_seconds
    """
    clock = ReplayClock(float(timestamps[0]) if len(timestamps) else 0.0)
    registry = ClassifierRegistry(clock=clock)
    classifier = registry.get(exercise)

    rows = []
    reps = 0
    for timestamp, pose in zip(timestamps, poses):
        clock.now = float(timestamp)
        result = classifier.update(pose)
        reps += int(result.rep_completed)
        rows.append({
            'timestamp': float(timestamp),
            'rep_completed': result.rep_completed,
            'reps': reps,
            'feedback': result.feedback,
            'hold_seconds': result.hold_seconds,
        })

    return pd.DataFrame(rows, columns=['timestamp', 'rep_completed', 'reps', 'feedback', 'hold_seconds'])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Parse command-line arguments
    parser = argparse.ArgumentParser(description="Exercise Replay CLI")
    parser.add_argument("csv_path", help="Path to the landmark CSV recording")
    parser.add_argument("--exercise", "-e", required=True,
                        help=f"Exercise to track ({', '.join(e.value for e in ExerciseType)})")
    parser.add_argument("--fps", type=float, default=30.0,
                        help="Frame rate used when the recording has no timestamp column")
    parser.add_argument("--output", "-o", help="Write per-frame results to this CSV (optional)")

    args = parser.parse_args(argv)

    # Validate input file
    if not os.path.isfile(args.csv_path):
        logger.error(f"Input file does not exist: {args.csv_path}")
        return 1

    try:
        timestamps, poses = load_pose_frames(args.csv_path, fps=args.fps)
        results_df = replay(args.exercise, timestamps, poses)
    except UnknownExerciseError as e:
        logger.error(str(e))
        return 1
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"Could not read recording {args.csv_path}: {e}")
        return 1

    logger.info(f"Replayed {len(results_df)} frames of {args.exercise}")

    if results_df['hold_seconds'].notna().any():
        logger.info(f"  Longest hold: {results_df['hold_seconds'].max():.1f}s")
    else:
        logger.info(f"  Repetitions: {int(results_df['rep_completed'].sum())}")

    if args.output:
        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        results_df.to_csv(args.output, index=False)
        logger.info(f"Per-frame results saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
