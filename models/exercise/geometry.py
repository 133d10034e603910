"""
Planar geometry helpers for normalized image coordinates.

All functions accept anything with ``x`` and ``y`` attributes.
"""

import numpy as np

from .pose import Point2D

def angle(a, b, c) -> float:
    """
    Calculate the interior angle at vertex ``b`` formed by ``a`` and ``c``.
    
    Args:
        a: First point
        b: Vertex point
        c: Third point
        
    Returns:
        Angle in degrees within [0, 180]
    """
    radians = np.arctan2(c.y - b.y, c.x - b.x) - np.arctan2(a.y - b.y, a.x - b.x)
    degrees = abs(float(np.degrees(radians)))
    
    if degrees > 180.0:
        degrees = 360.0 - degrees
    
    return degrees

def distance(p1, p2) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(p2.x - p1.x, p2.y - p1.y))

def midpoint(p1, p2) -> Point2D:
    """Point halfway between ``p1`` and ``p2``."""
    return Point2D((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)

def inclination(origin, target) -> float:
    """
    Absolute direction of the segment ``origin -> target`` against the x axis.
    
    Returns:
        Angle in degrees within [0, 180]; 0 and 180 are both horizontal
    """
    return abs(float(np.degrees(np.arctan2(target.y - origin.y, target.x - origin.x))))
