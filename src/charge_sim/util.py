# MIT License (see LICENSE)
"""
Utility functions for numeric conversion.

Helpers to move between plain Python sequences, numpy arrays of shape (3,),
and the package's value types.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets positions be passed as tuples, lists or arrays interchangeably.
    """
    return np.array(x, dtype=np.float64)


def as_xyz(point) -> tuple[float, float, float]:
    """
    Coerce a point-like value into an (x, y, z) tuple of floats.

    Accepts a Vector3D (anything with x/y/z attributes) or a sequence of
    length 3.
    """
    if hasattr(point, "x") and hasattr(point, "y") and hasattr(point, "z"):
        return float(point.x), float(point.y), float(point.z)
    arr = f64(point)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3D point, got shape {arr.shape}")
    return float(arr[0]), float(arr[1]), float(arr[2])
