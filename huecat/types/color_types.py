from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
ColorValue = Union[IntVector, ndarray]  # Includes array support
Positions = Union[Scalar, ndarray]

def element_to_array(element: Union[Positions, ScalarVector]) -> np.ndarray:
    """
    Convert a scalar, tuple or array of positions to a float64 numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=np.float64)
    return np.atleast_1d(np.array(element, dtype=np.float64))
