"""
SimpleMath – минимальная 3‑D математика для Python:
вектор Vector3f и матрица Matrix3f (float32, NumPy).
"""

from simple_math.utils import logger, Config
from simple_math.vector import Vector3f
from simple_math.matrix import Matrix3f

__version__ = "1.0.0"

__all__ = [
    "Vector3f",
    "Matrix3f",
    "Config",
    "logger",
]
