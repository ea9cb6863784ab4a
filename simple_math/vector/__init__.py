"""
Векторный суб‑пакет: Vector3f.
"""

from simple_math.vector.vector3f import Vector3f

__all__ = ["Vector3f"]
