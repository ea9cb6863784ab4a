"""
Матричный суб‑пакет: Matrix3f.
"""

from simple_math.matrix.matrix3f import Matrix3f

__all__ = ["Matrix3f"]
