# simple_math/matrix/matrix3f.py
"""
Матрица 3×3 (float32, row‑major).

Хранится как ndarray ``m`` формы (3, 3); элементы доступны по именам
``e11`` … ``e33`` (строка, столбец, нумерация с 1).
"""

from typing import Sequence

import numpy as np

from simple_math.utils.config import Config
from simple_math.utils.logger import logger
from simple_math.vector.vector3f import Vector3f


def _element(row: int, col: int) -> property:
    def getter(self) -> float:
        return float(self.m[row, col])

    def setter(self, value: float) -> None:
        self.m[row, col] = value

    return property(getter, setter, doc=f"Элемент ({row + 1}, {col + 1}).")


class Matrix3f:
    __slots__ = ("m",)

    def __init__(self, e11: float, e12: float, e13: float,
                 e21: float, e22: float, e23: float,
                 e31: float, e32: float, e33: float):
        self.m = np.array([[e11, e12, e13],
                           [e21, e22, e23],
                           [e31, e32, e33]], dtype=np.float32)

    e11, e12, e13 = _element(0, 0), _element(0, 1), _element(0, 2)
    e21, e22, e23 = _element(1, 0), _element(1, 1), _element(1, 2)
    e31, e32, e33 = _element(2, 0), _element(2, 1), _element(2, 2)

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def from_flat(cls, values: Sequence[float], legacy: bool = None) -> "Matrix3f":
        """
        Матрица из плоской последовательности [e11, e12, …, e33].
        Можно передать 0‑9 значений, недостающие заполняются нулём.

        ``legacy=True`` повторяет поведение старой версии: каждый
        присутствующий элемент берётся из ``values[0]``.  По умолчанию
        режим читается из конфигурации (matrix.legacy_flat_array).
        """
        if legacy is None:
            legacy = Config().legacy_flat_array
        if legacy:
            logger.warning("[Matrix3f] Legacy flat-array mode: all elements read from values[0]")
        n = len(values)
        return cls(*((values[0] if legacy else values[i]) if n > i else 0.0
                     for i in range(9)))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix3f":
        """
        Матрица из вложенного массива 3×3 [[e11, e12, e13], [...], [...]].
        Все 9 значений обязательны – иначе IndexError.
        """
        try:
            return cls(rows[0][0], rows[0][1], rows[0][2],
                       rows[1][0], rows[1][1], rows[1][2],
                       rows[2][0], rows[2][1], rows[2][2])
        except IndexError:
            logger.error("[Matrix3f] Nested array must be at least 3x3")
            raise

    @staticmethod
    def identity() -> "Matrix3f":
        return Matrix3f.from_rows(np.identity(3, dtype=np.float32))

    I = identity

    @staticmethod
    def create_scale_mat(v: Vector3f) -> "Matrix3f":
        """
        Диагональная матрица масштабирования (v.x, v.y, v.z).
        Не зависит от объекта, на котором вызвана.
        """
        return Matrix3f.from_rows([[v.x, 0.0, 0.0],
                                   [0.0, v.y, 0.0],
                                   [0.0, 0.0, v.z]])

    # -----------------------------------------------------------------
    # операции
    # -----------------------------------------------------------------
    def scalar_mult(self, val: float) -> "Matrix3f":
        """Умножить все элементы на число (на месте)."""
        self.m *= np.float32(val)
        return self

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def __repr__(self):
        return f"Matrix3f({self.m.tolist()})"
