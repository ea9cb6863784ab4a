# simple_math/vector/vector3f.py
"""
Трёхмерный вектор (float32) на базе NumPy.

Все изменяющие методы (add, sub, scale, normalize, ...) меняют объект
на месте и возвращают ``self`` – вызовы можно выстраивать в цепочку::

    v = Vector3f(1, 2, 3).add(Vector3f.unit_x()).scale(2.0)
"""

from typing import Sequence, List, Union

import numpy as np

from simple_math.utils.config import Config
from simple_math.utils.logger import logger

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


def _trunc(value: float) -> int:
    """Приведение float → int как в C/Java: NaN → 0, насыщение до int32."""
    if value != value:
        return 0
    if value >= _INT32_MAX:
        return _INT32_MAX
    if value <= _INT32_MIN:
        return _INT32_MIN
    return int(value)


class Vector3f:
    """Изменяемый вектор‑3 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    # -----------------------------------------------------------------
    # альтернативные конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def from_array(cls, vals: Sequence[float]) -> "Vector3f":
        """
        Компоненты из последовательности из 0 и более чисел.
        Недостающие компоненты заполняются нулём, лишние игнорируются.
        """
        n = len(vals)
        return cls(vals[0] if n > 0 else 0.0,
                   vals[1] if n > 1 else 0.0,
                   vals[2] if n > 2 else 0.0)

    @classmethod
    def filled(cls, val: float) -> "Vector3f":
        """Одно значение во всех трёх компонентах."""
        return cls(val, val, val)

    @classmethod
    def from_index(cls, n: int, val: float) -> "Vector3f":
        """
        Только компонента с номером ``n`` (x = 0, y = 1, z = 2) равна ``val``.
        При другом ``n`` получается нулевой вектор.
        """
        return cls(val if n == 0 else 0.0,
                   val if n == 1 else 0.0,
                   val if n == 2 else 0.0)

    @classmethod
    def from_vector(cls, v: "Vector3f") -> "Vector3f":
        """Независимая копия другого вектора."""
        out = cls()
        out._v[:] = v._v
        return out

    def copy(self) -> "Vector3f":
        return Vector3f.from_vector(self)

    @staticmethod
    def unit_x() -> "Vector3f":
        return Vector3f(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> "Vector3f":
        return Vector3f(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> "Vector3f":
        return Vector3f(0.0, 0.0, 1.0)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = value

    def get_val(self, index: int) -> float:
        """Компонента по номеру 1..3; для любого другого номера – -1."""
        if index in (1, 2, 3):
            return float(self._v[index - 1])
        return -1.0

    def get_vals_as_arr(self) -> List[float]:
        """Новый список ``[x, y, z]``."""
        return self._v.tolist()

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float32)."""
        return self._v.copy()

    # -----------------------------------------------------------------
    # арифметика на месте (возвращает self)
    # -----------------------------------------------------------------
    def add(self, other: Union["Vector3f", float]) -> "Vector3f":
        """
        Вектор – покомпонентное сложение.
        Число – **записывается** во все три компоненты (не прибавляется).
        """
        if isinstance(other, Vector3f):
            self._v += other._v
        else:
            self._v[:] = other
        return self

    def sub(self, other: Union["Vector3f", float]) -> "Vector3f":
        """Вычитание вектора или числа из каждой компоненты."""
        if isinstance(other, Vector3f):
            self._v -= other._v
        else:
            self._v -= np.float32(other)
        return self

    def scale(self, val: float) -> "Vector3f":
        self._v *= np.float32(val)
        return self

    def _rescale(self, target) -> "Vector3f":
        # деление на нулевую длину даёт inf/NaN, как в IEEE‑754
        norm = self._norm()
        if norm == 0.0:
            logger.debug(f"[Vector3f] Normalizing zero-length vector {self}")
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            self._v *= np.float32(target) / norm
        return self

    def normalize(self, val: float = None) -> "Vector3f":
        """
        Привести длину к 1 (или к ``val``).
        Нулевой вектор превращается в (NaN, NaN, NaN) без исключения.
        """
        return self._rescale(1.0 if val is None else val)

    def unitize(self) -> "Vector3f":
        return self._rescale(1.0)

    # -----------------------------------------------------------------
    # вычисления без изменения объекта
    # -----------------------------------------------------------------
    def _norm(self) -> np.float32:
        return np.float32(np.linalg.norm(self._v))

    def magnitude(self) -> float:
        """Евклидова длина."""
        return float(self._norm())

    def get_unit_vector(self) -> "Vector3f":
        """Новый единичный вектор того же направления."""
        return self.copy().unitize()

    def dot(self, other: "Vector3f") -> float:
        """
        Скалярное произведение.
        Работает и как «статический» вызов: ``Vector3f.dot(v, u)``.
        """
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vector3f") -> "Vector3f":
        """
        Векторное произведение (правая тройка), новый объект.
        Работает и как «статический» вызов: ``Vector3f.cross(v, u)``.
        """
        a, b = self._v, other._v
        out = Vector3f()
        out._v[0] = a[1] * b[2] - a[2] * b[1]
        out._v[1] = a[2] * b[0] - a[0] * b[2]
        out._v[2] = a[0] * b[1] - a[1] * b[0]
        return out

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Vector3f):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def equals(self, other: "Vector3f", epsilon: float = None) -> bool:
        """
        Без ``epsilon`` – точное равенство (как ``==``).
        С ``epsilon`` – |разность| каждой компоненты строго меньше epsilon.
        """
        if not isinstance(other, Vector3f):
            return False
        if epsilon is None:
            return self == other
        diff = np.abs(self._v - other._v)
        return bool(np.all(diff < np.float32(epsilon)))

    def almost_equals(self, other: "Vector3f") -> bool:
        """``equals`` с epsilon из конфигурации (vector.epsilon)."""
        return self.equals(other, Config().epsilon)

    def __hash__(self) -> int:
        # компоненты усекаются до целых – хэш согласован с == только для целых векторов
        return 97 * _trunc(self.x) + 89 * _trunc(self.y) + 83 * _trunc(self.z)

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        return f"<{self._v[0]!s}, {self._v[1]!s}, {self._v[2]!s}>"

    def __repr__(self) -> str:
        return f"Vector3f({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
