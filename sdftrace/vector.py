"""Immutable 3-D vector value type.

:class:`Vector3` wraps a read-only ``float64`` array of shape ``(3,)`` so it
can be handed straight to the vectorised helpers in :mod:`sdftrace.sdf_lib`
(``np.asarray(v)`` returns the backing array without copying).
"""

from __future__ import annotations

from typing import Iterator, Sequence, Union

import numpy as np
import numpy.typing as npt

_F = npt.NDArray[np.floating]


class Vector3:
    """A 3-D vector.  Every operation returns a new vector."""

    __slots__ = ("_v",)

    # Mixed arithmetic with numpy scalars resolves through the operators below.
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float) -> None:
        v = np.array([x, y, z], dtype=np.float64)
        v.flags.writeable = False
        self._v = v

    @classmethod
    def from_array(cls, a: _F) -> Vector3:
        """Build from any array-like of shape ``(3,)``."""
        a = np.asarray(a, dtype=np.float64)
        if a.shape != (3,):
            raise ValueError(f"expected shape (3,), got {a.shape}")
        return cls(a[0], a[1], a[2])

    @classmethod
    def of(cls, value: "VectorLike") -> Vector3:
        """Coerce *value* (a :class:`Vector3` or 3-sequence) to a vector."""
        if isinstance(value, Vector3):
            return value
        return cls.from_array(value)

    # ------------------------------------------------------------------
    # Components / numpy interop
    # ------------------------------------------------------------------

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    def __array__(self, dtype=None, copy=None) -> _F:
        if dtype is not None and np.dtype(dtype) != self._v.dtype:
            if copy is False:
                raise ValueError("Vector3 cannot be converted to another dtype without a copy")
            return self._v.astype(dtype)
        if copy:
            return self._v.copy()
        return self._v

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def isclose(self, other: Vector3, atol: float = 1e-9) -> bool:
        """Component-wise comparison within *atol*."""
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=atol))

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def clone(self) -> Vector3:
        return Vector3.from_array(self._v)

    def add(self, other: Vector3) -> Vector3:
        return Vector3.from_array(self._v + other._v)

    def sub(self, other: Vector3) -> Vector3:
        return Vector3.from_array(self._v - other._v)

    def mul(self, scalar: float) -> Vector3:
        return Vector3.from_array(self._v * scalar)

    def div(self, scalar: float) -> Vector3:
        return Vector3.from_array(self._v / scalar)

    def comp_product(self, other: Vector3) -> Vector3:
        """Component-wise (Hadamard) product."""
        return Vector3.from_array(self._v * other._v)

    def dot(self, other: Vector3) -> float:
        return float(self._v @ other._v)

    def norm(self) -> float:
        """Euclidean length."""
        return float(np.sqrt(self._v @ self._v))

    def normalized(self) -> Vector3:
        """Return ``self / norm``.

        The zero vector has no direction: normalizing it yields a non-finite
        vector.  Callers must not normalize a zero vector.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vector3.from_array(self._v / np.sqrt(self._v @ self._v))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div

    def __neg__(self) -> Vector3:
        return Vector3.from_array(-self._v)


VectorLike = Union[Vector3, Sequence[float], _F]
