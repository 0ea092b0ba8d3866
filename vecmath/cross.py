"""
Cross-Product Rules - Signed Areas and Perpendiculars

2D: the scalar cross product is the signed area of the parallelogram spanned
by the two vectors:

    cross(a, b) = a.X * b.Y - a.Y * b.X

    > 0  b is counter-clockwise from a
    = 0  a and b are parallel
    < 0  b is clockwise from a

3D: the vector cross product is perpendicular to both inputs.

KEY CONCEPTS:

1. NO WIDENING: The result has the operands' own kind (Vector2SB -> int8).

2. NARROW KINDS WRAP: int8/uint8/int16/uint16 compute at int32 and the result
   is cast back down, keeping only the low-order bits. Nothing saturates and
   nothing is checked:

       int8 (100, 1) x (1, 100) = 100*100 - 1*1 = 9999 -> 9999 & 0xFF = 15

3. WIDE KINDS: 32/64-bit integers use their native wraparound; float and
   decimal kinds compute at their own precision.

4. TWO CALL SHAPES: cross(a, b) and a.cross(b) run the same code and always
   agree.
"""

from __future__ import annotations
from typing import Union
import numpy as np

from .kinds import Scalar
from .vector import Vector


def _check_pair(left: Vector, right: Vector) -> None:
    if type(right) is not type(left):
        raise TypeError(
            f"Can only calculate cross product of {type(left).__name__} "
            f"with another {type(left).__name__}, got {type(right).__name__}."
        )


def _cross_2d(left: Vector, right: Vector) -> Scalar:
    kind = left.kind
    with kind.context():
        lhs = kind.promoted(left._data)
        rhs = kind.promoted(right._data)
        products = lhs * rhs[::-1]               # (lx*ry, ly*rx)
        area = products[:1] - products[1:]
        return kind.narrow(area)[0]


def _cross_3d(left: Vector, right: Vector) -> Vector:
    kind = left.kind
    with kind.context():
        lhs = kind.promoted(left._data)
        rhs = kind.promoted(right._data)
        # (ly*rz - lz*ry, lz*rx - lx*rz, lx*ry - ly*rx)
        result = np.roll(lhs, -1) * np.roll(rhs, -2) - np.roll(lhs, -2) * np.roll(rhs, -1)
        return type(left)._wrap(kind.narrow(result))


class Cross2Mixin:
    """Scalar cross product for 2-component types."""
    __slots__ = ()

    def cross(self, other) -> Scalar:
        """Signed parallelogram area (self.X * other.Y) - (self.Y * other.X), in this kind."""
        _check_pair(self, other)
        return _cross_2d(self, other)


class Cross3Mixin:
    """Vector cross product for 3-component types."""
    __slots__ = ()

    def cross(self, other) -> Vector:
        """Vector perpendicular to self and other, same type, same wrap policy."""
        _check_pair(self, other)
        return _cross_3d(self, other)


def cross(left: Vector, right: Vector) -> Union[Scalar, Vector]:
    """
    Cross product of two vectors of the same type.

    Returns:
        A scalar of the vectors' kind for 2 components, a vector of the same
        type for 3 components.

    Raises:
        TypeError: mismatched types, or a type without a cross product
                   (4 components, float16)
    """
    if isinstance(left, Cross2Mixin):
        _check_pair(left, right)
        return _cross_2d(left, right)
    if isinstance(left, Cross3Mixin):
        _check_pair(left, right)
        return _cross_3d(left, right)
    raise TypeError(f"{type(left).__name__} has no cross product")
