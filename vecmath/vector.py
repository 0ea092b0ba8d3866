"""
Vector Base - Fixed-Size Numeric Value Types

Graphics, physics and general numeric code all want the same thing from a
vector: a small value with named components and predictable arithmetic.

Key insight: We use NumPy arrays for storage, one dtype per scalar kind, but
wrap them so every component keeps its kind through every operation.

KEY CONCEPTS:

1. ONE BASE, MANY TYPES: Vector holds the behaviour shared by every
   (kind, dimension) pair. Concrete classes (Vector2F, Vector4SB, ...) are
   generated in vecmath.types with `kind` and `dimension` fixed.

2. NO IMPLICIT CONVERSION: Arithmetic only accepts the same concrete type or
   a scalar of the vector's own kind. Mixing kinds is a TypeError; widening
   is always an explicit call.

3. WRAPAROUND: Integer arithmetic keeps the low-order bits of the kind's
   width, like unchecked arithmetic in systems languages. Integer division
   truncates toward zero.

4. VALUE SEMANTICS: Equality is structural. Vectors are mutable (component
   setters, clamp, saturate ...) so they are not hashable; use copy().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Iterator, Tuple, Type, TypeVar, Union
import numpy as np

from .kinds import Scalar, ScalarKind

AXES = ("X", "Y", "Z", "W")

V = TypeVar("V", bound="Vector")


@dataclass
class MathConfig:
    """Tolerances for the approximate (fractional) operations."""
    zero_tolerance: float = 1e-6    # lengths below this count as zero
    truncate_epsilon: float = 1e-4  # truncate() zeroes components smaller than this


def where_clamped(data: np.ndarray, low, high) -> np.ndarray:
    """c < low ? low : (c > high ? high : c), per component. NaN passes through."""
    return np.where(data < low, low, np.where(data > high, high, data))


class Vector:
    """
    Base for every generated vector type.

    Storage is a 1-D numpy array of the kind's dtype, components in
    declared order (X, Y, Z, W).
    """
    __slots__ = ("_data",)

    kind: ClassVar[ScalarKind]
    dimension: ClassVar[int]
    # Same-kind classes by dimension, filled in when the types are generated
    _family: ClassVar[Dict[int, type]]

    def __init__(self, *components):
        if len(components) != self.dimension:
            raise ValueError(
                f"There must be {self.dimension} and only {self.dimension} "
                f"input values for {type(self).__name__}."
            )
        self._data = self.kind.array(components)

    @classmethod
    def _wrap(cls: Type[V], data: np.ndarray) -> V:
        """Adopt an already computed storage array."""
        vec = cls.__new__(cls)
        vec._data = cls.kind.narrow(data)
        return vec

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def filled(cls: Type[V], value) -> V:
        """Every component set to the same value."""
        return cls(*([value] * cls.dimension))

    @classmethod
    def zero(cls: Type[V]) -> V:
        return cls._wrap(np.full(cls.dimension, cls.kind.zero, dtype=cls.kind.dtype))

    @classmethod
    def one(cls: Type[V]) -> V:
        return cls._wrap(np.full(cls.dimension, cls.kind.one, dtype=cls.kind.dtype))

    @classmethod
    def unit(cls: Type[V], axis: Union[int, str]) -> V:
        """Unit vector along an axis, given by index or name ("X", "Y", ...)."""
        data = np.full(cls.dimension, cls.kind.zero, dtype=cls.kind.dtype)
        data[cls._axis_index(axis)] = cls.kind.one
        return cls._wrap(data)

    @classmethod
    def from_array(cls: Type[V], values) -> V:
        """Create from a numpy array or any sequence of exactly `dimension` values."""
        values = list(values)
        if len(values) != cls.dimension:
            raise ValueError(
                f"There must be {cls.dimension} and only {cls.dimension} "
                f"input values for {cls.__name__}."
            )
        return cls(*values)

    from_tuple = from_array

    @classmethod
    def _axis_index(cls, axis: Union[int, str]) -> int:
        if isinstance(axis, str):
            name = axis.upper()
            if name in AXES[:cls.dimension]:
                return AXES.index(name)
            raise IndexError(f"{cls.__name__} has no {axis!r} component")
        if not 0 <= axis < cls.dimension:
            raise IndexError(
                f"Indices for {cls.__name__} run from 0 to {cls.dimension - 1}, inclusive."
            )
        return axis

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------

    def __getitem__(self, index: Union[int, str]) -> Scalar:
        return self._data[self._axis_index(index)]

    def __setitem__(self, index: Union[int, str], value) -> None:
        self._data[self._axis_index(index)] = self.kind.coerce(value)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return self.dimension

    def to_array(self) -> np.ndarray:
        """Copy of the components as a numpy array of the kind's dtype."""
        return self._data.copy()

    def to_tuple(self) -> Tuple:
        return tuple(self._data)

    def to_dict(self) -> dict:
        """For JSON serialization."""
        return {
            axis.lower(): self.kind.to_python(value)
            for axis, value in zip(AXES, self._data)
        }

    def copy(self: V) -> V:
        return self._wrap(self._data.copy())

    __copy__ = copy

    def as_dimension(self, dimension: int) -> Vector:
        """
        Same kind, different dimension.

        Extra components are dropped; missing ones are filled with one.
        """
        if dimension not in self._family:
            raise ValueError(f"Vectors have 2, 3 or 4 components, not {dimension}")
        data = np.full(dimension, self.kind.one, dtype=self.kind.dtype)
        keep = min(dimension, self.dimension)
        data[:keep] = self._data[:keep]
        return self._family[dimension]._wrap(data)

    # ------------------------------------------------------------------
    # Equality and formatting
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.all(self._data == other._data))

    # Mutable value type
    __hash__ = None

    # numpy scalars defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(c) for c in self._data)})"

    def __str__(self) -> str:
        return " ".join(f"{axis}:{c}" for axis, c in zip(AXES, self._data))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _operand(self, other):
        """Storage for a same-type vector or a coerced scalar; None if unsupported."""
        if type(other) is type(self):
            return other._data
        if isinstance(other, Vector):
            return None
        try:
            return self.kind.coerce(other)
        except TypeError:
            return None

    def _binary(self, other, op: Callable, reflected: bool = False):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        lhs = self._data
        if reflected:
            lhs, rhs = rhs, lhs
        with self.kind.context():
            return self._wrap(op(lhs, rhs))

    def _divide(self, lhs, rhs):
        if self.kind.fractional:
            return np.true_divide(lhs, rhs)
        if np.any(rhs == 0):
            raise ZeroDivisionError(f"{type(self).__name__} integer division by zero")
        quotient = np.floor_divide(lhs, rhs)
        remainder = lhs - quotient * rhs
        # floor -> truncate toward zero when the signs differ
        adjust = (remainder != 0) & ((lhs < 0) != (rhs < 0))
        return quotient + adjust.astype(self.kind.dtype)

    def __add__(self: V, other) -> V:
        return self._binary(other, np.add)

    def __radd__(self: V, other) -> V:
        return self._binary(other, np.add, reflected=True)

    def __sub__(self: V, other) -> V:
        return self._binary(other, np.subtract)

    def __rsub__(self: V, other) -> V:
        return self._binary(other, np.subtract, reflected=True)

    def __mul__(self: V, other) -> V:
        return self._binary(other, np.multiply)

    def __rmul__(self: V, other) -> V:
        return self._binary(other, np.multiply, reflected=True)

    def __truediv__(self: V, other) -> V:
        return self._binary(other, self._divide)

    def __rtruediv__(self: V, other) -> V:
        return self._binary(other, self._divide, reflected=True)

    def __neg__(self: V) -> V:
        with self.kind.context():
            return self._wrap(np.negative(self._data))

    def negate(self: V) -> V:
        """A vector facing the opposite direction."""
        return -self

    # ------------------------------------------------------------------
    # Common operations (every kind)
    # ------------------------------------------------------------------

    def _same_type(self, other, operation: str) -> np.ndarray:
        if type(other) is not type(self):
            raise TypeError(
                f"Can only calculate {operation} with another {type(self).__name__}."
            )
        return other._data

    def _sum(self, values: np.ndarray) -> Scalar:
        """Sum in the given storage width, narrowed back to the kind."""
        total = values.sum(dtype=values.dtype, keepdims=True)
        return self.kind.narrow(total)[0]

    def dot(self, other: Vector) -> Scalar:
        """Dot product at the kind's own width (narrow kinds promote, then wrap)."""
        rhs = self._same_type(other, "dot product")
        kind = self.kind
        with kind.context():
            return self._sum(kind.promoted(self._data) * kind.promoted(rhs))

    def length_squared(self) -> Scalar:
        return self.dot(self)

    def distance_squared(self, other: Vector) -> Scalar:
        self._same_type(other, "distance")
        return (self - other).length_squared()

    def minimum(self: V, other: V) -> V:
        """Component-wise smaller of two vectors."""
        rhs = self._same_type(other, "minimum")
        return self._wrap(np.where(self._data < rhs, self._data, rhs))

    def maximum(self: V, other: V) -> V:
        """Component-wise larger of two vectors."""
        rhs = self._same_type(other, "maximum")
        return self._wrap(np.where(self._data > rhs, self._data, rhs))

    def _bound(self, value):
        if isinstance(value, Vector):
            return self._same_type(value, "clamp")
        return self.kind.coerce(value)

    def clamp(self, low, high) -> None:
        """Clamp every component into [low, high] in place (scalar or per-component bounds)."""
        self._data = self.kind.narrow(
            where_clamped(self._data, self._bound(low), self._bound(high))
        )

    def is_zero(self) -> bool:
        return bool(np.all(self._data == self.kind.zero))


def axis_property(index: int, axis: str) -> property:
    """Named component accessor (X, Y, Z, W) for a generated type."""

    def getter(self: Vector) -> Scalar:
        return self._data[index]

    def setter(self: Vector, value) -> None:
        self._data[index] = self.kind.coerce(value)

    return property(getter, setter, doc=f"The {axis} component.")
