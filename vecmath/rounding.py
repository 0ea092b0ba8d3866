"""
Range/Rounding Rules - Operations That Need a Fraction

Saturate, floor and ceiling only make sense for kinds that can hold a
fraction. They exist on the float32, float64 and decimal128 vector types and
nowhere else: an integer vector simply has no saturate() method, so the
mistake is caught by static checkers and by attribute lookup, never by a
runtime kind check.

KEY CONCEPTS:

1. SATURATE: clamp every component into [0, 1] using the kind's own 0 and 1:

       c = 0 if c < 0 else (1 if c > 1 else c)

   Both comparisons are false for NaN, so a NaN component stays NaN.

2. FLOOR / CEILING: standard rounding toward -inf / +inf, per component.
   Both are idempotent: floor(floor(v)) == floor(v).

3. IN PLACE: the methods mutate the receiver and return None.
   saturated() / floored() / ceiled() are the pure forms returning a new
   vector.

4. EVERYTHING ELSE FRACTIONAL: length, normalize, lerp, near_equal ...
   live here too, since they need a square root or a fractional amount.
"""

from __future__ import annotations
from typing import Optional, Union
import numpy as np

from .kinds import Scalar
from .vector import MathConfig, Vector, where_clamped


class FractionalMixin:
    """Operations for kinds with a fractional representation."""
    __slots__ = ()

    # ------------------------------------------------------------------
    # Range / rounding (in place)
    # ------------------------------------------------------------------

    def saturate(self) -> None:
        """Clamp every component into [0, 1]. NaN components are left unchanged."""
        kind = self.kind
        with kind.context():
            self._data = kind.narrow(where_clamped(self._data, kind.zero, kind.one))

    def floor(self) -> None:
        """Round every component down to the nearest integral value."""
        with self.kind.context():
            self._data = self.kind.narrow(self.kind.floor(self._data))

    def ceiling(self) -> None:
        """Round every component up to the nearest integral value."""
        with self.kind.context():
            self._data = self.kind.narrow(self.kind.ceil(self._data))

    def abs(self) -> None:
        """Remove the sign from every component."""
        with self.kind.context():
            self._data = self.kind.narrow(np.abs(self._data))

    def truncate(self, config: Optional[MathConfig] = None) -> None:
        """Set every near-zero component (|c| < truncate_epsilon) to exactly zero."""
        config = config or MathConfig()
        kind = self.kind
        epsilon = kind.coerce(config.truncate_epsilon)
        with kind.context():
            self._data = kind.narrow(np.where(np.abs(self._data) < epsilon, kind.zero, self._data))

    def pow(self, power) -> None:
        """Raise every component to the given power."""
        kind = self.kind
        exponent = kind.coerce(power)
        with kind.context():
            self._data = kind.narrow(np.power(self._data, exponent))

    # ------------------------------------------------------------------
    # Length and direction
    # ------------------------------------------------------------------

    def length(self) -> Scalar:
        """Length of the vector (Euclidean norm), in this kind."""
        return self.kind.sqrt(self.length_squared())

    def distance(self, other: Vector) -> Scalar:
        """Distance between two points."""
        return self.kind.sqrt(self.distance_squared(other))

    def is_normalized(self, config: Optional[MathConfig] = None) -> bool:
        config = config or MathConfig()
        with self.kind.context():
            return bool(abs(self.length_squared() - self.kind.one) < config.zero_tolerance)

    def normalize(self, allow_zero: bool = False, config: Optional[MathConfig] = None) -> None:
        """
        Convert to a unit vector in place.

        A zero-length vector (below config.zero_tolerance) becomes zero, or,
        with allow_zero, a unit vector along its last axis.
        """
        config = config or MathConfig()
        kind = self.kind
        length = self.length()
        # NaN lengths take this branch too and propagate
        if not abs(length) < config.zero_tolerance:
            with kind.context():
                self._data = kind.narrow(self._data / length)
            return

        data = np.full(self.dimension, kind.zero, dtype=kind.dtype)
        if allow_zero:
            data[-1] = kind.one
        self._data = data

    def normalized(self, allow_zero: bool = False, config: Optional[MathConfig] = None) -> Vector:
        """Unit vector (same direction, length = 1) as a new vector."""
        result = self.copy()
        result.normalize(allow_zero=allow_zero, config=config)
        return result

    def lerp(self, end: Vector, amount) -> Vector:
        """Linear interpolation (1 - amount) * self + amount * end."""
        rhs = self._same_type(end, "lerp")
        kind = self.kind
        t = kind.coerce(amount)
        with kind.context():
            return self._wrap((kind.one - t) * self._data + t * rhs)

    def near_equal(self, other, epsilon: Union[float, Vector]) -> bool:
        """True when every component is within epsilon (scalar or per component) of other's."""
        rhs = self._same_type(other, "near_equal")
        bound = self._bound(epsilon)
        with self.kind.context():
            delta = self._data - rhs
            return bool(np.all((-bound <= delta) & (delta <= bound)))


def _apply(value: Vector, operation: str) -> Vector:
    if not isinstance(value, FractionalMixin):
        raise TypeError(f"{type(value).__name__} has no fractional representation")
    result = value.copy()
    getattr(result, operation)()
    return result


def saturated(value: Vector) -> Vector:
    """Pure saturate: a new vector clamped into [0, 1]."""
    return _apply(value, "saturate")


def floored(value: Vector) -> Vector:
    """Pure floor: a new vector rounded down."""
    return _apply(value, "floor")


def ceiled(value: Vector) -> Vector:
    """Pure ceiling: a new vector rounded up."""
    return _apply(value, "ceiling")
