"""
Conversion Rules - Explicit Widening to Float

Narrow vectors (integers, half floats) are compact to store but awkward to do
geometry with. Each of them has exactly one PREFERRED WIDE FLOAT type it can
be converted to:

    Vector2SB / Vector2B / Vector2S / Vector2US / Vector2I / Vector2UI / Vector2H  ->  Vector2F
    Vector2L  / Vector2UL                                                        ->  Vector2D

(same for 3 and 4 components; intptr follows its platform width).

KEY CONCEPTS:

1. EXPLICIT ONLY: Nothing converts implicitly. Mixing Vector2B and Vector2F
   in arithmetic is a TypeError; callers ask with widen() or from_vector().

2. TOTAL: The destination range covers the source range for every edge
   (checked when a kind is registered), so widening never fails.

3. SHAPE PRESERVING: Same dimension, same component order; each component is
   the native numeric widening of its source.

4. ONE DIRECTION: No integer -> integer, float -> float (other than
   float16 -> float32) or wide -> narrow edges exist.
"""

from __future__ import annotations
from typing import ClassVar, List, Optional, Tuple, Union

from .kinds import KINDS, ScalarKind, get_kind
from .vector import Vector


def preferred_wide_kind(kind: Union[str, ScalarKind]) -> Optional[ScalarKind]:
    """The kind a scalar kind widens to, None for kinds that are already wide."""
    kind = get_kind(kind)
    if kind.wide is None:
        return None
    return KINDS[kind.wide]


def conversion_edges() -> List[Tuple[str, str]]:
    """Every (source kind, wide kind) pair, in registration order."""
    return [(kind.name, kind.wide) for kind in KINDS.values() if kind.wide is not None]


class WidenMixin:
    """Source side of a conversion edge."""
    __slots__ = ()

    # Set when the types are generated
    wide_type: ClassVar[type]

    def widen(self) -> Vector:
        """
        Explicitly convert to the preferred wide float type.

        Returns:
            New vector of the wide kind with the same dimension, each
            component the numeric widening of the source component.
        """
        target = self.wide_type
        return target._wrap(self._data.astype(target.kind.dtype))


class WideTargetMixin:
    """Destination side of a conversion edge (float32 and float64 types)."""
    __slots__ = ()

    @classmethod
    def from_vector(cls, value: Vector) -> Vector:
        """
        Explicit conversion constructor: Vector2F.from_vector(Vector2B(7, 3)).

        Raises:
            TypeError: value does not widen to this type
        """
        if not isinstance(value, WidenMixin) or value.wide_type is not cls:
            raise TypeError(
                f"No explicit conversion from {type(value).__name__} to {cls.__name__}"
            )
        return value.widen()


def widen(value: Vector) -> Vector:
    """Function form of WidenMixin.widen."""
    if not isinstance(value, WidenMixin):
        raise TypeError(f"{type(value).__name__} has no wider float type")
    return value.widen()
