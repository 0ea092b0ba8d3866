"""
Vector Types - One Class per (Scalar Kind, Dimension)

The operation matrix lives in the mixins; each concrete type lists the ones
its kind supports:

                       widen()   from_vector()   cross()    saturate/floor/ceiling
    integer kinds        yes          -          2D, 3D             -
    float16              yes          -             -               -
    float32, float64      -          yes         2D, 3D            yes
    decimal128            -           -          2D, 3D            yes

Names follow Vector{N}{suffix}: Vector2SB (int8), Vector3B (uint8),
Vector4US (uint16), Vector2N (intptr), Vector3H (float16), Vector2F (float32),
Vector4M (decimal) ...

The built-in types are plain class statements, so a method a kind does not
support is missing for type checkers as well as at runtime:
Vector2I(1, 2).saturate() is an attr-defined error under mypy and an
AttributeError when run. Kinds registered later get their types from
generate_types(), which builds the same bases with type().
"""

from __future__ import annotations
import logging
from typing import Dict, Iterator, Tuple, Union

from .conversion import WideTargetMixin, WidenMixin
from .cross import Cross2Mixin, Cross3Mixin
from .kinds import (
    DECIMAL128, FLOAT16, FLOAT32, FLOAT64,
    INT8, INT16, INT32, INT64, INTPTR,
    UINT8, UINT16, UINT32, UINT64,
    ScalarKind, get_kind,
)
from .rounding import FractionalMixin
from .vector import AXES, Vector, axis_property

logger = logging.getLogger(__name__)

DIMENSIONS = (2, 3, 4)

_REGISTRY: Dict[Tuple[str, int], type] = {}


def _bases_for(kind: ScalarKind, dimension: int) -> tuple:
    bases = []
    if kind.wide is not None:
        bases.append(WidenMixin)
    if kind.supports_rounding and not kind.is_decimal:
        bases.append(WideTargetMixin)
    if kind.supports_cross:
        if dimension == 2:
            bases.append(Cross2Mixin)
        elif dimension == 3:
            bases.append(Cross3Mixin)
    if kind.supports_rounding:
        bases.append(FractionalMixin)
    bases.append(Vector)
    return tuple(bases)


def _make_type(kind: ScalarKind, dimension: int) -> type:
    name = f"Vector{dimension}{kind.suffix}"
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "__doc__": f"{dimension}-component {kind.name} vector.",
        "kind": kind,
        "dimension": dimension,
    }
    for index, axis in enumerate(AXES[:dimension]):
        namespace[axis] = axis_property(index, axis)
    return type(name, _bases_for(kind, dimension), namespace)


def _register(family: Dict[int, type]) -> Dict[int, type]:
    """Link a kind's 2, 3 and 4 component types to each other and to their wide targets."""
    for dimension, cls in family.items():
        kind = cls.kind
        if (kind.name, dimension) in _REGISTRY:
            raise ValueError(f"Vector types for {kind.name!r} already exist")
        cls._family = family
        if kind.wide is not None:
            cls.wide_type = _REGISTRY[(kind.wide, dimension)]
        _REGISTRY[(kind.name, dimension)] = cls

    logger.debug("Registered %s", ", ".join(cls.__name__ for cls in family.values()))
    return family


def generate_types(kind: Union[str, ScalarKind]) -> Dict[int, type]:
    """
    Build the 2, 3 and 4 component types for a kind registered at runtime.

    The kind's wide target (if any) must already have its types.

    Raises:
        ValueError: the kind's types already exist
    """
    kind = get_kind(kind)
    if (kind.name, DIMENSIONS[0]) in _REGISTRY:
        raise ValueError(f"Vector types for {kind.name!r} already exist")
    return _register({dimension: _make_type(kind, dimension) for dimension in DIMENSIONS})


def vector_type(kind: Union[str, ScalarKind], dimension: int) -> type:
    """The concrete vector class for a kind and dimension. Raises KeyError if unknown."""
    kind = get_kind(kind)
    try:
        return _REGISTRY[(kind.name, dimension)]
    except KeyError:
        raise KeyError(f"No vector type for {kind.name} with {dimension} components") from None


def all_vector_types() -> Iterator[type]:
    return iter(list(_REGISTRY.values()))


# Wide targets are registered before the kinds that widen to them


class Vector2F(WideTargetMixin, Cross2Mixin, FractionalMixin, Vector):
    """2-component float32 vector."""
    __slots__ = ()
    kind = FLOAT32
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3F(WideTargetMixin, Cross3Mixin, FractionalMixin, Vector):
    """3-component float32 vector."""
    __slots__ = ()
    kind = FLOAT32
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4F(WideTargetMixin, FractionalMixin, Vector):
    """4-component float32 vector."""
    __slots__ = ()
    kind = FLOAT32
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2F, 3: Vector3F, 4: Vector4F})


class Vector2D(WideTargetMixin, Cross2Mixin, FractionalMixin, Vector):
    """2-component float64 vector."""
    __slots__ = ()
    kind = FLOAT64
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3D(WideTargetMixin, Cross3Mixin, FractionalMixin, Vector):
    """3-component float64 vector."""
    __slots__ = ()
    kind = FLOAT64
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4D(WideTargetMixin, FractionalMixin, Vector):
    """4-component float64 vector."""
    __slots__ = ()
    kind = FLOAT64
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2D, 3: Vector3D, 4: Vector4D})


class Vector2M(Cross2Mixin, FractionalMixin, Vector):
    """2-component decimal128 vector."""
    __slots__ = ()
    kind = DECIMAL128
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3M(Cross3Mixin, FractionalMixin, Vector):
    """3-component decimal128 vector."""
    __slots__ = ()
    kind = DECIMAL128
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4M(FractionalMixin, Vector):
    """4-component decimal128 vector."""
    __slots__ = ()
    kind = DECIMAL128
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2M, 3: Vector3M, 4: Vector4M})


class Vector2H(WidenMixin, Vector):
    """2-component float16 vector."""
    __slots__ = ()
    kind = FLOAT16
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3H(WidenMixin, Vector):
    """3-component float16 vector."""
    __slots__ = ()
    kind = FLOAT16
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4H(WidenMixin, Vector):
    """4-component float16 vector."""
    __slots__ = ()
    kind = FLOAT16
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2H, 3: Vector3H, 4: Vector4H})


class Vector2SB(WidenMixin, Cross2Mixin, Vector):
    """2-component int8 vector."""
    __slots__ = ()
    kind = INT8
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3SB(WidenMixin, Cross3Mixin, Vector):
    """3-component int8 vector."""
    __slots__ = ()
    kind = INT8
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4SB(WidenMixin, Vector):
    """4-component int8 vector."""
    __slots__ = ()
    kind = INT8
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2SB, 3: Vector3SB, 4: Vector4SB})


class Vector2B(WidenMixin, Cross2Mixin, Vector):
    """2-component uint8 vector."""
    __slots__ = ()
    kind = UINT8
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3B(WidenMixin, Cross3Mixin, Vector):
    """3-component uint8 vector."""
    __slots__ = ()
    kind = UINT8
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4B(WidenMixin, Vector):
    """4-component uint8 vector."""
    __slots__ = ()
    kind = UINT8
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2B, 3: Vector3B, 4: Vector4B})


class Vector2S(WidenMixin, Cross2Mixin, Vector):
    """2-component int16 vector."""
    __slots__ = ()
    kind = INT16
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3S(WidenMixin, Cross3Mixin, Vector):
    """3-component int16 vector."""
    __slots__ = ()
    kind = INT16
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4S(WidenMixin, Vector):
    """4-component int16 vector."""
    __slots__ = ()
    kind = INT16
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2S, 3: Vector3S, 4: Vector4S})


class Vector2US(WidenMixin, Cross2Mixin, Vector):
    """2-component uint16 vector."""
    __slots__ = ()
    kind = UINT16
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3US(WidenMixin, Cross3Mixin, Vector):
    """3-component uint16 vector."""
    __slots__ = ()
    kind = UINT16
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4US(WidenMixin, Vector):
    """4-component uint16 vector."""
    __slots__ = ()
    kind = UINT16
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2US, 3: Vector3US, 4: Vector4US})


class Vector2I(WidenMixin, Cross2Mixin, Vector):
    """2-component int32 vector."""
    __slots__ = ()
    kind = INT32
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3I(WidenMixin, Cross3Mixin, Vector):
    """3-component int32 vector."""
    __slots__ = ()
    kind = INT32
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4I(WidenMixin, Vector):
    """4-component int32 vector."""
    __slots__ = ()
    kind = INT32
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2I, 3: Vector3I, 4: Vector4I})


class Vector2UI(WidenMixin, Cross2Mixin, Vector):
    """2-component uint32 vector."""
    __slots__ = ()
    kind = UINT32
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3UI(WidenMixin, Cross3Mixin, Vector):
    """3-component uint32 vector."""
    __slots__ = ()
    kind = UINT32
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4UI(WidenMixin, Vector):
    """4-component uint32 vector."""
    __slots__ = ()
    kind = UINT32
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2UI, 3: Vector3UI, 4: Vector4UI})


class Vector2L(WidenMixin, Cross2Mixin, Vector):
    """2-component int64 vector."""
    __slots__ = ()
    kind = INT64
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3L(WidenMixin, Cross3Mixin, Vector):
    """3-component int64 vector."""
    __slots__ = ()
    kind = INT64
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4L(WidenMixin, Vector):
    """4-component int64 vector."""
    __slots__ = ()
    kind = INT64
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2L, 3: Vector3L, 4: Vector4L})


class Vector2UL(WidenMixin, Cross2Mixin, Vector):
    """2-component uint64 vector."""
    __slots__ = ()
    kind = UINT64
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3UL(WidenMixin, Cross3Mixin, Vector):
    """3-component uint64 vector."""
    __slots__ = ()
    kind = UINT64
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4UL(WidenMixin, Vector):
    """4-component uint64 vector."""
    __slots__ = ()
    kind = UINT64
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2UL, 3: Vector3UL, 4: Vector4UL})


class Vector2N(WidenMixin, Cross2Mixin, Vector):
    """2-component intptr vector."""
    __slots__ = ()
    kind = INTPTR
    dimension = 2
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")


class Vector3N(WidenMixin, Cross3Mixin, Vector):
    """3-component intptr vector."""
    __slots__ = ()
    kind = INTPTR
    dimension = 3
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")


class Vector4N(WidenMixin, Vector):
    """4-component intptr vector."""
    __slots__ = ()
    kind = INTPTR
    dimension = 4
    X = axis_property(0, "X")
    Y = axis_property(1, "Y")
    Z = axis_property(2, "Z")
    W = axis_property(3, "W")


_register({2: Vector2N, 3: Vector3N, 4: Vector4N})
