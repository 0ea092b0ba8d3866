"""
Fixed-size numeric vectors over a broad set of scalar kinds.

This package provides:
- Vector2/3/4 types for int8 ... uint64, intptr, float16, float32, float64
  and decimal components (vecmath.types)
- Explicit widening to the preferred float type (vecmath.conversion)
- 2D scalar and 3D vector cross products with per-kind wraparound (vecmath.cross)
- Saturate/floor/ceiling and the other fractional-only operations (vecmath.rounding)
"""

from .kinds import (
    DECIMAL_CONTEXT,
    KINDS,
    ScalarKind,
    get_kind,
    register_kind,
)
from .vector import MathConfig, Vector
from .conversion import conversion_edges, preferred_wide_kind, widen
from .cross import cross
from .rounding import ceiled, floored, saturated
from .types import (
    all_vector_types,
    generate_types,
    vector_type,
    Vector2SB, Vector3SB, Vector4SB,
    Vector2B, Vector3B, Vector4B,
    Vector2S, Vector3S, Vector4S,
    Vector2US, Vector3US, Vector4US,
    Vector2I, Vector3I, Vector4I,
    Vector2UI, Vector3UI, Vector4UI,
    Vector2L, Vector3L, Vector4L,
    Vector2UL, Vector3UL, Vector4UL,
    Vector2N, Vector3N, Vector4N,
    Vector2H, Vector3H, Vector4H,
    Vector2F, Vector3F, Vector4F,
    Vector2D, Vector3D, Vector4D,
    Vector2M, Vector3M, Vector4M,
)

__version__ = "0.1.0"

__all__ = [
    "DECIMAL_CONTEXT",
    "KINDS",
    "ScalarKind",
    "get_kind",
    "register_kind",
    "MathConfig",
    "Vector",
    "conversion_edges",
    "preferred_wide_kind",
    "widen",
    "cross",
    "ceiled",
    "floored",
    "saturated",
    "all_vector_types",
    "generate_types",
    "vector_type",
    "Vector2SB", "Vector3SB", "Vector4SB",
    "Vector2B", "Vector3B", "Vector4B",
    "Vector2S", "Vector3S", "Vector4S",
    "Vector2US", "Vector3US", "Vector4US",
    "Vector2I", "Vector3I", "Vector4I",
    "Vector2UI", "Vector3UI", "Vector4UI",
    "Vector2L", "Vector3L", "Vector4L",
    "Vector2UL", "Vector3UL", "Vector4UL",
    "Vector2N", "Vector3N", "Vector4N",
    "Vector2H", "Vector3H", "Vector4H",
    "Vector2F", "Vector3F", "Vector4F",
    "Vector2D", "Vector3D", "Vector4D",
    "Vector2M", "Vector3M", "Vector4M",
]
