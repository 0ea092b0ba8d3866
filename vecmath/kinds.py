"""
Scalar Kinds - What a Single Vector Component Is Made Of

Every vector type stores its components in exactly one scalar kind, fixed when
the type is generated. The kind decides how values are coerced on the way in
and how arithmetic behaves on the way through.

KEY CONCEPTS:

1. STORAGE: Each kind maps onto a numpy dtype (int8 ... float64).
   The decimal kind has no numpy dtype, so its components live as
   Decimal objects inside an object array.

2. PREFERRED WIDE FLOAT: Integer kinds and float16 explicitly widen to one
   fixed float kind:
   - float32 for integers up to 32 bits and for float16
   - float64 for 64-bit integers
   The rule depends on bit width and category only, never on dimension.

3. PROMOTION: Kinds narrower than 32 bits compute intermediate products at
   signed int32 and wrap the result back to their own width (unchecked).
   32-bit and wider integers use their native wraparound.

4. CAPABILITIES:
   - fractional kinds (float32, float64, decimal128) get saturate/floor/ceiling
   - float16 is STORAGE-ONLY: it widens before doing math, so it gets
     neither rounding operations nor a cross product
"""

from __future__ import annotations
import decimal
import logging
import numbers
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


# 96-bit decimal semantics: 28 significant digits, scale up to 28.
DECIMAL_CONTEXT = decimal.Context(
    prec=28,
    rounding=decimal.ROUND_HALF_EVEN,
    Emax=28,
    Emin=-28,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)

# Width every narrow integer kind computes at before wrapping back down
PROMOTION_DTYPE = np.dtype(np.int32)

OBJECT_DTYPE = np.dtype(object)

# A single component: a numpy scalar of the kind's dtype, or a Decimal
Scalar = Union[np.generic, Decimal]


@dataclass(frozen=True)
class ScalarKind:
    """
    Fixed properties of one scalar kind.

    Attributes:
        name: Canonical kind name ("int8", "float32", ...)
        suffix: Type-name suffix ("SB" -> Vector2SB)
        dtype: numpy storage dtype (object for decimal)
        bits: Storage width in bits
        signed: Whether negative values are representable
        fractional: Whether the kind has a fractional representation
        wide: Name of the preferred wide float kind, None if it has none
        storage_only: Kind widens before doing math (no cross, no rounding)
    """
    name: str
    suffix: str
    dtype: np.dtype
    bits: int
    signed: bool
    fractional: bool
    wide: Optional[str] = None
    storage_only: bool = False

    @property
    def is_decimal(self) -> bool:
        return self.dtype == OBJECT_DTYPE

    @property
    def promote(self) -> Optional[np.dtype]:
        """Intermediate dtype for products, None when the kind computes natively."""
        if not self.fractional and self.bits < PROMOTION_DTYPE.itemsize * 8:
            return PROMOTION_DTYPE
        return None

    @property
    def supports_rounding(self) -> bool:
        return self.fractional and not self.storage_only

    @property
    def supports_cross(self) -> bool:
        return not self.storage_only

    @property
    def zero(self):
        return Decimal(0) if self.is_decimal else self.dtype.type(0)

    @property
    def one(self):
        return Decimal(1) if self.is_decimal else self.dtype.type(1)

    def value_range(self) -> Tuple[float, float]:
        """Smallest and largest finite value as Python floats."""
        if self.is_decimal:
            limit = float(Decimal("9.999999999999999999999999999E+28"))
            return -limit, limit
        info = np.finfo(self.dtype) if self.fractional else np.iinfo(self.dtype)
        return float(info.min), float(info.max)

    # ------------------------------------------------------------------
    # Coercion
    # ------------------------------------------------------------------

    def coerce(self, value):
        """
        Convert a Python or numpy number into this kind's scalar.

        Raises:
            TypeError: value is not a number this kind accepts
            OverflowError: integer value outside the kind's range
            ValueError: non-finite value for the decimal kind
        """
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"{self.name} components cannot be booleans")
        if self.is_decimal:
            return self._coerce_decimal(value)
        if self.fractional:
            if not isinstance(value, numbers.Real):
                raise TypeError(
                    f"{self.name} components must be real numbers, got {type(value).__name__}"
                )
            with np.errstate(over="ignore"):
                return self.dtype.type(value)

        if not isinstance(value, numbers.Integral):
            raise TypeError(
                f"{self.name} components must be integers, got {type(value).__name__}"
            )
        ivalue = int(value)
        info = np.iinfo(self.dtype)
        if not info.min <= ivalue <= info.max:
            raise OverflowError(
                f"{ivalue} is outside the {self.name} range [{info.min}, {info.max}]"
            )
        return self.dtype.type(ivalue)

    def _coerce_decimal(self, value) -> Decimal:
        if isinstance(value, numbers.Integral):
            value = int(value)
        elif isinstance(value, numbers.Real):
            # Shortest repr, so 0.1 stays 0.1 instead of its binary expansion
            value = repr(float(value))
        elif not isinstance(value, (Decimal, str)):
            raise TypeError(
                f"{self.name} components must be numbers or numeric strings, "
                f"got {type(value).__name__}"
            )
        try:
            result = DECIMAL_CONTEXT.create_decimal(value)
        except decimal.InvalidOperation as exc:
            raise ValueError(f"{value!r} is not a valid {self.name} value") from exc
        except decimal.Overflow as exc:
            raise OverflowError(f"{value!r} is outside the {self.name} range") from exc
        if not result.is_finite():
            raise ValueError(f"{self.name} components must be finite, got {value!r}")
        return result

    def array(self, values: Iterable) -> np.ndarray:
        """Build a storage array, coercing every value."""
        return np.array([self.coerce(v) for v in values], dtype=self.dtype)

    def to_python(self, value):
        """Plain Python value for serialization (decimals as strings)."""
        if self.is_decimal:
            return str(value)
        return value.item()

    # ------------------------------------------------------------------
    # Arithmetic support
    # ------------------------------------------------------------------

    @contextmanager
    def context(self) -> Iterator[None]:
        """
        Arithmetic context for this kind.

        Decimal math runs under DECIMAL_CONTEXT without touching the caller's
        thread context. numpy math runs with overflow/invalid/divide
        reporting off: wraparound and IEEE results are the contract.
        """
        if self.is_decimal:
            with decimal.localcontext(DECIMAL_CONTEXT):
                yield
        else:
            with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
                yield

    def promoted(self, data: np.ndarray) -> np.ndarray:
        dtype = self.promote
        return data.astype(dtype) if dtype is not None else data

    def narrow(self, data: np.ndarray) -> np.ndarray:
        """Unchecked cast back to the kind's own width (low-order bits kept)."""
        return data.astype(self.dtype, copy=False)

    def floor(self, data: np.ndarray) -> np.ndarray:
        if self.is_decimal:
            return np.array(
                [c.to_integral_value(rounding=decimal.ROUND_FLOOR, context=DECIMAL_CONTEXT) for c in data],
                dtype=OBJECT_DTYPE,
            )
        return np.floor(data)

    def ceil(self, data: np.ndarray) -> np.ndarray:
        if self.is_decimal:
            return np.array(
                [c.to_integral_value(rounding=decimal.ROUND_CEILING, context=DECIMAL_CONTEXT) for c in data],
                dtype=OBJECT_DTYPE,
            )
        return np.ceil(data)

    def sqrt(self, value):
        if self.is_decimal:
            return value.sqrt(DECIMAL_CONTEXT)
        return self.dtype.type(np.sqrt(value))

    def __str__(self) -> str:
        return self.name


# ============================================================
# Registry
# ============================================================

KINDS: Dict[str, ScalarKind] = {}


def preferred_wide_name(bits: int, fractional: bool) -> str:
    """
    The widening rule: 64-bit integers go to float64, everything narrower
    (integers up to 32 bits, float16) goes to float32.
    """
    if not fractional and bits > 32:
        return "float64"
    return "float32"


def _dominates(target: ScalarKind, source: ScalarKind) -> bool:
    """
    True when the target range contains the source range.

    A range check only: values still round to the target precision
    (int32 values above 2**24 are not exact in float32).
    """
    src_min, src_max = source.value_range()
    dst_min, dst_max = target.value_range()
    return dst_min <= src_min and src_max <= dst_max


def register_kind(kind: ScalarKind) -> ScalarKind:
    """
    Add a kind to the registry.

    A kind with a wide target must name an already registered, non
    storage-only fractional kind whose range covers the source range, so
    widening stays total.

    Raises:
        ValueError: duplicate name or an invalid wide target
    """
    if kind.name in KINDS:
        raise ValueError(f"Scalar kind {kind.name!r} is already registered")

    if kind.wide is not None:
        target = KINDS.get(kind.wide)
        if target is None:
            logger.warning("Rejected kind %s: unknown wide kind %s", kind.name, kind.wide)
            raise ValueError(f"Unknown wide kind {kind.wide!r} for {kind.name!r}")
        if not target.supports_rounding or target.is_decimal:
            logger.warning("Rejected kind %s: %s is not a wide float kind", kind.name, target.name)
            raise ValueError(f"{target.name!r} cannot be a wide float kind")
        if target.name == kind.name or not _dominates(target, kind):
            logger.warning("Rejected kind %s: %s does not cover its range", kind.name, target.name)
            raise ValueError(f"{target.name!r} cannot represent every {kind.name!r} value")

    KINDS[kind.name] = kind
    logger.debug("Registered scalar kind %s (%d bits, wide=%s)", kind.name, kind.bits, kind.wide)
    return kind


def get_kind(kind: Union[str, ScalarKind]) -> ScalarKind:
    """Look up a kind by name (or pass one through). Raises KeyError if unknown."""
    if isinstance(kind, ScalarKind):
        return kind
    try:
        return KINDS[kind]
    except KeyError:
        raise KeyError(f"Unknown scalar kind {kind!r}") from None


# Wide targets first so the narrow kinds can validate against them
FLOAT32 = register_kind(ScalarKind("float32", "F", np.dtype(np.float32), 32, True, True))
FLOAT64 = register_kind(ScalarKind("float64", "D", np.dtype(np.float64), 64, True, True))
DECIMAL128 = register_kind(ScalarKind("decimal128", "M", OBJECT_DTYPE, 128, True, True))

FLOAT16 = register_kind(ScalarKind(
    "float16", "H", np.dtype(np.float16), 16, True, True,
    wide=preferred_wide_name(16, True), storage_only=True,
))


def _integer_kind(name: str, suffix: str, dtype, signed: bool) -> ScalarKind:
    dtype = np.dtype(dtype)
    bits = dtype.itemsize * 8
    return register_kind(ScalarKind(
        name, suffix, dtype, bits, signed, False, wide=preferred_wide_name(bits, False),
    ))


INT8 = _integer_kind("int8", "SB", np.int8, True)
UINT8 = _integer_kind("uint8", "B", np.uint8, False)
INT16 = _integer_kind("int16", "S", np.int16, True)
UINT16 = _integer_kind("uint16", "US", np.uint16, False)
INT32 = _integer_kind("int32", "I", np.int32, True)
UINT32 = _integer_kind("uint32", "UI", np.uint32, False)
INT64 = _integer_kind("int64", "L", np.int64, True)
UINT64 = _integer_kind("uint64", "UL", np.uint64, False)
INTPTR = _integer_kind("intptr", "N", np.intp, True)   # platform width
