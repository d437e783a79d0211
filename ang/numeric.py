"""Scalar-kind capabilities used by the angle types.

An angle payload can be any real scalar kind: Python ``int`` and ``float``,
NumPy scalar kinds, ``Fraction`` or ``Decimal``. This module gathers every
operation whose behavior depends on that kind, so the angle types above it
never need to branch on the payload's type themselves.

Capabilities:
    - Validation: reject complex, array and non-numeric payloads.
    - Float anchor: every unit conversion goes through a double-precision
      intermediate and is cast back into the payload kind. The cast is
      checked; values that cannot be represented raise ``CastError``.
    - Truncating remainder: ``fmod`` keeps the sign of the dividend for every
      kind, matching IEEE/C semantics rather than Python's floored ``%``.
    - Sign queries: ``signum``, ``is_positive`` and ``is_negative`` follow
      sign-bit semantics for floating kinds and plain ordering otherwise.
    - Transcendental functions: thin wrappers over NumPy ufuncs that keep
      NumPy kinds intact, return ``float`` for Python inputs, and propagate
      NaN instead of raising on domain errors.

Example:
    >>> import numpy as np
    >>> cast(3.7, np.int32)
    np.int32(3)
    >>> fmod(-90.0, 360.0)
    -90.0
    >>> signum(-0.0)
    -1.0
    >>> arcsin(2.0)
    nan
"""

from __future__ import annotations

import logging
import math
import numbers
from decimal import Decimal

import numpy as np

logger = logging.getLogger(__name__)


class CastError(ValueError):
    """Raised when a value cannot be represented in the requested scalar kind."""


def is_scalar(value) -> bool:
    """Return True if ``value`` is a real scalar usable as an angle payload."""
    if isinstance(value, Decimal):
        return True
    return isinstance(value, numbers.Real)


def check_scalar(value) -> None:
    """Raise ``TypeError`` unless ``value`` is a real scalar."""
    if not is_scalar(value):
        msg = f"angle payload must be a real scalar, got {type(value).__name__}"
        raise TypeError(msg)


def result_kind(value) -> type:
    """Return the kind a converted ``value`` is cast back into.

    Python ``int`` (and ``bool``) promote to ``float``; every other kind,
    NumPy integers included, is preserved.
    """
    if isinstance(value, int):
        return float
    return type(value)


def is_floating(value) -> bool:
    """Return True for kinds with IEEE-like signed zero, infinities and NaN."""
    return isinstance(value, (float, np.floating, Decimal))


def is_nan(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if is_floating(value):
        return bool(np.isnan(value))
    return False


def is_infinite(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_infinite()
    if is_floating(value):
        return bool(np.isinf(value))
    return False


def to_anchor(value) -> float:
    """Convert ``value`` to the double-precision anchor used for conversions."""
    try:
        return float(value)
    except (OverflowError, ValueError, TypeError) as exc:
        logger.debug("cannot convert %r to float", value)
        msg = f"{value!r} is not representable as a double"
        raise CastError(msg) from exc


def cast(value, kind: type):
    """Cast a double-precision ``value`` into the scalar ``kind``.

    Integer kinds truncate toward zero. Non-finite values cannot enter an
    integer kind, and finite values outside a NumPy kind's range are
    rejected instead of wrapping or saturating.

    Raises:
        CastError: If ``value`` has no representation in ``kind``.
    """
    try:
        if kind is float:
            return float(value)
        if issubclass(kind, np.floating):
            if math.isfinite(value) and abs(value) > float(np.finfo(kind).max):
                msg = f"{value!r} overflows {kind.__name__}"
                raise CastError(msg)
            return kind(value)
        if issubclass(kind, np.integer):
            if not math.isfinite(value):
                msg = f"{value!r} cannot be cast to {kind.__name__}"
                raise CastError(msg)
            truncated = math.trunc(value)
            info = np.iinfo(kind)
            if not info.min <= truncated <= info.max:
                msg = f"{value!r} overflows {kind.__name__}"
                raise CastError(msg)
            return kind(truncated)
        if issubclass(kind, int):
            return kind(math.trunc(value))
        return kind(value)
    except CastError:
        logger.debug("cast of %r into %s failed", value, kind.__name__)
        raise
    except (OverflowError, ValueError, TypeError) as exc:
        logger.debug("cast of %r into %s failed", value, kind.__name__)
        msg = f"{value!r} cannot be cast to {kind.__name__}"
        raise CastError(msg) from exc


def fmod(a, b):
    """Truncating remainder of ``a / b``; the result has the sign of ``a``.

    Non-finite dividends and zero divisors yield NaN for floating kinds.
    """
    if isinstance(a, np.generic) or isinstance(b, np.generic):
        with np.errstate(invalid="ignore", divide="ignore"):
            return np.fmod(a, b)
    if isinstance(a, Decimal) or isinstance(b, Decimal):
        # Decimal's % already truncates toward zero
        return a % b
    if isinstance(a, float) or isinstance(b, float):
        if math.isinf(a) or math.isnan(a) or math.isnan(b) or b == 0:
            return math.nan
        return math.fmod(a, b)
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return a - b * math.trunc(a / b)


def signum(value):
    """Return the sign of ``value`` in its own kind.

    Floating kinds return ``±1`` by sign bit (so ``-0.0`` gives ``-1``) and
    NaN for NaN. Other kinds return ``-1``, ``0`` or ``1``.
    """
    if isinstance(value, Decimal):
        return value if value.is_nan() else Decimal(1).copy_sign(value)
    if isinstance(value, np.floating):
        return value if np.isnan(value) else np.copysign(type(value)(1), value)
    if isinstance(value, float):
        return value if math.isnan(value) else math.copysign(1.0, value)
    kind = type(value)
    return kind(int(value > 0) - int(value < 0))


def is_positive(value) -> bool:
    """True for values with a positive sign; ``+0.0`` and ``+inf`` included."""
    if isinstance(value, Decimal):
        return not value.is_signed()
    if is_floating(value):
        return not bool(np.signbit(value))
    return bool(value > 0)


def is_negative(value) -> bool:
    """True for values with a negative sign; ``-0.0`` and ``-inf`` included."""
    if isinstance(value, Decimal):
        return value.is_signed()
    if is_floating(value):
        return bool(np.signbit(value))
    return bool(value < 0)


def is_zero(value) -> bool:
    return bool(value == 0)


# ------------------------------ Transcendental functions ------------------------------
def _apply(ufunc, *args):
    """Evaluate ``ufunc`` with IEEE propagation instead of Python exceptions."""
    if any(isinstance(arg, np.generic) for arg in args):
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            return ufunc(*args)
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        return float(ufunc(*(to_anchor(arg) for arg in args)))


def sin(value):
    return _apply(np.sin, value)


def cos(value):
    return _apply(np.cos, value)


def tan(value):
    return _apply(np.tan, value)


def arcsin(value):
    return _apply(np.arcsin, value)


def arccos(value):
    return _apply(np.arccos, value)


def arctan(value):
    return _apply(np.arctan, value)


def arctan2(y, x):
    return _apply(np.arctan2, y, x)


__all__ = [
    "CastError",
    "arccos",
    "arcsin",
    "arctan",
    "arctan2",
    "cast",
    "check_scalar",
    "cos",
    "fmod",
    "is_floating",
    "is_infinite",
    "is_nan",
    "is_negative",
    "is_positive",
    "is_scalar",
    "is_zero",
    "result_kind",
    "signum",
    "sin",
    "tan",
    "to_anchor",
]
