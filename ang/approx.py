"""Approximate equality for scalar payloads.

Three comparison strategies are provided, each with defaults taken from
``ang.config`` for the kind of the left operand:

- ``abs_diff_eq``: the absolute difference is within ``epsilon``.
- ``relative_eq``: within ``epsilon`` absolutely, or within ``max_relative``
  of the larger magnitude. Infinities only match themselves exactly.
- ``ulps_eq``: within ``epsilon`` absolutely, or at most ``max_ulps``
  representable values apart. Requires a binary floating-point kind.

Example:
    >>> abs_diff_eq(1.0, 1.0 + 1e-17)
    True
    >>> relative_eq(1e10, 1e10 + 1.0, max_relative=1e-9)
    True
    >>> ulps_eq(0.1 + 0.2, 0.3)
    True
"""

from __future__ import annotations

import numpy as np

from . import numeric
from .config import DEFAULT_MAX_ULPS, default_epsilon, default_max_relative


def _abs_diff(a, b):
    return a - b if a > b else b - a


def abs_diff_eq(a, b, epsilon=None) -> bool:
    """Return True if ``|a - b| <= epsilon``."""
    if epsilon is None:
        epsilon = default_epsilon(type(a))
    return bool(_abs_diff(a, b) <= epsilon)


def relative_eq(a, b, epsilon=None, max_relative=None) -> bool:
    """Return True if ``a`` and ``b`` agree within an absolute or relative bound."""
    if epsilon is None:
        epsilon = default_epsilon(type(a))
    if max_relative is None:
        max_relative = default_max_relative(type(a))

    if a == b:
        return True
    if numeric.is_infinite(a) or numeric.is_infinite(b):
        return False

    diff = abs(a - b)
    if diff <= epsilon:
        return True

    largest = max(abs(a), abs(b))
    return bool(diff <= largest * max_relative)


def _as_binary_float(value):
    if isinstance(value, float) and not isinstance(value, np.floating):
        value = np.float64(value)
    if not isinstance(value, np.floating):
        msg = f"ULP comparison requires a binary floating-point kind, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _to_bits(value, dtype) -> int:
    raw = np.asarray(value, dtype=dtype)
    return int(raw.view(f"u{raw.itemsize}"))


def ulps_eq(a, b, epsilon=None, max_ulps: int | None = None) -> bool:
    """Return True if ``a`` and ``b`` are at most ``max_ulps`` floats apart.

    Operands of different widths are measured in the wider format.

    Raises:
        TypeError: If either operand is not a binary floating-point scalar.
    """
    if epsilon is None:
        epsilon = default_epsilon(type(a))
    if max_ulps is None:
        max_ulps = DEFAULT_MAX_ULPS

    wide_a = _as_binary_float(a)
    wide_b = _as_binary_float(b)
    dtype = np.promote_types(wide_a.dtype, wide_b.dtype)

    if abs_diff_eq(a, b, epsilon):
        return True
    # opposite signs never match by ULP distance
    if numeric.signum(a) != numeric.signum(b):
        return False

    return abs(_to_bits(wide_a, dtype) - _to_bits(wide_b, dtype)) <= max_ulps


__all__ = ["abs_diff_eq", "relative_eq", "ulps_eq"]
