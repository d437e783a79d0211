"""Global configuration and type definitions for the angle library.

This module provides the scalar type alias shared by every module and the
default tolerances used by approximate angle comparisons. Defaults are
derived from the payload's numeric kind, so single-precision angles get a
single-precision epsilon and exact kinds compare with zero tolerance.

Type Definitions:
    BASE_TYPE: Union type defining acceptable payload kinds. Supports Python
               native numbers, NumPy scalar kinds, and the exact decimal and
               rational kinds from the standard library.

Example:
    >>> import numpy as np
    >>> from ang.config import default_epsilon, DEFAULT_MAX_ULPS
    >>> default_epsilon(float)
    2.220446049250313e-16
    >>> default_epsilon(np.float32)
    np.float32(1.1920929e-07)
    >>> DEFAULT_MAX_ULPS
    4
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import numpy as np

BASE_TYPE = int | float | np.number | Fraction | Decimal

DEFAULT_MAX_ULPS = 4


def _is_binary_float(kind: type) -> bool:
    return kind is float or (isinstance(kind, type) and issubclass(kind, np.floating))


def default_epsilon(kind: type):
    """Return the default absolute tolerance for values of ``kind``.

    Binary floating kinds use their machine epsilon; every other kind
    compares exactly.
    """
    if kind is float:
        return float(np.finfo(np.float64).eps)
    if _is_binary_float(kind):
        return np.finfo(kind).eps
    return kind(0)


def default_max_relative(kind: type):
    """Return the default relative tolerance for values of ``kind``."""
    return default_epsilon(kind)
