"""Unit-tagged angles that unify radians and degrees behind one type.

``ang`` removes "degrees vs. radians" bookkeeping from angle computations in
graphics, navigation, robotics and signal processing. An angle is always
either ``Radians(v)`` or ``Degrees(v)``; every operation knows which and
converts only when it has to.

Library Components:
    Angle Types (ang.unit):
        • Radians / Degrees: the two variants of ``Angle``
        • Unit-aware arithmetic, equality, ordering and approximate equality
        • Normalization into one turn and minimal angular distance
        • Direct trigonometry (sin, cos, tan, sin_cos)

    Trigonometric Constructors (ang.trig):
        • asin / acos returning None outside [-1, 1]
        • atan / atan2
        • mean_angle: circular mean that handles wraparound

    Scalar Layer (ang.numeric, ang.approx, ang.config):
        • Payloads of any real kind: int, float, NumPy scalars, Fraction, Decimal
        • Checked numeric casts raising CastError instead of wrapping
        • Absolute, relative and ULP tolerances with per-kind defaults

Example:
    >>> from ang import Degrees, Radians, mean_angle
    >>> heading = Degrees(350.0) + Degrees(20.0)
    >>> heading
    Degrees(370.0)
    >>> heading.normalized()
    Degrees(10.0)
    >>> round(Degrees(0.1).min_dist(Degrees(359.9)).in_degrees(), 6)
    0.2
    >>> round(mean_angle([Degrees(20.0), Degrees(350.0)]).in_degrees(), 6)
    5.0
"""

import logging

from .numeric import CastError
from .trig import acos, asin, atan, atan2, mean_angle
from .unit import Angle, Degrees, Radians

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "CastError",
    "Degrees",
    "Radians",
    "acos",
    "asin",
    "atan",
    "atan2",
    "mean_angle",
]
