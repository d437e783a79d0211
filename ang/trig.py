"""Inverse trigonometric constructors and circular statistics.

These functions produce angles from floating-point values and need
transcendental functions, so they sit on top of the core angle types
rather than inside them. Every result is a ``Radians`` angle.

Functions:
    asin: Arcsine, or None outside [-1, 1].
    acos: Arccosine, or None outside [-1, 1].
    atan: Arctangent, always defined.
    atan2: Four-quadrant arctangent, always defined.
    mean_angle: Circular mean of a sequence of angles.

Example:
    >>> asin(1.0)
    Radians(1.5707963267948966)
    >>> acos(2.0) is None
    True
    >>> round(mean_angle([Degrees(20.0), Degrees(350.0)]).in_degrees(), 6)  # not 185°
    5.0
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from . import numeric
from .unit import Angle, Radians

logger = logging.getLogger(__name__)


def asin(value) -> Radians | None:
    """Compute the arcsine of a number.

    Returns:
        Radians in [-π/2, π/2], or None if the number is outside [-1, 1].
    """
    result = numeric.arcsin(value)
    if numeric.is_nan(result):
        return None
    return Radians(result)


def acos(value) -> Radians | None:
    """Compute the arccosine of a number.

    Returns:
        Radians in [0, π], or None if the number is outside [-1, 1].
    """
    result = numeric.arccos(value)
    if numeric.is_nan(result):
        return None
    return Radians(result)


def atan(value) -> Radians:
    """Compute the arctangent of a number, in [-π/2, π/2] rad."""
    return Radians(numeric.arctan(value))


def atan2(y, x) -> Radians:
    """Compute the four quadrant arctangent of ``y`` and ``x``."""
    return Radians(numeric.arctan2(y, x))


def mean_angle(angles: Iterable[Angle]) -> Radians:
    """Compute the circular mean of ``angles``.

    Averages the Cartesian coordinates of the angles on the unit circle, so
    wraparound is handled correctly: the mean of 20° and 350° is 5°, not
    185°. The input is consumed once, lazily; generators work.

    Args:
        angles: Any iterable of angles, in any mix of units.

    Returns:
        Radians: The mean direction, normalized into [0, 2π).

    Raises:
        ValueError: If ``angles`` is empty.

    Example:
        >>> mu = mean_angle([Degrees(270.0), Degrees(360.0), Degrees(90.0)])
        >>> mu.min_dist(Radians(0.0)).in_radians() < 1e-10
        True
    """
    x = 0
    y = 0
    n = 0

    for angle in angles:
        sin, cos = angle.sin_cos()
        x = x + cos
        y = y + sin
        n += 1

    if n == 0:
        logger.debug("mean_angle called with no angles")
        msg = "mean_angle requires at least one angle"
        raise ValueError(msg)

    return atan2(y / n, x / n).normalized()


__all__ = ["acos", "asin", "atan", "atan2", "mean_angle"]
