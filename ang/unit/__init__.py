"""Unit-tagged angle values.

This package provides the angle type: a value that is either ``Radians`` or
``Degrees`` and that converts, compares and combines across the two units
without manual bookkeeping.

Architecture:
    - unit_base: Foundation Unit class with family management and display
    - unit_angle: Angle with its Radians and Degrees variants

Example:
    >>> from ang.unit import Degrees, Radians
    >>> Degrees(90.0) + Radians(0.5)
    Radians(2.0707963267948966)
    >>> print(Degrees(90.0))
    90.0°
"""

from .unit_angle import Angle, Degrees, Radians
from .unit_base import Unit

__all__ = [
    # Base classes
    "Unit",
    # Angular units
    "Angle",
    "Radians",
    "Degrees",
]
