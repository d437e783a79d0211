"""Angular unit definitions: one angle type with a radians and a degrees variant.

An angle is exactly one of two variants, ``Radians(v)`` or ``Degrees(v)``,
each holding a numeric payload in its own unit. The variant is fixed for the
lifetime of a value; converting with ``in_radians``/``in_degrees`` yields a
plain scalar and never changes the angle itself. Payloads are never range
checked, so negative angles and angles beyond one turn stay meaningful (for
example, cumulative rotation).

Unit Selection:
    Operations avoid converting between units whenever both operands are
    already in a common unit:

    - ``+`` and ``-``: Degrees with Degrees stays in degrees; every other
      pairing is computed in radians and returns Radians.
    - ``==``: Degrees with Degrees compares payloads; every other pairing
      compares radian measures.
    - ``<``, ``<=``, ``>``, ``>=`` and approximate equality: Radians with
      Radians compares payloads; every other pairing compares degree measures.
    - Scaling, negation and sign queries keep the variant and act on the payload.

    Equality and ordering pick different common units for mixed pairs. Both
    rules are kept as they are; a mixed pair that is ``==`` can in rare
    rounding cases compare as unequal under ordering.

Payload Kinds:
    Any real scalar kind works: ``int``, ``float``, NumPy scalars,
    ``Fraction`` and ``Decimal``. Conversions go through a double-precision
    intermediate and are cast back to the payload kind (Python ``int``
    becomes ``float``). A NumPy kind that cannot hold the converted value
    raises ``CastError`` instead of overflowing silently.

Classes:
    Angle: Base of the two variants; holds every operation.
    Radians: Angle variant whose payload is in radians.
    Degrees: Angle variant whose payload is in degrees.

Example:
    >>> heading = Degrees(45.0)
    >>> print(heading)
    45.0°
    >>> heading.in_radians()
    0.7853981633974483
    >>> Degrees(90.0) + Degrees(90.0)
    Degrees(180.0)
    >>> Degrees(-90.0).normalized()
    Degrees(270.0)
    >>> Degrees(180.0) == Radians(math.pi)
    True
"""

from __future__ import annotations

import math
from typing import ClassVar, Generic, TypeVar

from .. import approx, numeric
from .unit_base import Unit

T = TypeVar("T")


class Angle(Unit, Generic[T]):
    """An angle, stored either in radians or in degrees.

    ``Angle`` is the closed base of ``Radians`` and ``Degrees`` and cannot be
    instantiated directly. Values are immutable; every operation returns a
    new angle.

    Attributes:
        PERIOD (ClassVar[float]): Length of one full turn in the variant's unit.
    """

    __slots__ = ()

    IS_FAMILY_ROOT = True
    PERIOD: ClassVar[float]

    def __new__(cls, *args, **kwargs):
        if cls is Angle:
            msg = "Angle is abstract; construct Radians(...) or Degrees(...)"
            raise TypeError(msg)
        return super().__new__(cls)

    # -------------------------------- Conversions --------------------------------
    def in_radians(self) -> T:
        """Yield the value encoded in radians.

        Returns:
            The payload unchanged for Radians, otherwise ``v / 180 * π`` cast
            back into the payload kind.

        Raises:
            CastError: If the converted value does not fit the payload kind.
        """
        v = self._value
        if isinstance(self, Radians):
            return v
        return numeric.cast(numeric.to_anchor(v) / 180.0 * math.pi, numeric.result_kind(v))

    def in_degrees(self) -> T:
        """Yield the value encoded in degrees.

        Returns:
            The payload unchanged for Degrees, otherwise ``v / π * 180`` cast
            back into the payload kind.

        Raises:
            CastError: If the converted value does not fit the payload kind.
        """
        v = self._value
        if isinstance(self, Degrees):
            return v
        return numeric.cast(numeric.to_anchor(v) / math.pi * 180.0, numeric.result_kind(v))

    # -------------------------------- Constants --------------------------------
    @classmethod
    def eighth(cls, kind: type = float) -> Degrees:
        """An angle of 45°."""
        return Degrees(numeric.cast(45, kind))

    @classmethod
    def quarter(cls, kind: type = float) -> Degrees:
        """An angle of 90° (right angle)."""
        return Degrees(numeric.cast(90, kind))

    @classmethod
    def half(cls, kind: type = float) -> Degrees:
        """An angle of 180° (straight)."""
        return Degrees(numeric.cast(180, kind))

    @classmethod
    def full(cls, kind: type = float) -> Degrees:
        """An angle of 360° (perigon)."""
        return Degrees(numeric.cast(360, kind))

    @classmethod
    def zero(cls, kind: type = float) -> Radians:
        """The additive identity, ``Radians(0)``.

        Useful as the start value of ``sum``: ``sum(angles, Angle.zero())``.
        """
        return Radians(numeric.cast(0, kind))

    def is_zero(self) -> bool:
        """Return True if the payload is zero, whatever the variant."""
        return numeric.is_zero(self._value)

    # -------------------------------- Normalization --------------------------------
    def normalized(self) -> Angle[T]:
        """Create a new angle by normalizing the value into one turn.

        Radians land in [0, 2π) and degrees in [0, 360); the variant is kept.
        Values already in range are returned unchanged, without rounding.

        Example:
            >>> Degrees(-90.0).normalized()
            Degrees(270.0)
            >>> Radians(2 * math.pi).normalized()
            Radians(0.0)
        """
        v = self._value
        upper = numeric.cast(type(self).PERIOD, numeric.result_kind(v))

        if 0 <= v < upper:
            return self

        rem = numeric.fmod(v, upper)
        if rem < 0:
            rem = rem + upper
        # a tiny negative remainder can round up to a full turn
        if rem >= upper:
            rem = rem - upper
        return type(self)(rem)

    # -------------------------------- Distance & Trigonometry --------------------------------
    def min_dist(self, other: Angle[T]) -> Radians:
        """Compute the minimal unsigned distance between two angles.

        Returns:
            Radians: The shortest separation along the circle, in [0, π].

        Example:
            >>> d = Degrees(345.0).min_dist(Degrees(15.0))
            >>> round(d.in_degrees(), 10)
            30.0
        """
        a = self.in_radians()
        b = other.in_radians()
        kind = numeric.result_kind(a)
        pi = numeric.cast(math.pi, kind)
        two_pi = numeric.cast(2.0 * math.pi, kind)

        d = abs(a - b)

        # short-circuit if both angles are normalized
        if 0 <= a < two_pi and 0 <= b < two_pi:
            return Radians(min(d, two_pi - d))
        return Radians(pi - abs(numeric.fmod(d, two_pi) - pi))

    def sin(self):
        """Compute the sine of the angle."""
        return numeric.sin(self.in_radians())

    def cos(self):
        """Compute the cosine of the angle."""
        return numeric.cos(self.in_radians())

    def tan(self):
        """Compute the tangent of the angle."""
        return numeric.tan(self.in_radians())

    def sin_cos(self) -> tuple:
        """Simultaneously compute the sine and cosine of the angle.

        Returns:
            tuple: ``(sin(x), cos(x))``.
        """
        x = self.in_radians()
        return numeric.sin(x), numeric.cos(x)

    # -------------------------------- Sign --------------------------------
    def __abs__(self) -> Angle[T]:
        return type(self)(abs(self._value))

    def __neg__(self) -> Angle[T]:
        return type(self)(-self._value)

    def __pos__(self) -> Angle[T]:
        return self

    def signum(self) -> Angle[T]:
        """Return an angle in the same unit holding the sign of the payload.

        * ``1`` if the payload is positive, ``+0.0`` or ``+inf``
        * ``-1`` if the payload is negative, ``-0.0`` or ``-inf``
        * NaN if the payload is NaN
        * ``0`` for an integer zero
        """
        return type(self)(numeric.signum(self._value))

    def is_positive(self) -> bool:
        """Returns True if the payload has a positive sign (``+0.0`` included)."""
        return numeric.is_positive(self._value)

    def is_negative(self) -> bool:
        """Returns True if the payload has a negative sign (``-0.0`` included)."""
        return numeric.is_negative(self._value)

    # -------------------------------- Arithmetic Operations --------------------------------
    def _additive(self, other: Angle, op) -> Angle:
        if isinstance(self, Degrees) and isinstance(other, Degrees):
            return Degrees(op(self._value, other._value))
        return Radians(op(self.in_radians(), other.in_radians()))

    def __add__(self, other: Angle) -> Angle:
        """Add two angles.

        Args:
            other: Angle to add to this angle.

        Returns:
            Angle: Degrees if both operands are Degrees, Radians otherwise.
        """
        if not self._same_family(other):
            return NotImplemented
        return self._additive(other, lambda a, b: a + b)

    def __sub__(self, other: Angle) -> Angle:
        """Subtract two angles.

        Args:
            other: Angle to subtract from this angle.

        Returns:
            Angle: Degrees if both operands are Degrees, Radians otherwise.
        """
        if not self._same_family(other):
            return NotImplemented
        return self._additive(other, lambda a, b: a - b)

    def __iadd__(self, other: Angle) -> Angle:
        """In-place addition; same unit selection as ``+``."""
        return self.__add__(other)

    def __isub__(self, other: Angle) -> Angle:
        """In-place subtraction; same unit selection as ``-``."""
        return self.__sub__(other)

    def __mul__(self, k) -> Angle[T]:
        """Multiply the angle by a scalar, keeping its unit.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            Angle: Same variant holding ``v * k``.
        """
        if not numeric.is_scalar(k):
            return NotImplemented
        return type(self)(self._value * k)

    def __rmul__(self, k) -> Angle[T]:
        """Right-side multiplication by scalar; ``k * Degrees(v) == Degrees(k * v)``."""
        if not numeric.is_scalar(k):
            return NotImplemented
        return type(self)(k * self._value)

    def __truediv__(self, k) -> Angle[T]:
        """Divide the angle by a scalar, keeping its unit.

        Args:
            k: Numeric scalar to divide by.

        Returns:
            Angle: Same variant holding ``v / k``.
        """
        if not numeric.is_scalar(k):
            return NotImplemented
        return type(self)(self._value / k)

    def __rtruediv__(self, k) -> Angle[T]:
        """Right-side division by scalar; ``k / Degrees(v) == Degrees(k / v)``."""
        if not numeric.is_scalar(k):
            return NotImplemented
        return type(self)(k / self._value)

    def __imul__(self, k) -> Angle[T]:
        return self.__mul__(k)

    def __itruediv__(self, k) -> Angle[T]:
        return self.__truediv__(k)

    # -------------------------------- Comparison Operations --------------------------------
    def __eq__(self, other: object) -> bool:
        """Equality across units.

        Degrees are compared with Degrees directly; any other pairing is
        compared in radians.
        """
        if not self._same_family(other):
            return NotImplemented
        if isinstance(self, Degrees) and isinstance(other, Degrees):
            return bool(self._value == other._value)
        return bool(self.in_radians() == other.in_radians())

    def __hash__(self) -> int:
        # hash the double-precision measure so equal payloads of different kinds agree
        anchor = numeric.to_anchor(self._value)
        if isinstance(self, Degrees):
            anchor = anchor / 180.0 * math.pi
        return hash(anchor)

    def _common_unit(self, other: Angle) -> tuple:
        """Return both payloads in the unit used for ordering and approximate equality."""
        if isinstance(self, Radians) and isinstance(other, Radians):
            return self._value, other._value
        return self.in_degrees(), other.in_degrees()

    def partial_cmp(self, other: Angle) -> int | None:
        """Three-way comparison.

        Radians are compared with Radians directly; any other pairing is
        compared in degrees.

        Returns:
            ``-1``, ``0`` or ``1``, or None if the angles are unordered (NaN).
        """
        a, b = self._common_unit(other)
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        return None

    def __lt__(self, other: Angle) -> bool:
        if not self._same_family(other):
            return NotImplemented
        order = self.partial_cmp(other)
        return order is not None and order < 0

    def __le__(self, other: Angle) -> bool:
        if not self._same_family(other):
            return NotImplemented
        order = self.partial_cmp(other)
        return order is not None and order <= 0

    def __gt__(self, other: Angle) -> bool:
        if not self._same_family(other):
            return NotImplemented
        order = self.partial_cmp(other)
        return order is not None and order > 0

    def __ge__(self, other: Angle) -> bool:
        if not self._same_family(other):
            return NotImplemented
        order = self.partial_cmp(other)
        return order is not None and order >= 0

    # -------------------------------- Approximate Equality --------------------------------
    def abs_diff_eq(self, other: Angle, epsilon=None) -> bool:
        """Return True if the angles differ by at most ``epsilon``.

        The tolerance is in radians for a Radians pair and in degrees otherwise.
        """
        a, b = self._common_unit(other)
        return approx.abs_diff_eq(a, b, epsilon)

    def relative_eq(self, other: Angle, epsilon=None, max_relative=None) -> bool:
        """Return True if the angles agree within an absolute or relative bound."""
        a, b = self._common_unit(other)
        return approx.relative_eq(a, b, epsilon, max_relative)

    def ulps_eq(self, other: Angle, epsilon=None, max_ulps: int | None = None) -> bool:
        """Return True if the angles are at most ``max_ulps`` floats apart.

        Raises:
            TypeError: If the compared payloads are not binary floats.
        """
        a, b = self._common_unit(other)
        return approx.ulps_eq(a, b, epsilon, max_ulps)


class Radians(Angle[T]):
    """Angle variant whose payload is in radians.

    Attributes:
        SYMBOL (str): "rad", appended to the payload on display.
        PERIOD (float): 2π, one full turn.

    Example:
        >>> angle = Radians(1.5)
        >>> print(angle)
        1.5rad
        >>> angle.in_degrees()
        85.94366926962348
    """

    __slots__ = ()

    SYMBOL = "rad"
    PERIOD = 2.0 * math.pi


class Degrees(Angle[T]):
    """Angle variant whose payload is in degrees.

    Attributes:
        SYMBOL (str): "°", appended to the payload on display.
        PERIOD (float): 360, one full turn.

    Example:
        >>> bearing = Degrees(90.0)
        >>> print(bearing)
        90.0°
        >>> bearing.in_radians()
        1.5707963267948966
    """

    __slots__ = ()

    SYMBOL = "°"
    PERIOD = 360.0
