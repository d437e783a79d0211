"""Base unit system foundation for unit-tagged values.

This module provides the fundamental Unit class that serves as the base
for the angle variants. A unit value is an immutable wrapper around one
numeric payload whose class records how that payload is interpreted. It
implements the unit family system using automatic ROOT class assignment,
which lets operators accept any member of the same family while rejecting
unrelated objects.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base class of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- Immutability: the payload is fixed at construction; operations return new values
- Unit-tagged display: the payload is rendered followed by the class SYMBOL

Classes:
    Unit: Base class for all unit-tagged values with family management.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for angle units
    >>> class Radians(Angle):
    ...     SYMBOL = "rad"  # Automatically gets ROOT = Angle
    >>> class Degrees(Angle):
    ...     SYMBOL = "°"  # Also gets ROOT = Angle
    >>> str(Degrees(90.0))
    '90.0°'
"""

from __future__ import annotations

from typing import ClassVar

from .. import numeric
from ..config import BASE_TYPE


class Unit:
    """Base class for all unit-tagged values.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol appended to the payload on display.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)
    # NumPy scalars and arrays defer to our reflected operators
    __array_priority__ = 1000
    __array_ufunc__ = None

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        This method is called when a class is subclassed and automatically
        determines the ROOT class by finding the first ancestor with
        IS_FAMILY_ROOT=True, or defaults to self if none found.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    def __init__(self, value: BASE_TYPE) -> None:
        """Wrap ``value`` as the payload of this unit.

        Args:
            value: Real scalar interpreted in this unit.

        Raises:
            TypeError: If value is not a real scalar.
        """
        numeric.check_scalar(value)
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> BASE_TYPE:
        """The raw payload, in this value's own unit."""
        return self._value

    def __setattr__(self, name, value):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        return (type(self), (self._value,))

    @classmethod
    def _same_family(cls, other: object) -> bool:
        """Check if ``other`` belongs to the same unit family as this class.

        Args:
            other: Object to check compatibility with.

        Returns:
            bool: True if other is a unit value sharing this class's ROOT.
        """
        return isinstance(other, Unit) and cls.ROOT is type(other).ROOT

    def __str__(self) -> str:
        """Return the payload followed by the unit symbol (e.g., "90.0°")."""
        return f"{self._value}{type(self).SYMBOL}"

    def __format__(self, format_spec: str) -> str:
        """Format the payload with ``format_spec`` and append the unit symbol."""
        return f"{format(self._value, format_spec)}{type(self).SYMBOL}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
