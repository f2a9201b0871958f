"""
Dimension algebra.  A ``Dimension`` is the 'type' of a physical quantity,
given as integer powers of ten fundamental axes.

Examples
--------
>>> force = MASS * LENGTH / TIME ** 2
>>> print(force)
mass * length * [time]^-2
>>> force / (MASS * LENGTH / TIME ** 2) == DIMENSIONLESS
True
>>> print(DIMENSIONLESS)
count
"""

from __future__ import annotations

from collections import namedtuple
from enum import Enum

from pyunits._types import int_power

__all__ = ['Fundamental', 'Dimension', 'N_FUNDAMENTALS', 'MASS', 'LENGTH',
           'TIME', 'CURRENT', 'TEMPERATURE', 'AMOUNT_OF_SUBSTANCE',
           'LUMINOUS_INTENSITY', 'ANGLE', 'BIT', 'COUNT', 'DIMENSIONLESS']


# ======================================================================

class Fundamental(Enum):
    """
    The fundamental axes from which all dimensions are built, in fixed
    order.  Each value is the name used for the axis in unit definition
    files and in displayed dimensions.  ``COUNT`` is the dimensionless
    axis.
    """
    MASS = 'mass'
    LENGTH = 'length'
    TIME = 'time'
    CURRENT = 'current'
    TEMPERATURE = 'temperature'
    AMOUNT_OF_SUBSTANCE = 'amount of substance'
    LUMINOUS_INTENSITY = 'luminous intensity'
    ANGLE = 'angle'
    BIT = 'bit'
    COUNT = 'count'

    @classmethod
    def from_name(cls, name: str) -> Fundamental:
        """
        Returns the axis with the given name, e.g. ``'amount of
        substance'``.

        Raises
        ------
        ValueError
            If there is no axis with this name.
        """
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown fundamental dimension "
                             f"'{name}'.") from None

    @property
    def index(self) -> int:
        """Position of this axis in a ``Dimension``."""
        return _AXIS_INDEX[self]

    def __str__(self):
        return self.value


_AXIS_ORDER = tuple(Fundamental)
N_FUNDAMENTALS = len(_AXIS_ORDER)
_AXIS_INDEX = {axis: i for i, axis in enumerate(_AXIS_ORDER)}


# ----------------------------------------------------------------------

class Dimension(namedtuple('Dimension',
                           [f.name.lower() for f in _AXIS_ORDER],
                           defaults=[0] * N_FUNDAMENTALS)):
    """
    ``Dimension`` is an immutable vector of integer powers, one for each
    fundamental axis in ``Fundamental`` order.  Dimensions are hashable
    and compare equal only if all powers are equal.

    A ``Dimension`` is always held in canonical form:

        - If all of the non-count powers are zero, the value is
          dimensionless and the `count` power is set to 1.
        - Otherwise, the `count` power is set to 0.

    This means that there is only one dimensionless value, and that
    `count` drops out when combined with any other axis.

    Construction is by position or by axis field name, with missing
    powers assumed zero, e.g. ``Dimension(mass=1, length=2, time=-2)``.
    Calling ``Dimension()`` gives the dimensionless value.
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs) -> Dimension:
        raw = super().__new__(cls, *args, **kwargs)
        powers = [int_power(p) for p in raw]
        if any(powers[:-1]):
            powers[-1] = 0
        else:
            powers = [0] * (N_FUNDAMENTALS - 1) + [1]
        return super().__new__(cls, *powers)

    @classmethod
    def _make(cls, iterable) -> Dimension:
        # Also used by _replace.
        return cls(*iterable)

    @classmethod
    def from_fundamental(cls, axis: Fundamental) -> Dimension:
        """Returns the unit dimension along the given axis."""
        powers = [0] * N_FUNDAMENTALS
        powers[axis.index] = 1
        return cls(*powers)

    # -- Algebra -------------------------------------------------------

    def multiply(self, rhs: Dimension) -> Dimension:
        """Multiply dimensions (powers are added)."""
        return Dimension(*(a + b for a, b in zip(self, rhs)))

    def divide(self, rhs: Dimension) -> Dimension:
        """Divide dimensions (powers are subtracted)."""
        return Dimension(*(a - b for a, b in zip(self, rhs)))

    def power(self, n: int) -> Dimension:
        """
        Raise dimension to an integer power (powers are multiplied).

        Raises
        ------
        ValueError
            If `n` is not a whole number.
        """
        n = int_power(n)
        return Dimension(*(p * n for p in self))

    @property
    def is_dimensionless(self) -> bool:
        return not any(self[:-1])

    # -- Operators -----------------------------------------------------

    def __mul__(self, rhs: Dimension) -> Dimension:
        _check_dimension(rhs, "multiply")
        return self.multiply(rhs)

    def __truediv__(self, rhs: Dimension) -> Dimension:
        _check_dimension(rhs, "divide")
        return self.divide(rhs)

    def __rmul__(self, lhs: Dimension) -> Dimension:
        _check_dimension(lhs, "multiply")
        return lhs.multiply(self)

    def __add__(self, rhs):
        raise TypeError("Dimensions can't be added, only multiplied or "
                        "divided.")

    __radd__ = __add__

    def __pow__(self, n: int) -> Dimension:
        return self.power(n)

    # -- String Magic Methods ------------------------------------------

    def __str__(self):
        """
        Axes with non-zero powers are shown in order, e.g. ``mass *
        [length]^2 * [time]^-2``.  Dimensionless values give ``count``.
        """
        parts = []
        for axis, pwr in zip(_AXIS_ORDER, self):
            if pwr == 1:
                parts.append(str(axis))
            elif pwr != 0:
                parts.append(f"[{axis}]^{pwr}")

        return ' * '.join(parts)


# ----------------------------------------------------------------------

def _check_dimension(rhs, operation: str):
    # Raised directly, otherwise tuple repetition would apply.
    if not isinstance(rhs, Dimension):
        raise TypeError(f"Can only {operation} a Dimension by another "
                        f"Dimension, got {type(rhs).__name__}.")


# -- Axis Dimensions ---------------------------------------------------

MASS = Dimension.from_fundamental(Fundamental.MASS)
LENGTH = Dimension.from_fundamental(Fundamental.LENGTH)
TIME = Dimension.from_fundamental(Fundamental.TIME)
CURRENT = Dimension.from_fundamental(Fundamental.CURRENT)
TEMPERATURE = Dimension.from_fundamental(Fundamental.TEMPERATURE)
AMOUNT_OF_SUBSTANCE = Dimension.from_fundamental(
    Fundamental.AMOUNT_OF_SUBSTANCE)
LUMINOUS_INTENSITY = Dimension.from_fundamental(
    Fundamental.LUMINOUS_INTENSITY)
ANGLE = Dimension.from_fundamental(Fundamental.ANGLE)
BIT = Dimension.from_fundamental(Fundamental.BIT)
COUNT = Dimension.from_fundamental(Fundamental.COUNT)
DIMENSIONLESS = COUNT
