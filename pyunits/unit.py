"""
Units pair a ``Dimension`` with a ``Transformation`` under a display name.

Examples
--------
>>> from pyunits.dimension import LENGTH, TIME
>>> km = Unit.linear('kilometer', LENGTH, 1000)
>>> minute = Unit.linear('minute', TIME, 60)
>>> speed = km / minute
>>> print(speed)
(kilometer / minute) [length * [time]^-1]
>>> float(speed.to_base(1.0))
16.666666666666668
"""

from __future__ import annotations

from dataclasses import dataclass, field

from numpy.typing import ArrayLike

from pyunits._types import int_power
from pyunits.dimension import Dimension
from pyunits.exceptions import UnitCompositionError
from pyunits.transform import (Decibel, Identity, Linear, Transformation,
                               is_scale_only, scale_of)

__all__ = ['Unit']


# ======================================================================

@dataclass(frozen=True)
class Unit:
    """
    ``Unit`` objects are immutable.  Multiplying, dividing or raising
    units to a power creates a new unit with a generated name, e.g.
    ``'(meter * second)'``.

    Only units having a pure scale transformation (``Identity`` or
    ``Linear`` with zero offset) can be combined in this way.  Offset
    (biased) and logarithmic scales have no meaningful product, so trying
    to combine them raises ``UnitCompositionError``.

    Parameters
    ----------
    name : str
        Display name, which is also the key used in a registry.
    dimension : Dimension
        Physical dimension of the unit.
    transformation : Transformation, default = Identity()
        Conversion to / from the base representation.
    """
    name: str
    dimension: Dimension
    transformation: Transformation = field(default_factory=Identity)

    __array_ufunc__ = None  # So that ``array * unit`` uses __rmul__.

    def __post_init__(self):
        if not isinstance(self.dimension, Dimension):
            raise TypeError(f"Unit '{self.name}' requires a Dimension, got "
                            f"{type(self.dimension).__name__}.")
        if not isinstance(self.transformation, (Identity, Linear, Decibel)):
            raise TypeError(f"Unit '{self.name}' has unknown transformation "
                            f"{self.transformation!r}.")

    @classmethod
    def base(cls, name: str, dimension: Dimension) -> Unit:
        """Create a unit which is the base representation (``Identity``)."""
        return cls(name, dimension, Identity())

    @classmethod
    def linear(cls, name: str, dimension: Dimension, scale: float,
               offset: float = 0.0) -> Unit:
        """Create a unit with a ``Linear`` transformation."""
        return cls(name, dimension, Linear(scale, offset))

    # -- Conversion ----------------------------------------------------

    def to_base(self, value: ArrayLike) -> ArrayLike:
        """Convert `value` in these units to base representation."""
        return self.transformation.to_base(value)

    def from_base(self, value: ArrayLike) -> ArrayLike:
        """Convert `value` in base representation to these units."""
        return self.transformation.from_base(value)

    def compatible(self, other: Unit) -> bool:
        """Returns ``True`` if both units have the same dimension."""
        return self.dimension == other.dimension

    @property
    def is_scale_only(self) -> bool:
        """``True`` if this unit can be multiplied, divided, etc."""
        return is_scale_only(self.transformation)

    # -- Composition ---------------------------------------------------

    def multiply(self, rhs: Unit) -> Unit:
        """
        Returns the product of two units.

        Raises
        ------
        UnitCompositionError
            If either unit is biased or logarithmic.
        """
        self._check_composable('multiply')
        rhs._check_composable('multiply')
        return Unit(f"({self.name} * {rhs.name})",
                    self.dimension * rhs.dimension,
                    Linear(scale_of(self.transformation) *
                           scale_of(rhs.transformation)))

    def divide(self, rhs: Unit) -> Unit:
        """
        Returns the quotient of two units.

        Raises
        ------
        UnitCompositionError
            If either unit is biased or logarithmic.
        """
        self._check_composable('divide')
        rhs._check_composable('divide')
        return Unit(f"({self.name} / {rhs.name})",
                    self.dimension / rhs.dimension,
                    Linear(scale_of(self.transformation) /
                           scale_of(rhs.transformation)))

    def power(self, n: int) -> Unit:
        """
        Raise the unit to an integer power.  An ``Identity`` unit remains
        ``Identity``, and a ``Linear`` unit has its scale raised to the
        same power.

        Raises
        ------
        UnitCompositionError
            If the unit is biased or logarithmic.
        ValueError
            If `n` is not a whole number.
        """
        n = int_power(n)
        self._check_composable('raise to a power')
        if isinstance(self.transformation, Identity):
            trans = Identity()
        else:
            trans = Linear(self.transformation.scale ** n)

        return Unit(f"({self.name}^{n})", self.dimension ** n, trans)

    def _check_composable(self, operation: str):
        t = self.transformation
        if isinstance(t, Decibel):
            raise UnitCompositionError(self.name, operation,
                                       "logarithmic (decibel) scale")
        if not is_scale_only(t):
            raise UnitCompositionError(self.name, operation,
                                       f"biased linear scale (offset = "
                                       f"{t.offset})")

    # -- Operators -----------------------------------------------------

    def __mul__(self, rhs: Unit) -> Unit:
        if not isinstance(rhs, Unit):
            return NotImplemented
        return self.multiply(rhs)

    def __rmul__(self, lhs: ArrayLike):
        """``value * unit`` gives ``Quantity(value, unit)``."""
        from pyunits.quantity import Quantity
        if isinstance(lhs, Quantity):
            return NotImplemented
        return Quantity(lhs, self)

    def __truediv__(self, rhs: Unit) -> Unit:
        if not isinstance(rhs, Unit):
            return NotImplemented
        return self.divide(rhs)

    def __pow__(self, n: int) -> Unit:
        return self.power(n)

    def __str__(self):
        return f"{self.name} [{self.dimension}]"
