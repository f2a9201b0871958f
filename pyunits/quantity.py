"""
Units-aware values.

A ``Quantity`` holds its magnitude in the base representation of its
dimension, regardless of the unit attached to it.  The unit is only used
when the quantity is created, when explicitly converting, when combining
units in multiplication / division / powers and for display.  This means
that arithmetic between quantities of the same dimension never needs a
conversion step.

Examples
--------
>>> from pyunits.dimension import LENGTH, MASS, TIME
>>> from pyunits.unit import Unit
>>> meter, second = Unit.base('meter', LENGTH), Unit.base('second', TIME)
>>> gram = Unit.linear('gram', MASS, 1e-3)
>>> joule = Unit.base('joule', MASS * LENGTH ** 2 / TIME ** 2)
>>> e = Quantity(1000, gram) * Quantity(4, meter) ** 2 / Quantity(1, second) ** 2
>>> float(e.magnitude_as(joule))
16.0

Values can also be made by multiplying a unit:

>>> km = Unit.linear('kilometer', LENGTH, 1000)
>>> (5 * km).magnitude_as(meter)
5000.0
"""

from __future__ import annotations

import numbers
import operator
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from pyunits._types import int_power
from pyunits.dimension import Dimension
from pyunits.exceptions import (IncompatibleDimensionsError,
                                UnitConversionError, UnknownUnitNameError)
from pyunits.transform import power
from pyunits.unit import Unit

__all__ = ['Quantity']


# ======================================================================

class Quantity:
    """
    ``Quantity`` represents a magnitude together with a ``Unit``.
    Quantities are immutable; every operation returns a new object.

    Arithmetic rules:

        - ``Quantity`` ± ``Quantity``: Dimensions must match, otherwise
          ``IncompatibleDimensionsError`` is raised.  The unit of the LHS
          is kept.
        - ``Quantity`` × / ÷ ``Quantity``: Units are combined (see
          ``Unit.multiply``), which raises ``UnitCompositionError`` for
          biased or logarithmic units.
        - ``Quantity`` × / ÷ scalar (or scalar × ``Quantity``): The
          magnitude is scaled and the unit is unchanged.  This is always
          permitted.
        - ``Quantity ** n``: Only integer `n` and only for units that can
          be combined.

    Parameters
    ----------
    magnitude : scalar or array_like
        Value expressed in `unit`.  Lists and tuples are converted to
        ``numpy`` arrays.
    unit : Unit
        Units of `magnitude`.
    """
    __slots__ = ('_magnitude', '_unit')
    __array_ufunc__ = None  # Prevent numpy from broadcasting over us.

    def __init__(self, magnitude: ArrayLike, unit: Unit):
        if not isinstance(unit, Unit):
            raise TypeError(f"Quantity requires a Unit, got "
                            f"{type(unit).__name__}.")
        if isinstance(magnitude, (list, tuple)):
            magnitude = np.asarray(magnitude)

        self._magnitude = unit.to_base(magnitude)
        self._unit = unit

    @classmethod
    def from_registry(cls, registry, magnitude: ArrayLike,
                      unit_name: str) -> Quantity:
        """
        Create a quantity using the unit called `unit_name` in `registry`.

        Raises
        ------
        UnknownUnitNameError
            If `registry` has no such unit.
        """
        unit = registry.get(unit_name)
        if unit is None:
            raise UnknownUnitNameError(unit_name)
        return cls(magnitude, unit)

    @classmethod
    def _from_base(cls, base_magnitude: ArrayLike, unit: Unit) -> Quantity:
        # Bypasses conversion; `base_magnitude` is already in base.
        res = cls.__new__(cls)
        res._magnitude = base_magnitude
        res._unit = unit
        return res

    # -- Properties ----------------------------------------------------

    @property
    def base_magnitude(self) -> ArrayLike:
        """Magnitude in base representation."""
        return self._magnitude

    @property
    def dimension(self) -> Dimension:
        return self._unit.dimension

    @property
    def magnitude(self) -> ArrayLike:
        """Magnitude expressed in the attached unit."""
        return self._unit.from_base(self._magnitude)

    @property
    def unit(self) -> Unit:
        return self._unit

    # -- Conversion ----------------------------------------------------

    def convert(self, unit: Unit) -> Quantity:
        """
        Returns the same quantity with `unit` attached instead.

        Raises
        ------
        UnitConversionError
            If `unit` has a different dimension.
        """
        self._check_convertible(unit)
        return Quantity._from_base(self._magnitude, unit)

    def magnitude_as(self, unit: Unit) -> ArrayLike:
        """
        Returns the magnitude expressed in `unit`.

        Raises
        ------
        UnitConversionError
            If `unit` has a different dimension.
        """
        self._check_convertible(unit)
        return unit.from_base(self._magnitude)

    m_as = magnitude_as  # Shorthand.

    def power(self, n: int) -> Quantity:
        """
        Raise the quantity to an integer power.  Both the magnitude (in
        base representation) and the unit are raised to `n`.

        Raises
        ------
        UnitCompositionError
            If the unit is biased or logarithmic.
        ValueError
            If `n` is not a whole number.
        """
        n = int_power(n)
        res_unit = self._unit.power(n)  # Checks unit first.
        return Quantity._from_base(power(self._magnitude, n), res_unit)

    def _check_convertible(self, unit: Unit):
        if self.dimension != unit.dimension:
            raise UnitConversionError(self.dimension, unit.dimension)

    def _check_same_dimension(self, rhs: Quantity):
        if self.dimension != rhs.dimension:
            raise IncompatibleDimensionsError(self.dimension, rhs.dimension)

    # -- Unary Operators -----------------------------------------------

    def __abs__(self) -> Quantity:
        return Quantity._from_base(abs(self._magnitude), self._unit)

    def __float__(self) -> float:
        """
        Returns float(self.magnitude), i.e. in the attached unit.

        .. note:: Units are removed and checking ability is lost.
        """
        return float(self.magnitude)

    def __neg__(self) -> Quantity:
        return Quantity._from_base(-self._magnitude, self._unit)

    # -- Binary Operators ----------------------------------------------

    def __add__(self, rhs: Quantity) -> Quantity:
        if not isinstance(rhs, Quantity):
            return NotImplemented
        self._check_same_dimension(rhs)
        return Quantity._from_base(self._magnitude + rhs._magnitude,
                                   self._unit)

    def __sub__(self, rhs: Quantity) -> Quantity:
        if not isinstance(rhs, Quantity):
            return NotImplemented
        self._check_same_dimension(rhs)
        return Quantity._from_base(self._magnitude - rhs._magnitude,
                                   self._unit)

    def __mul__(self, rhs: Quantity | ArrayLike) -> Quantity:
        if isinstance(rhs, Quantity):
            return Quantity._from_base(self._magnitude * rhs._magnitude,
                                       self._unit * rhs._unit)
        if not _is_scalar_like(rhs):
            return NotImplemented
        return Quantity._from_base(self._magnitude * rhs, self._unit)

    def __rmul__(self, lhs: ArrayLike) -> Quantity:
        if not _is_scalar_like(lhs):
            return NotImplemented
        return Quantity._from_base(lhs * self._magnitude, self._unit)

    def __truediv__(self, rhs: Quantity | ArrayLike) -> Quantity:
        if isinstance(rhs, Quantity):
            return Quantity._from_base(self._magnitude / rhs._magnitude,
                                       self._unit / rhs._unit)
        if not _is_scalar_like(rhs):
            return NotImplemented
        return Quantity._from_base(self._magnitude / rhs, self._unit)

    def __pow__(self, n: int) -> Quantity:
        return self.power(n)

    # -- Comparison Operators ------------------------------------------

    def __eq__(self, rhs):
        if not isinstance(rhs, Quantity):
            return NotImplemented
        if self.dimension != rhs.dimension:
            return False
        return self._magnitude == rhs._magnitude

    def __ne__(self, rhs):
        res = self.__eq__(rhs)
        if res is NotImplemented:
            return res
        return np.logical_not(res) if isinstance(res, np.ndarray) else not res

    __hash__ = None  # Magnitudes may be arrays.

    def __lt__(self, rhs):
        return _common_cmp(self, rhs, operator.lt)

    def __le__(self, rhs):
        return _common_cmp(self, rhs, operator.le)

    def __ge__(self, rhs):
        return _common_cmp(self, rhs, operator.ge)

    def __gt__(self, rhs):
        return _common_cmp(self, rhs, operator.gt)

    # -- String Magic Methods ------------------------------------------

    def __format__(self, format_spec: str):
        return format(self.magnitude, format_spec) + f" {self._unit.name}"

    def __repr__(self):
        return f"Quantity({self.magnitude!r}, '{self._unit.name}')"

    def __str__(self):
        return self.__format__('')


# ----------------------------------------------------------------------

def _common_cmp(lhs: Quantity, rhs, op: Callable[..., bool]):
    """
    Common method used for ordering comparisons between quantities.  Both
    must have the same dimension; base magnitudes are compared directly.
    """
    if not isinstance(rhs, Quantity):
        return NotImplemented
    lhs._check_same_dimension(rhs)
    return op(lhs.base_magnitude, rhs.base_magnitude)


def _is_scalar_like(x) -> bool:
    return isinstance(x, (numbers.Number, np.ndarray))
