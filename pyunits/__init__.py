"""
Units (:mod:`pyunits`)
======================

.. currentmodule:: pyunits

Dimensional analysis and units-aware calculations.

Examples
--------

Units are looked up by name in a registry.  The factory function
``quantity()`` uses the default registry, which holds the common SI and
imperial units along with the SI prefixed versions of many of them.

>>> d = quantity(5, 'kilometer')
>>> round(d.magnitude_as(unit('foot')))
16404

Values are held internally in the base representation of their
dimension, so values having the same dimension can be added directly.
The result keeps the unit of the left hand side:

>>> print(quantity(1, 'kilometer') + quantity(500, 'meter'))
1.5 kilometer

Values with different dimensions can't be added or compared:

>>> quantity(1, 'meter') + quantity(1, 'second')
... # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
pyunits.exceptions.IncompatibleDimensionsError: These dimensions are not
compatible to perform this operation: length and time

Multiplication and division combine the units as well as the values:

>>> f = quantity(2, 'kilogram') * quantity(9.81, 'meter') / (
...     quantity(1, 'second') ** 2)
>>> f.dimension == unit('newton').dimension
True
>>> float(f.magnitude_as(unit('newton')))
19.62

Units having an offset (e.g. degrees Celsius) or a logarithmic scale
(decibels) can be converted to and from, but not combined with other
units:

>>> float(quantity(100, 'degree_celsius').magnitude_as(unit('kelvin')))
373.15
>>> float(quantity(20, 'decibel').magnitude_as(unit('unity')))
100.0

Magnitudes can also be ``numpy`` arrays:

>>> quantity([1, 2, 3], 'kilometer').magnitude_as(unit('meter'))
array([1000., 2000., 3000.])

Separate registries can be built from unit definition documents.  See
``pyunits.parser`` for a description of the format.
"""

from numpy.typing import ArrayLike

from ._opts import UnitOptions, get_unit_options, set_unit_options
from .dimension import (Dimension, Fundamental, MASS, LENGTH, TIME, CURRENT,
                        TEMPERATURE, AMOUNT_OF_SUBSTANCE,
                        LUMINOUS_INTENSITY, ANGLE, BIT, COUNT, DIMENSIONLESS)
from .exceptions import (UnitsError, IncompatibleDimensionsError, ParseError,
                         StorageError, UnitConversionError,
                         DuplicateUnitNameError, UnknownUnitNameError,
                         UnitCompositionError)
from .parser import SI_PREFIXES, parse_units
from .quantity import Quantity
from .registry import (UnitRegistry, default_registry, read_catalog,
                       reset_default_registry)
from .transform import Decibel, Identity, Linear, Transformation
from .unit import Unit

__version__ = "0.1.0"


# ======================================================================

def unit(name: str, registry: UnitRegistry = None) -> Unit:
    """
    Returns the unit called `name` from `registry` (or the default
    registry if not given).

    Raises
    ------
    UnknownUnitNameError
        If there is no such unit.
    """
    if registry is None:
        registry = default_registry()
    return registry[name]


def quantity(magnitude: ArrayLike, unit_name: str,
             registry: UnitRegistry = None) -> Quantity:
    """
    Returns a ``Quantity`` of `magnitude` in the unit called `unit_name`
    from `registry` (or the default registry if not given).

    Raises
    ------
    UnknownUnitNameError
        If there is no such unit.
    """
    if registry is None:
        registry = default_registry()
    return Quantity.from_registry(registry, magnitude, unit_name)
