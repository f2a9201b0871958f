"""
Transformations map a value expressed in a particular unit to and from the
canonical base representation of its dimension.  There are exactly three
kinds:

    - ``Identity``: The unit *is* the base representation.
    - ``Linear``: ``base = value * scale + offset``.
    - ``Decibel``: A logarithmic ratio, ``base = 10^(value / 10) * p0``.

All are immutable and hashable.  Functions that need to distinguish between
kinds (e.g. ``scale_of``) check every kind explicitly and reject anything
else.

Values (magnitudes) may be any numeric type supporting arithmetic with a
plain float - normally Python scalars or ``numpy`` arrays.  Logarithms and
exponentials are computed using ``numpy`` so that arrays are handled
elementwise.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import ArrayLike

__all__ = ['Identity', 'Linear', 'Decibel', 'Transformation',
           'is_scale_only', 'scale_of', 'log', 'exp', 'power']


# ======================================================================

@dataclass(frozen=True)
class Identity:
    """Values are already in base representation."""

    def to_base(self, value: ArrayLike) -> ArrayLike:
        return value

    def from_base(self, value: ArrayLike) -> ArrayLike:
        return value

    def __str__(self):
        return 'identity'


@dataclass(frozen=True)
class Linear:
    """
    Scaled and (optionally) offset values.  A non-zero `offset` is
    referred to as a `biased` transformation, e.g. °C → K.

    Parameters
    ----------
    scale : float
        Multiplier applied to convert to base.  Must be non-zero.
    offset : float, default = 0.0
        Constant added after scaling.
    """
    scale: float
    offset: float = 0.0

    def __post_init__(self):
        if self.scale == 0:
            raise ValueError("Linear transformation requires scale != 0.")

    def to_base(self, value: ArrayLike) -> ArrayLike:
        return value * self.scale + self.offset

    def from_base(self, value: ArrayLike) -> ArrayLike:
        return (value - self.offset) / self.scale

    def __str__(self):
        if self.offset == 0:
            return f"linear(scale: {self.scale})"
        return f"linear(scale: {self.scale}, offset: {self.offset})"


@dataclass(frozen=True)
class Decibel:
    """
    Logarithmic scale referenced to `p0`, i.e. a value of 0 dB
    corresponds to `p0` in base representation.

    .. note:: Results are undefined for `p0` <= 0 and for non-positive
       values given to `from_base`; these are not checked.
    """
    p0: float

    def to_base(self, value: ArrayLike) -> ArrayLike:
        return exp(value / 10.0, 10.0) * self.p0

    def from_base(self, value: ArrayLike) -> ArrayLike:
        return log(value / self.p0, 10.0) * 10.0

    def __str__(self):
        return f"decibel(p0: {self.p0})"


Transformation = Union[Identity, Linear, Decibel]
"""Type alias covering all kinds of transformation."""


# -- Classification ----------------------------------------------------

def is_scale_only(t: Transformation) -> bool:
    """
    Returns ``True`` if `t` is a pure multiplication, i.e. ``Identity`` or
    ``Linear`` with zero offset.  Only these can be combined when
    multiplying, dividing or raising units to powers.
    """
    if isinstance(t, Identity):
        return True
    elif isinstance(t, Linear):
        return t.offset == 0
    elif isinstance(t, Decibel):
        return False
    else:
        raise TypeError(f"Unknown transformation: {t!r}.")


def scale_of(t: Transformation) -> float:
    """
    Returns the multiplier of a scale-only transformation: 1 for
    ``Identity``, otherwise ``Linear.scale``.

    Raises
    ------
    TypeError
        If `t` is logarithmic, or is not a transformation.
    """
    if isinstance(t, Identity):
        return 1
    elif isinstance(t, Linear):
        return t.scale
    elif isinstance(t, Decibel):
        raise TypeError("Decibel transformations have no scale.")
    else:
        raise TypeError(f"Unknown transformation: {t!r}.")


# -- Numeric Operations ------------------------------------------------

def log(x: ArrayLike, base: float) -> ArrayLike:
    """Logarithm of `x` to the given `base`, elementwise for arrays."""
    if base == 10:
        return np.log10(x)
    return np.log(x) / np.log(base)


def exp(x: ArrayLike, base: float) -> ArrayLike:
    """Returns `base` raised to `x`, elementwise for arrays."""
    return np.power(base, x)


def power(x: ArrayLike, n: int) -> ArrayLike:
    """
    Returns `x` raised to the integer power `n`.  Integer values (numpy
    scalars and arrays included) are promoted to float for negative
    powers.  Python integers otherwise stay exact.  Float results that
    overflow give ``inf``, as for multiplication.
    """
    if n < 0 and np.issubdtype(np.asarray(x).dtype, np.integer):
        x = np.asarray(x, dtype=float)[()]
    if isinstance(x, numbers.Integral) and not isinstance(x, np.integer):
        return x ** n

    with np.errstate(over='ignore'):
        return np.power(x, n)
