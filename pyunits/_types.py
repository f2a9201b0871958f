"""
Numeric checks shared by the dimension and quantity code.
"""

import numbers


# ======================================================================

def int_power(n) -> int:
    """
    Returns `n` as a plain ``int`` for use as an exponent.  Integral floats
    (e.g. ``2.0``), fractions and numpy integers are accepted.

    >>> int_power(3.0)
    3
    >>> int_power(2.5)
    Traceback (most recent call last):
    ...
    ValueError: Only integer powers are supported, got 2.5.

    Raises
    ------
    ValueError
        If `n` is not a whole number.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise ValueError(f"Only integer powers are supported, got "
                         f"{repr(n)}.")
    if isinstance(n, numbers.Integral):
        return int(n)

    try:
        integral = float(n).is_integer()  # False for NaN / inf.
    except OverflowError:
        integral = False
    if not integral:
        raise ValueError(f"Only integer powers are supported, got "
                         f"{repr(n)}.")
    return int(n)
