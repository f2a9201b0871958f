from __future__ import annotations

import warnings
from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds option flags for the package.  See
    'get_unit_options' and 'set_unit_options' for full details.
    """
    default_catalog: str | None
    freeze_default: bool

    def __post_init__(self):
        """Check certain values"""
        if self.default_catalog is not None and not isinstance(
                self.default_catalog, str):
            raise ValueError("Require 'default_catalog' to be a path string "
                             "or None.")
        if self.default_catalog == '':
            raise ValueError("Require non-empty 'default_catalog'.")


# Create single instance and set defaults.
_unit_options = UnitOptions(
    default_catalog=None,
    freeze_default=True
)


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        Returns a copy of the UnitOptions object containing the options.
        For a full description of each option, see `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Set the current unit options.

    Parameters
    ----------
    default_catalog : str or None, default = None
        Path of the unit definition file used to build the default
        registry (see `default_registry`).  If `None`, the catalog bundled
        with the package is used.

        .. note:: The default registry is built only once.  Changing this
           after it has been built has no effect until
           `reset_default_registry` is called, and a warning is issued.

    freeze_default : bool, default = True
        If `True`, the default registry is made read-only once it has been
        loaded so that it can be freely shared.

    Raises
    ------
    TypeError
        If an unknown option is given.
    ValueError
        If an option value is invalid.

    See Also
    --------
    get_unit_options
    """
    global _unit_options
    _unit_options = replace(_unit_options, **kwargs)

    from pyunits.registry import default_registry_built
    if default_registry_built() and ('default_catalog' in kwargs or
                                     'freeze_default' in kwargs):
        warnings.warn("Default registry already built, option change has no "
                      "effect until reset_default_registry() is called.")
