"""
Unit registries map unit names to ``Unit`` objects.

Registries are normally built from a unit definition document (see
``pyunits.parser``) using ``UnitRegistry.from_string`` or
``UnitRegistry.from_file``, but units can also be added directly using
``register``.  Names can't be replaced once registered.

A default registry containing common units is built from the catalog
bundled with the package the first time ``default_registry()`` is called.
It is then frozen and shared for the rest of the process.

Examples
--------
>>> reg = UnitRegistry.from_string('''
... unit meter { dimension: length; prefixes: standard }
... unit foot { dimension: length; transformation: linear(scale: 0.3048) }
... ''')
>>> 'kilometer' in reg, 'kilofoot' in reg
(True, False)
>>> reg['kilometer'].transformation
Linear(scale=1000.0, offset=0.0)
"""

from __future__ import annotations

import os
from importlib import resources
from typing import Iterable, Iterator

from pyunits._opts import get_unit_options
from pyunits.exceptions import (DuplicateUnitNameError, StorageError,
                                UnitsError, UnknownUnitNameError)
from pyunits.unit import Unit

__all__ = ['UnitRegistry', 'read_catalog', 'default_registry',
           'reset_default_registry', 'default_registry_built']


# ======================================================================

class UnitRegistry:
    """
    Name → ``Unit`` store.

    Parameters
    ----------
    units : iterable of Unit, optional
        Initial units, registered in order.

    Raises
    ------
    DuplicateUnitNameError
        If `units` contains a name more than once.
    """

    def __init__(self, units: Iterable[Unit] = ()):
        self._units: dict[str, Unit] = {}
        self._frozen = False
        for unit in units:
            self.register(unit)

    @classmethod
    def from_string(cls, text: str) -> UnitRegistry:
        """
        Build a registry by parsing a unit definition document.  See
        ``pyunits.parser.parse_units`` for details.
        """
        from pyunits.parser import parse_units
        return parse_units(text)

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> UnitRegistry:
        """
        Build a registry by reading and parsing the unit definition file
        at `path`.

        Raises
        ------
        StorageError
            If the file can't be read.
        ParseError, DuplicateUnitNameError
            As for ``from_string``.
        """
        return cls.from_string(read_catalog(path))

    # -- Registration --------------------------------------------------

    def register(self, unit: Unit):
        """
        Add `unit` to the registry under its name.

        Raises
        ------
        DuplicateUnitNameError
            If a unit with the same name is already registered.  The
            registry is unchanged.
        TypeError
            If the registry is frozen or `unit` is not a ``Unit``.
        """
        if self._frozen:
            raise TypeError("Registry is frozen and can't be changed.")
        if not isinstance(unit, Unit):
            raise TypeError(f"Can only register Unit objects, got "
                            f"{type(unit).__name__}.")
        if unit.name in self._units:
            raise DuplicateUnitNameError(unit.name)
        self._units[unit.name] = unit

    def freeze(self):
        """Prevent any further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Lookup --------------------------------------------------------

    def contains(self, name: str) -> bool:
        return name in self._units

    def get(self, name: str, default: Unit = None) -> Unit | None:
        """Returns the unit called `name`, or `default` if absent."""
        return self._units.get(name, default)

    def unit_names(self) -> Iterator[str]:
        """Returns an iterator over the registered names (unordered)."""
        return iter(self._units.keys())

    # -- Container Methods ---------------------------------------------

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __getitem__(self, name: str) -> Unit:
        try:
            return self._units[name]
        except KeyError:
            raise UnknownUnitNameError(name) from None

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self):
        return (f"UnitRegistry({len(self)} units"
                f"{', frozen' if self._frozen else ''})")


# -- Storage -----------------------------------------------------------

def read_catalog(path: str | os.PathLike) -> str:
    """
    Returns the text of the unit definition file at `path` (UTF-8).

    Raises
    ------
    StorageError
        If the file can't be opened, read or decoded.  The original
        exception is chained.
    """
    try:
        with open(path, encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(str(e), path=os.fspath(path)) from e


def _read_bundled_catalog() -> str:
    try:
        return resources.files('pyunits').joinpath(
            'data', 'units.txt').read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(str(e), path='pyunits/data/units.txt') from e


# -- Default Registry --------------------------------------------------

_default_registry: UnitRegistry | None = None


def default_registry() -> UnitRegistry:
    """
    Returns the shared default registry, building it on the first call.
    This reads the catalog given by the `default_catalog` option, or the
    catalog bundled with the package if that is ``None``.  If the
    `freeze_default` option is set (the default), the registry is frozen.

    Raises
    ------
    RuntimeError
        If the catalog can't be read or parsed.  The underlying
        ``StorageError``, ``ParseError``, etc is chained.  Nothing is kept
        in this case, so a later call will try again.
    """
    global _default_registry
    if _default_registry is None:
        opts = get_unit_options()
        try:
            if opts.default_catalog is None:
                registry = UnitRegistry.from_string(_read_bundled_catalog())
            else:
                registry = UnitRegistry.from_file(opts.default_catalog)
        except UnitsError as e:
            raise RuntimeError(f"Failed to build default unit registry: "
                               f"{e}") from e

        if opts.freeze_default:
            registry.freeze()
        _default_registry = registry

    return _default_registry


def default_registry_built() -> bool:
    """Returns ``True`` if the default registry has been built."""
    return _default_registry is not None


def reset_default_registry():
    """
    Discard the default registry so that it is rebuilt (using the current
    options) on the next call to ``default_registry()``.  Units already
    obtained from it remain valid.
    """
    global _default_registry
    _default_registry = None
