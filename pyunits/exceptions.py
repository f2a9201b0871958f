"""
Exceptions raised by ``pyunits``.  All errors derive from ``UnitsError``
and carry the structured values involved (names, dimensions, etc) as
attributes, so that callers can produce their own diagnostics.
"""


# ======================================================================

class UnitsError(Exception):
    """
    Base class for all errors raised by this package.  Keyword arguments
    are stored as attributes of the same name.
    """

    def __init__(self, *args, details: str = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `Exception`.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = str(self.args[0]) if self.args else ''
        if self.details is not None:
            error_str += f"\n{self.details}"
        return error_str


# ----------------------------------------------------------------------

class IncompatibleDimensionsError(UnitsError, ValueError):
    """
    Raised when an operation requires two values of the same dimension
    (e.g. addition, subtraction, comparison) but they differ.

    Attributes
    ----------
    a, b : Dimension
        Dimensions of the left and right operands.
    """

    def __init__(self, a, b, **kwargs):
        super().__init__(f"These dimensions are not compatible to perform "
                         f"this operation: {a} and {b}", a=a, b=b, **kwargs)


class ParseError(UnitsError, ValueError):
    """
    Raised when a unit definition document cannot be parsed, or contains
    a definition which is invalid.

    Attributes
    ----------
    message : str
        Description of the problem.
    line, column : int or None
        Position in the document (1-based) where the problem was found, if
        known.
    """

    def __init__(self, message: str, line: int = None, column: int = None,
                 **kwargs):
        if line is not None:
            text = f"Error during parsing at line {line}"
            if column is not None:
                text += f", column {column}"
            text += f": {message}"
        else:
            text = f"Error during parsing: {message}"
        super().__init__(text, message=message, line=line, column=column,
                         **kwargs)


class StorageError(UnitsError):
    """
    Raised when a unit definition document cannot be read.  The original
    exception is available as ``__cause__``.

    Attributes
    ----------
    message : str
        Description of the underlying failure.
    path : str or None
        Location that was being read.
    """

    def __init__(self, message: str, path: str = None, **kwargs):
        text = "Unable to read units file"
        if path is not None:
            text += f" '{path}'"
        super().__init__(f"{text}: {message}", message=message, path=path,
                         **kwargs)


class UnitConversionError(UnitsError, ValueError):
    """
    Raised when a value is converted to a unit of a different dimension.

    Attributes
    ----------
    expected : Dimension
        Dimension of the value being converted.
    got : Dimension
        Dimension of the requested target unit.
    """

    def __init__(self, expected, got, **kwargs):
        super().__init__(f"Incompatible units: expected {expected}, "
                         f"got {got}", expected=expected, got=got, **kwargs)


class DuplicateUnitNameError(UnitsError, ValueError):
    """
    Raised when registering a unit under a name that is already taken.

    Attributes
    ----------
    name : str
        The duplicated name.
    """

    def __init__(self, name: str, **kwargs):
        super().__init__(f"Unit '{name}' already exists.", name=name,
                         **kwargs)


class UnknownUnitNameError(UnitsError, LookupError):
    """
    Raised when a unit name is not present in a registry.

    Attributes
    ----------
    name : str
        The name that was requested.
    """

    def __init__(self, name: str, **kwargs):
        super().__init__(f"Registry does not contain unit '{name}'.",
                         name=name, **kwargs)


class UnitCompositionError(UnitsError, TypeError):
    """
    Raised when a unit (or a quantity using it) is multiplied, divided or
    raised to a power but its transformation is not a pure scale, i.e. it
    is logarithmic or has a non-zero offset.  There is no physically
    meaningful result in these cases, so this indicates a programming
    error rather than bad input.

    Attributes
    ----------
    unit : str
        Name of the offending unit.
    operation : str
        The operation attempted, e.g. ``'multiply'``.
    """

    def __init__(self, unit: str, operation: str, reason: str, **kwargs):
        super().__init__(f"Cannot {operation} unit '{unit}': {reason}.",
                         unit=unit, operation=operation, **kwargs)
