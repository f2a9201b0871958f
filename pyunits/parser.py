"""
Parser for the unit definition language.  A document is a series of
blocks, one for each unit::

    # Comments run to the end of the line.
    unit meter {
        dimension: length
        transformation: identity
        prefixes: standard
    }

    unit newton { dimension: mass * length / time^2; prefixes: standard }

Properties within a block are separated by newlines, ``;`` or ``,`` and
may be given in any order.  ``dimension`` is required, ``transformation``
defaults to ``identity`` and ``prefixes`` defaults to ``no``.

Dimension expressions are reduced strictly left to right with no
precedence or grouping, so ``mass / length * time`` is ``mass * length^-1
* time``.  Transformations are one of::

    identity
    linear(scale: <number>[, offset: <number>])
    decibel(p0: <number>)

When ``prefixes: standard`` is given, a unit is also created for each
entry in ``SI_PREFIXES`` named ``<prefix><name>``, e.g. ``kilometer``.

The complete document is parsed and checked before any unit is created,
so that an error anywhere means no units are returned at all.
"""

from __future__ import annotations

import re
import warnings
from typing import TYPE_CHECKING, Iterator, NamedTuple

from pyunits._types import int_power
from pyunits.dimension import DIMENSIONLESS, Dimension, Fundamental
from pyunits.exceptions import ParseError
from pyunits.transform import (Decibel, Identity, Linear, Transformation,
                               is_scale_only, scale_of)
from pyunits.unit import Unit

if TYPE_CHECKING:
    from pyunits.registry import UnitRegistry

__all__ = ['Prefix', 'SI_PREFIXES', 'UnitDefinition', 'parse_definitions',
           'reduce_dimension', 'expand_prefixes', 'build_units',
           'parse_units']


# ======================================================================

class Prefix(NamedTuple):
    name: str
    symbol: str
    factor: float


# Only the long names are used when expanding units, symbols are included
# for reference.
SI_PREFIXES = (
    Prefix('Quetta', 'Q', 1e30),
    Prefix('Ronna', 'R', 1e27),
    Prefix('Yotta', 'Y', 1e24),
    Prefix('Zetta', 'Z', 1e21),
    Prefix('Exa', 'E', 1e18),
    Prefix('Peta', 'P', 1e15),
    Prefix('Tera', 'T', 1e12),
    Prefix('Giga', 'G', 1e9),
    Prefix('Mega', 'M', 1e6),
    Prefix('kilo', 'k', 1e3),
    Prefix('hecto', 'h', 1e2),
    Prefix('deca', 'da', 1e1),
    Prefix('deci', 'd', 1e-1),
    Prefix('centi', 'c', 1e-2),
    Prefix('milli', 'm', 1e-3),
    Prefix('micro', 'µ', 1e-6),
    Prefix('nano', 'n', 1e-9),
    Prefix('pico', 'p', 1e-12),
    Prefix('femto', 'f', 1e-15),
    Prefix('atto', 'a', 1e-18),
    Prefix('zepto', 'z', 1e-21),
    Prefix('yocto', 'y', 1e-24),
    Prefix('ronto', 'r', 1e-27),
    Prefix('quecto', 'q', 1e-30),
)


class UnitDefinition(NamedTuple):
    """
    A single parsed (but not yet built) unit block.  `terms` are pairs of
    ``(axis, exponent)`` with exponents already negated for terms following
    ``/``.
    """
    name: str
    terms: tuple[tuple[Fundamental, int], ...]
    transformation: Transformation
    prefixes: bool
    line: int
    column: int


# -- Tokenizer ---------------------------------------------------------

_token_rx = re.compile(r'''
    (?P<comment>\#[^\n]*)                                   # Comment.
    |(?P<newline>\n)                                        # Separator.
    |(?P<space>[ \t\r\f\v]+)                                # Ignored.
    |(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    |(?P<word>[^\W\d]\w*)                                   # Name / keyword.
    |(?P<punct>[{}():;,*/^])                                # Punctuation.
    |(?P<mismatch>.)                                        # OR mismatch.
''', flags=re.VERBOSE)

_AXIS_WORDS = {axis: tuple(axis.value.split()) for axis in Fundamental}
_PROPERTIES = ('dimension', 'transformation', 'prefixes')


class _Token(NamedTuple):
    kind: str
    text: str
    line: int
    column: int


def _tokenize(text: str) -> Iterator[_Token]:
    line, line_start = 1, 0
    for match in _token_rx.finditer(text):
        kind, value = match.lastgroup, match.group()
        column = match.start() - line_start + 1
        if kind == 'mismatch':
            raise ParseError(f"unexpected character '{value}'", line,
                             column)
        if kind == 'newline':
            yield _Token(kind, value, line, column)
            line, line_start = line + 1, match.end()
        elif kind not in ('space', 'comment'):
            yield _Token(kind, value, line, column)

    yield _Token('end', '', line, len(text) - line_start + 1)


# -- Parser ------------------------------------------------------------

class _Parser:
    """
    Recursive descent parser, each method consumes one grammar element.
    """

    def __init__(self, text: str):
        self._tokens = list(_tokenize(text))
        self._pos = 0

    def document(self) -> list[UnitDefinition]:
        defs = []
        while True:
            self._skip('newline')
            if self._peek().kind == 'end':
                return defs
            defs.append(self._definition())

    # -- Grammar Elements ----------------------------------------------

    def _definition(self) -> UnitDefinition:
        start = self._expect('word', 'unit')
        name = self._expect('word').text
        self._skip('newline')
        self._expect('punct', '{')

        found = {}
        while True:
            self._skip_separators()
            if self._accept('punct', '}'):
                break

            prop = self._expect('word')
            if prop.text not in _PROPERTIES:
                self._error(f"unknown property '{prop.text}' in unit "
                            f"'{name}'", prop)
            if prop.text in found:
                self._error(f"duplicate property '{prop.text}' in unit "
                            f"'{name}'", prop)
            self._expect('punct', ':')

            if prop.text == 'dimension':
                found['dimension'] = self._dimension_expr()
            elif prop.text == 'transformation':
                found['transformation'] = self._transformation_expr()
            else:
                found['prefixes'] = self._prefixes()

            # Each property must be followed by a separator or the end.
            tok = self._peek()
            if not (tok.kind == 'newline' or
                    (tok.kind == 'punct' and tok.text in ';,}')):
                self._error(f"expected end of property, found "
                            f"{_describe(tok)}", tok)

        if 'dimension' not in found:
            self._error(f"unit '{name}' has no dimension", start)

        trans = found.get('transformation', Identity())
        prefixes = found.get('prefixes', False)
        if prefixes:
            if isinstance(trans, Decibel):
                self._error("prefixes not compatible with decibel "
                            "transformation", start)
            if not is_scale_only(trans):
                self._error("prefixes not compatible with biased linear "
                            "transformation", start)

        return UnitDefinition(name, found['dimension'], trans, prefixes,
                              start.line, start.column)

    def _dimension_expr(self) -> tuple[tuple[Fundamental, int], ...]:
        terms = [self._dimension_term()]
        while (tok := self._peek()).kind == 'punct' and tok.text in '*/':
            self._next()
            axis, pwr = self._dimension_term()
            terms.append((axis, -pwr if tok.text == '/' else pwr))
        return tuple(terms)

    def _dimension_term(self) -> tuple[Fundamental, int]:
        first = self._expect('word')
        axis = _axis_starting_with(first.text)
        if axis is None:
            self._error(f"unknown fundamental dimension '{first.text}'",
                        first)

        # Multi-word names must match word for word.
        for word in _AXIS_WORDS[axis][1:]:
            tok = self._peek()
            if tok.kind != 'word' or tok.text != word:
                self._error(f"unknown fundamental dimension "
                            f"'{first.text} {tok.text}'", first)
            self._next()

        if not self._accept('punct', '^'):
            return axis, 1

        tok = self._expect('number')
        try:
            pwr = int(tok.text)
        except ValueError:
            try:
                pwr = int_power(float(tok.text))
            except ValueError:
                self._error(f"exponent must be an integer, found "
                            f"'{tok.text}'", tok)
        return axis, pwr

    def _transformation_expr(self) -> Transformation:
        kind = self._expect('word')
        if kind.text == 'identity':
            return Identity()

        elif kind.text == 'linear':
            self._expect('punct', '(')
            scale_tok, scale = self._argument('scale')
            offset = 0.0
            if self._accept('punct', ','):
                _, offset = self._argument('offset')
            self._skip('newline')
            self._expect('punct', ')')
            try:
                return Linear(scale, offset)
            except ValueError:
                self._error("linear transformation requires a non-zero "
                            "scale", scale_tok)

        elif kind.text == 'decibel':
            self._expect('punct', '(')
            _, p0 = self._argument('p0')
            self._skip('newline')
            self._expect('punct', ')')
            return Decibel(p0)

        self._error(f"unknown transformation '{kind.text}'", kind)

    def _argument(self, name: str) -> tuple[_Token, float]:
        self._skip('newline')
        self._expect('word', name)
        self._expect('punct', ':')
        tok = self._expect('number')
        return tok, float(tok.text)

    def _prefixes(self) -> bool:
        tok = self._expect('word')
        if tok.text == 'standard':
            return True
        if tok.text == 'no':
            return False
        self._error(f"prefixes must be 'standard' or 'no', found "
                    f"'{tok.text}'", tok)

    # -- Token Handling ------------------------------------------------

    def _accept(self, kind: str, text: str = None) -> _Token | None:
        tok = self._peek()
        if tok.kind == kind and (text is None or tok.text == text):
            return self._next()
        return None

    def _error(self, message: str, tok: _Token):
        raise ParseError(message, tok.line, tok.column)

    def _expect(self, kind: str, text: str = None) -> _Token:
        tok = self._accept(kind, text)
        if tok is None:
            tok = self._peek()
            wanted = f"'{text}'" if text is not None else kind
            self._error(f"expected {wanted}, found {_describe(tok)}", tok)
        return tok

    def _next(self) -> _Token:
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def _peek(self) -> _Token:
        return self._tokens[self._pos]

    def _skip(self, kind: str):
        while self._peek().kind == kind:
            self._next()

    def _skip_separators(self):
        while True:
            tok = self._peek()
            if tok.kind == 'newline' or (tok.kind == 'punct' and
                                         tok.text in ';,'):
                self._next()
            else:
                return


def _axis_starting_with(word: str) -> Fundamental | None:
    for axis, words in _AXIS_WORDS.items():
        if words[0] == word:
            return axis
    return None


def _describe(tok: _Token) -> str:
    if tok.kind == 'end':
        return 'end of input'
    if tok.kind == 'newline':
        return 'end of line'
    return f"'{tok.text}'"


# ----------------------------------------------------------------------

def parse_definitions(text: str) -> list[UnitDefinition]:
    """
    Parse a unit definition document without building any units.

    Raises
    ------
    ParseError
        If the document is malformed or any definition is invalid.
    """
    return _Parser(text).document()


def reduce_dimension(terms) -> Dimension:
    """
    Reduce ``(axis, exponent)`` pairs to a ``Dimension`` by multiplying
    them in order, starting from dimensionless.
    """
    res = DIMENSIONLESS
    for axis, pwr in terms:
        res *= Dimension.from_fundamental(axis) ** pwr
    return res


def expand_prefixes(unit: Unit) -> list[Unit]:
    """
    Returns a new unit for every entry in ``SI_PREFIXES``, e.g. ``kilogram``
    with ``Linear(1e3 * gram_scale)``.  `unit` must be scale-only.
    """
    base_scale = scale_of(unit.transformation)
    return [Unit(f"{prefix.name}{unit.name}", unit.dimension,
                 Linear(base_scale * prefix.factor))
            for prefix in SI_PREFIXES]


def build_units(definitions) -> list[Unit]:
    """
    Create the units for each definition in order, followed immediately by
    any prefixed units.
    """
    units = []
    for defn in definitions:
        axes = {axis for axis, _ in defn.terms}
        if Fundamental.COUNT in axes and len(axes) > 1:
            warnings.warn(f"Unit '{defn.name}' (line {defn.line}): 'count' "
                          f"has no effect when combined with other "
                          f"dimensions.")

        unit = Unit(defn.name, reduce_dimension(defn.terms),
                    defn.transformation)
        units.append(unit)
        if defn.prefixes:
            units.extend(expand_prefixes(unit))

    return units


def parse_units(text: str) -> UnitRegistry:
    """
    Parse a unit definition document and return a new ``UnitRegistry``
    containing all units defined, including prefixed units.

    Raises
    ------
    ParseError
        If the document is malformed or any definition is invalid.
    DuplicateUnitNameError
        If any name (including prefixed names) is defined more than once.
    """
    from pyunits.registry import UnitRegistry

    registry = UnitRegistry()
    for unit in build_units(parse_definitions(text)):
        registry.register(unit)
    return registry
