"""Edge definition commands and the lexer for the compact edge encoding.

An XFL ``<Edge edges="...">`` attribute packs path segments and style
selection flags into a single string::

    !x y              moveTo
    |x y  or  /x y    lineTo
    [cx cy ex ey      quadratic curveTo (also ``]``)
    Sn                selection, n is a bitmask (1 fillStyle0, 2 fillStyle1, 4 stroke)

Coordinates are either decimal literals (``-12.5``) or hexadecimal fixed
point literals (``#108.C5``, whole part plus fraction / 256).
"""

import enum
from dataclasses import dataclass
from typing import Iterable, Union

from ..errors import (
    InvalidDigitError,
    InvalidFixedPointError,
    InvalidSelectionMaskError,
    UnexpectedEndError,
    UnknownCommandError,
)
from ..geometry import BoundingBox, bounding_box_of_points


class SelectionMask(enum.IntFlag):
    """Which styles apply to the path of an edge."""

    NONE = 0
    FILL_STYLE_0 = 1
    FILL_STYLE_1 = 2
    STROKE = 4


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CurveTo:
    """Quadratic curve through control point (cx, cy) to (ex, ey)."""

    cx: float
    cy: float
    ex: float
    ey: float


@dataclass(frozen=True)
class Selection:
    mask: SelectionMask


EdgeCommand = Union[MoveTo, LineTo, CurveTo, Selection]

_MAX_SELECTION_MASK = int(SelectionMask.FILL_STYLE_0 | SelectionMask.FILL_STYLE_1 | SelectionMask.STROKE)


class EdgeDefinitionLexer:
    """Single pass lexer over one edge definition string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek_char(self) -> str | None:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def next_char(self) -> str | None:
        char = self.peek_char()
        if char is not None:
            self.pos += 1
        return char

    def skip_whitespace(self) -> str | None:
        """Consume whitespace and return the next char without consuming it."""
        while (char := self.peek_char()) is not None and char.isspace():
            self.pos += 1
        return char

    def lex_all(self) -> tuple[EdgeCommand, ...]:
        commands = []
        while (cmd := self.lex_command()) is not None:
            commands.append(cmd)
        return tuple(commands)

    def lex_command(self) -> EdgeCommand | None:
        """Lex the next command, or return None at the end of input."""
        if self.skip_whitespace() is None:
            return None

        cmd = self.next_char()
        if cmd == "!":
            return MoveTo(self.expect_numeric(), self.expect_numeric())
        if cmd in ("|", "/"):
            return LineTo(self.expect_numeric(), self.expect_numeric())
        if cmd in ("[", "]"):
            return CurveTo(
                self.expect_numeric(),
                self.expect_numeric(),
                self.expect_numeric(),
                self.expect_numeric(),
            )
        if cmd == "S":
            return Selection(self.read_selection_mask())
        raise UnknownCommandError(cmd)

    def read_selection_mask(self) -> SelectionMask:
        char = self.next_char()
        if char is None:
            raise UnexpectedEndError()
        if not _is_digit(char, 10):
            raise InvalidDigitError(char)
        value = int(char)
        if value > _MAX_SELECTION_MASK:
            raise InvalidSelectionMaskError(value)
        return SelectionMask(value)

    def read_digits(self, base: int) -> str:
        """Read a non-empty run of digits valid in ``base``, after any whitespace."""
        self.skip_whitespace()
        start = self.pos
        while (char := self.peek_char()) is not None and _is_digit(char, base):
            self.pos += 1

        if self.pos == start:
            char = self.peek_char()
            if char is None:
                raise UnexpectedEndError()
            raise InvalidDigitError(char, base)
        return self.text[start : self.pos]

    def expect_numeric(self) -> float:
        value = self.read_numeric()
        if value is None:
            raise UnexpectedEndError()
        return value

    def read_numeric(self) -> float | None:
        """Read a decimal or fixed point literal, or None at the end of input."""
        start_char = self.skip_whitespace()
        if start_char is None:
            return None
        if start_char == "#":
            return self.read_fixed_point()

        sign = 1.0
        if start_char == "-":
            sign = -1.0
            self.pos += 1

        value = sign * int(self.read_digits(10))
        if self.peek_char() == ".":
            self.pos += 1
            frac = self.read_digits(10)
            # The fraction is divided by its digit count, not a power of ten,
            # and added to the signed whole before the sign applies again.
            value = sign * (value + int(frac) / len(frac))
        return float(value)

    def read_fixed_point(self) -> float:
        """Read ``#WHOLE.FRAC`` where both parts are hexadecimal."""
        self.pos += 1  # "#"
        whole = self.read_digits(16)
        dot = self.next_char()
        if dot is None:
            raise UnexpectedEndError()
        if dot != ".":
            raise InvalidFixedPointError(dot)
        frac = self.read_digits(16)

        return int(whole, 16) + int(frac, 16) / 256


def _is_digit(char: str, base: int) -> bool:
    if base == 16:
        return char in "0123456789abcdefABCDEF"
    return char in "0123456789"


def parse_edge_definition(text: str) -> tuple[EdgeCommand, ...]:
    """
    Parse an edge definition string into its commands.

    Args:
        text: Value of an ``edges`` attribute

    Returns:
        Every command in order

    Raises:
        EdgeParseError: If any token is malformed. Nothing is returned for a
            partially valid string.
    """
    return EdgeDefinitionLexer(text).lex_all()


def command_points(commands: Iterable[EdgeCommand]) -> Iterable[tuple[float, float]]:
    """Yield the end point of every coordinate-bearing command.

    A curve contributes only its end point, never its control point.
    """
    for cmd in commands:
        if isinstance(cmd, (MoveTo, LineTo)):
            yield cmd.x, cmd.y
        elif isinstance(cmd, CurveTo):
            yield cmd.ex, cmd.ey


def bounding_box_of_commands(commands: Iterable[EdgeCommand]) -> BoundingBox | None:
    return bounding_box_of_points(command_points(commands))
