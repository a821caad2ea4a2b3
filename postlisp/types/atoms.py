"""Atom kinds for PostLisp values.

Every value the interpreter manipulates is exactly one of ten kinds, each a
frozen dataclass owning only its own fields:

    - NoneAtom             -> the empty value, printed as ()
    - Boolean(value)       -> True / False
    - Number(value)        -> float
    - Symbol(name)         -> identifier
    - Point(x, y)
    - Line(start, end)
    - Arc(center, start, angle)   angle in radians
    - Rect(corner1, corner2)      corners kept as supplied
    - FillRect(rect, r, g, b)
    - Ellipse(rect)               rect is the bounding box

Equality between numeric fields uses a machine-epsilon tolerance, which is
effectively exact equality; atoms of different kinds never compare equal.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from typing import ClassVar

EPSILON = sys.float_info.epsilon


def tol_eq(a: float, b: float) -> bool:
    """True when a and b differ by at most one machine epsilon."""
    return abs(a - b) <= EPSILON


def _field_eq(a, b) -> bool:
    if isinstance(a, float) and isinstance(b, float):
        return tol_eq(a, b)
    return a == b


class Atom:
    """Base class of all value kinds."""

    __slots__ = ()
    kind: ClassVar[str] = "Atom"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Atom):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return all(
            _field_eq(getattr(self, f.name), getattr(other, f.name))
            for f in fields(self)
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Tolerance equality has no consistent hash.
    __hash__ = None  # type: ignore[assignment]


def _coerce(obj: Atom, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, float(getattr(obj, name)))


@dataclass(frozen=True, eq=False)
class NoneAtom(Atom):
    kind: ClassVar[str] = "None"

    def __hash__(self) -> int:
        return hash(NoneAtom)

    def __repr__(self) -> str:
        return "NoneAtom()"


@dataclass(frozen=True, eq=False)
class Boolean(Atom):
    value: bool
    kind: ClassVar[str] = "Boolean"

    def __post_init__(self):
        object.__setattr__(self, "value", bool(self.value))

    def __hash__(self) -> int:
        return hash((Boolean, self.value))


@dataclass(frozen=True, eq=False)
class Number(Atom):
    value: float
    kind: ClassVar[str] = "Number"

    def __post_init__(self):
        _coerce(self, "value")


@dataclass(frozen=True, eq=False)
class Symbol(Atom):
    name: str
    kind: ClassVar[str] = "Symbol"

    def __post_init__(self):
        # Intern to ensure fast equality/hash
        object.__setattr__(self, "name", sys.intern(self.name))

    def __hash__(self) -> int:
        return hash((Symbol, self.name))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class Point(Atom):
    x: float
    y: float
    kind: ClassVar[str] = "Point"

    def __post_init__(self):
        _coerce(self, "x", "y")


@dataclass(frozen=True, eq=False)
class Line(Atom):
    start: Point
    end: Point
    kind: ClassVar[str] = "Line"


@dataclass(frozen=True, eq=False)
class Arc(Atom):
    center: Point
    start: Point
    angle: float
    kind: ClassVar[str] = "Arc"

    def __post_init__(self):
        _coerce(self, "angle")


@dataclass(frozen=True, eq=False)
class Rect(Atom):
    corner1: Point
    corner2: Point
    kind: ClassVar[str] = "Rect"


@dataclass(frozen=True, eq=False)
class FillRect(Atom):
    rect: Rect
    r: float
    g: float
    b: float
    kind: ClassVar[str] = "FillRect"

    def __post_init__(self):
        _coerce(self, "r", "g", "b")


@dataclass(frozen=True, eq=False)
class Ellipse(Atom):
    rect: Rect
    kind: ClassVar[str] = "Ellipse"


NONE = NoneAtom()
TRUE = Boolean(True)
FALSE = Boolean(False)

GRAPHICAL_KINDS: tuple[type[Atom], ...] = (Point, Line, Arc, Rect, FillRect, Ellipse)


def is_graphical(atom: Atom) -> bool:
    return isinstance(atom, GRAPHICAL_KINDS)
