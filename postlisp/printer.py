"""Textual rendering of PostLisp values.

Every value prints parenthesized:

    None      ()
    Boolean   (True) / (False)
    Number    (3.14159)
    Symbol    (name)
    Point     (x,y)
    Line      ((x1,y1),(x2,y2))
    Arc       ((cx,cy),(sx,sy) angle)
    Rect      ((x1,y1),(x2,y2))
    FillRect  (((x1,y1),(x2,y2)) (r,g,b))
    Ellipse   (((x1,y1),(x2,y2)))

Numbers use the shortest general format with six significant digits.
"""

from __future__ import annotations

from io import StringIO

from postlisp.types.atoms import (
    Atom, NoneAtom, Boolean, Number, Symbol, Point, Line, Arc, Rect, FillRect, Ellipse,
)
from postlisp.types.expression import Expression


def format_number(value: float) -> str:
    return f"{value:g}"


def _write_point(buffer: StringIO, p: Point) -> None:
    buffer.write(f"({format_number(p.x)},{format_number(p.y)})")


def _write_rect(buffer: StringIO, r: Rect) -> None:
    buffer.write("(")
    _write_point(buffer, r.corner1)
    buffer.write(",")
    _write_point(buffer, r.corner2)
    buffer.write(")")


def write_atom(buffer: StringIO, atom: Atom) -> None:
    match atom:
        case NoneAtom():
            buffer.write("()")
        case Boolean(value=v):
            buffer.write("(True)" if v else "(False)")
        case Number(value=v):
            buffer.write(f"({format_number(v)})")
        case Symbol(name=name):
            buffer.write(f"({name})")
        case Point():
            _write_point(buffer, atom)
        case Line(start=start, end=end):
            buffer.write("(")
            _write_point(buffer, start)
            buffer.write(",")
            _write_point(buffer, end)
            buffer.write(")")
        case Arc(center=center, start=start, angle=angle):
            buffer.write("(")
            _write_point(buffer, center)
            buffer.write(",")
            _write_point(buffer, start)
            buffer.write(f" {format_number(angle)})")
        case Rect():
            _write_rect(buffer, atom)
        case FillRect(rect=rect, r=r, g=g, b=b):
            buffer.write("(")
            _write_rect(buffer, rect)
            buffer.write(f" ({format_number(r)},{format_number(g)},{format_number(b)}))")
        case Ellipse(rect=rect):
            buffer.write("(")
            _write_rect(buffer, rect)
            buffer.write(")")
        case _:
            raise TypeError(f"Cannot print {atom!r}")


def to_string(value: Expression | Atom) -> str:
    """Render the head of an Expression (or a bare Atom) as result text."""
    atom = value.head if isinstance(value, Expression) else value
    with StringIO() as buffer:
        write_atom(buffer, atom)
        return buffer.getvalue()
