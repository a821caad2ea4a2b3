"""Conversion of graphical values into device-space drawing primitives.

Device space has y growing downward. Rect, FillRect and Ellipse bounding boxes
are normalized here (origin at min x/min y, size from absolute deltas); the
interpreter keeps corners exactly as the program supplied them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from postlisp.errors import PostLispTypeError
from postlisp.types.atoms import Atom, Point, Line, Arc, Rect, FillRect, Ellipse
from postlisp.types.expression import Expression

POINT_SIZE = 4.0


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    width: float
    height: float
    fill: Optional[tuple[int, int, int]] = None


@dataclass(frozen=True)
class Dot:
    """A small filled disc; its bounding box is centered on the point."""
    x: float
    y: float
    size: float = POINT_SIZE


@dataclass(frozen=True)
class Segment:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class ArcItem:
    """Arc on the circle bounded by `box`; angles in degrees, counter-clockwise on screen."""
    box: Box
    start_angle: float
    span_angle: float


@dataclass(frozen=True)
class Oval:
    box: Box


Primitive = Union[Dot, Segment, ArcItem, Box, Oval]


def _channel(c: float) -> int:
    # non-finite components have no integer value; treat them as 0
    if not math.isfinite(c):
        return 0
    return int(c)


def bounding_box(rect: Rect, fill: Optional[tuple[int, int, int]] = None) -> Box:
    p1, p2 = rect.corner1, rect.corner2
    return Box(
        x=min(p1.x, p2.x),
        y=min(p1.y, p2.y),
        width=abs(p2.x - p1.x),
        height=abs(p2.y - p1.y),
        fill=fill,
    )


def arc_item(arc: Arc) -> ArcItem:
    dx = arc.start.x - arc.center.x
    dy = arc.start.y - arc.center.y
    radius = math.hypot(dx, dy)
    # y grows downward, so flip dy to get the on-screen angle
    start = math.atan2(-dy, dx)
    box = Box(arc.center.x - radius, arc.center.y - radius, 2 * radius, 2 * radius)
    return ArcItem(box, math.degrees(start), math.degrees(arc.angle))


def to_primitive(value: Expression | Atom) -> Primitive:
    atom = value.head if isinstance(value, Expression) else value
    match atom:
        case Point(x=x, y=y):
            return Dot(x, y)
        case Line(start=s, end=e):
            return Segment(s.x, s.y, e.x, e.y)
        case Arc():
            return arc_item(atom)
        case Rect():
            return bounding_box(atom)
        case FillRect(rect=rect, r=r, g=g, b=b):
            return bounding_box(rect, fill=(_channel(r), _channel(g), _channel(b)))
        case Ellipse(rect=rect):
            return Oval(bounding_box(rect))
    raise PostLispTypeError(f"cannot render {atom.kind} value")


def to_scene(values: Iterable[Expression | Atom]) -> list[Primitive]:
    return [to_primitive(v) for v in values]
