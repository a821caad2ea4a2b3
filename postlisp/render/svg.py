from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from typing import Iterable

from postlisp.render.scene import ArcItem, Box, Dot, Oval, Primitive, Segment

SVG_NS = "http://www.w3.org/2000/svg"
STROKE = "black"


def _fmt(v: float) -> str:
    return f"{v:g}"


def _clamp(c: int) -> int:
    return max(0, min(255, c))


def _outline(el: ET.Element) -> ET.Element:
    el.set("fill", "none")
    el.set("stroke", STROKE)
    return el


def _arc_path(item: ArcItem) -> ET.Element:
    r = item.box.width / 2
    cx = item.box.x + r
    cy = item.box.y + r
    if abs(item.span_angle) >= 360.0:
        return _outline(ET.Element("circle", cx=_fmt(cx), cy=_fmt(cy), r=_fmt(r)))

    start = math.radians(item.start_angle)
    end = math.radians(item.start_angle + item.span_angle)
    sx, sy = cx + r * math.cos(start), cy - r * math.sin(start)
    ex, ey = cx + r * math.cos(end), cy - r * math.sin(end)
    large = 1 if abs(item.span_angle) > 180.0 else 0
    # positive spans run counter-clockwise on screen, which is SVG's negative sweep
    sweep = 0 if item.span_angle > 0 else 1
    d = (
        f"M {_fmt(sx)} {_fmt(sy)} "
        f"A {_fmt(r)} {_fmt(r)} 0 {large} {sweep} {_fmt(ex)} {_fmt(ey)}"
    )
    el = _outline(ET.Element("path", d=d))
    el.set("stroke-linecap", "round")
    return el


def primitive_to_element(item: Primitive) -> ET.Element:
    match item:
        case Dot(x=x, y=y, size=size):
            return ET.Element("circle", cx=_fmt(x), cy=_fmt(y), r=_fmt(size / 2), fill=STROKE)
        case Segment(x1=x1, y1=y1, x2=x2, y2=y2):
            return ET.Element(
                "line", x1=_fmt(x1), y1=_fmt(y1), x2=_fmt(x2), y2=_fmt(y2), stroke=STROKE
            )
        case ArcItem():
            return _arc_path(item)
        case Box(x=x, y=y, width=w, height=h, fill=fill):
            el = ET.Element("rect", x=_fmt(x), y=_fmt(y), width=_fmt(w), height=_fmt(h))
            if fill is None:
                return _outline(el)
            r, g, b = (_clamp(c) for c in fill)
            el.set("fill", f"rgb({r},{g},{b})")
            el.set("stroke", "none")
            return el
        case Oval(box=box):
            rx, ry = box.width / 2, box.height / 2
            return _outline(
                ET.Element(
                    "ellipse",
                    cx=_fmt(box.x + rx), cy=_fmt(box.y + ry), rx=_fmt(rx), ry=_fmt(ry),
                )
            )
    raise TypeError(f"Unknown primitive {item!r}")


def scene_to_svg(scene: Iterable[Primitive], width: int, height: int) -> str:
    """Serialize a scene as a standalone SVG document."""
    root = ET.Element(
        "svg",
        xmlns=SVG_NS,
        width=str(width),
        height=str(height),
        viewBox=f"0 0 {width} {height}",
    )
    for item in scene:
        root.append(primitive_to_element(item))
    return ET.tostring(root, encoding="unicode")
