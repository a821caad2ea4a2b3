from postlisp.types.atoms import (
    Atom, NoneAtom, Boolean, Number, Symbol, Point, Line, Arc, Rect, FillRect, Ellipse,
    NONE, TRUE, FALSE, GRAPHICAL_KINDS, EPSILON, is_graphical, tol_eq,
)
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment, SpecialFormMarker

__all__ = [
    "Atom", "NoneAtom", "Boolean", "Number", "Symbol", "Point", "Line", "Arc",
    "Rect", "FillRect", "Ellipse", "NONE", "TRUE", "FALSE", "GRAPHICAL_KINDS",
    "EPSILON", "is_graphical", "tol_eq", "Expression", "Environment",
    "SpecialFormMarker",
]
