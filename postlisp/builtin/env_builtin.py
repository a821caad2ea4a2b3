"""Built-in procedures for the PostLisp runtime environment.

This module defines arithmetic, boolean logic, comparison, math and geometry
constructors, plus `register`, which installs the baseline catalog (including
the `pi` constant and the special-form markers) into an Environment.

Every builtin checks its argument count and argument kinds before computing.
"""
from __future__ import annotations

import math

from postlisp.types.atoms import (
    Atom, Boolean, Number, Point, Line, Arc, Rect, FillRect, Ellipse,
)
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment, SpecialFormMarker
from postlisp.errors import (
    PostLispArityError,
    PostLispTypeError,
    PostLispDomainError,
    PostLispDivisionByZero,
)

SPECIAL_FORM_NAMES = ("define", "begin", "if", "draw")


# -------------------------------
# Argument checking
# -------------------------------
def _exactly(op: str, args: list[Atom], n: int) -> None:
    if len(args) != n:
        raise PostLispArityError(f"{op}: wrong number of arguments")


def _at_least_one(op: str, args: list[Atom]) -> None:
    if not args:
        raise PostLispArityError(f"{op}: requires at least one argument")


def _expect(op: str, args: list[Atom], kind: type[Atom]) -> None:
    for a in args:
        if not isinstance(a, kind):
            raise PostLispTypeError(f"{op}: argument must be {kind.kind}")


def _numbers(op: str, args: list[Atom]) -> list[float]:
    _expect(op, args, Number)
    return [a.value for a in args]


def _bools(op: str, args: list[Atom]) -> list[bool]:
    _expect(op, args, Boolean)
    return [a.value for a in args]


def _num(v: float) -> Expression:
    return Expression.of(Number(v))


def _bool(v: bool) -> Expression:
    return Expression.of(Boolean(v))


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Atom]) -> Expression:
    """Return the sum of one or more Numbers."""
    _at_least_one("+", args)
    result = 0.0
    for x in _numbers("+", args):
        result += x
    return _num(result)


def sub(args: list[Atom]) -> Expression:
    """Unary negation for one arg, subtraction for two."""
    if len(args) not in (1, 2):
        raise PostLispArityError("-: wrong number of arguments")
    nums = _numbers("-", args)
    if len(nums) == 1:
        return _num(-nums[0])
    return _num(nums[0] - nums[1])


def mul(args: list[Atom]) -> Expression:
    """Return the product of one or more Numbers."""
    _at_least_one("*", args)
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return _num(result)


def div(args: list[Atom]) -> Expression:
    _exactly("/", args, 2)
    a, b = _numbers("/", args)
    if b == 0.0:
        raise PostLispDivisionByZero("/: division by zero")
    return _num(a / b)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(args: list[Atom]) -> Expression:
    _exactly("not", args, 1)
    (v,) = _bools("not", args)
    return _bool(not v)


def logical_and(args: list[Atom]) -> Expression:
    """Fold with and; every argument has already been evaluated by the caller."""
    _at_least_one("and", args)
    return _bool(all(_bools("and", args)))


def logical_or(args: list[Atom]) -> Expression:
    _at_least_one("or", args)
    return _bool(any(_bools("or", args)))


# -------------------------------
# Comparison
# -------------------------------
def _comparison(op: str, test):
    def compare(args: list[Atom]) -> Expression:
        _exactly(op, args, 2)
        a, b = _numbers(op, args)
        return _bool(test(a, b))
    compare.__name__ = f"compare_{op}"
    compare.__doc__ = f"({op}) on exactly two Numbers."
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)
# == uses the same machine-epsilon tolerance as value equality
equals = _comparison("==", lambda a, b: Number(a) == Number(b))


# -------------------------------
# Math
# -------------------------------
def sqrt(args: list[Atom]) -> Expression:
    _exactly("sqrt", args, 1)
    (x,) = _numbers("sqrt", args)
    if x < 0.0:
        raise PostLispDomainError("sqrt: domain error")
    return _num(math.sqrt(x))


def log2(args: list[Atom]) -> Expression:
    _exactly("log2", args, 1)
    (x,) = _numbers("log2", args)
    if x <= 0.0:
        raise PostLispDomainError("log2: domain error")
    return _num(math.log2(x))


def _periodic(fn, x: float) -> float:
    # math.sin/cos reject infinities; the result there is NaN
    if math.isinf(x):
        return math.nan
    return fn(x)


def sin(args: list[Atom]) -> Expression:
    _exactly("sin", args, 1)
    (x,) = _numbers("sin", args)
    return _num(_periodic(math.sin, x))


def cos(args: list[Atom]) -> Expression:
    _exactly("cos", args, 1)
    (x,) = _numbers("cos", args)
    return _num(_periodic(math.cos, x))


def arctan(args: list[Atom]) -> Expression:
    """(y x arctan) => atan2(y, x)."""
    _exactly("arctan", args, 2)
    y, x = _numbers("arctan", args)
    return _num(math.atan2(y, x))


# -------------------------------
# Geometry constructors
# -------------------------------
def point(args: list[Atom]) -> Expression:
    _exactly("point", args, 2)
    x, y = _numbers("point", args)
    return Expression.of(Point(x, y))


def line(args: list[Atom]) -> Expression:
    _exactly("line", args, 2)
    _expect("line", args, Point)
    return Expression.of(Line(args[0], args[1]))


def arc(args: list[Atom]) -> Expression:
    """(center start angle arc); angle is in radians."""
    _exactly("arc", args, 3)
    _expect("arc", args[:2], Point)
    (angle,) = _numbers("arc", args[2:])
    return Expression.of(Arc(args[0], args[1], angle))


def rect(args: list[Atom]) -> Expression:
    """Corners are stored as given, not normalized."""
    _exactly("rect", args, 2)
    _expect("rect", args, Point)
    return Expression.of(Rect(args[0], args[1]))


def fill_rect(args: list[Atom]) -> Expression:
    _exactly("fill_rect", args, 4)
    _expect("fill_rect", args[:1], Rect)
    r, g, b = _numbers("fill_rect", args[1:])
    return Expression.of(FillRect(args[0], r, g, b))


def ellipse(args: list[Atom]) -> Expression:
    _exactly("ellipse", args, 1)
    _expect("ellipse", args, Rect)
    return Expression.of(Ellipse(args[0]))


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "not": logical_not,
    "and": logical_and,
    "or": logical_or,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "==": equals,
    "sqrt": sqrt,
    "log2": log2,
    "sin": sin,
    "cos": cos,
    "arctan": arctan,
    "point": point,
    "line": line,
    "arc": arc,
    "rect": rect,
    "fill_rect": fill_rect,
    "ellipse": ellipse,
}


def register(env: Environment) -> None:
    """Install the baseline catalog: constants, procedures and special-form markers."""
    env.install("pi", _num(math.atan2(0.0, -1.0)))
    for name, proc in BUILTINS.items():
        env.install(name, proc)
    for name in SPECIAL_FORM_NAMES:
        env.install(name, SpecialFormMarker(name))
