from postlisp import EvaluatorFn, Graphics
from postlisp.errors import PostLispTypeError
from postlisp.types.atoms import NONE, is_graphical
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment


def draw_form(
    tail: tuple[Expression, ...],
    env: Environment,
    graphics: Graphics,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> Expression:
    """
    (g1 g2 ... draw)
    Evaluates every argument left to right and queues each graphical result
    for the renderer. Returns None.
    """
    for i, e in enumerate(tail, start=1):
        value = evaluate_fn(e, env, graphics)
        if not (value.is_literal and is_graphical(value.head)):
            raise PostLispTypeError(f"draw: argument {i} is not a graphical object")
        graphics.append(value)
    return Expression.of(NONE)
