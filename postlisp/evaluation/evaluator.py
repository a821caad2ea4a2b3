"""Core evaluator and trampoline for the PostLisp interpreter.

Reduces an Expression tree to a single value Expression. Special forms are
dispatched by name before procedure application. `begin` and `if` hand their
tail expression back as a TailCall so long chains of them run in constant
Python stack; everything else recurses naturally.
"""

from __future__ import annotations

from postlisp import Graphics
from postlisp.errors import PostLispMalformedExpression, PostLispUnboundSymbol
from postlisp.types.atoms import Symbol
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment
from postlisp.types.tail_call import TailCall
from postlisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(
    expr: Expression, env: Environment, graphics: Graphics | None = None
) -> Expression:
    """
    Trampoline evaluator. Graphical values passed to `draw` are appended to
    `graphics` in evaluation order.
    """
    if graphics is None:
        graphics = []

    result = evaluate0(expr, env, graphics, True)  # Start in 'tail' mode.
    while isinstance(result, TailCall):
        result = evaluate0(result.expr, env, graphics, True)
    return result


def evaluate0(
    expr: Expression,
    env: Environment,
    graphics: Graphics,
    is_tail_call: bool = False,
) -> Expression | TailCall:
    """
    Single evaluation step. Returns either a value or, in tail position, a
    TailCall for the trampoline to continue.
    """
    head = expr.head

    # --- Atoms ---
    if not expr.is_call:
        if isinstance(head, Symbol):
            if not env.is_symbol_bound(head.name):
                raise PostLispUnboundSymbol(f"Undefined symbol: {head.name}")
            return env.get_symbol(head.name)
        return expr

    if not isinstance(head, Symbol):
        raise PostLispMalformedExpression("Malformed expression: non-symbol head in list")

    op = head.name

    # --- Special forms handling ---
    form = SPECIAL_FORMS.get(op)
    if form is not None:
        return form(expr.tail, env, graphics, evaluate, is_tail_call)

    # --- Procedure application ---
    # Every argument is evaluated left to right, never short-circuited.
    args = [evaluate(arg, env, graphics).head for arg in expr.tail]
    proc = env.get_procedure(op)
    return proc(args)
