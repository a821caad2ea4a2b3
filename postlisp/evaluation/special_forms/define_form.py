from postlisp import EvaluatorFn, Graphics
from postlisp.errors import PostLispArityError, PostLispTypeError, PostLispRedefinitionError
from postlisp.types.atoms import Symbol
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment


def define_form(
    tail: tuple[Expression, ...],
    env: Environment,
    graphics: Graphics,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> Expression:
    """
    (name value define)
    Binds a fresh name and returns the bound value. Names already present in
    the environment, including earlier user definitions, are rejected.
    """
    if len(tail) != 2:
        raise PostLispArityError("define: wrong number of arguments")

    target, val_expr = tail
    if not (target.is_literal and isinstance(target.head, Symbol)):
        raise PostLispTypeError("define: first argument must be a symbol")
    name = target.head.name
    if env.is_reserved(name):
        raise PostLispRedefinitionError(f"define: cannot redefine built-in symbol: {name}")

    value = evaluate_fn(val_expr, env, graphics)  # normal evaluation
    env.define(name, value)
    return value
