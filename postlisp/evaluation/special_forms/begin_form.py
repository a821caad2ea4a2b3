from postlisp import EvaluatorFn, Graphics
from postlisp.errors import PostLispArityError
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment
from postlisp.types.tail_call import TailCall


def begin_form(
    tail: tuple[Expression, ...],
    env: Environment,
    graphics: Graphics,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> Expression | TailCall:
    if not tail:
        raise PostLispArityError("begin: requires at least one expression")
    for e in tail[:-1]:
        evaluate_fn(e, env, graphics)
    if is_tail_call:
        return TailCall(tail[-1])
    return evaluate_fn(tail[-1], env, graphics)
