from postlisp import EvaluatorFn, Graphics
from postlisp.errors import PostLispArityError, PostLispTypeError
from postlisp.types.atoms import Boolean
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment
from postlisp.types.tail_call import TailCall


def if_form(
    tail: tuple[Expression, ...],
    env: Environment,
    graphics: Graphics,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> Expression | TailCall:
    if len(tail) != 3:
        raise PostLispArityError("if: wrong number of arguments")

    cond = evaluate_fn(tail[0], env, graphics)
    # No truthiness: the condition must be a Boolean
    if not (cond.is_literal and isinstance(cond.head, Boolean)):
        raise PostLispTypeError("if: condition must be Boolean")

    branch = tail[1] if cond.head.value else tail[2]
    if is_tail_call:
        return TailCall(branch)
    return evaluate_fn(branch, env, graphics)
