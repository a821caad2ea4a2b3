# Core type aliases for PostLisp.
#
# Values and syntax share one representation: an Expression whose head is an
# Atom (see postlisp.types). These aliases name the roles used across the
# evaluator and special forms; the concrete types are imported for checking only.

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:
    from postlisp.types.environment import Environment
    from postlisp.types.expression import Expression

__version__ = "0.1.0"

# Graphical Expressions queued by `draw`, in discovery order
Graphics = List["Expression"]

# Evaluator function type: (expr, env, graphics) -> Expression
EvaluatorFn = Callable[["Expression", "Environment", Optional[Graphics]], "Expression"]
