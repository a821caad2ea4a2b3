from postlisp.types.expression import Expression


class TailCall:
    """An expression handed back to the evaluator loop instead of recursing."""

    __slots__ = ("expr",)

    def __init__(self, expr: Expression):
        self.expr = expr
