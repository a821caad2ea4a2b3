from __future__ import annotations

import logging
from typing import TextIO

from postlisp.errors import PostLispSyntaxError
from postlisp.reader.parser import parse
from postlisp.types.expression import Expression
from postlisp.types.environment import Environment
from postlisp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One evaluation session: owns an Environment and the graphics produced by
    the most recent top-level evaluation.

    Not safe for concurrent use; callers must serialize `parse`/`eval` pairs.
    """

    def __init__(self):
        self.env: Environment = Environment()
        self.ast: Expression | None = None
        self.graphics: list[Expression] = []

    def parse(self, source: str | TextIO) -> bool:
        """Parse source into the pending AST. Returns False on any syntax error."""
        self.ast = parse(source)
        if self.ast is None:
            logger.debug("parse failed")
            return False
        return True

    def eval(self) -> Expression:
        """Evaluate the AST produced by the last successful `parse`.

        Semantic errors propagate; the graphics of a failed evaluation are dropped.
        """
        if self.ast is None:
            raise PostLispSyntaxError()
        drawn: list[Expression] = []
        self.graphics = []
        result = evaluate(self.ast, self.env, drawn)
        self.graphics = drawn
        logger.debug("evaluated to %s with %d graphical value(s)", result, len(drawn))
        return result

    def run(self, source: str | TextIO) -> Expression:
        """Parse and evaluate in one step, raising PostLispSyntaxError on parse failure."""
        if not self.parse(source):
            raise PostLispSyntaxError()
        return self.eval()

    def reset(self) -> None:
        """Return the session to the baseline environment."""
        logger.debug("resetting environment")
        self.env.reset()
        self.ast = None
        self.graphics = []
