from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from postlisp.types.atoms import Atom, NONE


@dataclass(frozen=True, eq=False)
class Expression:
    """An Atom head plus an ordered tail of child Expressions.

    An empty tail marks a literal; a non-empty tail marks a call whose operator
    is the head Symbol and whose operands are the tail, left to right.
    """

    head: Atom = NONE
    tail: tuple[Expression, ...] = ()

    def __post_init__(self):
        if not isinstance(self.tail, tuple):
            object.__setattr__(self, "tail", tuple(self.tail))

    @classmethod
    def of(cls, atom: Atom) -> Expression:
        return cls(atom)

    @classmethod
    def call(cls, head: Atom, args: Iterable[Expression]) -> Expression:
        return cls(head, tuple(args))

    @property
    def is_call(self) -> bool:
        return bool(self.tail)

    @property
    def is_literal(self) -> bool:
        return not self.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        if self.head != other.head:
            return False
        if len(self.tail) != len(other.tail):
            return False
        return all(a == b for a, b in zip(self.tail, other.tail))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        from postlisp.printer import to_string
        return to_string(self)
