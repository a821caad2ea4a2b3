"""Runtime environment for PostLisp.

The Environment is a single flat symbol table. Each name occupies at most one
slot, which holds either a bound value Expression, a builtin procedure, or a
special-form marker with no value. Once a name occupies a slot it can never be
bound again until `reset()` reinstalls the baseline catalog.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, Union

from postlisp.types.atoms import Atom
from postlisp.types.expression import Expression
from postlisp.errors import (
    PostLispRedefinitionError,
    PostLispUnboundSymbol,
    PostLispUnknownProcedure,
)

# A builtin receives the already-evaluated argument Atoms.
Procedure = Callable[[list[Atom]], Expression]


class SpecialFormMarker:
    """Occupies a special-form name so it is reserved but not callable."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"<special form {self.name}>"


Slot = Union[Expression, Procedure, SpecialFormMarker]


class Environment:
    """Flat mapping from symbol names to values, procedures and reserved markers."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Slot] = {}
        self.reset()

    def reset(self) -> None:
        """Drop every binding and reinstall the baseline catalog."""
        # Lazy import to avoid circular imports
        from postlisp.builtin.env_builtin import register

        self.vars.clear()
        register(self)

    def install(self, name: str, slot: Slot) -> None:
        """Baseline installation; bypasses the reservation check."""
        self.vars[name] = slot

    def define(self, name: str, value: Expression) -> None:
        """Bind `name` to `value`.

        Raises PostLispRedefinitionError if `name` already occupies a slot.
        """
        if name in self.vars:
            raise PostLispRedefinitionError(f"define: cannot redefine built-in symbol: {name}")
        self.vars[name] = value

    def is_symbol_bound(self, name: str) -> bool:
        return isinstance(self.vars.get(name), Expression)

    def get_symbol(self, name: str) -> Expression:
        value = self.vars.get(name)
        if not isinstance(value, Expression):
            raise PostLispUnboundSymbol(f"Unbound symbol: {name}")
        return value

    def is_procedure(self, name: str) -> bool:
        slot = self.vars.get(name)
        return callable(slot) and not isinstance(slot, SpecialFormMarker)

    def get_procedure(self, name: str) -> Procedure:
        if not self.is_procedure(name):
            raise PostLispUnknownProcedure(f"Unknown procedure: {name}")
        return self.vars[name]

    def is_reserved(self, name: str) -> bool:
        return name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write user-visible value bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not isinstance(v, Expression):
                continue
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(f" procedures={sum(1 for n in self.vars if self.is_procedure(n))}>")
            return buffer.getvalue()
