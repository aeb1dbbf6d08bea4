"""Closures: one-argument semantic functions for binders."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from pie import CoreExpr, PieValue
from pie.types.environment import Environment
from pie.types.symbol import Symbol


class Closure:
    """A core body under one binder, together with the environment it was built in."""

    __slots__ = ("env", "name", "body")

    def __init__(self, env: Environment, name: Symbol, body: CoreExpr):
        self.env: Environment = env
        self.name: Symbol = name
        self.body: CoreExpr = body

    def apply(self, value: PieValue) -> PieValue:
        """Evaluate the body with `name` bound to `value` in the captured environment."""
        from pie.evaluation.evaluator import val_of
        return val_of(self.env.extend(self.name, value), self.body)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(closure (")
            buffer.write(str(self.name))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class HigherOrderClosure:
    """A closure whose body is a Python function from value to value.

    The checker and the evaluator use these to build the types of eliminator
    arguments, e.g. the `Π (n Nat) (mot (add1 n))` of an ind-Nat step.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: Symbol, fn: Callable[[PieValue], PieValue]):
        self.name: Symbol = name
        self.fn = fn

    def apply(self, value: PieValue) -> PieValue:
        return self.fn(value)

    def __repr__(self) -> str:
        return f"<closure ({self.name}) {self.fn!r}>"
