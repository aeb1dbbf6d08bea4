"""Typing context for the Pie core.

A Context is an ordered, persistent record of the names in scope:
locally bound variables (Free), top-level definitions (Definition) and
top-level claims awaiting a definition (Claim). It also drives fresh-name
selection, so every name bound in one context is distinct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterator, Optional, Union

from pie import PieValue
from pie.types.environment import Environment
from pie.types.symbol import Symbol

_SUBSCRIPTS = "₀₁₂₃₄₅₆₇₈₉"
_FROM_SUBSCRIPT = {c: str(i) for i, c in enumerate(_SUBSCRIPTS)}


@dataclass(frozen=True, eq=False)
class Free:
    """A locally bound variable of the given type."""
    type: PieValue


@dataclass(frozen=True, eq=False)
class Definition:
    """A top-level name with its type and value."""
    type: PieValue
    value: PieValue


@dataclass(frozen=True, eq=False)
class Claim:
    """A top-level name whose type is known but which is not yet defined."""
    type: PieValue


Binding = Union[Free, Definition, Claim]


@dataclass(frozen=True, eq=False)
class Context:
    bindings: tuple[tuple[Symbol, Binding], ...] = field(default_factory=tuple)

    def _extend(self, name: Symbol, binding: Binding) -> Context:
        return Context(self.bindings + ((name, binding),))

    def bind_free(self, name: Symbol, type_value: PieValue) -> Context:
        return self._extend(name, Free(type_value))

    def bind_claim(self, name: Symbol, type_value: PieValue) -> Context:
        return self._extend(name, Claim(type_value))

    def bind_definition(self, name: Symbol, type_value: PieValue, value: PieValue) -> Context:
        """Define `name`, replacing a claim for it if there is one."""
        kept = tuple((n, b) for n, b in self.bindings
                     if not (n == name and isinstance(b, Claim)))
        return Context(kept + ((name, Definition(type_value, value)),))

    def lookup(self, name: Symbol) -> Optional[Binding]:
        for n, binding in reversed(self.bindings):
            if n == name:
                return binding
        return None

    def names(self) -> set[Symbol]:
        return {n for n, _ in self.bindings}

    def __contains__(self, name: Symbol) -> bool:
        return self.lookup(name) is not None

    def __iter__(self) -> Iterator[tuple[Symbol, Binding]]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    @cached_property
    def environment(self) -> Environment:
        """The evaluation environment seen by expressions checked in this context.

        Free variables evaluate to neutral variables, definitions to their
        values; claims are not yet visible.
        """
        from pie.neutral import NVar
        from pie.values import Neutral

        env = Environment()
        for name, binding in self.bindings:
            if isinstance(binding, Free):
                env = env.extend(name, Neutral(binding.type, NVar(name)))
            elif isinstance(binding, Definition):
                env = env.extend(name, binding.value)
        return env


def _split_subscript(name: str) -> tuple[str, int]:
    """Split `x₁₂` into ("x", 12); a name without a subscript yields 0."""
    end = len(name)
    while end > 0 and name[end - 1] in _FROM_SUBSCRIPT:
        end -= 1
    digits = name[end:]
    if not digits or end == 0:
        return name, 0
    return name[:end], int("".join(_FROM_SUBSCRIPT[c] for c in digits))


def _subscript(n: int) -> str:
    return "".join(_SUBSCRIPTS[int(d)] for d in str(n))


def fresh_name(context: Context, hint: Symbol) -> Symbol:
    """Return a name based on `hint` that is not bound anywhere in `context`.

    The result depends only on the context's current names: `x` if it is
    free, otherwise the first of `x₁`, `x₂`, ... that is.
    """
    used = context.names()
    if hint not in used:
        return hint
    base, n = _split_subscript(str(hint))
    n += 1
    candidate = Symbol(base + _subscript(n))
    while candidate in used:
        n += 1
        candidate = Symbol(base + _subscript(n))
    return candidate
