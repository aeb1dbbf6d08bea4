"""Core expressions of Pie.

Core expressions are the fully elaborated, name-based syntax that the checker,
the evaluator and read-back share. They are immutable: the front-end builds
them once and every judgment returns new trees.

Binding forms name the field that holds the bound name and the field that is
its scope in `binds`; everything else is an ordinary sub-expression, an atom
name or a literal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from pie.types.symbol import Symbol


class Core:
    """Base class of every core expression."""

    binds: ClassVar[Optional[tuple[str, str]]] = None

    def __str__(self) -> str:
        from pie.debug_utils.pprint import to_sexpr
        return to_sexpr(self)


# --- Universe, functions and annotations ---

@dataclass(frozen=True)
class Universe(Core):
    pass


@dataclass(frozen=True)
class Pi(Core):
    binds = ("name", "result_type")
    name: Symbol
    arg_type: Core
    result_type: Core


@dataclass(frozen=True)
class Sigma(Core):
    binds = ("name", "cdr_type")
    name: Symbol
    car_type: Core
    cdr_type: Core


@dataclass(frozen=True)
class Lambda(Core):
    binds = ("param", "body")
    param: Symbol
    body: Core


@dataclass(frozen=True)
class Application(Core):
    fn: Core
    arg: Core


@dataclass(frozen=True)
class The(Core):
    type: Core
    expr: Core


@dataclass(frozen=True)
class Var(Core):
    name: Symbol


# --- Natural numbers ---

@dataclass(frozen=True)
class Nat(Core):
    pass


@dataclass(frozen=True)
class Zero(Core):
    pass


@dataclass(frozen=True)
class Add1(Core):
    smaller: Core


@dataclass(frozen=True)
class WhichNat(Core):
    target: Core
    base: Core
    step: Core


@dataclass(frozen=True)
class IterNat(Core):
    target: Core
    base: Core
    step: Core


@dataclass(frozen=True)
class RecNat(Core):
    target: Core
    base: Core
    step: Core


@dataclass(frozen=True)
class IndNat(Core):
    target: Core
    motive: Core
    base: Core
    step: Core


# --- Atoms ---

@dataclass(frozen=True)
class Atom(Core):
    pass


@dataclass(frozen=True)
class Quote(Core):
    atom: str


# --- Pairs ---

@dataclass(frozen=True)
class Cons(Core):
    car: Core
    cdr: Core


@dataclass(frozen=True)
class Car(Core):
    pair: Core


@dataclass(frozen=True)
class Cdr(Core):
    pair: Core


# --- Trivial and Absurd ---

@dataclass(frozen=True)
class Trivial(Core):
    pass


@dataclass(frozen=True)
class Sole(Core):
    pass


@dataclass(frozen=True)
class Absurd(Core):
    pass


@dataclass(frozen=True)
class IndAbsurd(Core):
    target: Core
    motive: Core


# --- Lists ---

@dataclass(frozen=True)
class List(Core):
    entry_type: Core


@dataclass(frozen=True)
class Nil(Core):
    pass


@dataclass(frozen=True)
class ListCons(Core):
    head: Core
    tail: Core


@dataclass(frozen=True)
class RecList(Core):
    target: Core
    base: Core
    step: Core


@dataclass(frozen=True)
class IndList(Core):
    target: Core
    motive: Core
    base: Core
    step: Core


# --- Vectors ---

@dataclass(frozen=True)
class Vec(Core):
    entry_type: Core
    length: Core


@dataclass(frozen=True)
class VecNil(Core):
    pass


@dataclass(frozen=True)
class VecCons(Core):
    head: Core
    tail: Core


@dataclass(frozen=True)
class Head(Core):
    vec: Core


@dataclass(frozen=True)
class Tail(Core):
    vec: Core


@dataclass(frozen=True)
class IndVec(Core):
    length: Core
    target: Core
    motive: Core
    base: Core
    step: Core


# --- Either ---

@dataclass(frozen=True)
class Either(Core):
    left_type: Core
    right_type: Core


@dataclass(frozen=True)
class Left(Core):
    value: Core


@dataclass(frozen=True)
class Right(Core):
    value: Core


@dataclass(frozen=True)
class IndEither(Core):
    target: Core
    motive: Core
    base_left: Core
    base_right: Core


# --- Equality ---

@dataclass(frozen=True)
class Equal(Core):
    type: Core
    from_: Core
    to: Core


@dataclass(frozen=True)
class Same(Core):
    value: Core


@dataclass(frozen=True)
class Replace(Core):
    target: Core
    motive: Core
    base: Core


@dataclass(frozen=True)
class Trans(Core):
    left: Core
    right: Core


@dataclass(frozen=True)
class Cong(Core):
    target: Core
    fun: Core


@dataclass(frozen=True)
class Symm(Core):
    target: Core


@dataclass(frozen=True)
class IndEqual(Core):
    target: Core
    motive: Core
    base: Core


# --- Holes ---

@dataclass(frozen=True)
class Todo(Core):
    pass


def nat_literal(n: int) -> Core:
    """Build the core numeral `(add1 ... zero)` for a non-negative integer."""
    if n < 0:
        raise ValueError(f"Natural numbers are non-negative, got {n}")
    expr: Core = Zero()
    for _ in range(n):
        expr = Add1(expr)
    return expr
