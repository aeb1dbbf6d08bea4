"""Values: the semantic domain of normalization by evaluation.

Evaluation turns core expressions into values; read-back turns values (at a
type) back into normal-form core expressions. Types with η-rules (Π, Σ,
Trivial, Absurd) constrain that normal form, so read-back inspects the type
before it inspects the value.

Laziness is implemented with `Delay`, a cell that holds an unevaluated
(environment, expression) pair until something asks for its value. Call
`now()` on a value before inspecting which form it has.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from pie import CoreExpr
from pie.types.environment import Environment
from pie.types.symbol import Symbol

if TYPE_CHECKING:
    from pie.neutral import Neutral as NeutralTerm
    from pie.types.closure import Closure, HigherOrderClosure

    AnyClosure = Union[Closure, HigherOrderClosure]


class Value:
    """Base class of every value."""

    __slots__ = ()

    def now(self) -> Value:
        """The value itself; only a Delay has work left to do."""
        return self


class Delay(Value):
    """A write-once memo cell for call-by-need evaluation.

    Every alias of the same Delay observes the forced value: the cell is
    shared by identity and updated in place exactly once.
    """

    __slots__ = ("_env", "_expr", "_value")

    def __init__(self, env: Environment, expr: CoreExpr):
        self._env: Environment | None = env
        self._expr: CoreExpr | None = expr
        self._value: Value | None = None

    @property
    def is_forced(self) -> bool:
        return self._value is not None

    def now(self) -> Value:
        if self._value is None:
            from pie.evaluation.evaluator import val_of
            value = val_of(self._env, self._expr).now()
            # A racing force computes an equal value; keep the first one.
            if self._value is None:
                self._value = value
                self._env = None
                self._expr = None
        return self._value

    def __repr__(self) -> str:
        if self._value is not None:
            return f"Delay(forced={self._value!r})"
        return f"Delay({self._expr!r})"


def later(env: Environment, expr: CoreExpr) -> Value:
    """Postpone evaluating `expr`; cheap forms are evaluated immediately."""
    from pie import core as C
    from pie.evaluation.evaluator import val_of
    if isinstance(expr, (C.Var, C.Zero, C.Nat, C.Universe, C.Atom, C.Quote,
                         C.Trivial, C.Sole, C.Absurd, C.Nil, C.VecNil)):
        return val_of(env, expr)
    return Delay(env, expr)


@dataclass(frozen=True, eq=False)
class TypedValue:
    """A value together with its type, for neutral arguments that read back at a type."""
    type: Value
    value: Value


@dataclass(frozen=True, eq=False)
class Neutral(Value):
    """A computation stuck on a free variable, and its type."""
    type: Value
    neutral: NeutralTerm


# --- Types ---

@dataclass(frozen=True, eq=False)
class VUniverse(Value):
    pass


@dataclass(frozen=True, eq=False)
class VPi(Value):
    name: Symbol
    arg_type: Value
    result_type: AnyClosure


@dataclass(frozen=True, eq=False)
class VSigma(Value):
    name: Symbol
    car_type: Value
    cdr_type: AnyClosure


@dataclass(frozen=True, eq=False)
class VNat(Value):
    pass


@dataclass(frozen=True, eq=False)
class VAtom(Value):
    pass


@dataclass(frozen=True, eq=False)
class VTrivial(Value):
    pass


@dataclass(frozen=True, eq=False)
class VAbsurd(Value):
    pass


@dataclass(frozen=True, eq=False)
class VList(Value):
    entry_type: Value


@dataclass(frozen=True, eq=False)
class VVec(Value):
    entry_type: Value
    length: Value


@dataclass(frozen=True, eq=False)
class VEither(Value):
    left_type: Value
    right_type: Value


@dataclass(frozen=True, eq=False)
class VEqual(Value):
    type: Value
    from_: Value
    to: Value


# --- Constructors ---

@dataclass(frozen=True, eq=False)
class VLambda(Value):
    param: Symbol
    body: AnyClosure


@dataclass(frozen=True, eq=False)
class VZero(Value):
    pass


@dataclass(frozen=True, eq=False)
class VAdd1(Value):
    smaller: Value


@dataclass(frozen=True, eq=False)
class VQuote(Value):
    atom: str


@dataclass(frozen=True, eq=False)
class VCons(Value):
    car: Value
    cdr: Value


@dataclass(frozen=True, eq=False)
class VSole(Value):
    pass


@dataclass(frozen=True, eq=False)
class VNil(Value):
    pass


@dataclass(frozen=True, eq=False)
class VListCons(Value):
    head: Value
    tail: Value


@dataclass(frozen=True, eq=False)
class VVecNil(Value):
    pass


@dataclass(frozen=True, eq=False)
class VVecCons(Value):
    head: Value
    tail: Value


@dataclass(frozen=True, eq=False)
class VLeft(Value):
    value: Value


@dataclass(frozen=True, eq=False)
class VRight(Value):
    value: Value


@dataclass(frozen=True, eq=False)
class VSame(Value):
    value: Value
