"""Neutral expressions: eliminators whose target is stuck on a free variable.

A neutral term records enough to be read back: the stuck target itself
(another neutral) and every other argument as a TypedValue, because the
arguments of a stuck eliminator are ordinary values that read back at a type.
"""

from __future__ import annotations

from dataclasses import dataclass

from pie.types.symbol import Symbol
from pie.values import TypedValue


class Neutral:
    """Base class of every neutral term."""

    __slots__ = ()


@dataclass(frozen=True, eq=False)
class NVar(Neutral):
    name: Symbol


@dataclass(frozen=True, eq=False)
class NApplication(Neutral):
    fn: Neutral
    arg: TypedValue


@dataclass(frozen=True, eq=False)
class NCar(Neutral):
    target: Neutral


@dataclass(frozen=True, eq=False)
class NCdr(Neutral):
    target: Neutral


@dataclass(frozen=True, eq=False)
class NWhichNat(Neutral):
    target: Neutral
    base: TypedValue
    step: TypedValue


@dataclass(frozen=True, eq=False)
class NIterNat(Neutral):
    target: Neutral
    base: TypedValue
    step: TypedValue


@dataclass(frozen=True, eq=False)
class NRecNat(Neutral):
    target: Neutral
    base: TypedValue
    step: TypedValue


@dataclass(frozen=True, eq=False)
class NIndNat(Neutral):
    target: Neutral
    motive: TypedValue
    base: TypedValue
    step: TypedValue


@dataclass(frozen=True, eq=False)
class NIndAbsurd(Neutral):
    target: Neutral
    motive: TypedValue


@dataclass(frozen=True, eq=False)
class NRecList(Neutral):
    target: Neutral
    base: TypedValue
    step: TypedValue


@dataclass(frozen=True, eq=False)
class NIndList(Neutral):
    target: Neutral
    motive: TypedValue
    base: TypedValue
    step: TypedValue


@dataclass(frozen=True, eq=False)
class NHead(Neutral):
    target: Neutral


@dataclass(frozen=True, eq=False)
class NTail(Neutral):
    target: Neutral


@dataclass(frozen=True, eq=False)
class NIndVec(Neutral):
    length: TypedValue
    target: Neutral
    motive: TypedValue
    base: TypedValue
    step: TypedValue


@dataclass(frozen=True, eq=False)
class NIndEither(Neutral):
    target: Neutral
    motive: TypedValue
    base_left: TypedValue
    base_right: TypedValue


@dataclass(frozen=True, eq=False)
class NReplace(Neutral):
    target: Neutral
    motive: TypedValue
    base: TypedValue


@dataclass(frozen=True, eq=False)
class NTrans(Neutral):
    # At least one side is neutral; both read back at their equality types.
    left: TypedValue
    right: TypedValue


@dataclass(frozen=True, eq=False)
class NCong(Neutral):
    target: Neutral
    fun: TypedValue


@dataclass(frozen=True, eq=False)
class NSymm(Neutral):
    target: Neutral


@dataclass(frozen=True, eq=False)
class NIndEqual(Neutral):
    target: Neutral
    motive: TypedValue
    base: TypedValue
