"""Rules for Vec, vecnil, vec::, head, tail and ind-Vec.

A vector's length lives in its type, so the rules that take a vector apart
insist that the length is visibly an `add1`.
"""

from __future__ import annotations

from pie import CoreExpr, PieValue
from pie.core import Head, IndVec, Tail, Vec, VecCons, VecNil
from pie.errors import PieTypeMismatch
from pie.checking.renaming import Renaming
from pie.checking.support import (
    Judgments,
    evaluate,
    require_same,
    shape_mismatch,
    show_type,
    synth_target,
)
from pie.evaluation.eliminators import do_ap, ind_vec_step_type, vec_motive_type
from pie.types.context import Context
from pie.values import VAdd1, VNat, VUniverse, VVec, VVecNil, VZero


def _nonempty_length(context: Context, vec_type: VVec, what: str) -> PieValue:
    length = vec_type.length.now()
    if not isinstance(length, VAdd1):
        found = show_type(context, vec_type)
        raise PieTypeMismatch(
            "a Vec whose length is an add1",
            found,
            message=f"{what} requires a non-empty Vec, but got {found}",
        )
    return length.smaller


def synth_vec(context: Context, renaming: Renaming, expr: Vec, j: Judgments):
    entry_core = j.check(context, expr.entry_type, VUniverse(), renaming)
    length_core = j.check(context, expr.length, VNat(), renaming)
    return Vec(entry_core, length_core), VUniverse()


def type_vec(context: Context, renaming: Renaming, expr: Vec, j: Judgments) -> CoreExpr:
    entry_core = j.is_type(context, expr.entry_type, renaming)
    return Vec(entry_core, j.check(context, expr.length, VNat(), renaming))


def check_vecnil(
    context: Context, renaming: Renaming, expr: VecNil, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VVec):
        raise shape_mismatch(context, expected, expr, "vecnil")
    require_same(context, VNat(), VZero(), expected.length)
    return VecNil()


def check_vec_cons(
    context: Context, renaming: Renaming, expr: VecCons, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VVec):
        raise shape_mismatch(context, expected, expr, "A vec::-expression")
    smaller = _nonempty_length(context, expected, "vec::")
    head_core = j.check(context, expr.head, expected.entry_type, renaming)
    tail_core = j.check(context, expr.tail, VVec(expected.entry_type, smaller), renaming)
    return VecCons(head_core, tail_core)


def synth_head(context: Context, renaming: Renaming, expr: Head, j: Judgments):
    vec_core, vec_type = synth_target(context, renaming, expr.vec, j, "head", VVec, "Vec")
    _nonempty_length(context, vec_type, "head")
    return Head(vec_core), vec_type.entry_type


def synth_tail(context: Context, renaming: Renaming, expr: Tail, j: Judgments):
    vec_core, vec_type = synth_target(context, renaming, expr.vec, j, "tail", VVec, "Vec")
    smaller = _nonempty_length(context, vec_type, "tail")
    return Tail(vec_core), VVec(vec_type.entry_type, smaller)


def synth_ind_vec(context: Context, renaming: Renaming, expr: IndVec, j: Judgments):
    length_core = j.check(context, expr.length, VNat(), renaming)
    length = evaluate(context, length_core)
    target_core, vec_type = synth_target(
        context, renaming, expr.target, j, "ind-Vec", VVec, "Vec"
    )
    require_same(context, VNat(), length, vec_type.length)
    entry_type = vec_type.entry_type
    motive_core = j.check(context, expr.motive, vec_motive_type(entry_type), renaming)
    motive = evaluate(context, motive_core)
    base_core = j.check(
        context, expr.base, do_ap(do_ap(motive, VZero()), VVecNil()), renaming
    )
    step_core = j.check(context, expr.step, ind_vec_step_type(entry_type, motive), renaming)
    result_type = do_ap(do_ap(motive, length), evaluate(context, target_core))
    return IndVec(length_core, target_core, motive_core, base_core, step_core), result_type
