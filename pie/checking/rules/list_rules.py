"""Rules for List, nil, :: and the List eliminators."""

from __future__ import annotations

from pie import CoreExpr, PieValue
from pie.core import IndList, List, ListCons, Nil, RecList
from pie.checking.renaming import Renaming
from pie.checking.support import (
    Judgments,
    annotate,
    evaluate,
    shape_mismatch,
    show_type,
    synth_target,
)
from pie.evaluation.eliminators import (
    do_ap,
    ind_list_step_type,
    list_motive_type,
    rec_list_step_type,
)
from pie.types.context import Context
from pie.values import VList, VNil, VUniverse


def synth_list(context: Context, renaming: Renaming, expr: List, j: Judgments):
    return List(j.check(context, expr.entry_type, VUniverse(), renaming)), VUniverse()


def type_list(context: Context, renaming: Renaming, expr: List, j: Judgments) -> CoreExpr:
    return List(j.is_type(context, expr.entry_type, renaming))


def check_nil(
    context: Context, renaming: Renaming, expr: Nil, expected: PieValue, j: Judgments
) -> CoreExpr:
    if not isinstance(expected.now(), VList):
        raise shape_mismatch(context, expected, expr, "nil")
    return Nil()


def synth_list_cons(context: Context, renaming: Renaming, expr: ListCons, j: Judgments):
    head_core, entry_type = j.synth(context, expr.head, renaming)
    list_type = VList(entry_type)
    tail_core = j.check(context, expr.tail, list_type, renaming)
    return ListCons(head_core, tail_core), list_type


def check_list_cons(
    context: Context, renaming: Renaming, expr: ListCons, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VList):
        raise shape_mismatch(context, expected, expr, "A ::-expression")
    head_core = j.check(context, expr.head, expected.entry_type, renaming)
    return ListCons(head_core, j.check(context, expr.tail, expected, renaming))


def synth_rec_list(context: Context, renaming: Renaming, expr: RecList, j: Judgments):
    target_core, list_type = synth_target(
        context, renaming, expr.target, j, "rec-List", VList, "List"
    )
    base_core, base_type = j.synth(context, expr.base, renaming)
    step_core = j.check(
        context, expr.step, rec_list_step_type(list_type.entry_type, base_type), renaming
    )
    base_core = annotate(show_type(context, base_type), base_core)
    return RecList(target_core, base_core, step_core), base_type


def synth_ind_list(context: Context, renaming: Renaming, expr: IndList, j: Judgments):
    target_core, list_type = synth_target(
        context, renaming, expr.target, j, "ind-List", VList, "List"
    )
    entry_type = list_type.entry_type
    motive_core = j.check(context, expr.motive, list_motive_type(entry_type), renaming)
    motive = evaluate(context, motive_core)
    base_core = j.check(context, expr.base, do_ap(motive, VNil()), renaming)
    step_core = j.check(context, expr.step, ind_list_step_type(entry_type, motive), renaming)
    result_type = do_ap(motive, evaluate(context, target_core))
    return IndList(target_core, motive_core, base_core, step_core), result_type
