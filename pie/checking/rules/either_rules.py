"""Rules for Either, left, right and ind-Either."""

from __future__ import annotations

from pie import CoreExpr, PieValue
from pie.core import Either, IndEither, Left, Right
from pie.checking.renaming import Renaming
from pie.checking.support import Judgments, evaluate, shape_mismatch, synth_target
from pie.evaluation.eliminators import do_ap, either_motive_type, ind_either_base_types
from pie.types.context import Context
from pie.values import VEither, VUniverse


def synth_either(context: Context, renaming: Renaming, expr: Either, j: Judgments):
    left_core = j.check(context, expr.left_type, VUniverse(), renaming)
    right_core = j.check(context, expr.right_type, VUniverse(), renaming)
    return Either(left_core, right_core), VUniverse()


def type_either(context: Context, renaming: Renaming, expr: Either, j: Judgments) -> CoreExpr:
    return Either(
        j.is_type(context, expr.left_type, renaming),
        j.is_type(context, expr.right_type, renaming),
    )


def check_left(
    context: Context, renaming: Renaming, expr: Left, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VEither):
        raise shape_mismatch(context, expected, expr, "A left-expression")
    return Left(j.check(context, expr.value, expected.left_type, renaming))


def check_right(
    context: Context, renaming: Renaming, expr: Right, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VEither):
        raise shape_mismatch(context, expected, expr, "A right-expression")
    return Right(j.check(context, expr.value, expected.right_type, renaming))


def synth_ind_either(context: Context, renaming: Renaming, expr: IndEither, j: Judgments):
    target_core, either_type = synth_target(
        context, renaming, expr.target, j, "ind-Either", VEither, "Either"
    )
    motive_core = j.check(context, expr.motive, either_motive_type(either_type), renaming)
    motive = evaluate(context, motive_core)
    left_type, right_type = ind_either_base_types(either_type, motive)
    left_core = j.check(context, expr.base_left, left_type, renaming)
    right_core = j.check(context, expr.base_right, right_type, renaming)
    result_type = do_ap(motive, evaluate(context, target_core))
    return IndEither(target_core, motive_core, left_core, right_core), result_type
