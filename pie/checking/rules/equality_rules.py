"""Rules for =, same and the equality eliminators."""

from __future__ import annotations

from pie import CoreExpr, PieValue
from pie.core import Cong, Equal, IndEqual, Replace, Same, Symm, Trans
from pie.alpha import occurs_free
from pie.errors import PieEliminatorTargetMismatch, PieTypeMismatch
from pie.checking.renaming import Renaming
from pie.checking.support import (
    Judgments,
    annotate,
    evaluate,
    require_same,
    require_same_type,
    shape_mismatch,
    show_type,
    synth_target,
)
from pie.evaluation.eliminators import (
    do_ap,
    equal_motive_type,
    replace_motive_type,
)
from pie.evaluation.read_back import read_back_type
from pie.neutral import NVar
from pie.types.context import Context, fresh_name
from pie.values import Neutral, VEqual, VPi, VSame, VUniverse


def synth_equal(context: Context, renaming: Renaming, expr: Equal, j: Judgments):
    type_core = j.check(context, expr.type, VUniverse(), renaming)
    type_value = evaluate(context, type_core)
    from_core = j.check(context, expr.from_, type_value, renaming)
    to_core = j.check(context, expr.to, type_value, renaming)
    return Equal(type_core, from_core, to_core), VUniverse()


def type_equal(context: Context, renaming: Renaming, expr: Equal, j: Judgments) -> CoreExpr:
    type_core = j.is_type(context, expr.type, renaming)
    type_value = evaluate(context, type_core)
    return Equal(
        type_core,
        j.check(context, expr.from_, type_value, renaming),
        j.check(context, expr.to, type_value, renaming),
    )


def check_same(
    context: Context, renaming: Renaming, expr: Same, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VEqual):
        raise shape_mismatch(context, expected, expr, "A same-expression")
    value_core = j.check(context, expr.value, expected.type, renaming)
    value = evaluate(context, value_core)
    require_same(context, expected.type, expected.from_, value)
    require_same(context, expected.type, value, expected.to)
    return Same(value_core)


def _synth_equality(context, renaming, target, j, eliminator):
    return synth_target(context, renaming, target, j, eliminator, VEqual, "=")


def synth_replace(context: Context, renaming: Renaming, expr: Replace, j: Judgments):
    target_core, eq = _synth_equality(context, renaming, expr.target, j, "replace")
    motive_core = j.check(context, expr.motive, replace_motive_type(eq.type), renaming)
    motive = evaluate(context, motive_core)
    base_core = j.check(context, expr.base, do_ap(motive, eq.from_), renaming)
    return Replace(target_core, motive_core, base_core), do_ap(motive, eq.to)


def synth_trans(context: Context, renaming: Renaming, expr: Trans, j: Judgments):
    left_core, left_eq = _synth_equality(context, renaming, expr.left, j, "trans")
    right_core, right_eq = _synth_equality(context, renaming, expr.right, j, "trans")
    require_same_type(context, left_eq.type, right_eq.type)
    require_same(context, left_eq.type, left_eq.to, right_eq.from_)
    return Trans(left_core, right_core), VEqual(left_eq.type, left_eq.from_, right_eq.to)


def _non_dependent_codomain(context: Context, fun_type: VPi) -> PieValue:
    """The codomain of a function type that must not mention its argument."""
    param = fresh_name(context, fun_type.name)
    codomain = fun_type.result_type.apply(Neutral(fun_type.arg_type, NVar(param)))
    codomain_core = read_back_type(context.bind_free(param, fun_type.arg_type), codomain)
    if occurs_free(param, codomain_core):
        found = show_type(context, fun_type)
        raise PieTypeMismatch(
            "a non-dependent function type",
            found,
            message=f"cong expects a non-dependent function type, but got {found}",
        )
    return evaluate(context, codomain_core)


def synth_cong(context: Context, renaming: Renaming, expr: Cong, j: Judgments):
    target_core, eq = _synth_equality(context, renaming, expr.target, j, "cong")
    fun_core, fun_type = j.synth(context, expr.fun, renaming)
    fun_type = fun_type.now()
    if not isinstance(fun_type, VPi):
        raise PieEliminatorTargetMismatch("cong", "Π", show_type(context, fun_type))
    require_same_type(context, fun_type.arg_type, eq.type)
    codomain = _non_dependent_codomain(context, fun_type)
    fun = evaluate(context, fun_core)
    result_type = VEqual(
        codomain,
        do_ap(fun, eq.from_),
        do_ap(fun, eq.to),
    )
    fun_core = annotate(show_type(context, fun_type), fun_core)
    return Cong(target_core, fun_core), result_type


def synth_symm(context: Context, renaming: Renaming, expr: Symm, j: Judgments):
    target_core, eq = _synth_equality(context, renaming, expr.target, j, "symm")
    return Symm(target_core), VEqual(eq.type, eq.to, eq.from_)


def synth_ind_equal(context: Context, renaming: Renaming, expr: IndEqual, j: Judgments):
    target_core, eq = _synth_equality(context, renaming, expr.target, j, "ind-=")
    motive_core = j.check(context, expr.motive, equal_motive_type(eq), renaming)
    motive = evaluate(context, motive_core)
    base_core = j.check(
        context, expr.base, do_ap(do_ap(motive, eq.from_), VSame(eq.from_)), renaming
    )
    result_type = do_ap(do_ap(motive, eq.to), evaluate(context, target_core))
    return IndEqual(target_core, motive_core, base_core), result_type
