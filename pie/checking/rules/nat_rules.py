"""Rules for Nat, zero, add1 and the Nat eliminators."""

from __future__ import annotations

from pie.core import Add1, IndNat, IterNat, Nat, RecNat, WhichNat, Zero
from pie.checking.renaming import Renaming
from pie.checking.support import Judgments, annotate, evaluate, show_type, synth_target
from pie.evaluation.eliminators import (
    do_ap,
    ind_nat_step_type,
    iter_nat_step_type,
    nat_motive_type,
    rec_nat_step_type,
    which_nat_step_type,
)
from pie.types.context import Context
from pie.values import VNat, VUniverse, VZero


def synth_nat(context: Context, renaming: Renaming, expr: Nat, j: Judgments):
    return Nat(), VUniverse()


def synth_zero(context: Context, renaming: Renaming, expr: Zero, j: Judgments):
    return Zero(), VNat()


def synth_add1(context: Context, renaming: Renaming, expr: Add1, j: Judgments):
    return Add1(j.check(context, expr.smaller, VNat(), renaming)), VNat()


def _synth_base_and_step(context, renaming, expr, j, step_type_of):
    base_core, base_type = j.synth(context, expr.base, renaming)
    step_core = j.check(context, expr.step, step_type_of(base_type), renaming)
    return annotate(show_type(context, base_type), base_core), step_core, base_type


def synth_which_nat(context: Context, renaming: Renaming, expr: WhichNat, j: Judgments):
    target_core, _ = synth_target(context, renaming, expr.target, j, "which-Nat", VNat, "Nat")
    base_core, step_core, base_type = _synth_base_and_step(
        context, renaming, expr, j, which_nat_step_type
    )
    return WhichNat(target_core, base_core, step_core), base_type


def synth_iter_nat(context: Context, renaming: Renaming, expr: IterNat, j: Judgments):
    target_core, _ = synth_target(context, renaming, expr.target, j, "iter-Nat", VNat, "Nat")
    base_core, step_core, base_type = _synth_base_and_step(
        context, renaming, expr, j, iter_nat_step_type
    )
    return IterNat(target_core, base_core, step_core), base_type


def synth_rec_nat(context: Context, renaming: Renaming, expr: RecNat, j: Judgments):
    target_core, _ = synth_target(context, renaming, expr.target, j, "rec-Nat", VNat, "Nat")
    base_core, step_core, base_type = _synth_base_and_step(
        context, renaming, expr, j, rec_nat_step_type
    )
    return RecNat(target_core, base_core, step_core), base_type


def synth_ind_nat(context: Context, renaming: Renaming, expr: IndNat, j: Judgments):
    target_core, _ = synth_target(context, renaming, expr.target, j, "ind-Nat", VNat, "Nat")
    motive_core = j.check(context, expr.motive, nat_motive_type(), renaming)
    motive = evaluate(context, motive_core)
    base_core = j.check(context, expr.base, do_ap(motive, VZero()), renaming)
    step_core = j.check(context, expr.step, ind_nat_step_type(motive), renaming)
    result_type = do_ap(motive, evaluate(context, target_core))
    return IndNat(target_core, motive_core, base_core, step_core), result_type
