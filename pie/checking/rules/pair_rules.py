"""Rules for Σ, cons, car and cdr."""

from __future__ import annotations

from pie import CoreExpr, PieValue
from pie.core import Car, Cdr, Cons, Sigma
from pie.errors import PieNotAPairType
from pie.checking.renaming import Renaming
from pie.checking.support import Judgments, bind_fresh, evaluate, shape_mismatch, show_type
from pie.evaluation.eliminators import do_car
from pie.types.context import Context
from pie.values import VSigma, VUniverse


def synth_sigma(context: Context, renaming: Renaming, expr: Sigma, j: Judgments):
    car_core = j.check(context, expr.car_type, VUniverse(), renaming)
    name, cdr_context, cdr_renaming = bind_fresh(
        context, renaming, expr.name, evaluate(context, car_core)
    )
    cdr_core = j.check(cdr_context, expr.cdr_type, VUniverse(), cdr_renaming)
    return Sigma(name, car_core, cdr_core), VUniverse()


def type_sigma(context: Context, renaming: Renaming, expr: Sigma, j: Judgments) -> CoreExpr:
    car_core = j.is_type(context, expr.car_type, renaming)
    name, cdr_context, cdr_renaming = bind_fresh(
        context, renaming, expr.name, evaluate(context, car_core)
    )
    return Sigma(name, car_core, j.is_type(cdr_context, expr.cdr_type, cdr_renaming))


def check_cons(
    context: Context, renaming: Renaming, expr: Cons, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VSigma):
        raise shape_mismatch(context, expected, expr, "A cons-pair")
    car_core = j.check(context, expr.car, expected.car_type, renaming)
    cdr_type = expected.cdr_type.apply(evaluate(context, car_core))
    return Cons(car_core, j.check(context, expr.cdr, cdr_type, renaming))


def _synth_pair(context: Context, renaming: Renaming, pair: CoreExpr, j: Judgments, eliminator: str):
    pair_core, pair_type = j.synth(context, pair, renaming)
    pair_type = pair_type.now()
    if not isinstance(pair_type, VSigma):
        raise PieNotAPairType(eliminator, show_type(context, pair_type))
    return pair_core, pair_type


def synth_car(context: Context, renaming: Renaming, expr: Car, j: Judgments):
    pair_core, pair_type = _synth_pair(context, renaming, expr.pair, j, "car")
    return Car(pair_core), pair_type.car_type


def synth_cdr(context: Context, renaming: Renaming, expr: Cdr, j: Judgments):
    pair_core, pair_type = _synth_pair(context, renaming, expr.pair, j, "cdr")
    car_value = do_car(evaluate(context, pair_core))
    return Cdr(pair_core), pair_type.cdr_type.apply(car_value)
