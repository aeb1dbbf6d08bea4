"""Rules for U, Π, λ, application, `the`, variables and holes."""

from __future__ import annotations

from pie import CoreExpr, PieValue
from pie.core import Application, Lambda, Pi, The, Universe, Var
from pie.errors import (
    PieIncompleteTerm,
    PieNotAFunctionType,
    PieTypeError,
    PieUnboundVariable,
)
from pie.checking.renaming import Renaming
from pie.checking.support import Judgments, bind_fresh, evaluate, shape_mismatch, show_type
from pie.neutral import NVar
from pie.types.context import Context, Definition, Free
from pie.values import Neutral, VPi, VUniverse


def synth_the(context: Context, renaming: Renaming, expr: The, j: Judgments):
    type_core = j.is_type(context, expr.type, renaming)
    type_value = evaluate(context, type_core)
    expr_core = j.check(context, expr.expr, type_value, renaming)
    return The(type_core, expr_core), type_value


def synth_var(context: Context, renaming: Renaming, expr: Var, j: Judgments):
    name = renaming.rename(expr.name)
    binding = context.lookup(name)
    # A claim without a definition cannot be used yet.
    if isinstance(binding, (Free, Definition)):
        return Var(name), binding.type
    raise PieUnboundVariable(expr.name)


def synth_application(context: Context, renaming: Renaming, expr: Application, j: Judgments):
    fn_core, fn_type = j.synth(context, expr.fn, renaming)
    fn_type = fn_type.now()
    if not isinstance(fn_type, VPi):
        raise PieNotAFunctionType(show_type(context, fn_type))
    arg_core = j.check(context, expr.arg, fn_type.arg_type, renaming)
    result_type = fn_type.result_type.apply(evaluate(context, arg_core))
    return Application(fn_core, arg_core), result_type


def check_lambda(
    context: Context, renaming: Renaming, expr: Lambda, expected: PieValue, j: Judgments
) -> CoreExpr:
    expected = expected.now()
    if not isinstance(expected, VPi):
        raise shape_mismatch(context, expected, expr, "A λ-expression")
    param, body_context, body_renaming = bind_fresh(context, renaming, expr.param, expected.arg_type)
    body_type = expected.result_type.apply(Neutral(expected.arg_type, NVar(param)))
    return Lambda(param, j.check(body_context, expr.body, body_type, body_renaming))


def synth_pi(context: Context, renaming: Renaming, expr: Pi, j: Judgments):
    arg_core = j.check(context, expr.arg_type, VUniverse(), renaming)
    name, body_context, body_renaming = bind_fresh(
        context, renaming, expr.name, evaluate(context, arg_core)
    )
    result_core = j.check(body_context, expr.result_type, VUniverse(), body_renaming)
    return Pi(name, arg_core, result_core), VUniverse()


def type_pi(context: Context, renaming: Renaming, expr: Pi, j: Judgments) -> CoreExpr:
    arg_core = j.is_type(context, expr.arg_type, renaming)
    name, body_context, body_renaming = bind_fresh(
        context, renaming, expr.name, evaluate(context, arg_core)
    )
    return Pi(name, arg_core, j.is_type(body_context, expr.result_type, body_renaming))


def synth_universe(context: Context, renaming: Renaming, expr: Universe, j: Judgments):
    raise PieTypeError("U is a type, but it does not have a type")


def type_universe(context: Context, renaming: Renaming, expr: Universe, j: Judgments) -> CoreExpr:
    return Universe()


def synth_todo(context: Context, renaming: Renaming, expr, j: Judgments):
    raise PieIncompleteTerm()


def check_todo(context: Context, renaming: Renaming, expr, expected: PieValue, j: Judgments):
    raise PieIncompleteTerm(show_type(context, expected))


def type_todo(context: Context, renaming: Renaming, expr, j: Judgments):
    raise PieIncompleteTerm(Universe())
