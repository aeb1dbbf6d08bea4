"""Helpers shared by the checking rules."""

from __future__ import annotations

from typing import Callable, NamedTuple

from pie import CoreExpr, PieValue
from pie.core import The
from pie.errors import PieEliminatorTargetMismatch, PieTypeMismatch
from pie.evaluation.convert import convert, same_type
from pie.evaluation.evaluator import val_of
from pie.evaluation.read_back import read_back, read_back_type
from pie.checking.renaming import Renaming
from pie.types.context import Context, fresh_name
from pie.types.symbol import Symbol


class Judgments(NamedTuple):
    """The mutually recursive judgments, handed to every rule."""
    synth: Callable[..., tuple[CoreExpr, PieValue]]
    check: Callable[..., CoreExpr]
    is_type: Callable[..., CoreExpr]


def evaluate(context: Context, expr: CoreExpr) -> PieValue:
    """Evaluate an elaborated expression in the context's environment."""
    return val_of(context.environment, expr)


def show_type(context: Context, type_value: PieValue) -> CoreExpr:
    """The normal form of a type, for error messages."""
    return read_back_type(context, type_value)


def show(context: Context, type_value: PieValue, value: PieValue) -> CoreExpr:
    return read_back(context, type_value, value)


def bind_fresh(
    context: Context, renaming: Renaming, name: Symbol, type_value: PieValue
) -> tuple[Symbol, Context, Renaming]:
    """Bind a source binder under a fresh name and record the renaming."""
    fresh = fresh_name(context, name)
    return fresh, context.bind_free(fresh, type_value), renaming.extend(name, fresh)


def annotate(type_core: CoreExpr, expr: CoreExpr) -> CoreExpr:
    """Wrap an elaborated argument in `the` unless it already is."""
    if isinstance(expr, The):
        return expr
    return The(type_core, expr)


def synth_target(
    context: Context,
    renaming: Renaming,
    target: CoreExpr,
    j: Judgments,
    eliminator: str,
    head: type,
    head_name: str,
) -> tuple[CoreExpr, PieValue]:
    """Synthesize an eliminator's target and insist on the head of its type."""
    target_core, target_type = j.synth(context, target, renaming)
    target_type = target_type.now()
    if not isinstance(target_type, head):
        raise PieEliminatorTargetMismatch(eliminator, head_name, show_type(context, target_type))
    return target_core, target_type


def require_same_type(context: Context, expected: PieValue, found: PieValue) -> None:
    if not same_type(context, expected, found):
        raise PieTypeMismatch(show_type(context, expected), show_type(context, found))


def require_same(
    context: Context, type_value: PieValue, expected: PieValue, found: PieValue
) -> None:
    if not convert(context, type_value, expected, found):
        raise PieTypeMismatch(
            show(context, type_value, expected),
            show(context, type_value, found),
        )


def shape_mismatch(context: Context, expected: PieValue, expr: CoreExpr, shape: str) -> PieTypeMismatch:
    expected_core = show_type(context, expected)
    return PieTypeMismatch(
        expected_core,
        expr,
        message=f"{shape} cannot be checked against {expected_core}",
    )
