"""Definitional equality.

Two values of one type are the same when their normal forms are
α-equivalent. Because read-back η-expands at Π, Σ, Trivial and Absurd,
this also decides the η-laws for those types.
"""

from __future__ import annotations

from pie.alpha import alpha_equiv
from pie.evaluation.read_back import read_back, read_back_type
from pie.types.context import Context
from pie.values import Value, VUniverse


def convert(context: Context, type_value: Value, v1: Value, v2: Value) -> bool:
    """Are `v1` and `v2` the same `type_value`?"""
    return alpha_equiv(
        read_back(context, type_value, v1),
        read_back(context, type_value, v2),
    )


def same_type(context: Context, t1: Value, t2: Value) -> bool:
    """Are `t1` and `t2` the same type?"""
    return convert(context, VUniverse(), t1, t2)


def normalize(context: Context, type_value: Value, value: Value) -> tuple:
    """The normal forms of a value and of its type."""
    return read_back_type(context, type_value), read_back(context, type_value, value)
