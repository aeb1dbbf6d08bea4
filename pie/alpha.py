"""α-equivalence of core expressions.

Two expressions are α-equivalent when they have the same structure and their
bound variables correspond one-to-one. Each binder is numbered by its depth;
a bound variable on one side must refer to a binder at the same depth as the
other side's, and free variables must have identical names.

Any two `(the Absurd e)` expressions are α-equivalent: Absurd's η-rule says
all of its (necessarily neutral) inhabitants are the same.
"""

from __future__ import annotations

from dataclasses import fields

from pie import core as C
from pie.types.symbol import Symbol


def alpha_equiv(e1: C.Core, e2: C.Core) -> bool:
    return _alpha(e1, e2, {}, {}, 0)


def _alpha(e1, e2, lhs: dict[Symbol, int], rhs: dict[Symbol, int], depth: int) -> bool:
    if isinstance(e1, C.Var) and isinstance(e2, C.Var):
        i, j = lhs.get(e1.name), rhs.get(e2.name)
        if i is None and j is None:
            return e1.name == e2.name
        return i == j

    if type(e1) is not type(e2):
        return False

    if isinstance(e1, C.The) and isinstance(e1.type, C.Absurd) and isinstance(e2.type, C.Absurd):
        return True

    if not isinstance(e1, C.Core):
        # Atom names and other literals
        return e1 == e2

    binds = type(e1).binds
    for f in fields(e1):
        if binds is not None and f.name == binds[0]:
            continue
        a, b = getattr(e1, f.name), getattr(e2, f.name)
        if binds is not None and f.name == binds[1]:
            name_field = binds[0]
            inner_lhs = {**lhs, getattr(e1, name_field): depth}
            inner_rhs = {**rhs, getattr(e2, name_field): depth}
            if not _alpha(a, b, inner_lhs, inner_rhs, depth + 1):
                return False
        elif not _alpha(a, b, lhs, rhs, depth):
            return False
    return True


def occurs_free(name: Symbol, expr) -> bool:
    """Does `name` occur in `expr` outside any binder for it?"""
    if isinstance(expr, C.Var):
        return expr.name == name
    if not isinstance(expr, C.Core):
        return False
    binds = type(expr).binds
    for f in fields(expr):
        if binds is not None and f.name == binds[0]:
            continue
        if binds is not None and f.name == binds[1] and getattr(expr, binds[0]) == name:
            continue
        if occurs_free(name, getattr(expr, f.name)):
            return True
    return False
