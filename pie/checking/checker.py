"""Bidirectional type checker and elaborator for Pie.

Three mutually recursive judgments, each of which returns elaborated core:

- `synthesize` finds an expression's type,
- `check` confirms an expression against a given type,
- `is_type` confirms that an expression is a type.

Rules are dispatched on the class of the expression through the tables in
`pie.checking.rules`. When no checking rule exists, `check` synthesizes and
compares; when no type-formation rule exists, `is_type` checks against U.
Binders are renamed to fresh names as they are crossed, so elaborated core
never shadows.
"""

from __future__ import annotations

import logging
from typing import Optional

from pie import CoreExpr, PieValue
from pie.core import Core, Cons, Lambda, Left, Nil, Right, Same, VecCons, VecNil
from pie.errors import PieAnnotationRequired, PieInternalError, PieNotAUniverse
from pie.checking.renaming import Renaming
from pie.checking.rules import CHECK_RULES, SYNTH_RULES, TYPE_RULES
from pie.checking.support import Judgments, require_same_type, show_type
from pie.types.context import Context
from pie.values import VUniverse

logger = logging.getLogger(__name__)

# Constructors whose type cannot be recovered from the expression alone.
_CHECK_ONLY = (Lambda, Cons, Nil, VecNil, VecCons, Left, Right, Same)


def _require_core(expr) -> None:
    if not isinstance(expr, Core):
        raise PieInternalError(f"Not a core expression: {expr!r}")


def synthesize(
    context: Context, expr: CoreExpr, renaming: Optional[Renaming] = None
) -> tuple[CoreExpr, PieValue]:
    """Find the type of `expr`, returning (elaborated expr, type value)."""
    _require_core(expr)
    if renaming is None:
        renaming = Renaming()
    rule = SYNTH_RULES.get(type(expr))
    if rule is None:
        if isinstance(expr, _CHECK_ONLY):
            raise PieAnnotationRequired(expr)
        raise PieInternalError(f"No synthesis rule for {expr!r}")
    logger.debug("synthesize %s", expr)
    return rule(context, renaming, expr, JUDGMENTS)


def check(
    context: Context,
    expr: CoreExpr,
    expected: PieValue,
    renaming: Optional[Renaming] = None,
) -> CoreExpr:
    """Check `expr` against the type value `expected`, returning elaborated core."""
    _require_core(expr)
    if renaming is None:
        renaming = Renaming()
    rule = CHECK_RULES.get(type(expr))
    if rule is not None:
        logger.debug("check %s", expr)
        return rule(context, renaming, expr, expected, JUDGMENTS)
    expr_core, found = synthesize(context, expr, renaming)
    require_same_type(context, expected, found)
    return expr_core


def is_type(
    context: Context, expr: CoreExpr, renaming: Optional[Renaming] = None
) -> CoreExpr:
    """Check that `expr` is a type, returning elaborated core."""
    _require_core(expr)
    if renaming is None:
        renaming = Renaming()
    rule = TYPE_RULES.get(type(expr))
    if rule is not None:
        return rule(context, renaming, expr, JUDGMENTS)
    expr_core, found = synthesize(context, expr, renaming)
    found = found.now()
    if not isinstance(found, VUniverse):
        raise PieNotAUniverse(expr, show_type(context, found))
    return expr_core


JUDGMENTS = Judgments(synth=synthesize, check=check, is_type=is_type)
