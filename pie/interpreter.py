"""Declaration host for the Pie core.

The Interpreter holds the growing top-level context and processes claims,
definitions, sameness checks and normalization requests against it. Source
locations are opaque: they are attached to errors as given.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from pie import CoreExpr
from pie.config import get_recursion_limit
from pie.core import The
from pie.errors import PieDuplicateBinderName, PieTypeError
from pie.checking.checker import check, is_type, synthesize
from pie.checking.support import evaluate, require_same
from pie.evaluation.convert import normalize
from pie.types.context import Claim as ClaimBinding
from pie.types.context import Context
from pie.types.symbol import Symbol
from pie.values import VUniverse

logger = logging.getLogger(__name__)


# ----------------- Declarations -----------------
@dataclass(frozen=True)
class Claim:
    name: Symbol
    type: CoreExpr
    location: Any = None


@dataclass(frozen=True)
class Define:
    name: Symbol
    expr: CoreExpr
    location: Any = None


@dataclass(frozen=True)
class CheckSame:
    type: CoreExpr
    left: CoreExpr
    right: CoreExpr
    location: Any = None


@dataclass(frozen=True)
class Normalize:
    expr: CoreExpr
    location: Any = None


Declaration = Union[Claim, Define, CheckSame, Normalize]


@dataclass
class Outcome:
    """The result of one declaration: a value on success, an error otherwise."""
    declaration: Declaration
    result: Any = None
    error: Optional[PieTypeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@contextmanager
def recursion_limit(limit: int):
    """Temporarily raise the interpreter's recursion limit to at least `limit`."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    A declaration-at-a-time host for Pie.
    Maintains the top-level context across claims and definitions.
    """
    def __init__(self, context: Context | None = None):
        self.context = context if context is not None else Context()

    def claim(self, name: Symbol, type_expr: CoreExpr) -> None:
        """Record the type of a name that will be defined later."""
        if name in self.context:
            raise PieDuplicateBinderName(name)
        type_core = is_type(self.context, type_expr)
        self.context = self.context.bind_claim(name, evaluate(self.context, type_core))
        logger.debug("claimed %s : %s", name, type_core)

    def define(self, name: Symbol, expr: CoreExpr) -> CoreExpr:
        """Define a name, checking against its claim when there is one."""
        binding = self.context.lookup(name)
        if binding is not None and not isinstance(binding, ClaimBinding):
            raise PieDuplicateBinderName(name)
        if binding is None:
            expr_core, type_value = synthesize(self.context, expr)
        else:
            type_value = binding.type
            expr_core = check(self.context, expr, type_value)
        value = evaluate(self.context, expr_core)
        self.context = self.context.bind_definition(name, type_value, value)
        logger.debug("defined %s", name)
        return expr_core

    def check_same(self, type_expr: CoreExpr, left: CoreExpr, right: CoreExpr) -> None:
        """Insist that `left` and `right` are the same `type_expr`."""
        type_core = is_type(self.context, type_expr)
        type_value = evaluate(self.context, type_core)
        left_value = evaluate(self.context, check(self.context, left, type_value))
        right_value = evaluate(self.context, check(self.context, right, type_value))
        require_same(self.context, type_value, left_value, right_value)

    def rep(self, expr: CoreExpr) -> The:
        """Normalize `expr`, returning (the type-normal-form expr-normal-form)."""
        expr_core, type_value = synthesize(self.context, expr)
        type_nf, expr_nf = normalize(self.context, type_value, evaluate(self.context, expr_core))
        return The(type_nf, expr_nf)

    def norm_type(self, type_expr: CoreExpr) -> CoreExpr:
        """The normal form of a type expression."""
        type_core = is_type(self.context, type_expr)
        _, type_nf = normalize(self.context, VUniverse(), evaluate(self.context, type_core))
        return type_nf

    def process(self, declaration: Declaration) -> Any:
        match declaration:
            case Claim(name, type_expr):
                return self.claim(name, type_expr)
            case Define(name, expr):
                return self.define(name, expr)
            case CheckSame(type_expr, left, right):
                return self.check_same(type_expr, left, right)
            case Normalize(expr):
                return self.rep(expr)
        raise TypeError(f"Not a declaration: {declaration!r}")

    def run(self, declarations: Iterable[Declaration]) -> list[Outcome]:
        """Process declarations in order; a failure does not stop later ones."""
        outcomes = []
        with recursion_limit(get_recursion_limit()):
            for declaration in declarations:
                try:
                    result = self.process(declaration)
                except PieTypeError as e:
                    if e.location is None:
                        e.location = declaration.location
                    logger.warning("%s", e)
                    outcomes.append(Outcome(declaration, error=e))
                else:
                    outcomes.append(Outcome(declaration, result=result))
        return outcomes


