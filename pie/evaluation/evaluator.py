"""Core evaluator for Pie.

`val_of` maps a core expression and an environment to a value. Sub-expressions
that may never be needed (operands, constructor fields, eliminator arguments)
are wrapped in Delay cells, so evaluation is call-by-need. Elimination is
delegated to the `do_*` rules in `pie.evaluation.eliminators`.
"""

from __future__ import annotations

from typing import Optional

from pie import CoreExpr
from pie.core import (
    Absurd,
    Add1,
    Application,
    Atom,
    Car,
    Cdr,
    Cong,
    Cons,
    Either,
    Equal,
    Head,
    IndAbsurd,
    IndEither,
    IndEqual,
    IndList,
    IndNat,
    IndVec,
    IterNat,
    Lambda,
    Left,
    List,
    ListCons,
    Nat,
    Nil,
    Pi,
    Quote,
    RecList,
    RecNat,
    Replace,
    Right,
    Same,
    Sigma,
    Sole,
    Symm,
    Tail,
    The,
    Todo,
    Trans,
    Trivial,
    Universe,
    Var,
    Vec,
    VecCons,
    VecNil,
    WhichNat,
    Zero,
)
from pie.errors import PieIncompleteTerm, PieInternalError
from pie.evaluation.eliminators import (
    do_ap,
    do_car,
    do_cdr,
    do_cong,
    do_head,
    do_ind_absurd,
    do_ind_either,
    do_ind_equal,
    do_ind_list,
    do_ind_nat,
    do_ind_vec,
    do_iter_nat,
    do_rec_list,
    do_rec_nat,
    do_replace,
    do_symm,
    do_tail,
    do_trans,
    do_which_nat,
)
from pie.types.closure import Closure
from pie.types.environment import Environment
from pie.values import (
    Value,
    VAbsurd,
    VAdd1,
    VAtom,
    VCons,
    VEither,
    VEqual,
    VLambda,
    VLeft,
    VList,
    VListCons,
    VNat,
    VNil,
    VPi,
    VQuote,
    VRight,
    VSame,
    VSigma,
    VSole,
    VTrivial,
    VUniverse,
    VVec,
    VVecCons,
    VVecNil,
    VZero,
    later,
)


def _annotated(env: Environment, expr: CoreExpr) -> tuple[Optional[Value], Value]:
    """Split an elaborated `(the T e)` argument into T's value and e's delayed value.

    Unelaborated arguments have no annotation; their type is None, which is
    only a problem if the eliminator gets stuck and must build a neutral.
    """
    if isinstance(expr, The):
        return val_of(env, expr.type), later(env, expr.expr)
    return None, later(env, expr)


def val_of(env: Environment, expr: CoreExpr) -> Value:
    """Evaluate `expr` in `env`."""
    match expr:
        case The(expr=inner):
            return val_of(env, inner)
        case Var(name):
            return env.lookup(name)

        # Types
        case Universe():
            return VUniverse()
        case Pi(name, arg_type, result_type):
            return VPi(name, later(env, arg_type), Closure(env, name, result_type))
        case Sigma(name, car_type, cdr_type):
            return VSigma(name, later(env, car_type), Closure(env, name, cdr_type))
        case Nat():
            return VNat()
        case Atom():
            return VAtom()
        case Trivial():
            return VTrivial()
        case Absurd():
            return VAbsurd()
        case List(entry_type):
            return VList(later(env, entry_type))
        case Vec(entry_type, length):
            return VVec(later(env, entry_type), later(env, length))
        case Either(left_type, right_type):
            return VEither(later(env, left_type), later(env, right_type))
        case Equal(type_, from_, to):
            return VEqual(later(env, type_), later(env, from_), later(env, to))

        # Functions and pairs
        case Lambda(param, body):
            return VLambda(param, Closure(env, param, body))
        case Application(fn, arg):
            return do_ap(val_of(env, fn), later(env, arg))
        case Cons(car, cdr):
            return VCons(later(env, car), later(env, cdr))
        case Car(pair):
            return do_car(val_of(env, pair))
        case Cdr(pair):
            return do_cdr(val_of(env, pair))

        # Natural numbers
        case Zero():
            return VZero()
        case Add1(smaller):
            return VAdd1(later(env, smaller))
        case WhichNat(target, base, step):
            base_type, base_value = _annotated(env, base)
            return do_which_nat(val_of(env, target), base_type, base_value, later(env, step))
        case IterNat(target, base, step):
            base_type, base_value = _annotated(env, base)
            return do_iter_nat(val_of(env, target), base_type, base_value, later(env, step))
        case RecNat(target, base, step):
            base_type, base_value = _annotated(env, base)
            return do_rec_nat(val_of(env, target), base_type, base_value, later(env, step))
        case IndNat(target, motive, base, step):
            return do_ind_nat(
                val_of(env, target), later(env, motive), later(env, base), later(env, step)
            )

        # Atoms, Trivial, Absurd
        case Quote(atom):
            return VQuote(atom)
        case Sole():
            return VSole()
        case IndAbsurd(target, motive):
            return do_ind_absurd(val_of(env, target), val_of(env, motive))

        # Lists
        case Nil():
            return VNil()
        case ListCons(head, tail):
            return VListCons(later(env, head), later(env, tail))
        case RecList(target, base, step):
            base_type, base_value = _annotated(env, base)
            return do_rec_list(val_of(env, target), base_type, base_value, later(env, step))
        case IndList(target, motive, base, step):
            return do_ind_list(
                val_of(env, target), later(env, motive), later(env, base), later(env, step)
            )

        # Vectors
        case VecNil():
            return VVecNil()
        case VecCons(head, tail):
            return VVecCons(later(env, head), later(env, tail))
        case Head(vec):
            return do_head(val_of(env, vec))
        case Tail(vec):
            return do_tail(val_of(env, vec))
        case IndVec(length, target, motive, base, step):
            return do_ind_vec(
                later(env, length),
                val_of(env, target),
                later(env, motive),
                later(env, base),
                later(env, step),
            )

        # Either
        case Left(value):
            return VLeft(later(env, value))
        case Right(value):
            return VRight(later(env, value))
        case IndEither(target, motive, base_left, base_right):
            return do_ind_either(
                val_of(env, target),
                later(env, motive),
                later(env, base_left),
                later(env, base_right),
            )

        # Equality
        case Same(value):
            return VSame(later(env, value))
        case Replace(target, motive, base):
            return do_replace(val_of(env, target), later(env, motive), later(env, base))
        case Trans(left, right):
            return do_trans(val_of(env, left), val_of(env, right))
        case Cong(target, fun):
            fun_type, fun_value = _annotated(env, fun)
            return do_cong(val_of(env, target), fun_type, fun_value)
        case Symm(target):
            return do_symm(val_of(env, target))
        case IndEqual(target, motive, base):
            return do_ind_equal(val_of(env, target), later(env, motive), later(env, base))

        case Todo():
            raise PieIncompleteTerm()

    raise PieInternalError(f"No evaluation rule for {expr!r}")
