"""Reduction rules for Pie's eliminators.

Every eliminator follows one pattern: force the target; if it is a
constructor, reduce; if it is neutral, build the matching neutral term whose
type is the eliminator's result type, recording the other arguments as
TypedValues so read-back can normalize them later.

Keeping these rules in one place lets the evaluator, read-back and the
checker (which builds the types of eliminator arguments) share them.
"""

from __future__ import annotations

from typing import Callable, Optional

from pie.errors import PieInternalError
from pie.neutral import (
    NApplication,
    NCar,
    NCdr,
    NCong,
    NHead,
    NIndAbsurd,
    NIndEither,
    NIndEqual,
    NIndList,
    NIndNat,
    NIndVec,
    NIterNat,
    NRecList,
    NRecNat,
    NReplace,
    NSymm,
    NTail,
    NTrans,
    NWhichNat,
)
from pie.types.closure import HigherOrderClosure
from pie.types.symbol import Symbol
from pie.values import (
    Neutral,
    TypedValue,
    Value,
    VAdd1,
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
    VRight,
    VSame,
    VSigma,
    VUniverse,
    VVec,
    VVecCons,
    VVecNil,
    VZero,
)


def pi_type(name: str, arg_type: Value, result: Callable[[Value], Value]) -> VPi:
    """Build Π (name arg_type) result, with the result computed by a Python function."""
    sym = Symbol(name)
    return VPi(sym, arg_type, HigherOrderClosure(sym, result))


def _stuck(eliminator: str, target: Value) -> PieInternalError:
    return PieInternalError(f"{eliminator} cannot reduce {target!r}; was the term checked?")


def _require_type(value: Optional[Value], eliminator: str) -> Value:
    if value is None:
        raise PieInternalError(
            f"{eliminator} on a neutral target needs a `the`-annotated base; "
            "evaluate elaborated core"
        )
    return value


# --- Functions and pairs ---

def do_ap(fn: Value, arg: Value) -> Value:
    """Apply a function value to an argument value."""
    fn = fn.now()
    if isinstance(fn, VLambda):
        return fn.body.apply(arg)
    if isinstance(fn, Neutral):
        fn_type = fn.type.now()
        if isinstance(fn_type, VPi):
            return Neutral(
                fn_type.result_type.apply(arg),
                NApplication(fn.neutral, TypedValue(fn_type.arg_type, arg)),
            )
    raise _stuck("application", fn)


def do_car(pair: Value) -> Value:
    pair = pair.now()
    if isinstance(pair, VCons):
        return pair.car
    if isinstance(pair, Neutral):
        pair_type = pair.type.now()
        if isinstance(pair_type, VSigma):
            return Neutral(pair_type.car_type, NCar(pair.neutral))
    raise _stuck("car", pair)


def do_cdr(pair: Value) -> Value:
    pair = pair.now()
    if isinstance(pair, VCons):
        return pair.cdr
    if isinstance(pair, Neutral):
        pair_type = pair.type.now()
        if isinstance(pair_type, VSigma):
            return Neutral(pair_type.cdr_type.apply(do_car(pair)), NCdr(pair.neutral))
    raise _stuck("cdr", pair)


# --- Natural numbers ---

def which_nat_step_type(base_type: Value) -> Value:
    return pi_type("n", VNat(), lambda _n: base_type)


def iter_nat_step_type(base_type: Value) -> Value:
    return pi_type("x", base_type, lambda _x: base_type)


def rec_nat_step_type(base_type: Value) -> Value:
    return pi_type("n", VNat(), lambda _n: pi_type("x", base_type, lambda _x: base_type))


def nat_motive_type() -> Value:
    return pi_type("x", VNat(), lambda _x: VUniverse())


def ind_nat_step_type(motive: Value) -> Value:
    return pi_type(
        "n-1", VNat(),
        lambda n: pi_type("ih", do_ap(motive, n), lambda _ih: do_ap(motive, VAdd1(n))),
    )


def do_which_nat(target: Value, base_type: Optional[Value], base: Value, step: Value) -> Value:
    target = target.now()
    if isinstance(target, VZero):
        return base
    if isinstance(target, VAdd1):
        # The step sees the predecessor; there is no recursive result.
        return do_ap(step, target.smaller)
    if isinstance(target, Neutral):
        base_type = _require_type(base_type, "which-Nat")
        return Neutral(
            base_type,
            NWhichNat(
                target.neutral,
                TypedValue(base_type, base),
                TypedValue(which_nat_step_type(base_type), step),
            ),
        )
    raise _stuck("which-Nat", target)


def do_iter_nat(target: Value, base_type: Optional[Value], base: Value, step: Value) -> Value:
    target = target.now()
    if isinstance(target, VZero):
        return base
    if isinstance(target, VAdd1):
        return do_ap(step, do_iter_nat(target.smaller, base_type, base, step))
    if isinstance(target, Neutral):
        base_type = _require_type(base_type, "iter-Nat")
        return Neutral(
            base_type,
            NIterNat(
                target.neutral,
                TypedValue(base_type, base),
                TypedValue(iter_nat_step_type(base_type), step),
            ),
        )
    raise _stuck("iter-Nat", target)


def do_rec_nat(target: Value, base_type: Optional[Value], base: Value, step: Value) -> Value:
    target = target.now()
    if isinstance(target, VZero):
        return base
    if isinstance(target, VAdd1):
        smaller = target.smaller
        return do_ap(do_ap(step, smaller), do_rec_nat(smaller, base_type, base, step))
    if isinstance(target, Neutral):
        base_type = _require_type(base_type, "rec-Nat")
        return Neutral(
            base_type,
            NRecNat(
                target.neutral,
                TypedValue(base_type, base),
                TypedValue(rec_nat_step_type(base_type), step),
            ),
        )
    raise _stuck("rec-Nat", target)


def do_ind_nat(target: Value, motive: Value, base: Value, step: Value) -> Value:
    target = target.now()
    if isinstance(target, VZero):
        return base
    if isinstance(target, VAdd1):
        smaller = target.smaller
        return do_ap(do_ap(step, smaller), do_ind_nat(smaller, motive, base, step))
    if isinstance(target, Neutral):
        return Neutral(
            do_ap(motive, target),
            NIndNat(
                target.neutral,
                TypedValue(nat_motive_type(), motive),
                TypedValue(do_ap(motive, VZero()), base),
                TypedValue(ind_nat_step_type(motive), step),
            ),
        )
    raise _stuck("ind-Nat", target)


# --- Absurd ---

def do_ind_absurd(target: Value, motive: Value) -> Value:
    target = target.now()
    if isinstance(target, Neutral):
        return Neutral(motive, NIndAbsurd(target.neutral, TypedValue(VUniverse(), motive)))
    raise _stuck("ind-Absurd", target)


# --- Lists ---

def rec_list_step_type(entry_type: Value, base_type: Value) -> Value:
    return pi_type(
        "e", entry_type,
        lambda _e: pi_type(
            "es", VList(entry_type),
            lambda _es: pi_type("ih", base_type, lambda _ih: base_type),
        ),
    )


def list_motive_type(entry_type: Value) -> Value:
    return pi_type("xs", VList(entry_type), lambda _xs: VUniverse())


def ind_list_step_type(entry_type: Value, motive: Value) -> Value:
    return pi_type(
        "e", entry_type,
        lambda e: pi_type(
            "es", VList(entry_type),
            lambda es: pi_type(
                "ih", do_ap(motive, es),
                lambda _ih: do_ap(motive, VListCons(e, es)),
            ),
        ),
    )


def _list_entry_type(target: Neutral, eliminator: str) -> Value:
    target_type = target.type.now()
    if not isinstance(target_type, VList):
        raise _stuck(eliminator, target)
    return target_type.entry_type


def do_rec_list(target: Value, base_type: Optional[Value], base: Value, step: Value) -> Value:
    target = target.now()
    if isinstance(target, VNil):
        return base
    if isinstance(target, VListCons):
        return do_ap(
            do_ap(do_ap(step, target.head), target.tail),
            do_rec_list(target.tail, base_type, base, step),
        )
    if isinstance(target, Neutral):
        base_type = _require_type(base_type, "rec-List")
        entry_type = _list_entry_type(target, "rec-List")
        return Neutral(
            base_type,
            NRecList(
                target.neutral,
                TypedValue(base_type, base),
                TypedValue(rec_list_step_type(entry_type, base_type), step),
            ),
        )
    raise _stuck("rec-List", target)


def do_ind_list(target: Value, motive: Value, base: Value, step: Value) -> Value:
    target = target.now()
    if isinstance(target, VNil):
        return base
    if isinstance(target, VListCons):
        return do_ap(
            do_ap(do_ap(step, target.head), target.tail),
            do_ind_list(target.tail, motive, base, step),
        )
    if isinstance(target, Neutral):
        entry_type = _list_entry_type(target, "ind-List")
        return Neutral(
            do_ap(motive, target),
            NIndList(
                target.neutral,
                TypedValue(list_motive_type(entry_type), motive),
                TypedValue(do_ap(motive, VNil()), base),
                TypedValue(ind_list_step_type(entry_type, motive), step),
            ),
        )
    raise _stuck("ind-List", target)


# --- Vectors ---

def do_head(vec: Value) -> Value:
    vec = vec.now()
    if isinstance(vec, VVecCons):
        return vec.head
    if isinstance(vec, Neutral):
        vec_type = vec.type.now()
        if isinstance(vec_type, VVec):
            return Neutral(vec_type.entry_type, NHead(vec.neutral))
    raise _stuck("head", vec)


def do_tail(vec: Value) -> Value:
    vec = vec.now()
    if isinstance(vec, VVecCons):
        return vec.tail
    if isinstance(vec, Neutral):
        vec_type = vec.type.now()
        if isinstance(vec_type, VVec):
            length = vec_type.length.now()
            if isinstance(length, VAdd1):
                return Neutral(VVec(vec_type.entry_type, length.smaller), NTail(vec.neutral))
    raise _stuck("tail", vec)


def vec_motive_type(entry_type: Value) -> Value:
    return pi_type(
        "k", VNat(),
        lambda k: pi_type("es", VVec(entry_type, k), lambda _es: VUniverse()),
    )


def ind_vec_step_type(entry_type: Value, motive: Value) -> Value:
    return pi_type(
        "k", VNat(),
        lambda k: pi_type(
            "e", entry_type,
            lambda e: pi_type(
                "es", VVec(entry_type, k),
                lambda es: pi_type(
                    "ih", do_ap(do_ap(motive, k), es),
                    lambda _ih: do_ap(do_ap(motive, VAdd1(k)), VVecCons(e, es)),
                ),
            ),
        ),
    )


def do_ind_vec(length: Value, target: Value, motive: Value, base: Value, step: Value) -> Value:
    target = target.now()
    if isinstance(target, VVecNil):
        return base
    if isinstance(target, VVecCons):
        length_now = length.now()
        if not isinstance(length_now, VAdd1):
            raise _stuck("ind-Vec", length_now)
        smaller = length_now.smaller
        return do_ap(
            do_ap(do_ap(do_ap(step, smaller), target.head), target.tail),
            do_ind_vec(smaller, target.tail, motive, base, step),
        )
    if isinstance(target, Neutral):
        target_type = target.type.now()
        if not isinstance(target_type, VVec):
            raise _stuck("ind-Vec", target)
        entry_type = target_type.entry_type
        return Neutral(
            do_ap(do_ap(motive, length), target),
            NIndVec(
                TypedValue(VNat(), length),
                target.neutral,
                TypedValue(vec_motive_type(entry_type), motive),
                TypedValue(do_ap(do_ap(motive, VZero()), VVecNil()), base),
                TypedValue(ind_vec_step_type(entry_type, motive), step),
            ),
        )
    raise _stuck("ind-Vec", target)


# --- Either ---

def either_motive_type(either_type: Value) -> Value:
    return pi_type("x", either_type, lambda _x: VUniverse())


def ind_either_base_types(either_type: VEither, motive: Value) -> tuple[Value, Value]:
    """The types of the left and right branches of an ind-Either."""
    left_type = pi_type("x", either_type.left_type, lambda x: do_ap(motive, VLeft(x)))
    right_type = pi_type("x", either_type.right_type, lambda x: do_ap(motive, VRight(x)))
    return left_type, right_type


def do_ind_either(target: Value, motive: Value, base_left: Value, base_right: Value) -> Value:
    target = target.now()
    if isinstance(target, VLeft):
        return do_ap(base_left, target.value)
    if isinstance(target, VRight):
        return do_ap(base_right, target.value)
    if isinstance(target, Neutral):
        either_type = target.type.now()
        if not isinstance(either_type, VEither):
            raise _stuck("ind-Either", target)
        left_type, right_type = ind_either_base_types(either_type, motive)
        return Neutral(
            do_ap(motive, target),
            NIndEither(
                target.neutral,
                TypedValue(either_motive_type(either_type), motive),
                TypedValue(left_type, base_left),
                TypedValue(right_type, base_right),
            ),
        )
    raise _stuck("ind-Either", target)


# --- Equality ---

def _equal_type(target: Neutral, eliminator: str) -> VEqual:
    target_type = target.type.now()
    if not isinstance(target_type, VEqual):
        raise _stuck(eliminator, target)
    return target_type


def replace_motive_type(entry_type: Value) -> Value:
    return pi_type("x", entry_type, lambda _x: VUniverse())


def do_replace(target: Value, motive: Value, base: Value) -> Value:
    target = target.now()
    if isinstance(target, VSame):
        return base
    if isinstance(target, Neutral):
        eq = _equal_type(target, "replace")
        return Neutral(
            do_ap(motive, eq.to),
            NReplace(
                target.neutral,
                TypedValue(replace_motive_type(eq.type), motive),
                TypedValue(do_ap(motive, eq.from_), base),
            ),
        )
    raise _stuck("replace", target)


def do_trans(left: Value, right: Value) -> Value:
    left = left.now()
    right = right.now()
    if isinstance(left, VSame) and isinstance(right, VSame):
        return VSame(left.value)
    if isinstance(left, VSame) and isinstance(right, Neutral):
        eq = _equal_type(right, "trans")
        return Neutral(
            VEqual(eq.type, left.value, eq.to),
            NTrans(
                TypedValue(VEqual(eq.type, left.value, left.value), left),
                TypedValue(eq, right),
            ),
        )
    if isinstance(left, Neutral) and isinstance(right, VSame):
        eq = _equal_type(left, "trans")
        return Neutral(
            VEqual(eq.type, eq.from_, right.value),
            NTrans(
                TypedValue(eq, left),
                TypedValue(VEqual(eq.type, right.value, right.value), right),
            ),
        )
    if isinstance(left, Neutral) and isinstance(right, Neutral):
        left_eq = _equal_type(left, "trans")
        right_eq = _equal_type(right, "trans")
        return Neutral(
            VEqual(left_eq.type, left_eq.from_, right_eq.to),
            NTrans(TypedValue(left_eq, left), TypedValue(right_eq, right)),
        )
    raise _stuck("trans", left)


def do_cong(target: Value, fun_type: Optional[Value], fun: Value) -> Value:
    target = target.now()
    if isinstance(target, VSame):
        return VSame(do_ap(fun, target.value))
    if isinstance(target, Neutral):
        eq = _equal_type(target, "cong")
        fun_type = _require_type(fun_type, "cong")
        fun_pi = fun_type.now()
        if not isinstance(fun_pi, VPi):
            raise _stuck("cong", fun_pi)
        result_type = fun_pi.result_type.apply(eq.from_)
        return Neutral(
            VEqual(result_type, do_ap(fun, eq.from_), do_ap(fun, eq.to)),
            NCong(target.neutral, TypedValue(fun_pi, fun)),
        )
    raise _stuck("cong", target)


def do_symm(target: Value) -> Value:
    target = target.now()
    if isinstance(target, VSame):
        return target
    if isinstance(target, Neutral):
        eq = _equal_type(target, "symm")
        return Neutral(VEqual(eq.type, eq.to, eq.from_), NSymm(target.neutral))
    raise _stuck("symm", target)


def equal_motive_type(eq: VEqual) -> Value:
    return pi_type(
        "to", eq.type,
        lambda to: pi_type("p", VEqual(eq.type, eq.from_, to), lambda _p: VUniverse()),
    )


def do_ind_equal(target: Value, motive: Value, base: Value) -> Value:
    target = target.now()
    if isinstance(target, VSame):
        return base
    if isinstance(target, Neutral):
        eq = _equal_type(target, "ind-=")
        return Neutral(
            do_ap(do_ap(motive, eq.to), target),
            NIndEqual(
                target.neutral,
                TypedValue(equal_motive_type(eq), motive),
                TypedValue(do_ap(do_ap(motive, eq.from_), VSame(eq.from_)), base),
            ),
        )
    raise _stuck("ind-=", target)
