"""Read-back: turn values into normal-form core expressions.

`read_back` dispatches on the type first. Π, Σ, Trivial and Absurd have
η-rules, so their normal forms have a fixed shape no matter what the value
looks like: every function reads back as a λ, every pair as a cons, every
Trivial as sole, and every Absurd as an annotated neutral. Only for the other
types does the value's own form decide.

Fresh names are chosen against the context, which holds every free and
defined name in scope, so read-back never captures a variable.
"""

from __future__ import annotations

from pie import core as C
from pie.errors import PieInternalError
from pie.evaluation.eliminators import do_ap, do_car, do_cdr
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
    Neutral as NeutralTerm,
    NRecList,
    NRecNat,
    NReplace,
    NSymm,
    NTail,
    NTrans,
    NVar,
    NWhichNat,
)
from pie.types.context import Context, fresh_name
from pie.values import (
    Neutral,
    TypedValue,
    Value,
    VAbsurd,
    VAdd1,
    VAtom,
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
    VTrivial,
    VUniverse,
    VVec,
    VVecCons,
    VVecNil,
    VZero,
)


def read_back(context: Context, type_value: Value, value: Value) -> C.Core:
    """Read `value` back as a normal form of type `type_value`."""
    type_value = type_value.now()

    match type_value:
        case VUniverse():
            return read_back_type(context, value)
        case VPi(name, arg_type, result_type):
            # η: every function reads back as a λ, even a neutral one.
            value_now = value.now()
            hint = value_now.param if isinstance(value_now, VLambda) else name
            param = fresh_name(context, hint)
            arg = Neutral(arg_type, NVar(param))
            body = read_back(
                context.bind_free(param, arg_type),
                result_type.apply(arg),
                do_ap(value_now, arg),
            )
            return C.Lambda(param, body)
        case VSigma(_, car_type, cdr_type):
            car = do_car(value)
            cdr = do_cdr(value)
            return C.Cons(
                read_back(context, car_type, car),
                read_back(context, cdr_type.apply(car), cdr),
            )
        case VTrivial():
            return C.Sole()
        case VAbsurd():
            value_now = value.now()
            if not isinstance(value_now, Neutral):
                raise PieInternalError(f"A value of type Absurd must be neutral, got {value_now!r}")
            return C.The(C.Absurd(), read_back_neutral(context, value_now.neutral))

    value = value.now()
    if isinstance(value, Neutral):
        return read_back_neutral(context, value.neutral)

    match type_value, value:
        case VNat(), VZero():
            return C.Zero()
        case VNat(), VAdd1(smaller):
            return C.Add1(read_back(context, VNat(), smaller))
        case VAtom(), VQuote(atom):
            return C.Quote(atom)
        case VList(), VNil():
            return C.Nil()
        case VList(entry_type), VListCons(head, tail):
            return C.ListCons(
                read_back(context, entry_type, head),
                read_back(context, type_value, tail),
            )
        case VVec(), VVecNil():
            return C.VecNil()
        case VVec(entry_type, length), VVecCons(head, tail):
            length = length.now()
            if not isinstance(length, VAdd1):
                raise PieInternalError(f"vec:: at a length without add1 on top: {length!r}")
            return C.VecCons(
                read_back(context, entry_type, head),
                read_back(context, VVec(entry_type, length.smaller), tail),
            )
        case VEither(left_type, _), VLeft(inner):
            return C.Left(read_back(context, left_type, inner))
        case VEither(_, right_type), VRight(inner):
            return C.Right(read_back(context, right_type, inner))
        case VEqual(type_, _, _), VSame(inner):
            return C.Same(read_back(context, type_, inner))

    raise PieInternalError(f"Cannot read back {value!r} at type {type_value!r}")


def read_back_typed(context: Context, typed: TypedValue) -> C.Core:
    return read_back(context, typed.type, typed.value)


def read_back_type(context: Context, type_value: Value) -> C.Core:
    """Read a type value back as a core type."""
    type_value = type_value.now()
    match type_value:
        case VUniverse():
            return C.Universe()
        case VNat():
            return C.Nat()
        case VAtom():
            return C.Atom()
        case VTrivial():
            return C.Trivial()
        case VAbsurd():
            return C.Absurd()
        case VPi(name, arg_type, result_type):
            param = fresh_name(context, name)
            return C.Pi(
                param,
                read_back_type(context, arg_type),
                read_back_type(
                    context.bind_free(param, arg_type),
                    result_type.apply(Neutral(arg_type, NVar(param))),
                ),
            )
        case VSigma(name, car_type, cdr_type):
            param = fresh_name(context, name)
            return C.Sigma(
                param,
                read_back_type(context, car_type),
                read_back_type(
                    context.bind_free(param, car_type),
                    cdr_type.apply(Neutral(car_type, NVar(param))),
                ),
            )
        case VList(entry_type):
            return C.List(read_back_type(context, entry_type))
        case VVec(entry_type, length):
            return C.Vec(read_back_type(context, entry_type), read_back(context, VNat(), length))
        case VEither(left_type, right_type):
            return C.Either(read_back_type(context, left_type), read_back_type(context, right_type))
        case VEqual(type_, from_, to):
            return C.Equal(
                read_back_type(context, type_),
                read_back(context, type_, from_),
                read_back(context, type_, to),
            )
        case Neutral(_, neutral):
            return read_back_neutral(context, neutral)

    raise PieInternalError(f"Not a type: {type_value!r}")


def read_back_neutral(context: Context, neutral: NeutralTerm) -> C.Core:
    """Rebuild the eliminator chain of a stuck computation."""
    match neutral:
        case NVar(name):
            return C.Var(name)
        case NApplication(fn, arg):
            return C.Application(read_back_neutral(context, fn), read_back_typed(context, arg))
        case NCar(target):
            return C.Car(read_back_neutral(context, target))
        case NCdr(target):
            return C.Cdr(read_back_neutral(context, target))
        case NWhichNat(target, base, step):
            return C.WhichNat(
                read_back_neutral(context, target),
                _annotate(context, base),
                read_back_typed(context, step),
            )
        case NIterNat(target, base, step):
            return C.IterNat(
                read_back_neutral(context, target),
                _annotate(context, base),
                read_back_typed(context, step),
            )
        case NRecNat(target, base, step):
            return C.RecNat(
                read_back_neutral(context, target),
                _annotate(context, base),
                read_back_typed(context, step),
            )
        case NIndNat(target, motive, base, step):
            return C.IndNat(
                read_back_neutral(context, target),
                read_back_typed(context, motive),
                read_back_typed(context, base),
                read_back_typed(context, step),
            )
        case NIndAbsurd(target, motive):
            return C.IndAbsurd(
                C.The(C.Absurd(), read_back_neutral(context, target)),
                read_back_type(context, motive.value),
            )
        case NRecList(target, base, step):
            return C.RecList(
                read_back_neutral(context, target),
                _annotate(context, base),
                read_back_typed(context, step),
            )
        case NIndList(target, motive, base, step):
            return C.IndList(
                read_back_neutral(context, target),
                read_back_typed(context, motive),
                read_back_typed(context, base),
                read_back_typed(context, step),
            )
        case NHead(target):
            return C.Head(read_back_neutral(context, target))
        case NTail(target):
            return C.Tail(read_back_neutral(context, target))
        case NIndVec(length, target, motive, base, step):
            return C.IndVec(
                read_back_typed(context, length),
                read_back_neutral(context, target),
                read_back_typed(context, motive),
                read_back_typed(context, base),
                read_back_typed(context, step),
            )
        case NIndEither(target, motive, base_left, base_right):
            return C.IndEither(
                read_back_neutral(context, target),
                read_back_typed(context, motive),
                read_back_typed(context, base_left),
                read_back_typed(context, base_right),
            )
        case NReplace(target, motive, base):
            return C.Replace(
                read_back_neutral(context, target),
                read_back_typed(context, motive),
                read_back_typed(context, base),
            )
        case NTrans(left, right):
            return C.Trans(read_back_typed(context, left), read_back_typed(context, right))
        case NCong(target, fun):
            return C.Cong(read_back_neutral(context, target), _annotate(context, fun))
        case NSymm(target):
            return C.Symm(read_back_neutral(context, target))
        case NIndEqual(target, motive, base):
            return C.IndEqual(
                read_back_neutral(context, target),
                read_back_typed(context, motive),
                read_back_typed(context, base),
            )

    raise PieInternalError(f"Cannot read back neutral {neutral!r}")


def _annotate(context: Context, typed: TypedValue) -> C.Core:
    """`(the T v)`: the evaluator needs T to rebuild the neutral again."""
    return C.The(read_back_type(context, typed.type), read_back_typed(context, typed))
