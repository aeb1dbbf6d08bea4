import pytest
from hypothesis import given, strategies as st

from pie.alpha import alpha_equiv
from pie.checking.checker import is_type, synthesize
from pie.core import (
    Absurd,
    Add1,
    Application,
    Atom,
    Car,
    Cdr,
    Cong,
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
    List,
    ListCons,
    Nat,
    Nil,
    RecList,
    RecNat,
    Replace,
    Sigma,
    Symm,
    Tail,
    The,
    Trans,
    Vec,
    WhichNat,
    Zero,
    nat_literal,
)
from pie.evaluation.convert import convert
from pie.evaluation.evaluator import val_of
from pie.evaluation.read_back import read_back
from pie.types.context import Context
from pie.values import Neutral, VList, VNat

from conftest import S, V, arrow


FREE_VARIABLES = [
    ("n", Nat()),
    ("k", Nat()),
    ("f", arrow(Nat(), Nat(), "x")),
    ("xs", List(Nat())),
    ("vs", Vec(Nat(), Add1(V("k")))),
    ("lr", Either(Nat(), Atom())),
    ("p", Equal(Nat(), V("n"), Zero())),
    ("q", Equal(Nat(), Zero(), V("n"))),
    ("bot", Absurd()),
    ("pr", Sigma(S("a"), Nat(), Nat())),
]


def lam(*names_and_body):
    *names, body = names_and_body
    for name in reversed(names):
        body = Lambda(S(name), body)
    return body


@pytest.fixture
def free_ctx() -> Context:
    ctx = Context()
    for name, type_expr in FREE_VARIABLES:
        ctx = ctx.bind_free(S(name), val_of(ctx.environment, is_type(ctx, type_expr)))
    return ctx


STUCK_ELIMINATORS = {
    "application": Application(V("f"), V("n")),
    "which-Nat": WhichNat(V("n"), Zero(), lam("x", V("x"))),
    "iter-Nat": IterNat(V("n"), Zero(), lam("x", Add1(V("x")))),
    "rec-Nat": RecNat(V("n"), Zero(), lam("k", "ih", Add1(V("ih")))),
    "ind-Nat": IndNat(V("n"), lam("k", Nat()), Zero(), lam("k", "ih", Add1(V("ih")))),
    "rec-List": RecList(V("xs"), Zero(), lam("e", "es", "ih", Add1(V("ih")))),
    "ind-List": IndList(
        V("xs"), lam("ys", Nat()), Zero(), lam("e", "es", "ih", Add1(V("ih")))
    ),
    "head": Head(V("vs")),
    "tail": Tail(V("vs")),
    "ind-Vec": IndVec(
        Add1(V("k")),
        V("vs"),
        lam("j", "es", Nat()),
        Zero(),
        lam("j", "e", "es", "ih", Add1(V("ih"))),
    ),
    "ind-Either": IndEither(V("lr"), lam("x", Nat()), lam("l", V("l")), lam("r", Zero())),
    "car": Car(V("pr")),
    "cdr": Cdr(V("pr")),
    "replace": Replace(V("p"), lam("x", Nat()), Zero()),
    "trans": Trans(V("p"), V("q")),
    "cong": Cong(V("p"), The(arrow(Nat(), Nat(), "x"), lam("x", Add1(V("x"))))),
    "symm": Symm(V("p")),
    "ind-=": IndEqual(V("p"), lam("to", "pf", Nat()), Zero()),
    "ind-Absurd": IndAbsurd(V("bot"), Nat()),
}


@pytest.mark.parametrize("expr", list(STUCK_ELIMINATORS.values()), ids=list(STUCK_ELIMINATORS))
def test_stuck_eliminator_normal_form_is_stable(free_ctx, expr):
    core, type_value = synthesize(free_ctx, expr)
    value = val_of(free_ctx.environment, core)
    assert isinstance(value.now(), Neutral)

    once = read_back(free_ctx, type_value, value)
    twice = read_back(free_ctx, type_value, val_of(free_ctx.environment, once))
    assert alpha_equiv(once, twice), (once, twice)


nat_lists = st.lists(st.integers(min_value=0, max_value=10), max_size=8)


def list_literal(entries):
    expr = Nil()
    for n in reversed(entries):
        expr = ListCons(nat_literal(n), expr)
    return The(List(Nat()), expr)


@given(nat_lists)
def test_rec_list_counts_entries(entries):
    length = RecList(list_literal(entries), Zero(), lam("e", "es", "ih", Add1(V("ih"))))
    ctx = Context()
    core, type_value = synthesize(ctx, length)
    assert read_back(ctx, type_value, val_of(ctx.environment, core)) == nat_literal(len(entries))


@given(nat_lists)
def test_list_normalization_is_idempotent(entries):
    ctx = Context()
    core, _ = synthesize(ctx, list_literal(entries))
    once = read_back(ctx, VList(VNat()), val_of(ctx.environment, core))
    twice = read_back(ctx, VList(VNat()), val_of(ctx.environment, once))
    assert once == twice


@given(nat_lists, nat_lists)
def test_list_convert_agrees_with_equality(left, right):
    ctx = Context()
    values = [val_of(ctx.environment, synthesize(ctx, list_literal(xs))[0]) for xs in (left, right)]
    assert convert(ctx, VList(VNat()), *values) == (left == right)
