import pytest
from hypothesis import given, strategies as st

from pie.neutral import NVar
from pie.types.context import Claim, Context, Definition, Free, fresh_name
from pie.types.symbol import Symbol
from pie.values import Neutral, VNat, VZero


@pytest.mark.parametrize(
    "bound,hint,expected",
    [
        ([], "x", "x"),
        (["x"], "x", "x₁"),
        (["x", "x₁"], "x", "x₂"),
        (["x₁"], "x₁", "x₂"),
        (["x₉"], "x₉", "x₁₀"),
        (["y"], "x", "x"),
    ],
)
def test_fresh_name(bound, hint, expected):
    ctx = Context()
    for name in bound:
        ctx = ctx.bind_free(Symbol(name), VNat())
    assert fresh_name(ctx, Symbol(hint)) == Symbol(expected)


@given(st.integers(min_value=0, max_value=30))
def test_fresh_name_never_collides(n):
    ctx = Context()
    for _ in range(n):
        ctx = ctx.bind_free(fresh_name(ctx, Symbol("x")), VNat())
    assert len(ctx.names()) == n
    assert fresh_name(ctx, Symbol("x")) not in ctx.names()


def test_fresh_name_is_deterministic():
    ctx = Context().bind_free(Symbol("x"), VNat())
    assert fresh_name(ctx, Symbol("x")) == fresh_name(ctx, Symbol("x"))


def test_binding_does_not_mutate_original():
    base = Context()
    extended = base.bind_free(Symbol("x"), VNat())
    assert Symbol("x") in extended
    assert Symbol("x") not in base
    assert len(base) == 0


def test_definition_replaces_claim():
    ctx = Context().bind_claim(Symbol("one"), VNat())
    assert isinstance(ctx.lookup(Symbol("one")), Claim)
    ctx = ctx.bind_definition(Symbol("one"), VNat(), VZero())
    assert isinstance(ctx.lookup(Symbol("one")), Definition)
    assert len(ctx) == 1


def test_environment_of_context():
    ctx = (
        Context()
        .bind_free(Symbol("n"), VNat())
        .bind_claim(Symbol("c"), VNat())
        .bind_definition(Symbol("z"), VNat(), VZero())
    )
    env = ctx.environment
    n = env.lookup(Symbol("n"))
    assert isinstance(n, Neutral)
    assert isinstance(n.neutral, NVar) and n.neutral.name == Symbol("n")
    assert isinstance(env.lookup(Symbol("z")), VZero)
    # Claims are not visible to evaluation.
    assert Symbol("c") not in env
    assert isinstance(ctx.lookup(Symbol("n")), Free)


def test_symbols_compare_by_name():
    built = Symbol("".join(["x", "₁"]))
    assert built == Symbol("x₁")
    assert hash(built) == hash(Symbol("x₁"))
    assert Symbol(Symbol("y")) == Symbol("y")
    assert Symbol("x") != "x"
    assert str(built) == "x₁"
