import logging
import sys

import pytest

from pie.core import (
    Add1,
    Application,
    Atom,
    Cong,
    Equal,
    IndNat,
    Lambda,
    Nat,
    Pi,
    Quote,
    The,
    Todo,
    Universe,
    WhichNat,
    Zero,
    nat_literal,
)
from pie.errors import PieDuplicateBinderName, PieIncompleteTerm, PieTypeError, PieTypeMismatch
from pie.checking.checker import is_type
from pie.checking.support import evaluate
from pie.interpreter import CheckSame, Claim, Define, Interpreter, Normalize, recursion_limit
from pie.types.context import Context, Definition

from conftest import S, V, arrow


def test_claim_then_define(itp):
    itp.claim(S("one"), Nat())
    itp.define(S("one"), Add1(Zero()))
    assert isinstance(itp.context.lookup(S("one")), Definition)
    assert itp.rep(V("one")) == The(Nat(), nat_literal(1))


def test_define_without_claim_synthesizes(itp):
    itp.define(S("two"), nat_literal(2))
    assert itp.rep(V("two")) == The(Nat(), nat_literal(2))


def test_defined_function_normalizes(itp):
    itp.claim(S("incr"), arrow(Nat(), Nat(), "n"))
    itp.define(S("incr"), Lambda(S("n"), Add1(V("n"))))
    assert itp.rep(Application(V("incr"), Zero())) == The(Nat(), nat_literal(1))
    assert itp.rep(V("incr")) == The(
        arrow(Nat(), Nat(), "n"), Lambda(S("n"), Add1(V("n")))
    )


def test_duplicate_claim_is_rejected(itp):
    itp.claim(S("x"), Nat())
    with pytest.raises(PieDuplicateBinderName):
        itp.claim(S("x"), Nat())


def test_redefinition_is_rejected(itp):
    itp.define(S("x"), Zero())
    with pytest.raises(PieDuplicateBinderName):
        itp.define(S("x"), Zero())


def test_define_checks_against_claim(itp):
    itp.claim(S("name"), Atom())
    with pytest.raises(PieTypeMismatch):
        itp.define(S("name"), Zero())


def test_check_same(itp):
    itp.check_same(Nat(), Application(The(arrow(Nat(), Nat()), Lambda(S("k"), Add1(V("k")))), Zero()), nat_literal(1))
    with pytest.raises(PieTypeMismatch):
        itp.check_same(Nat(), Zero(), nat_literal(1))


def test_norm_type(itp):
    itp.define(S("T"), The(Universe(), Nat()))
    assert itp.norm_type(V("T")) == Nat()
    assert itp.norm_type(arrow(Nat(), Nat(), "x")) == arrow(Nat(), Nat(), "x")


def test_run_isolates_failures(itp, caplog):
    declarations = [
        Claim(S("a"), Nat(), location="line 1"),
        Define(S("a"), Quote("oops"), location="line 2"),
        Claim(S("b"), Atom(), location="line 3"),
        Define(S("b"), Quote("fine"), location="line 4"),
        Define(S("c"), Todo(), location="line 5"),
        Normalize(V("b"), location="line 6"),
        CheckSame(Nat(), Zero(), Zero(), location="line 7"),
    ]
    with caplog.at_level(logging.WARNING, logger="pie"):
        outcomes = itp.run(declarations)

    assert [o.ok for o in outcomes] == [True, False, True, True, False, True, True]
    assert isinstance(outcomes[1].error, PieTypeMismatch)
    assert outcomes[1].error.location == "line 2"
    assert str(outcomes[1].error).startswith("line 2: ")
    assert isinstance(outcomes[4].error, PieIncompleteTerm)
    assert outcomes[5].result == The(Atom(), Quote("fine"))
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_failed_define_leaves_claim_in_place(itp):
    outcomes = itp.run([Claim(S("a"), Nat()), Define(S("a"), Quote("no")), Define(S("a"), Zero())])
    assert [o.ok for o in outcomes] == [True, False, True]


def test_recursion_limit_is_restored():
    before = sys.getrecursionlimit()
    with recursion_limit(before + 1000):
        assert sys.getrecursionlimit() == before + 1000
    assert sys.getrecursionlimit() == before


def test_recursion_limit_from_environment(monkeypatch, itp):
    monkeypatch.setenv("PIE_RECURSION_LIMIT", "20000")
    seen = []
    itp.process = lambda declaration: seen.append(sys.getrecursionlimit())
    itp.run([Normalize(Zero())])
    assert seen and seen[0] >= 20000


def test_dependent_cong_is_reported_and_run_continues():
    family = The(
        Pi(S("n"), Nat(), Universe()),
        Lambda(S("n"), WhichNat(V("n"), The(Universe(), Atom()), Lambda(S("k"), Nat()))),
    )
    step = Lambda(S("k"), Lambda(S("ih"), Zero()))
    fun = The(
        Pi(S("n"), Nat(), Application(family, V("n"))),
        Lambda(S("n"), IndNat(V("n"), family, Quote("a"), step)),
    )
    ctx = Context()
    proof_type = evaluate(ctx, is_type(ctx, Equal(Nat(), Zero(), nat_literal(1))))
    itp = Interpreter(ctx.bind_free(S("p"), proof_type))
    outcomes = itp.run([
        Normalize(Cong(V("p"), fun), location="line 1"),
        Normalize(nat_literal(2), location="line 2"),
    ])
    assert [o.ok for o in outcomes] == [False, True]
    assert isinstance(outcomes[0].error, PieTypeError)
    assert outcomes[0].error.location == "line 1"
    assert outcomes[1].result == The(Nat(), nat_literal(2))
