import pytest

from pie.checking.checker import check, is_type, synthesize
from pie.core import (
    Absurd,
    Add1,
    Application,
    Atom,
    Car,
    Cong,
    Cons,
    Either,
    Equal,
    Head,
    IndAbsurd,
    IndEither,
    IndNat,
    IndVec,
    Lambda,
    Left,
    List,
    ListCons,
    Nat,
    Nil,
    Pi,
    Quote,
    RecList,
    Same,
    Sigma,
    Sole,
    Symm,
    The,
    Todo,
    Trans,
    Trivial,
    Universe,
    Vec,
    VecCons,
    VecNil,
    WhichNat,
    Zero,
    nat_literal,
)
from pie.errors import (
    PieAnnotationRequired,
    PieEliminatorTargetMismatch,
    PieIncompleteTerm,
    PieInternalError,
    PieInvalidAtom,
    PieNotAFunctionType,
    PieNotAPairType,
    PieNotAUniverse,
    PieTypeError,
    PieTypeMismatch,
    PieUnboundVariable,
)
from pie.evaluation.evaluator import val_of
from pie.evaluation.read_back import read_back_type
from pie.types.context import Context
from pie.values import VAbsurd, VAtom, VNat, VUniverse

from conftest import S, V, arrow


def type_value(ctx, expr):
    return val_of(ctx.environment, is_type(ctx, expr))


def synth_type(ctx, expr):
    _, t = synthesize(ctx, expr)
    return read_back_type(ctx, t)


def test_the_elaborates_identity(ctx):
    expr = The(Pi(S("x"), Nat(), Nat()), Lambda(S("x"), V("x")))
    core, t = synthesize(ctx, expr)
    assert core == The(Pi(S("x"), Nat(), Nat()), Lambda(S("x"), V("x")))
    assert read_back_type(ctx, t) == Pi(S("x"), Nat(), Nat())


def test_shadowed_binders_are_renamed(ctx):
    expected = type_value(ctx, Pi(S("x"), Nat(), Pi(S("y"), Nat(), Nat())))
    core = check(ctx, Lambda(S("x"), Lambda(S("x"), V("x"))), expected)
    assert core == Lambda(S("x"), Lambda(S("x₁"), V("x₁")))


def test_binder_renamed_away_from_context(nat_ctx):
    expected = type_value(nat_ctx, arrow(Nat(), Nat()))
    core = check(nat_ctx, Lambda(S("n"), Add1(V("n"))), expected)
    assert core == Lambda(S("n₁"), Add1(V("n₁")))


def test_unbound_variable(ctx):
    with pytest.raises(PieUnboundVariable):
        synthesize(ctx, V("ghost"))


def test_claimed_but_undefined_name_is_unbound():
    ctx = Context().bind_claim(S("later"), VNat())
    with pytest.raises(PieUnboundVariable):
        synthesize(ctx, V("later"))


def test_car_of_non_pair(ctx):
    with pytest.raises(PieEliminatorTargetMismatch) as info:
        synthesize(ctx, Car(Zero()))
    assert isinstance(info.value, PieNotAPairType)


def test_applying_non_function(ctx):
    with pytest.raises(PieNotAFunctionType):
        synthesize(ctx, Application(Zero(), Zero()))


def test_cons_against_non_sigma(ctx):
    with pytest.raises(PieTypeMismatch):
        check(ctx, Cons(Zero(), Zero()), VNat())


def test_cons_against_sigma(ctx):
    pair_type = type_value(ctx, Sigma(S("a"), Nat(), Atom()))
    assert check(ctx, Cons(Zero(), Quote("pie")), pair_type) == Cons(Zero(), Quote("pie"))


def test_mismatch_through_synthesis(ctx):
    with pytest.raises(PieTypeMismatch):
        check(ctx, Zero(), VAtom())


@pytest.mark.parametrize("expr", [Lambda(S("x"), V("x")), Cons(Zero(), Zero()), Nil(), Same(Zero())])
def test_constructors_need_annotation(ctx, expr):
    with pytest.raises(PieAnnotationRequired):
        synthesize(ctx, expr)


def test_todo_is_always_reported(ctx):
    with pytest.raises(PieIncompleteTerm):
        synthesize(ctx, Todo())
    with pytest.raises(PieIncompleteTerm) as info:
        check(ctx, Todo(), VNat())
    assert info.value.expected == Nat()


def test_universe_has_no_type(ctx):
    with pytest.raises(PieTypeError):
        synthesize(ctx, Universe())
    assert is_type(ctx, Universe()) == Universe()


def test_non_type_is_rejected(ctx):
    with pytest.raises(PieNotAUniverse):
        is_type(ctx, Zero())


def test_non_core_input_is_internal_error(ctx):
    with pytest.raises(PieInternalError):
        synthesize(ctx, 42)


@pytest.mark.parametrize("atom", ["", "a b", "x1", "'quoted"])
def test_invalid_atoms(ctx, atom):
    with pytest.raises(PieInvalidAtom):
        synthesize(ctx, Quote(atom))


def test_atoms_may_contain_hyphens(ctx):
    assert synth_type(ctx, Quote("pea-soup")) == Atom()


def test_sole_and_list_cons_synthesize(ctx):
    assert synth_type(ctx, Sole()) == Trivial()
    assert synth_type(ctx, ListCons(Zero(), Nil())) == List(Nat())


def test_which_nat_base_is_annotated(nat_ctx):
    core, t = synthesize(nat_ctx, WhichNat(V("n"), Zero(), Lambda(S("x"), V("x"))))
    assert core == WhichNat(V("n"), The(Nat(), Zero()), Lambda(S("x"), V("x")))
    assert isinstance(t.now(), VNat)


def test_which_nat_target_must_be_nat(ctx):
    with pytest.raises(PieEliminatorTargetMismatch):
        synthesize(ctx, WhichNat(Quote("a"), Zero(), Lambda(S("x"), V("x"))))


def test_ind_nat_result_type_follows_motive(nat_ctx):
    motive = Lambda(S("k"), Nat())
    step = Lambda(S("k"), Lambda(S("ih"), Add1(V("ih"))))
    core, t = synthesize(nat_ctx, IndNat(V("n"), motive, Zero(), step))
    assert isinstance(core, IndNat)
    assert read_back_type(nat_ctx, t) == Nat()


def test_rec_list_base_is_annotated(ctx):
    xs = The(List(Atom()), ListCons(Quote("a"), Nil()))
    step = Lambda(S("e"), Lambda(S("es"), Lambda(S("ih"), Add1(V("ih")))))
    core, _ = synthesize(ctx, RecList(xs, Zero(), step))
    assert core.base == The(Nat(), Zero())


def test_ind_absurd(ctx):
    absurd_ctx = ctx.bind_free(S("bot"), VAbsurd())
    core, t = synthesize(absurd_ctx, IndAbsurd(V("bot"), Nat()))
    assert core == IndAbsurd(The(Absurd(), V("bot")), Nat())
    assert isinstance(t.now(), VNat)


def test_vecnil_needs_length_zero(ctx):
    assert check(ctx, VecNil(), type_value(ctx, Vec(Nat(), Zero()))) == VecNil()
    with pytest.raises(PieTypeMismatch):
        check(ctx, VecNil(), type_value(ctx, Vec(Nat(), nat_literal(1))))


def test_vec_cons_needs_add1_length(ctx):
    one = type_value(ctx, Vec(Nat(), nat_literal(1)))
    assert check(ctx, VecCons(Zero(), VecNil()), one) == VecCons(Zero(), VecNil())
    with pytest.raises(PieTypeMismatch):
        check(ctx, VecCons(Zero(), VecNil()), type_value(ctx, Vec(Nat(), Zero())))


def test_head_of_empty_vec_is_rejected(ctx):
    empty = The(Vec(Nat(), Zero()), VecNil())
    with pytest.raises(PieTypeMismatch):
        synthesize(ctx, Head(empty))


def test_ind_vec_checks_length(ctx):
    vec = The(Vec(Nat(), nat_literal(1)), VecCons(Zero(), VecNil()))
    motive = Lambda(S("k"), Lambda(S("es"), Nat()))
    step = Lambda(S("k"), Lambda(S("e"), Lambda(S("es"), Lambda(S("ih"), Add1(V("ih"))))))
    assert synth_type(ctx, IndVec(nat_literal(1), vec, motive, Zero(), step)) == Nat()
    with pytest.raises(PieTypeMismatch):
        synthesize(ctx, IndVec(nat_literal(2), vec, motive, Zero(), step))


def test_either(ctx):
    either = type_value(ctx, Either(Nat(), Atom()))
    assert check(ctx, Left(Zero()), either) == Left(Zero())
    with pytest.raises(PieTypeMismatch):
        check(ctx, Left(Quote("a")), either)
    target = The(Either(Nat(), Atom()), Left(Zero()))
    motive = Lambda(S("e"), Nat())
    on_left = Lambda(S("l"), Add1(V("l")))
    on_right = Lambda(S("r"), Zero())
    assert synth_type(ctx, IndEither(target, motive, on_left, on_right)) == Nat()


def test_same_checks_both_ends(ctx):
    zero_is_zero = type_value(ctx, Equal(Nat(), Zero(), Zero()))
    assert check(ctx, Same(Zero()), zero_is_zero) == Same(Zero())
    with pytest.raises(PieTypeMismatch):
        check(ctx, Same(Zero()), type_value(ctx, Equal(Nat(), Zero(), nat_literal(1))))


def test_cong_annotates_function(ctx):
    proof = The(Equal(Nat(), Zero(), Zero()), Same(Zero()))
    fun = Lambda(S("x"), Add1(V("x")))
    core, t = synthesize(ctx, Cong(proof, The(arrow(Nat(), Nat(), "x"), fun)))
    assert core.fun == The(arrow(Nat(), Nat(), "x"), fun)
    assert read_back_type(ctx, t) == Equal(Nat(), nat_literal(1), nat_literal(1))


def test_symm_and_trans(ctx):
    eq_ctx = ctx.bind_free(S("m"), VNat())
    eq_type = type_value(eq_ctx, Equal(Nat(), V("m"), Zero()))
    eq_ctx = eq_ctx.bind_free(S("p"), eq_type)
    assert synth_type(eq_ctx, Symm(V("p"))) == Equal(Nat(), Zero(), V("m"))
    refl = The(Equal(Nat(), Zero(), Zero()), Same(Zero()))
    assert synth_type(eq_ctx, Trans(V("p"), refl)) == Equal(Nat(), V("m"), Zero())
    with pytest.raises(PieTypeMismatch):
        synthesize(eq_ctx, Trans(refl, V("p")))


def test_pi_is_a_type_and_has_type_u(ctx):
    assert isinstance(synthesize(ctx, arrow(Nat(), Nat()))[1].now(), VUniverse)


def nat_indexed_family():
    """(the (Π (n Nat) U) (λ (n) (which-Nat n (the U Atom) (λ (k) Nat))))"""
    return The(
        Pi(S("n"), Nat(), Universe()),
        Lambda(S("n"), WhichNat(V("n"), The(Universe(), Atom()), Lambda(S("k"), Nat()))),
    )


def dependent_function():
    family = nat_indexed_family()
    body = IndNat(V("n"), family, Quote("a"), Lambda(S("k"), Lambda(S("ih"), Zero())))
    return The(Pi(S("n"), Nat(), Application(family, V("n"))), Lambda(S("n"), body))


def test_cong_rejects_dependent_function(ctx):
    eq_ctx = ctx.bind_free(S("p"), type_value(ctx, Equal(Nat(), Zero(), nat_literal(1))))
    with pytest.raises(PieTypeError) as info:
        synthesize(eq_ctx, Cong(V("p"), dependent_function()))
    assert isinstance(info.value, PieTypeMismatch)
    assert "non-dependent" in str(info.value)


def test_cong_accepts_pi_whose_codomain_ignores_binder(ctx):
    eq_ctx = ctx.bind_free(S("m"), VNat())
    eq_ctx = eq_ctx.bind_free(S("p"), type_value(eq_ctx, Equal(Nat(), V("m"), Zero())))
    fun = The(Pi(S("x"), Nat(), Atom()), Lambda(S("x"), Quote("same")))
    assert synth_type(eq_ctx, Cong(V("p"), fun)) == Equal(Atom(), Quote("same"), Quote("same"))
