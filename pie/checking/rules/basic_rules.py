"""Rules for Atom, quote, Trivial, sole, Absurd and ind-Absurd."""

from __future__ import annotations

from pie.core import Absurd, Atom, IndAbsurd, Quote, Sole, Trivial
from pie.errors import PieInvalidAtom
from pie.checking.renaming import Renaming
from pie.checking.support import Judgments, annotate, evaluate, synth_target
from pie.types.context import Context
from pie.values import VAbsurd, VAtom, VTrivial, VUniverse


def is_valid_atom(atom: str) -> bool:
    """Atoms are non-empty and made of letters and hyphens."""
    return bool(atom) and all(ch.isalpha() or ch == "-" for ch in atom)


def synth_atom(context: Context, renaming: Renaming, expr: Atom, j: Judgments):
    return Atom(), VUniverse()


def synth_quote(context: Context, renaming: Renaming, expr: Quote, j: Judgments):
    if not is_valid_atom(expr.atom):
        raise PieInvalidAtom(expr.atom)
    return Quote(expr.atom), VAtom()


def synth_trivial(context: Context, renaming: Renaming, expr: Trivial, j: Judgments):
    return Trivial(), VUniverse()


def synth_sole(context: Context, renaming: Renaming, expr: Sole, j: Judgments):
    return Sole(), VTrivial()


def synth_absurd(context: Context, renaming: Renaming, expr: Absurd, j: Judgments):
    return Absurd(), VUniverse()


def synth_ind_absurd(context: Context, renaming: Renaming, expr: IndAbsurd, j: Judgments):
    target_core, _ = synth_target(
        context, renaming, expr.target, j, "ind-Absurd", VAbsurd, "Absurd"
    )
    motive_core = j.check(context, expr.motive, VUniverse(), renaming)
    return (
        IndAbsurd(annotate(Absurd(), target_core), motive_core),
        evaluate(context, motive_core),
    )
