import pytest

from pie.core import Nat, Pi, Var
from pie.interpreter import Interpreter
from pie.types.context import Context
from pie.types.symbol import Symbol

# Shared fixtures for the Pie core tests. Most tests build core expressions
# directly; `S` keeps symbol construction short in test bodies.


def S(name: str) -> Symbol:
    return Symbol(name)


def V(name: str) -> Var:
    return Var(Symbol(name))


def arrow(arg_type, result_type, name: str = "_"):
    """Non-dependent function type."""
    return Pi(Symbol(name), arg_type, result_type)


@pytest.fixture
def ctx() -> Context:
    return Context()


@pytest.fixture
def itp() -> Interpreter:
    return Interpreter()


@pytest.fixture
def nat_ctx() -> Context:
    """A context with one free variable n : Nat."""
    from pie.values import VNat
    return Context().bind_free(Symbol("n"), VNat())


@pytest.fixture
def nat_to_nat():
    return arrow(Nat(), Nat(), "x")
