"""Names for Pie variables and binders.

Both source names and the fresh names made during elaboration and read-back
(`x`, `x₁`, `x₂`, ...) are `Symbol`s. Names are interned, so comparing two
symbols is a string identity check in the common case.
"""

from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        if isinstance(name, Symbol):
            name = name.name
        self.name = sys.intern(str(name))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
