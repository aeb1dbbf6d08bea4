"""Renamings from source binder names to elaborated binder names.

The checker elaborates every binder to a name that is fresh in the context,
so a reference in the source must be mapped to the name its binder received.
"""

from __future__ import annotations

from pie.types.symbol import Symbol


class Renaming:
    __slots__ = ("pairs",)

    def __init__(self, pairs: tuple[tuple[Symbol, Symbol], ...] = ()):
        self.pairs = pairs

    def extend(self, source: Symbol, target: Symbol) -> Renaming:
        return Renaming(self.pairs + ((source, target),))

    def rename(self, name: Symbol) -> Symbol:
        """The innermost binder for `name` wins; unmapped names are top-level."""
        for source, target in reversed(self.pairs):
            if source == name:
                return target
        return name

    def __repr__(self) -> str:
        inner = ", ".join(f"{s}↦{t}" for s, t in self.pairs)
        return f"Renaming({inner})"
