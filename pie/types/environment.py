"""Evaluation environment for the Pie core.

An Environment is a persistent chain of single-binding frames. Extending it
returns a new frame whose `outer` link is the old environment, so closures that
captured the old environment keep their own view of the bindings.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from pie import PieValue
from pie.errors import PieInternalError
from pie.types.symbol import Symbol


class Environment:
    """Persistent mapping from Symbols to values; nearest binding wins."""

    __slots__ = ("name", "value", "outer")

    def __init__(
        self,
        name: Optional[Symbol] = None,
        value: PieValue = None,
        outer: Optional[Environment] = None,
    ):
        # The empty environment has no name and no outer link
        self.name: Symbol | None = name
        self.value: PieValue = value
        self.outer: Environment | None = outer

    def extend(self, name: Symbol, value: PieValue) -> Environment:
        """Return a new environment binding `name` to `value` in front of this one."""
        if not isinstance(name, Symbol):
            raise PieInternalError(f"Cannot bind {name!r}: not a symbol")
        return Environment(name, value, self)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if env.name is not None and env.name == name:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> PieValue:
        """Look up the value bound to `name`.

        Well-typed core never mentions an unbound variable, so a miss here is
        a programmer error rather than a type error.
        """
        env = self.find(name)
        if env is None:
            raise PieInternalError(f"Cannot lookup unbound variable {name}")
        return env.value

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __iter__(self) -> Iterator[tuple[Symbol, PieValue]]:
        """Yield (name, value) pairs from the most recent binding outwards."""
        env: Optional[Environment] = self
        while env is not None:
            if env.name is not None:
                yield env.name, env.value
            env = env.outer

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
