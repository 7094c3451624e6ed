"""Runtime environment for Sprig.

An Environment maps Symbols to evaluated values and links to the scope it was
created in through `outer`. The link is fixed at construction, so chains are
never cyclic. Closures and child scopes hold ordinary references to their
Environment, which keeps it alive for as long as any of them need it, and a
mutation made through one holder is seen by all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sprig import SchemeValue
from sprig.errors import SchemeError
from sprig.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Scheme values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, SchemeValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: SchemeValue) -> None:
        """Bind `name` to `value` in this frame only, overwriting any local binding.

        Raises SchemeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SchemeError(f"define: cannot define {name!r}, expected Symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain whose own frame binds `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: SchemeValue) -> None:
        """Rebind `name` in the innermost frame that already binds it.

        Raises SchemeError if no frame in the chain binds the symbol; an
        unbound `set!` never creates a new variable.
        """
        env = self.find(name)
        if env is None:
            raise SchemeError(f'set!: Symbol "{name}" undefined, cannot set!')
        env.vars[name] = value

    def lookup(self, name: Symbol) -> SchemeValue:
        """Return the value bound to `name`, searching outward from this frame.

        Raises SchemeError if the chain is exhausted.
        """
        env = self.find(name)
        if env is None:
            raise SchemeError(f'eval: Symbol "{name}" undefined')
        return env.vars[name]

    def update(self, mapping: dict[Symbol, SchemeValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
