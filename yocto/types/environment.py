"""Runtime environment for Yocto.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Every function or macro invocation gets its
own child Environment; closures keep a reference to the Environment they were
created in, which keeps that frame alive for as long as the closure is.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from yocto import LispValue
from yocto.errors import YoctoInvalidSymbol, YoctoUndefinedName
from yocto.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Never searches outward, so defining a name that an enclosing frame
        already binds shadows it rather than changing it.

        Raises YoctoInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise YoctoInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises YoctoUndefinedName if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise YoctoUndefinedName(f"Cannot set undefined name: {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises YoctoUndefinedName if no frame up to the root binds it.
        """
        env = self.find(name)
        if env is None:
            raise YoctoUndefinedName(f"undefined name: {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
