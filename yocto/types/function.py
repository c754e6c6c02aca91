"""User-defined function representation and argument binding for Yocto."""

from __future__ import annotations

from io import StringIO

from yocto import SExpression, LispValue
from yocto.errors import YoctoArityError
from yocto.types.environment import Environment
from yocto.types.symbol import Symbol


class Function:
    """A first-class function with parameters, body forms and closure env.

    Built by `defn` (named) and `lambda` (anonymous). The closure env is the
    environment the defining form was evaluated in, not the call site.
    """

    __slots__ = ("name", "params", "body", "env")

    def __init__(
        self,
        params: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: Symbol | None = None,
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.env: Environment = env
        self.name: Symbol | None = name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn ")
            if self.name is not None:
                buffer.write(f"{self.name} ")
            buffer.write("(")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write("))")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this function's parameters and
        return a new child Environment of the closure env for the body.
        """
        if len(args) != len(self.params):
            raise YoctoArityError(
                f"{self.name or 'lambda'}: wrong number of arguments: "
                f"expected {len(self.params)}, got {len(args)}"
            )
        new_env = Environment(outer=self.env)
        for param, arg in zip(self.params, args):
            new_env.define(param, arg)
        return new_env
