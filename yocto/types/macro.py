from __future__ import annotations

from yocto import SExpression
from yocto.errors import YoctoArityError
from yocto.types.environment import Environment
from yocto.types.symbol import Symbol


class Macro:
    """A macro defined by `defmacro`.

    `params` are bound positionally to the raw argument forms; when
    `rest_param` is set it receives the remaining forms as a list. Only the
    last body form's expansion is the macro's output.
    """

    __slots__ = ("name", "params", "rest_param", "body")

    def __init__(
        self,
        params: list[Symbol],
        body: list[SExpression],
        rest_param: Symbol | None = None,
        name: Symbol | None = None,
    ):
        self.params: list[Symbol] = params
        self.rest_param: Symbol | None = rest_param
        self.body: list[SExpression] = body
        self.name: Symbol | None = name

    def extend_env(self, args: list[SExpression], env: Environment) -> Environment:
        """Bind unevaluated `args` in a fresh child of the expansion-site `env`."""
        fixed = len(self.params)
        if self.rest_param is None and len(args) != fixed:
            raise YoctoArityError(
                f"macro {self.name}: expected {fixed} arguments, got {len(args)}"
            )
        if len(args) < fixed:
            raise YoctoArityError(
                f"macro {self.name}: expected at least {fixed} arguments, got {len(args)}"
            )
        macro_env = Environment(outer=env)
        for param, arg in zip(self.params, args):
            macro_env.define(param, arg)
        if self.rest_param is not None:
            macro_env.define(self.rest_param, list(args[fixed:]))
        return macro_env

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        if self.rest_param is not None:
            params = f"{params} ... {self.rest_param}".strip()
        return f"(macro {self.name} ({params}))"
