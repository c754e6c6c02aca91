from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from yocto import LispValue
from yocto.builtin.env_builtin import register
from yocto.config import get_prelude_files
from yocto.evaluation.evaluator import evaluate
from yocto.reader.parser import lex, TokenStream
from yocto.types.environment import Environment
from yocto.types.nil import Nil

logger = logging.getLogger(__name__)


def make_root_env() -> Environment:
    """A fresh root Environment with every builtin registered."""
    env = Environment()
    register(env)
    return env


class Interpreter:
    """
    Orchestrates reading and evaluating Yocto code.
    Maintains one root Environment across calls, so definitions persist.
    """

    def __init__(self, prelude: str | None = None, prelude_files: Iterable[Path] | None = None):
        self.env: Environment = make_root_env()

        if prelude_files is None:
            prelude_files = get_prelude_files()
        for path in prelude_files:
            logger.debug("loading prelude %s", path)
            self.eval_prelude(Path(path).read_text(encoding='utf-8'))
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        self.eval(code)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value (nil if none)."""
        stream = TokenStream(lex(code))
        result: LispValue = Nil
        while (expr := stream.parse_expr()) is not None:
            result = evaluate(expr, self.env)
        return result
