"""Render Yocto values as source-like text.

`to_lisp_string(value)` is what the REPL echoes; `display=True` is what
`print` writes (strings without quotes or escapes).
"""

from __future__ import annotations

import math
from io import StringIO

from yocto import LispValue
from yocto.types.function import Function
from yocto.types.macro import Macro
from yocto.types.nil import NilType
from yocto.types.splice import SplicedList
from yocto.types.symbol import Symbol

_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def format_number(value: float) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def _write(buffer: StringIO, value: LispValue, display: bool) -> None:
    if isinstance(value, bool):
        buffer.write("true" if value else "false")
    elif isinstance(value, (int, float)):
        buffer.write(format_number(value))
    elif isinstance(value, str):
        if display:
            buffer.write(value)
        else:
            buffer.write('"')
            buffer.write("".join(_STRING_ESCAPES.get(ch, ch) for ch in value))
            buffer.write('"')
    elif isinstance(value, Symbol):
        buffer.write(str(value))
    elif isinstance(value, NilType):
        buffer.write("nil")
    elif isinstance(value, (list, SplicedList)):
        if isinstance(value, SplicedList):
            buffer.write(",@")
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(buffer, item, display)
        buffer.write(")")
    elif isinstance(value, Function):
        buffer.write(f"<fn {value.name}>" if value.name is not None else "<lambda>")
    elif isinstance(value, Macro):
        buffer.write(f"<macro {value.name}>")
    elif callable(value):
        buffer.write(f"<builtin {getattr(value, '__name__', '?')}>")
    else:
        buffer.write(str(value))


def to_lisp_string(value: LispValue, display: bool = False) -> str:
    with StringIO() as buffer:
        _write(buffer, value, display)
        return buffer.getvalue()
