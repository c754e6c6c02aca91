from __future__ import annotations

from yocto import LispValue


class SplicedList:
    """Marker produced by unquote-splicing.

    A list wrapped in a SplicedList is flattened into whatever contains it: the
    enclosing template list during quasiquote expansion, or the argument list of
    a call during evaluation.
    """

    __slots__ = ("items",)

    def __init__(self, items: list[LispValue]):
        self.items: list[LispValue] = list(items)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SplicedList) and self.items == other.items

    __hash__ = None

    def __repr__(self) -> str:
        return f"SplicedList({self.items!r})"


def flatten_into(target: list[LispValue], value: LispValue) -> None:
    """Append `value` to `target`, inlining its items when it is a splice marker."""
    if isinstance(value, SplicedList):
        target.extend(value.items)
    else:
        target.append(value)
