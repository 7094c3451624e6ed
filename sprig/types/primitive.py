from __future__ import annotations

from typing import Callable

from sprig import SchemeValue


class Primitive:
    """A built-in function taking a list of evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[SchemeValue]], SchemeValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[SchemeValue]) -> SchemeValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"
