from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from dial import DialValue

if TYPE_CHECKING:
    from dial.types.environment import Environment

BuiltinFn = Callable[["Environment", list[DialValue]], DialValue]


class Builtin:
    """A named native function called as fn(env, args); equal by name."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[DialValue]) -> DialValue:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Builtin, self.name))

    def __repr__(self) -> str:
        return f"#builtin: {self.name}"
