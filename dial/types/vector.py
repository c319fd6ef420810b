from __future__ import annotations


class Vector(list):
    """A `[ ... ]` collection: same shape as a list, evaluated element-wise, never called."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Vector) and list.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"


def is_list(value: object) -> bool:
    """True for a plain list value (a Vector is not a list)."""
    return isinstance(value, list) and not isinstance(value, Vector)
