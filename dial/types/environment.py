"""Runtime environment for Dial.

The Environment is one frame of bindings from Symbols to evaluated values plus
an `outer` link to the enclosing frame. A chain of frames is addressed by its
innermost frame. Frames are shared: every Lambda created inside a frame holds
a reference to it, so a frame lives as long as any closure over it and every
holder observes writes made through any other.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from dial import DialValue
from dial.errors import DialInvalidArgument, DialUndefinedSymbol
from dial.types.symbol import Symbol


class Environment:
    """Chained mapping from Symbols to Dial values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # Insertion-ordered bindings of this frame only
        self.vars: dict[Symbol, DialValue] = {}
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        """Return the outermost (global) frame of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def depth(self) -> int:
        """Number of frames in the chain, the global frame included."""
        return sum(1 for _ in self.frames())

    def frames(self) -> Iterator[Environment]:
        """Iterate frames innermost to outermost."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `symbol`."""
        for env in self.frames():
            if symbol in env.vars:
                return env
        return None

    def lookup(self, name: Symbol) -> DialValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises DialUndefinedSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise DialUndefinedSymbol(name)
        return env.vars[name]

    def define_local(self, name: Symbol, value: DialValue) -> None:
        """Bind `name` in this (innermost) frame."""
        if not isinstance(name, Symbol):
            raise DialInvalidArgument(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def define_global(self, name: Symbol, value: DialValue) -> None:
        """Bind `name` in the outermost frame, whatever the nesting depth."""
        self.root().define_local(name, value)

    def push_frame(self) -> Environment:
        """Return a new empty frame whose outer chain is this one."""
        return Environment(outer=self)

    def pop_frames(self, count: int = 1) -> Environment:
        """Return the chain `count` frames further out than this one."""
        env = self
        for _ in range(count):
            if env.outer is None:
                raise DialInvalidArgument("Cannot pop the global frame")
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, DialValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define_local(k, v)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

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
        """Detailed chain representation for debugging purposes."""
        chain = []
        for env in self.frames():
            with StringIO() as frame_buf:
                env._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
        return f"<Environment chain: {' -> '.join(chain)}>"
