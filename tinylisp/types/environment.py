"""Runtime environment for tinylisp.

The Environment stores bindings of Symbols to evaluated Lisp values and
supports nested scopes via an `outer` link. `define` only ever touches the
receiving frame; `lookup` walks outward to the global frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from tinylisp import LispValue
from tinylisp.errors import TypeMismatch, UnboundSymbol
from tinylisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any previous binding here.

        Raises TypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise TypeMismatch(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises UnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(f"Unbound symbol: {name}")
        return env.vars[name]

    def extend(self) -> Environment:
        """Create an empty child frame whose parent is this one."""
        return Environment(outer=self)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(str(k) for k in self.vars))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; lists bound names only."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for env in self.frames():
                with StringIO() as frame_buf:
                    env._write_vars(frame_buf)
                    chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
