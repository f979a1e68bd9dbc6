"""Runtime environment for Keel.

An Environment is one lexical frame mapping Symbols to binding Cells, with an
`outer` link to the enclosing frame. The root of every chain is the basis
frame populated by keel.builtins.register.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from keel import LispValue
from keel.errors import KeelTypeError, KeelUnboundVariable
from keel.types.cell import Cell
from keel.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to shared binding cells."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Cell] = {}
        self.outer: Environment | None = outer

    def declare(self, name: Symbol) -> Cell:
        """Create an uninitialised cell for `name` in this frame and return it."""
        if not isinstance(name, Symbol):
            raise KeelTypeError(f"Cannot bind {name!r}: not a symbol")
        cell = Cell()
        self.vars[name] = cell
        return cell

    def define(self, name: Symbol, value: LispValue) -> Cell:
        """Bind `name` to `value` in this frame.

        An existing cell in this frame is updated in place so every holder
        sees the new value.
        """
        if not isinstance(name, Symbol):
            raise KeelTypeError(f"Cannot bind {name!r}: not a symbol")
        cell = self.vars.get(name)
        if cell is None:
            cell = self.vars[name] = Cell(value)
        else:
            cell.value = value
        return cell

    def find_cell(self, name: Symbol) -> Optional[Cell]:
        """Find the nearest cell bound to `name`, walking outward."""
        env: Optional[Environment] = self
        while env is not None:
            cell = env.vars.get(name)
            if cell is not None:
                return cell
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update the nearest existing binding for `name`.

        Raises KeelUnboundVariable if the symbol is not found.
        """
        cell = self.find_cell(name)
        if cell is None:
            raise KeelUnboundVariable(f"Cannot set unbound symbol {name}")
        cell.value = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises KeelUnboundVariable if no frame binds it, or if the nearest
        binding is still uninitialised.
        """
        cell = self.find_cell(name)
        if cell is None:
            raise KeelUnboundVariable(f"Unbound variable {name}")
        if cell.value is None:
            raise KeelUnboundVariable(f"Variable {name} used before initialisation")
        return cell.value

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, cell in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {cell.value!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        # The basis frame is large; only its size is shown
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            if env.outer is None:
                frames.append(f"<basis: {len(env.vars)} bindings>")
            else:
                with StringIO() as buffer:
                    env._write_vars(buffer)
                    frames.append(buffer.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(frames) + ">"
