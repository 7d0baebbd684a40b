"""Runtime environment for yall.

An Environment is one frame of symbol bindings plus a link to its parent
frame. The global environment has no parent; every function or macro
application derives a fresh child frame from the environment the callable
was defined in. Frames are shared freely between closures.
"""

from __future__ import annotations

from typing import Mapping, Optional

from yall import Expr
from yall.errors import YallRedefinitionError, YallTypeError, YallUnboundSymbol
from yall.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to yall values."""

    __slots__ = ("values", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.values: dict[Symbol, Expr] = {}
        self.parent: Environment | None = parent

    def derive(self) -> Environment:
        """Create a child frame whose parent is this one."""
        return Environment(parent=self)

    def intern(self, name: Symbol, value: Expr) -> None:
        """Bind `name` to `value` in this frame.

        A name may be bound only once per frame: rebinding raises
        YallRedefinitionError instead of overwriting. Shadowing a binding of
        a parent frame is allowed.
        """
        if not isinstance(name, Symbol):
            raise YallTypeError(f"Cannot bind {name}, a symbol is required")
        if name in self.values:
            raise YallRedefinitionError(f"Can't overwrite {name}")
        self.values[name] = value

    def unintern(self, name: Symbol) -> None:
        """Remove the local binding of `name`, if any."""
        self.values.pop(name, None)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.values:
                return env
            env = env.parent
        return None

    def lookup(self, name: Symbol) -> Expr:
        """Return the value bound to `name` here or in the nearest parent.

        Raises YallUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise YallUnboundSymbol(f"Unbound variable: {name}")
        return env.values[name]

    def update(self, mapping: Mapping[Symbol, Expr]) -> None:
        """Intern every entry of `mapping` in this frame."""
        for k, v in mapping.items():
            self.intern(k, v)

    def __str__(self) -> str:
        """This frame's bindings, with a marker when a parent frame exists."""
        frame = "{" + ", ".join(f"{k}: {v}" for k, v in self.values.items()) + "}"
        return frame + " -> ..." if self.parent is not None else frame

    def __repr__(self) -> str:
        return f"<Environment {self}>"
