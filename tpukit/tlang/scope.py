"""Address bookkeeping for assembled variables in one scope."""

from dataclasses import dataclass, field

from .errors import TIdentifierInUseException, TUnknownIdentifierException
from .ttype import Type

# An identifier can never be named "0", so this marks where return values start.
SCOPE_RETURN_START = "0"


@dataclass
class ScopeAddr:
    """One byte slot of a scope: a variable's first byte or a placeholder."""

    name: str = ""
    type: Type = field(default_factory=Type)
    is_allocated: bool = False


class Scope:
    """Tracks the byte slots taken by the variables of one scope, in order."""

    def __init__(self):
        self._children = []

    def __len__(self) -> int:
        return len(self._children)

    def _allocated(self, name: str):
        return (addr for addr in self._children if addr.is_allocated and addr.name == name)

    def has_variable(self, name: str) -> bool:
        """True if a variable with this name is declared in the scope."""
        return next(self._allocated(name), None) is not None

    def declare_variable(self, var_type: Type, name: str, err) -> int:
        """Declare a variable and reserve its bytes; return its size in bytes."""
        if self.has_variable(name):
            raise TIdentifierInUseException(err)
        self._children.append(ScopeAddr(name, var_type, True))
        size = var_type.size_bytes()
        self.add_placeholder(size - 1)
        return size

    def declare_function_param(self, var_type: Type, name: str, err) -> int:
        """Declare a parameter; arrays are marked as passed by reference."""
        if var_type.is_array():
            var_type = var_type.copy()
            var_type.is_reference_pointer = True
        return self.declare_variable(var_type, name, err)

    def pop(self, n: int = 1) -> int:
        """Remove the last ``n`` slots and return how many were removed."""
        if n > len(self._children):
            raise IndexError("Cannot pop more slots than the scope holds")
        for _ in range(n):
            self._children.pop()
        return n

    def offset(self, name: str, err) -> int:
        """Return the distance from the end of the scope to the variable's slot."""
        for distance, addr in enumerate(reversed(self._children), 1):
            if addr.is_allocated and addr.name == name:
                return distance
        raise TUnknownIdentifierException(err)

    def variable(self, name: str, err) -> ScopeAddr:
        """Return the slot of the named variable."""
        addr = next(self._allocated(name), None)
        if addr is None:
            raise TUnknownIdentifierException(err)
        return addr

    def add_placeholder(self, n: int = 1) -> None:
        """Append ``n`` unallocated slots."""
        self._children.extend(ScopeAddr() for _ in range(n))