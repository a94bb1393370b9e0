"""Types of T-language values: primitive, signedness, pointers and arrays."""

from enum import IntEnum

from .errors import TConstQualifierMismatchException
from .token import TokenType, size_of_type
from .toolbox import MEM_ADDR_SIZE

TYPE_EMPTY_PTR = 0


class ParamMatch(IntEnum):
    MISMATCH = 0
    EXACT = 1
    IMPLICIT = 2


_INTEGRAL = (TokenType.TYPE_CHAR, TokenType.TYPE_INT)


class Type:
    """A primitive type with pointer and array modifiers.

    ``pointers`` holds one entry per modifier; array hints are kept at the
    end, innermost subscript last, so ``int a[2][3]`` is stored as ``[3, 2]``.
    """

    def __init__(self, prim_type=TokenType.VOID, is_unsigned=False):
        self.prim_type = prim_type
        self.is_unsigned = is_unsigned
        self.pointers = []
        self.num_array_hints = 0
        self.is_reference_pointer = False
        self.is_const = False

    def copy(self) -> "Type":
        clone = Type(self.prim_type, self.is_unsigned)
        clone.pointers = list(self.pointers)
        clone.num_array_hints = self.num_array_hints
        clone.is_reference_pointer = self.is_reference_pointer
        clone.is_const = self.is_const
        return clone

    @property
    def num_pointers(self) -> int:
        return len(self.pointers)

    def add_empty_pointer(self) -> None:
        self.pointers.append(TYPE_EMPTY_PTR)

    def add_hint_pointer(self, n: int) -> None:
        """Add an array dimension of size ``n`` (0 when unknown)."""
        self.pointers.insert(len(self.pointers) - self.num_array_hints, n)
        self.num_array_hints += 1

    def pop_pointer(self) -> None:
        if not self.pointers:
            raise IndexError("Type has no pointers to pop")
        if self.num_array_hints > 0:
            self.num_array_hints -= 1
        self.pointers.pop()

    def clear_pointers(self) -> None:
        self.pointers.clear()

    def size_bytes(self, array_as_pointer: bool = False) -> int:
        """Total bytes the type occupies in memory."""
        if self.is_array() and array_as_pointer:
            return MEM_ADDR_SIZE
        if self.pointers and self.pointers[-1] == TYPE_EMPTY_PTR:
            return MEM_ADDR_SIZE
        if len(self.pointers) > self.num_array_hints:
            size = MEM_ADDR_SIZE
        else:
            size = size_of_type(self.prim_type)
        for hint in self.pointers:
            if hint != TYPE_EMPTY_PTR:
                size *= hint
        return size

    def is_pointer(self) -> bool:
        return bool(self.pointers)

    def is_array(self) -> bool:
        return self.num_array_hints > 0

    def is_void_non_ptr(self) -> bool:
        return self.prim_type is TokenType.VOID and not self.pointers

    def is_void_ptr(self) -> bool:
        return self.prim_type is TokenType.VOID and bool(self.pointers)

    def is_void_any(self) -> bool:
        return self.prim_type is TokenType.VOID

    def _hint_position(self, index: int) -> int:
        return index + len(self.pointers) - self.num_array_hints

    def array_hint(self, index: int) -> int:
        return self.pointers[self._hint_position(index)]

    def set_array_hint(self, index: int, value: int) -> None:
        self.pointers[self._hint_position(index)] = value

    def clear_array_hints(self) -> None:
        """Turn every modifier into a plain pointer."""
        self.pointers = [TYPE_EMPTY_PTR] * len(self.pointers)
        self.num_array_hints = 0

    def address_pointer(self) -> "Type":
        """Return the type of this type's address."""
        clone = self.copy()
        clone.clear_array_hints()
        clone.add_empty_pointer()
        return clone

    def param_match(self, other: "Type", err) -> ParamMatch:
        """How well ``other`` (a given argument) fits this parameter type."""
        if not self.is_const and other.is_const:
            raise TConstQualifierMismatchException(err)

        num_a = len(self.pointers)
        num_b = len(other.pointers)
        # The outermost modifier may differ; all others must match.
        ptrs_match = num_a == num_b and all(
            a == b for a, b in zip(self.pointers[:-1], other.pointers[:-1])
        )

        if (self.prim_type is other.prim_type
                and self.is_unsigned == other.is_unsigned and ptrs_match):
            return ParamMatch.EXACT
        if num_a > 0 and num_b > 0 and not self.is_array() and not other.is_array():
            return ParamMatch.IMPLICIT
        if num_a == 0 and num_b == 0:
            if self.prim_type is other.prim_type and self.is_unsigned != other.is_unsigned:
                return ParamMatch.IMPLICIT
            if _implicitly_convertible(self.prim_type, other.prim_type):
                return ParamMatch.IMPLICIT
        return ParamMatch.MISMATCH

    def __eq__(self, other):
        if not isinstance(other, Type):
            return NotImplemented
        return (self.prim_type is other.prim_type
                and self.is_unsigned == other.is_unsigned
                and self.pointers == other.pointers)

    __hash__ = None

    def __repr__(self) -> str:
        sign = "unsigned " if self.is_unsigned else ""
        const = "const " if self.is_const else ""
        return f"Type({const}{sign}{self.prim_type.name}, pointers={self.pointers})"


def mem_addr_type() -> Type:
    """The type of a memory address: an unsigned int."""
    return Type(TokenType.TYPE_INT, True)


def _rank(prim, is_unsigned) -> int:
    if prim is TokenType.TYPE_CHAR:
        return 1 + is_unsigned
    if prim is TokenType.TYPE_BOOL:
        return 2
    if prim is TokenType.TYPE_INT:
        return 3 + is_unsigned
    if prim is TokenType.TYPE_FLOAT:
        return 5
    return 0


def _implicitly_convertible(a, b) -> bool:
    if a is b:
        return True
    a_integral = a in _INTEGRAL
    b_integral = b in _INTEGRAL
    if (a_integral and b is TokenType.TYPE_BOOL) or (b_integral and a is TokenType.TYPE_BOOL):
        return True
    return a_integral and b_integral


def dominant_type(a: Type, b: Type) -> Type:
    """Return the type two operands are promoted to."""
    if a.is_pointer() and not b.is_pointer():
        return a.copy()
    if b.is_pointer() and not a.is_pointer():
        return b.copy()
    if not a.is_pointer():
        if a.prim_type is b.prim_type:
            return (a if a.is_unsigned else b).copy()
        winner = a if _rank(a.prim_type, a.is_unsigned) >= _rank(b.prim_type, b.is_unsigned) else b
        return winner.copy()
    return mem_addr_type()