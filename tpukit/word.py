"""A mutable 16-bit value made of two bytes."""

from .byte import Byte


class Word:
    """A 16-bit register-like value with addressable lower and upper bytes."""

    __slots__ = ("_value",)

    def __init__(self, value=0):
        self._value = int(value) & 0xFFFF

    @classmethod
    def from_bytes(cls, lower, upper) -> "Word":
        """Build a word from its lower and upper bytes."""
        return cls(((int(upper) & 0xFF) << 8) | (int(lower) & 0xFF))

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value) -> None:
        self._value = int(value) & 0xFFFF

    @property
    def lower(self) -> Byte:
        return Byte(self._value & 0xFF)

    @lower.setter
    def lower(self, value) -> None:
        self._value = (self._value & 0xFF00) | (int(value) & 0xFF)

    @property
    def upper(self) -> Byte:
        return Byte(self._value >> 8)

    @upper.setter
    def upper(self, value) -> None:
        self._value = (self._value & 0x00FF) | ((int(value) & 0xFF) << 8)

    def __getitem__(self, index: int) -> int:
        """Return bit ``index`` (0 is least significant) as 0 or 1."""
        if index < 0:
            raise IndexError("Index out of range")
        return self.upper[index - 8] if index > 7 else self.lower[index]

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other):
        if isinstance(other, Word):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.upper}{self.lower}"

    def __repr__(self) -> str:
        return f"Word(0x{self._value:04X})"

    def increment(self) -> "Word":
        """Add one, wrapping at 16 bits, and return the previous value."""
        previous = Word(self._value)
        self.value = self._value + 1
        return previous

    def decrement(self) -> "Word":
        """Subtract one, wrapping at 16 bits, and return the previous value."""
        previous = Word(self._value)
        self.value = self._value - 1
        return previous