"""An 8-bit value."""


class Byte:
    """An immutable unsigned 8-bit value; larger inputs are truncated."""

    __slots__ = ("_value",)

    def __init__(self, value=0):
        self._value = int(value) & 0xFF

    def __getitem__(self, index: int) -> int:
        """Return bit ``index`` (0 is least significant) as 0 or 1."""
        if not 0 <= index <= 7:
            raise IndexError("Index out of range")
        return (self._value >> index) & 1

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other):
        if isinstance(other, Byte):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __str__(self) -> str:
        return f"{self._value:02X}"

    def __repr__(self) -> str:
        return f"Byte(0x{self._value:02X})"