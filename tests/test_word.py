import pytest

from tpukit.byte import Byte
from tpukit.word import Word


def test_split_into_bytes():
    w = Word(0x1234)
    assert w.lower == Byte(0x34)
    assert w.upper == Byte(0x12)


def test_from_bytes_round_trip():
    w = Word(0xBEEF)
    assert Word.from_bytes(w.lower, w.upper) == w


def test_bits_reconstruct_value():
    value = 0xA5C3
    w = Word(value)
    assert sum(w[i] << i for i in range(16)) == value


@pytest.mark.parametrize("index", [16, -1])
def test_bit_index_out_of_range(index):
    with pytest.raises(IndexError):
        Word(1)[index]


def test_hex_string():
    assert str(Word(0xBEEF)) == "BEEF"


def test_set_lower_keeps_upper():
    w = Word(0x1234)
    w.lower = 0xFF
    assert w.upper == Byte(0x12)
    assert w.lower == Byte(0xFF)


def test_set_upper_keeps_lower():
    w = Word(0x1234)
    w.upper = 0x1FF
    assert w.lower == Byte(0x34)
    assert w.upper == Byte(0xFF)


def test_increment_returns_previous_and_wraps():
    w = Word(0xFFFF)
    previous = w.increment()
    assert int(previous) == 0xFFFF
    assert int(w) == 0


def test_decrement_returns_previous_and_wraps():
    w = Word(0)
    previous = w.decrement()
    assert int(previous) == 0
    assert int(w) == 0xFFFF


def test_increment_then_decrement_round_trip():
    w = Word(0x1000)
    w.increment()
    w.decrement()
    assert w == 0x1000


def test_value_truncated():
    assert Word(0x12345) == Word(0x2345)