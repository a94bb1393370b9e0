import pytest

from tpukit.byte import Byte


def test_default_is_zero():
    assert int(Byte()) == 0


def test_bits_reconstruct_value():
    value = 0xA5
    b = Byte(value)
    assert sum(b[i] << i for i in range(8)) == value


def test_bits_are_zero_or_one():
    b = Byte(0x5A)
    assert {b[i] for i in range(8)} <= {0, 1}


@pytest.mark.parametrize("index", [8, 9, -1])
def test_bit_index_out_of_range(index):
    with pytest.raises(IndexError):
        Byte(1)[index]


def test_truncates_to_eight_bits():
    assert Byte(0x1FF) == Byte(0xFF)


def test_hex_string_uppercase():
    assert str(Byte(0xAB)) == "AB"


def test_hex_string_padded():
    assert str(Byte(0x0F)) == "0F"


def test_equality_with_int_and_byte():
    assert Byte(7) == 7
    assert Byte(7) == Byte(7)
    assert not (Byte(7) == Byte(8))


def test_copy_from_byte():
    original = Byte(0x42)
    assert Byte(original) == original