import pytest

from tpukit.tlang.errors import ErrInfo, TConstQualifierMismatchException
from tpukit.tlang.token import TokenType as T
from tpukit.tlang.ttype import ParamMatch, Type, dominant_type, mem_addr_type

ERR = ErrInfo(1, 1, "t.t")


def ptr(prim, n=1, is_unsigned=False):
    t = Type(prim, is_unsigned)
    for _ in range(n):
        t.add_empty_pointer()
    return t


def test_default_is_void():
    t = Type()
    assert t.is_void_non_ptr()
    assert t.size_bytes() == 0


def test_primitive_sizes():
    assert Type(T.TYPE_INT).size_bytes() == 2
    assert Type(T.TYPE_CHAR).size_bytes() == 1


def test_pointer_size_is_address_size():
    assert ptr(T.TYPE_CHAR).size_bytes() == 2
    assert ptr(T.VOID).is_void_ptr()


def test_array_hints_stored_innermost_last():
    t = Type(T.TYPE_INT)
    t.add_hint_pointer(2)
    t.add_hint_pointer(3)
    assert t.pointers == [3, 2]
    assert t.is_array()
    assert t.size_bytes() == 12
    assert t.size_bytes(True) == 2


def test_set_array_hint_and_read_back():
    t = Type(T.TYPE_CHAR)
    t.add_hint_pointer(0)
    t.set_array_hint(0, 5)
    assert t.array_hint(0) == 5
    assert t.size_bytes() == 5


def test_pop_pointer_drops_hint():
    t = Type(T.TYPE_INT)
    t.add_hint_pointer(4)
    t.pop_pointer()
    assert not t.is_array()
    assert t == Type(T.TYPE_INT)
    with pytest.raises(IndexError):
        t.pop_pointer()


def test_address_pointer_clears_hints():
    t = Type(T.TYPE_INT)
    t.add_hint_pointer(4)
    addr = t.address_pointer()
    assert addr.pointers == [0, 0]
    assert not addr.is_array()
    assert t.pointers == [4]


def test_copy_is_independent():
    t = ptr(T.TYPE_INT)
    clone = t.copy()
    clone.add_empty_pointer()
    assert len(t.pointers) == 1
    assert clone != t


def test_equality_ignores_const():
    a = Type(T.TYPE_INT)
    b = Type(T.TYPE_INT)
    b.is_const = True
    assert a == b
    assert a != Type(T.TYPE_INT, True)


def test_param_exact_match():
    assert Type(T.TYPE_INT).param_match(Type(T.TYPE_INT), ERR) is ParamMatch.EXACT


def test_param_implicit_matches():
    assert Type(T.TYPE_INT).param_match(Type(T.TYPE_INT, True), ERR) is ParamMatch.IMPLICIT
    assert Type(T.TYPE_INT).param_match(Type(T.TYPE_CHAR), ERR) is ParamMatch.IMPLICIT
    assert Type(T.TYPE_BOOL).param_match(Type(T.TYPE_INT), ERR) is ParamMatch.IMPLICIT
    assert ptr(T.TYPE_INT).param_match(ptr(T.TYPE_CHAR), ERR) is ParamMatch.IMPLICIT


def test_param_mismatch():
    assert Type(T.TYPE_FLOAT).param_match(Type(T.TYPE_INT), ERR) is ParamMatch.MISMATCH
    assert Type(T.TYPE_INT).param_match(ptr(T.TYPE_INT), ERR) is ParamMatch.MISMATCH


def test_param_const_cannot_be_dropped():
    given = Type(T.TYPE_INT)
    given.is_const = True
    with pytest.raises(TConstQualifierMismatchException):
        Type(T.TYPE_INT).param_match(given, ERR)


def test_dominant_prefers_pointer():
    p = ptr(T.TYPE_CHAR)
    assert dominant_type(Type(T.TYPE_INT), p) == p
    assert dominant_type(p, Type(T.TYPE_INT)) == p


def test_dominant_prefers_unsigned_and_higher_rank():
    assert dominant_type(Type(T.TYPE_INT), Type(T.TYPE_INT, True)) == Type(T.TYPE_INT, True)
    assert dominant_type(Type(T.TYPE_CHAR), Type(T.TYPE_FLOAT)) == Type(T.TYPE_FLOAT)
    assert dominant_type(Type(T.TYPE_INT), Type(T.TYPE_BOOL)) == Type(T.TYPE_INT)


def test_dominant_of_two_pointers_is_address_type():
    assert dominant_type(ptr(T.TYPE_INT), ptr(T.TYPE_CHAR)) == mem_addr_type()
    assert mem_addr_type() == Type(T.TYPE_INT, True)