import pytest

from tpukit.tlang.errors import ErrInfo, TDevException
from tpukit.tlang.token import (
    Token,
    TokenType,
    is_token_assign_op,
    is_token_binary_op,
    is_token_comp_op,
    is_token_literal,
    is_token_primitive_type,
    is_token_protected_asm,
    is_token_signed_unsigned,
    is_token_type_keyword,
    is_token_unary_op,
    size_of_type,
)


def test_primitive_type_void_only_when_allowed():
    assert is_token_primitive_type(TokenType.TYPE_INT)
    assert not is_token_primitive_type(TokenType.VOID)
    assert is_token_primitive_type(TokenType.VOID, True)
    assert not is_token_primitive_type(TokenType.LIT_INT, True)


def test_signedness_and_keywords():
    assert is_token_signed_unsigned(TokenType.UNSIGNED)
    assert is_token_signed_unsigned(TokenType.SIGNED)
    assert not is_token_signed_unsigned(TokenType.CONST)
    assert is_token_type_keyword(TokenType.CONST)
    assert is_token_type_keyword(TokenType.VOID)
    assert not is_token_type_keyword(TokenType.IDENTIFIER)


def test_add_and_sub_are_both_unary_and_binary():
    for t in (TokenType.OP_ADD, TokenType.OP_SUB):
        assert is_token_unary_op(t)
        assert is_token_binary_op(t)
    assert is_token_unary_op(TokenType.SIZEOF)
    assert not is_token_binary_op(TokenType.OP_BIT_NOT)


def test_literals_and_comparisons():
    assert is_token_literal(TokenType.VOID)
    assert not is_token_literal(TokenType.LIT_STRING)
    assert is_token_comp_op(TokenType.AMPERSAND)
    assert not is_token_comp_op(TokenType.OP_ADD)


def test_assign_and_protected_asm():
    assert is_token_assign_op(TokenType.ASSIGN)
    assert not is_token_assign_op(TokenType.OP_EQ)
    assert is_token_protected_asm(TokenType.ASM_READ_DX)
    assert not is_token_protected_asm(TokenType.ASM)


@pytest.mark.parametrize(
    "token_type, size",
    [
        (TokenType.TYPE_INT, 2),
        (TokenType.TYPE_FLOAT, 2),
        (TokenType.TYPE_CHAR, 1),
        (TokenType.TYPE_BOOL, 1),
        (TokenType.VOID, 0),
    ],
)
def test_size_of_type(token_type, size):
    assert size_of_type(token_type) == size


def test_size_of_non_type_raises():
    with pytest.raises(TDevException):
        size_of_type(TokenType.IDENTIFIER)


def test_token_holds_its_fields():
    err = ErrInfo(1, 2, "f.t")
    tok = Token(err, "x", TokenType.IDENTIFIER)
    assert tok.raw == "x"
    assert tok.type is TokenType.IDENTIFIER
    assert tok.err == err