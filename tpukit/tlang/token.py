"""Token kinds produced by the lexer and predicates over them."""

from dataclasses import dataclass
from enum import Enum, auto

from .errors import ErrInfo, TDevException


class TokenType(Enum):
    RETURN = auto()
    SEMICOLON = auto()
    IDENTIFIER = auto()
    IF = auto()
    ELSE_IF = auto()
    ELSE = auto()
    WHILE = auto()
    FOR = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    LBRACE = auto()
    RBRACE = auto()
    TYPE_INT = auto()
    TYPE_FLOAT = auto()
    TYPE_CHAR = auto()
    TYPE_BOOL = auto()
    LIT_INT = auto()
    LIT_FLOAT = auto()
    LIT_BOOL = auto()
    LIT_CHAR = auto()
    LIT_STRING = auto()
    VOID = auto()
    BLOCK_COMMENT_START = auto()
    BLOCK_COMMENT_END = auto()
    COMMA = auto()
    UNSIGNED = auto()
    SIGNED = auto()
    CONST = auto()
    OP_LT = auto()
    OP_LTE = auto()
    OP_GT = auto()
    OP_GTE = auto()
    OP_LSHIFT = auto()
    OP_RSHIFT = auto()
    OP_ADD = auto()
    OP_SUB = auto()
    ASTERISK = auto()
    OP_DIV = auto()
    OP_MOD = auto()
    OP_BIT_OR = auto()
    AMPERSAND = auto()
    OP_BIT_NOT = auto()
    OP_BIT_XOR = auto()
    OP_BOOL_OR = auto()
    OP_BOOL_AND = auto()
    OP_BOOL_NOT = auto()
    OP_EQ = auto()
    OP_NEQ = auto()
    SIZEOF = auto()
    ASM = auto()
    ASM_LOAD_AX = auto()
    ASM_LOAD_BX = auto()
    ASM_LOAD_CX = auto()
    ASM_LOAD_DX = auto()
    ASM_READ_AX = auto()
    ASM_READ_BX = auto()
    ASM_READ_CX = auto()
    ASM_READ_DX = auto()
    ASSIGN = auto()


@dataclass(frozen=True)
class Token:
    """A lexed token with its source location."""

    err: ErrInfo
    raw: str
    type: TokenType


T = TokenType

_PRIMITIVES = frozenset({T.TYPE_BOOL, T.TYPE_CHAR, T.TYPE_FLOAT, T.TYPE_INT})
_SIGNEDNESS = frozenset({T.UNSIGNED, T.SIGNED})
_TYPE_KEYWORDS = _PRIMITIVES | _SIGNEDNESS | {T.VOID, T.CONST}
_UNARY_OPS = frozenset({T.OP_BOOL_NOT, T.OP_ADD, T.OP_SUB, T.OP_BIT_NOT, T.SIZEOF})
_BINARY_OPS = frozenset({
    T.OP_LT, T.OP_LTE, T.OP_GT, T.OP_GTE, T.OP_LSHIFT, T.OP_RSHIFT,
    T.OP_ADD, T.OP_SUB, T.ASTERISK, T.OP_DIV, T.OP_MOD,
    T.OP_BIT_OR, T.AMPERSAND, T.OP_BIT_XOR, T.OP_BOOL_OR, T.OP_BOOL_AND,
    T.OP_EQ, T.OP_NEQ, T.ASSIGN,
})
_LITERALS = frozenset({T.LIT_BOOL, T.LIT_CHAR, T.LIT_FLOAT, T.LIT_INT, T.VOID})
_COMP_OPS = frozenset({
    T.OP_LT, T.OP_LTE, T.OP_GT, T.OP_GTE, T.OP_BIT_OR, T.AMPERSAND,
    T.OP_BIT_XOR, T.OP_BOOL_OR, T.OP_BOOL_AND, T.OP_EQ, T.OP_NEQ,
})
_PROTECTED_ASM = frozenset({
    T.ASM_LOAD_AX, T.ASM_LOAD_BX, T.ASM_LOAD_CX, T.ASM_LOAD_DX,
    T.ASM_READ_AX, T.ASM_READ_BX, T.ASM_READ_CX, T.ASM_READ_DX,
})
_SIZES = {T.TYPE_INT: 2, T.TYPE_FLOAT: 2, T.TYPE_CHAR: 1, T.TYPE_BOOL: 1, T.VOID: 0}


def is_token_primitive_type(token_type: TokenType, allow_void: bool = False) -> bool:
    """True for int, float, char and bool, and for void if allowed."""
    return token_type in _PRIMITIVES or (allow_void and token_type is T.VOID)


def is_token_signed_unsigned(token_type: TokenType) -> bool:
    return token_type in _SIGNEDNESS


def is_token_type_keyword(token_type: TokenType) -> bool:
    """True for primitives, void, signed, unsigned and const."""
    return token_type in _TYPE_KEYWORDS


def is_token_unary_op(token_type: TokenType) -> bool:
    return token_type in _UNARY_OPS


def is_token_binary_op(token_type: TokenType) -> bool:
    return token_type in _BINARY_OPS


def is_token_literal(token_type: TokenType) -> bool:
    return token_type in _LITERALS


def is_token_comp_op(token_type: TokenType) -> bool:
    return token_type in _COMP_OPS


def is_token_assign_op(token_type: TokenType) -> bool:
    return token_type is T.ASSIGN


def is_token_protected_asm(token_type: TokenType) -> bool:
    return token_type in _PROTECTED_ASM


def size_of_type(token_type: TokenType) -> int:
    """Return the size in bytes of a primitive type."""
    try:
        return _SIZES[token_type]
    except KeyError:
        raise TDevException("Invalid type passed to getSizeOfType.") from None