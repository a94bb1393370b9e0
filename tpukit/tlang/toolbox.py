"""Character classification and token-scanning helpers for the parser."""

from .errors import TUnclosedGroupException
from .token import TokenType

MEM_ADDR_SIZE = 2


def is_char_valid_identifier(char: str) -> bool:
    """True if the character may appear in an identifier."""
    return len(char) == 1 and char.isascii() and (char.isalnum() or char == "_")


def is_char_valid_identifier_start(char: str) -> bool:
    """True if the character may begin an identifier."""
    return is_char_valid_identifier(char) and not char.isdigit()


def _find_closing(tokens, start, end, opening, closing) -> int:
    open_indices = []
    i = start
    while True:
        kind = tokens[i].type
        if kind is opening:
            open_indices.append(i)
        elif kind is closing:
            if not open_indices:
                raise TUnclosedGroupException(tokens[i].err)
            open_indices.pop()
        i += 1
        if not open_indices or i > end:
            break
    if open_indices:
        raise TUnclosedGroupException(tokens[open_indices[-1]].err)
    return i - 1


def find_closing_paren(tokens, start: int, end: int) -> int:
    """Return the index of the parenthesis closing the one at ``start``."""
    return _find_closing(tokens, start, end, TokenType.LPAREN, TokenType.RPAREN)


def find_closing_brace(tokens, start: int, end: int) -> int:
    """Return the index of the brace closing the one at ``start``."""
    return _find_closing(tokens, start, end, TokenType.LBRACE, TokenType.RBRACE)


def delimit_indices(tokens, start: int, end: int, delimiter=TokenType.COMMA) -> list:
    """Return the indices in ``start..end`` (inclusive) of delimiter tokens."""
    return [
        i for i, tok in enumerate(tokens[start:end + 1], start)
        if tok.type is delimiter
    ]