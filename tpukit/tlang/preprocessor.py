"""Handling of ``#define`` and ``#include`` lines and macro substitution."""

import sys
from pathlib import Path

from ..memory_map import trim_string
from .errors import TIllegalMacroDefinitionException, TInvalidMacroIncludeException
from .toolbox import is_char_valid_identifier


def break_keywords(line: str) -> list:
    """Split a line on spaces, dropping empty pieces."""
    return [kwd for kwd in line.split(" ") if kwd]


def replace_macrodefs(line: str, macros: dict, offset: int = 0) -> str:
    """Replace every whole-word occurrence of each macro from ``offset`` on."""
    for old, new in sorted(macros.items()):
        i = offset
        while True:
            i = line.find(old, i)
            if i == -1:
                break
            end = i + len(old)
            starts_word = i == 0 or not is_char_valid_identifier(line[i - 1])
            ends_word = (
                end == len(line)
                or line[end].isspace()
                or not is_char_valid_identifier(line[end])
            )
            if starts_word and ends_word:
                line = line[:i] + new + line[end:]
                i = end
            i += 1
    return line


def _default_stdlib_dir() -> Path:
    return Path(sys.argv[0]).resolve().parent / "stdlib"


class Preprocessor:
    """Processes macro lines; included files are handed to ``tokenize``.

    ``tokenize`` is called as ``tokenize(handle, tokens, cwd_stack, filename,
    is_stdlib)`` with the opened file while its directory is on the stack.
    A file is included at most once per preprocessor.
    """

    def __init__(self, tokenize, stdlib_dir=None):
        self.tokenize = tokenize
        self.stdlib_dir = Path(stdlib_dir) if stdlib_dir is not None else _default_stdlib_dir()
        self.included_paths = set()

    def preprocess_line(self, line: str, macros: dict, tokens: list, cwd_stack: list, err) -> bool:
        """Handle a macro line; return True if the line must not be tokenized."""
        line = trim_string(line)
        if not line.startswith("#"):
            return False

        kwds = break_keywords(line)
        macro_type = kwds[0][1:]

        if macro_type == "define":
            if len(kwds) < 3:
                raise TIllegalMacroDefinitionException(err)
            macros[kwds[1]] = " ".join(kwds[2:])
            return True

        if macro_type == "include":
            self._include(kwds, tokens, cwd_stack, err)
            return True

        return False

    def _include(self, kwds, tokens, cwd_stack, err) -> None:
        if len(kwds) != 2:
            raise TInvalidMacroIncludeException(err)
        target = kwds[1]
        if target[0] == '"' and target[-1] == '"':
            is_stdlib = False
        elif target[0] == "<" and target[-1] == ">":
            is_stdlib = True
        else:
            raise TInvalidMacroIncludeException(err)

        in_path = target[1:-1]
        base = self.stdlib_dir if is_stdlib else Path(cwd_stack[-1])
        path = base / in_path

        key = str(path)
        if key in self.included_paths:
            return
        self.included_paths.add(key)

        try:
            handle = open(path, encoding="utf-8")
        except OSError as exc:
            raise TInvalidMacroIncludeException(err) from exc

        with handle:
            cwd_stack.append(path.absolute().parent)
            try:
                self.tokenize(handle, tokens, cwd_stack, path.name, is_stdlib)
            finally:
                cwd_stack.pop()