"""Memory layout, machine constants and small string helpers."""

import os

# Reserved pool for the operating system (2 KiB)
RESERVED_LOWER_ADDR = 0x0000
RESERVED_UPPER_ADDR = 0x07FF

# Call stack (2 KiB)
CALLSTACK_LOWER_ADDR = 0x0800
CALLSTACK_UPPER_ADDR = 0x0FFF

# .data section (2 KiB)
DATA_LOWER_ADDR = 0x1000
DATA_UPPER_ADDR = 0x17FF

# .text section (4 KiB); the first 4 bytes hold the entry jump
TEXT_LOWER_ADDR = 0x1804
TEXT_UPPER_ADDR = 0x27FF
INSTRUCTION_PTR_START = TEXT_LOWER_ADDR - 4

# Stack (4 KiB), grows upwards
STACK_LOWER_ADDR = 0x2800
STACK_UPPER_ADDR = 0x37FF

# Heap (the remaining 50 KiB)
HEAP_LOWER_ADDR = 0x3800
HEAP_UPPER_ADDR = 0xFFFF
HEAP_SIZE = HEAP_UPPER_ADDR - HEAP_LOWER_ADDR + 1

CLOCK_FREQ_HZ = 5_000

T_NULL = 0

TAB = "    "

RESERVED_LABEL_MAIN = "_main"
RESERVED_LABEL_MALLOC = "_malloc"
RESERVED_LABEL_REALLOC = "_realloc"
RESERVED_LABEL_FREE = "_free"

DATA_TYPE_STRZ = ".strz"  # null-terminated string
DATA_TYPE_STR = ".str"  # non-null-terminated string

FUNC_LABEL_PREFIX = "__UF"
FUNC_END_LABEL_SUFFIX = "E"
JMP_LABEL_PREFIX = "__J"
STR_DATA_LABEL_PREFIX = "__US"

_WHITESPACE = " \t\n\v\f\r"

_ESCAPES = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}


def is_reserved_kernel_func_label(label: str) -> bool:
    """Return True if the label names a kernel-provided function."""
    return label in (RESERVED_LABEL_MALLOC, RESERVED_LABEL_FREE, RESERVED_LABEL_REALLOC)


def trim_string(text: str) -> str:
    """Strip ASCII whitespace from both ends of the text."""
    return text.strip(_WHITESPACE)


def escape_char(text: str) -> str:
    """Expand a one-character string or a backslash escape such as ``\\n``.

    Unknown escapes expand to the NUL character.
    """
    if not text:
        raise ValueError("Cannot escape an empty string")
    if len(text) == 1:
        return text
    return _ESCAPES.get(text[1], "\0")


def escape_string(text: str) -> str:
    """Return the text with every backslash escape expanded."""
    out = []
    chars = iter(text)
    for char in chars:
        if char != "\\":
            out.append(char)
            continue
        following = next(chars, None)
        out.append(escape_char(char if following is None else char + following))
    return "".join(out)


def does_file_exist(path) -> bool:
    """Return True if something exists at the path."""
    return os.path.exists(path)