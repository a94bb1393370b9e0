# tpukit

Building blocks for a small 16-bit processor (the TPU) and for the front end
of the T language compiler that targets it.

## What is inside

- `tpukit.memory_map` – the fixed memory layout of the machine as constants
  (`RESERVED_*`, `CALLSTACK_*`, `DATA_*`, `TEXT_*`, `STACK_*`, `HEAP_*`,
  `INSTRUCTION_PTR_START`, `CLOCK_FREQ_HZ`), reserved label names, and string
  helpers: `trim_string`, `escape_char`, `escape_string`,
  `is_reserved_kernel_func_label` and `does_file_exist`.
- `tpukit.byte.Byte` – an immutable 8-bit value with bit access
  (`byte[i]`), `int()` conversion and two-digit hexadecimal `str()`.
- `tpukit.word.Word` – a mutable 16-bit value with `lower` and `upper` byte
  properties, bit access, `Word.from_bytes(lower, upper)`, and
  `increment()` / `decrement()` that wrap at 16 bits and return the previous
  value.
- `tpukit.tlang.errors` – `ErrInfo` (file, line, column) and the compiler's
  error classes, all derived from `TException`.
- `tpukit.tlang.token` – `TokenType`, `Token` and predicates such as
  `is_token_type_keyword`, `is_token_binary_op` and `size_of_type`.
- `tpukit.tlang.toolbox` – identifier character checks,
  `find_closing_paren`, `find_closing_brace` and `delimit_indices` over token
  lists.
- `tpukit.tlang.ttype` – the `Type` model: pointers, array hints, sizes,
  parameter matching (`param_match`, returning a `ParamMatch`) and
  `dominant_type`.
- `tpukit.tlang.scope` – `Scope`, which lays out variables byte by byte for
  code generation.
- `tpukit.tlang.scope_stack` – the parser's scopes: `ParserScope`,
  `ParserVariable`, `ParserFunction` with overload resolution, and
  `pop_scope_stack` with optional pruning controlled by `ParserConfig`.
- `tpukit.tlang.preprocessor` – `break_keywords`, `replace_macrodefs` and a
  `Preprocessor` that handles `#define` and `#include` lines, handing included
  files to a tokenizer you supply.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from tpukit.word import Word
from tpukit.tlang.token import TokenType
from tpukit.tlang.ttype import Type
from tpukit.tlang.preprocessor import replace_macrodefs

reg = Word(0x1234)
reg.lower = 0xFF
print(reg)                                # 12FF

arr = Type(TokenType.TYPE_INT)
arr.add_hint_pointer(4)
print(arr.size_bytes())                   # 8

print(replace_macrodefs("int x = SIZE;", {"SIZE": "10"}))   # int x = 10;
```

## What this package does not do

The package has no processor model: there is no register file, no
instruction decoding and no execution of programs. Of the compiler it holds
only supporting pieces; there is no lexer, parser, abstract syntax tree or
code generator, and no command-line tool. `Preprocessor` needs a tokenizer
function passed in to process included files.