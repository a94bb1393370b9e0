"""Source positions and the compiler's error types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrInfo:
    """Where a token came from in its original file."""

    line: int
    col: int
    file: str

    def trace(self) -> str:
        """Return the location as an indented ``file:line:col`` line."""
        return f"\n  {self.file}:{self.line}:{self.col}"


class TException(Exception):
    """Base class of every error the compiler reports for user source."""

    def __init__(self, err: ErrInfo, msg: str = None):
        self.err = err
        self.msg = msg if msg is not None else self._default_message()
        super().__init__(self.msg)

    def _default_message(self) -> str:
        if type(self) is TException:
            return "Base TException."
        return f"{type(self).__name__[1:]} {self.err.trace()}"

    def trace(self) -> str:
        return self.err.trace()

    def __str__(self) -> str:
        return self.msg


class TUnclosedGroupException(TException):
    """A bracket, brace or parenthesis is never closed."""


class TZeroDivException(TException):
    """Division by a constant zero."""


class TInvalidTokenException(TException):
    """A token appears where it is not allowed."""


class TUnclosedQuoteException(TException):
    """A string or character literal is never closed."""


class TInvalidEscapeException(TException):
    """An escape sequence is not recognised."""


class TUnclosedCommentException(TException):
    """A block comment is never closed."""


class TUnknownIdentifierException(TException):
    """An identifier is used before it is declared."""


class TUnknownFunctionException(TException):
    """A function is called that does not exist."""


class TIdentifierInUseException(TException):
    """A name is declared twice in the same scope."""


class TTypeInferException(TException):
    """The type of an expression cannot be inferred."""


class TInvalidOperationException(TException):
    """An operation is applied to operands that do not support it."""


class TSyntaxException(TException):
    """Malformed source."""


class TVoidReturnException(TException):
    """A void function returns a value."""


class TMissingReturnException(TException):
    """A non-void function does not return a value."""


class TIllegalArraySizeException(TException):
    """An array size is missing or invalid."""


class TIllegalImplicitCastException(TException):
    """A value cannot be converted implicitly."""


class TExpressionEvalException(TException):
    """An expression does not reduce to a single value."""


class TIllegalMacroDefinitionException(TException):
    """A ``#define`` line is malformed."""


class TInvalidMacroIncludeException(TException):
    """An ``#include`` line is malformed or names a missing file."""


class TIllegalVoidUseException(TException):
    """A void value is used where a value is needed."""


class TConstQualifierMismatchException(TException):
    """A const qualifier would be discarded implicitly."""


class TConstAssignmentException(TException):
    """A const value is assigned to."""


class TAmbiguousFunctionResolutionException(TException):
    """Several overloads match a call equally well."""


class TFunctionParameterMismatchException(TException):
    """No overload accepts the given arguments."""


class TDevException(TException):
    """An internal error of the compiler itself."""

    def __init__(self, msg: str):
        super().__init__(ErrInfo(0, 0, "<core>"), msg)