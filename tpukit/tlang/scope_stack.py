"""Scopes the parser uses to resolve variables and overloaded functions."""

from dataclasses import dataclass

from .errors import (
    TAmbiguousFunctionResolutionException,
    TFunctionParameterMismatchException,
    TIdentifierInUseException,
    TUnknownFunctionException,
    TUnknownIdentifierException,
)
from .ttype import ParamMatch, Type

FUNC_MAIN_NAME = "main"


@dataclass
class ParserConfig:
    """Whether unused declarations are pruned when a scope is popped."""

    delete_unused_variables: bool = False
    delete_unused_functions: bool = False


class ParserVariable:
    """A declared variable; ``parent`` is a container with ``remove(node)``."""

    def __init__(self, var_type: Type, parent=None, node=None):
        self.type = var_type
        self.is_unused = True
        self.parent = parent
        self.node = node

    def remove(self) -> None:
        """Remove the declaration node from its parent, if it has one."""
        if self.parent is not None:
            self.parent.remove(self.node)


class ParserFunction:
    """A declared function overload."""

    def __init__(self, ret_type: Type, is_main: bool, parent, node, param_types):
        self.type = ret_type
        self.is_unused = True
        self.is_main_function = is_main
        self.parent = parent
        self.node = node
        self.param_types = list(param_types)

    def params_match(self, param_types, err) -> ParamMatch:
        """How well the given argument types fit this overload."""
        if len(param_types) != len(self.param_types):
            return ParamMatch.MISMATCH
        exact = True
        for wanted, given in zip(self.param_types, param_types):
            match = wanted.param_match(given, err)
            if match is ParamMatch.MISMATCH:
                return ParamMatch.MISMATCH
            exact = exact and match is ParamMatch.EXACT
        return ParamMatch.EXACT if exact else ParamMatch.IMPLICIT

    def remove(self) -> None:
        """Remove the function node from its parent unless it is main."""
        if not self.is_main_function:
            self.parent.remove(self.node)


class ParserScope:
    """Variables and function overloads declared in one scope."""

    def __init__(self):
        self.variables = {}
        self.functions = {}

    def is_name_taken(self, name: str) -> bool:
        return name in self.functions or self.is_var_name_taken(name)

    def is_var_name_taken(self, name: str) -> bool:
        return name in self.variables

    def variable(self, name: str):
        """Return the named variable, or None."""
        return self.variables.get(name)


def lookup_parser_variable(scope_stack, name: str, err) -> ParserVariable:
    """Find a variable from the innermost scope outwards and mark it used."""
    for scope in reversed(scope_stack):
        var = scope.variable(name)
        if var is not None:
            var.is_unused = False
            return var
    raise TUnknownIdentifierException(err)


def lookup_parser_function(scope_stack, name: str, err, param_types):
    """Resolve an overload in the global scope.

    Returns the function and whether it matched exactly or implicitly.
    """
    overloads = scope_stack[0].functions.get(name, [])
    if not overloads:
        raise TUnknownFunctionException(err)

    implicit = []
    for func in overloads:
        match = func.params_match(param_types, err)
        if match is ParamMatch.EXACT:
            func.is_unused = False
            return func, ParamMatch.EXACT
        if match is ParamMatch.IMPLICIT:
            implicit.append(func)

    if not implicit:
        raise TFunctionParameterMismatchException(err)
    if len(implicit) > 1:
        raise TAmbiguousFunctionResolutionException(err)
    implicit[0].is_unused = False
    return implicit[0], ParamMatch.IMPLICIT


def declare_parser_variable(scope_stack, name: str, parser_var: ParserVariable, err) -> None:
    """Declare a variable in the innermost scope."""
    scope = scope_stack[-1]
    if scope.is_var_name_taken(name):
        raise TIdentifierInUseException(err)
    scope.variables[name] = parser_var


def declare_parser_function(scope_stack, name: str, parser_func: ParserFunction, param_types, err) -> None:
    """Declare a function overload in the global scope."""
    scope = scope_stack[0]
    for existing in scope.functions.get(name, []):
        if existing.params_match(param_types, err) is ParamMatch.EXACT:
            raise TIdentifierInUseException(err)
    scope.functions.setdefault(name, []).append(parser_func)


def pop_scope_stack(scope_stack, config: ParserConfig = None) -> ParserScope:
    """Pop the innermost scope, pruning unused declarations as configured."""
    config = config or ParserConfig()
    scope = scope_stack[-1]

    if config.delete_unused_variables:
        for _, var in sorted(scope.variables.items(), key=lambda item: item[0]):
            if var.is_unused:
                var.remove()

    if config.delete_unused_functions:
        for _, overloads in sorted(scope.functions.items(), key=lambda item: item[0]):
            for func in overloads:
                if func.is_unused:
                    func.remove()

    return scope_stack.pop()