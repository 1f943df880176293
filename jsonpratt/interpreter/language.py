"""
The JSON expression language, assembled from the generic Pratt engine.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Optional

from ..core.constants import DEFAULT_IGNORE_PATTERN
from ..core.engine import PrattParser
from ..utils.config import ParseConfig
from . import handlers

PATTERNS = {
    "number": r"[0-9]+(?:\.[0-9]+)?",
    "identifier": r"[a-zA-Z_][a-zA-Z_0-9]*",
    "string": r"'[^']*'|\"[^\"]*\"",
    # Keywords must not match the start of a longer identifier, e.g. `insinuations`
    "true": r"true(?![a-zA-Z_0-9])",
    "false": r"false(?![a-zA-Z_0-9])",
    "in": r"in(?![a-zA-Z_0-9])",
    "null": r"null(?![a-zA-Z_0-9])",
}

# Declaration order is match order
TOKENS = [
    "**", "+", "-", "*", "/", "[", "]", ".", "(", ")", "{", "}", ":", ",",
    ">=", "<=", "<", ">", "==", "!=", "!", "&&", "||",
    "true", "false", "in", "null", "number", "identifier", "string",
]

PRECEDENCE = [
    ["||"],
    ["&&"],
    ["in"],
    ["==", "!="],
    [">=", "<=", "<", ">"],
    ["+", "-"],
    ["*", "/"],
    ["**"],
    ["[", "."],
    ["("],
    ["unary"],
]

PREFIX_RULES = {
    "number": handlers.parse_number,
    "string": handlers.parse_string,
    "true": handlers.parse_true,
    "false": handlers.parse_false,
    "null": handlers.parse_null,
    "identifier": handlers.parse_identifier,
    "-": handlers.unary_minus,
    "+": handlers.unary_plus,
    "!": handlers.logical_not,
    "(": handlers.parse_group,
    "[": handlers.parse_array,
    "{": handlers.parse_object,
}

INFIX_RULES = {
    "+": handlers.add,
    "-": handlers.arithmetic,
    "*": handlers.arithmetic,
    "/": handlers.arithmetic,
    "**": handlers.power,
    "<": handlers.compare,
    ">": handlers.compare,
    "<=": handlers.compare,
    ">=": handlers.compare,
    "==": handlers.equality,
    "!=": handlers.equality,
    "&&": handlers.logical,
    "||": handlers.logical,
    "in": handlers.membership,
    ".": handlers.member,
    "[": handlers.subscript,
    "(": handlers.call,
}


def create_interpreter(config: Optional[ParseConfig] = None) -> PrattParser[Any]:
    """Build a parser that evaluates JSON expressions to JSON-like values."""
    return PrattParser(
        ignore=DEFAULT_IGNORE_PATTERN,
        patterns=PATTERNS,
        tokens=TOKENS,
        precedence=PRECEDENCE,
        prefix_rules=PREFIX_RULES,
        infix_rules=INFIX_RULES,
        config=config,
    )


def evaluate(
    expression: str,
    bindings: Optional[Mapping[str, Any]] = None,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Evaluate a JSON expression against the given bindings.

    Args:
        expression: Expression source, e.g. ``"a.b[0] + 1"``
        bindings: Values that identifiers in the expression refer to
        config: Optional limits and error reporting settings

    Returns:
        The value of the expression: None, bool, number, str, list or dict

    Raises:
        SyntaxError: If the expression is malformed or has trailing input
        InterpreterError: If an operator is applied to values it cannot handle
        SecurityError: If the expression exceeds the configured limits
    """
    interpreter = _default_interpreter() if config is None else create_interpreter(config)
    return interpreter.parse_complete(expression, bindings)


@lru_cache(maxsize=None)
def _default_interpreter() -> PrattParser[Any]:
    return create_interpreter()
