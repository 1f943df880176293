"""
jsonpratt - configurable Pratt expression parser with a JSON expression interpreter.

The engine combines a regex-driven tokenizer with a table-driven
precedence-climbing parser. Callers supply the token patterns, the
precedence levels and the prefix/infix rules; the engine supplies the
parse loop.

Quick Start:
    # Evaluate a JSON expression
    import jsonpratt
    jsonpratt.evaluate("a.b[0] * 2", {"a": {"b": [21]}})  # 42.0

    # Build your own language
    from jsonpratt import PrattParser
    parser = PrattParser(
        patterns={"number": "[0-9]+"},
        tokens=["+", "number"],
        precedence=[["+"]],
        prefix_rules={"number": lambda token, context: int(token.value)},
        infix_rules={"+": lambda left, token, context: left + context.parse("+")},
    )
    parser.parse("1 + 2")  # 3
"""

from .core.engine import Context, PrattParser, PrecedenceTable
from .core.tokenizer import Token, Tokenizer
from .interpreter.language import create_interpreter, evaluate
from .security.exceptions import (  # pylint: disable=redefined-builtin
    InterpreterError,
    PrattError,
    SecurityError,
    SyntaxError,
)
from .utils.config import ErrorReporting, ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "jsonpratt contributors"

__all__ = [
    # Engine
    "PrattParser", "Context", "PrecedenceTable", "Tokenizer", "Token",
    # Reference interpreter
    "create_interpreter", "evaluate",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ErrorReporting",
    # Exception classes
    "PrattError", "SyntaxError", "InterpreterError", "SecurityError",
]
