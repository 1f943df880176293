"""
jsonpratt JSON Expression Interpreter.

A reference language built on the Pratt engine: arithmetic, comparisons,
logic, membership, member access, indexing, slicing and calls over
JSON-like values.
"""

from .language import (
    INFIX_RULES,
    PATTERNS,
    PRECEDENCE,
    PREFIX_RULES,
    TOKENS,
    create_interpreter,
    evaluate,
)
from .values import is_truthy, values_equal

__all__ = [
    'create_interpreter', 'evaluate',
    'PATTERNS', 'TOKENS', 'PRECEDENCE', 'PREFIX_RULES', 'INFIX_RULES',
    'is_truthy', 'values_equal'
]
