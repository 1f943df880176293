"""
jsonpratt Error and Limits System.

This module provides the exception hierarchy and resource limits.
"""

from .exceptions import (  # pylint: disable=redefined-builtin
    ErrorReporter,
    InterpreterError,
    PrattError,
    SecurityError,
    SyntaxError,
)
from .limits import LimitValidator

__all__ = [
    'PrattError', 'SyntaxError', 'InterpreterError', 'SecurityError',
    'ErrorReporter', 'LimitValidator'
]
