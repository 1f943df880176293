"""
jsonpratt Core Parsing Engine.

This module provides the tokenizer and the generic Pratt parser.
"""

from .engine import Context, PrattParser, PrecedenceTable
from .tokenizer import Token, Tokenizer, is_literal_symbol

__all__ = [
    'PrattParser', 'Context', 'PrecedenceTable',
    'Tokenizer', 'Token', 'is_literal_symbol'
]
