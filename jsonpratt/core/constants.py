"""
Common constants used across the jsonpratt library.
"""

# Whitespace is skipped between tokens unless the caller says otherwise
DEFAULT_IGNORE_PATTERN = r"\s+"

# Token types spelled only with punctuation need no pattern of their own
LITERAL_SYMBOL_PATTERN = r"[^\w\s]+"

# Characters of offending input quoted in tokenizer errors
ERROR_SNIPPET_LENGTH = 10

# Precedence of a token type that is absent from the precedence table
NO_PRECEDENCE = 0

# Precedence level names that may stand for no token type
DEFAULT_PSEUDO_LEVELS = ("unary",)
