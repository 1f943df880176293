"""
Tokenizer for jsonpratt - splits expression source into typed tokens.

Token types are tried in the order they are declared and the first match
wins, so more specific types must come first: ``**`` before ``*`` and
keywords before ``identifier``.
"""

import re
from collections.abc import Iterator, Mapping, Sequence
from typing import NamedTuple, Optional

from ..security.exceptions import (  # pylint: disable=redefined-builtin
    ErrorReporter,
    SyntaxError,
)
from ..utils.config import ErrorReporting
from .constants import (
    DEFAULT_IGNORE_PATTERN,
    ERROR_SNIPPET_LENGTH,
    LITERAL_SYMBOL_PATTERN,
)

_LITERAL_SYMBOL_RE = re.compile(LITERAL_SYMBOL_PATTERN)


class Token(NamedTuple):
    """Token with type, matched text and source offset."""

    type: str
    value: str
    position: int


def is_literal_symbol(token_type: str) -> bool:
    """Whether a token type is spelled out by its own name, like ``**`` or ``(``."""
    return _LITERAL_SYMBOL_RE.fullmatch(token_type) is not None


def _compile(token_type: str, pattern: str) -> "re.Pattern[str]":
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise SyntaxError(
            f"invalid pattern for token {token_type}: {e}"
        ) from e
    if regex.match("") is not None:
        raise SyntaxError(f"pattern for token {token_type} matches the empty string")
    return regex


class Tokenizer:
    """Lexical analyzer driven by a table of regular expressions."""

    def __init__(
        self,
        ignore: Optional[str],
        patterns: Mapping[str, str],
        tokens: Sequence[str],
        error_reporting: Optional[ErrorReporting] = None,
    ) -> None:
        self.token_types = tuple(tokens)
        self.error_reporting = error_reporting

        seen: set[str] = set()
        for token_type in self.token_types:
            if token_type in seen:
                raise SyntaxError(f"duplicate token type {token_type}")
            seen.add(token_type)

        for token_type in patterns:
            if token_type not in seen:
                raise SyntaxError(f"pattern given for undeclared token type {token_type}")

        matchers = []
        for token_type in self.token_types:
            if token_type in patterns:
                matchers.append((token_type, _compile(token_type, patterns[token_type])))
            elif is_literal_symbol(token_type):
                matchers.append((token_type, re.compile(re.escape(token_type))))
            else:
                raise SyntaxError(f"no pattern for token type {token_type}")
        self._matchers = tuple(matchers)

        if ignore is None:
            ignore = DEFAULT_IGNORE_PATTERN
        try:
            self._ignore: Optional["re.Pattern[str]"] = (
                re.compile(ignore) if ignore else None
            )
        except re.error as e:
            raise SyntaxError(f"invalid ignore pattern: {e}") from e

    def _skip_ignored(self, text: str, pos: int) -> int:
        """Skip text matched by the ignore pattern, as often as it applies."""
        if self._ignore is None:
            return pos
        while pos < len(text):
            match = self._ignore.match(text, pos)
            if match is None or match.end() == pos:
                break
            pos = match.end()
        return pos

    def tokenize(self, text: str, offset: int = 0) -> Iterator[Token]:
        """Lazily tokenize text, starting at the given offset.

        The generator cannot be rewound; call tokenize again to start over.
        """
        reporter = ErrorReporter(text, self.error_reporting)
        pos = offset

        while True:
            pos = self._skip_ignored(text, pos)
            if pos >= len(text):
                return

            for token_type, regex in self._matchers:
                match = regex.match(text, pos)
                if match is None:
                    continue
                if match.end() == pos:
                    raise reporter.create_syntax_error(
                        f"pattern for token {token_type} matched the empty string", pos
                    )
                yield Token(token_type, match.group(0), pos)
                pos = match.end()
                break
            else:
                snippet = text[pos:pos + ERROR_SNIPPET_LENGTH]
                raise reporter.create_syntax_error(f"unexpected input {snippet!r}", pos)

    def get_all_tokens(self, text: str) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize(text))
