"""
Pratt parser engine for jsonpratt - precedence climbing over caller-supplied rules.

The engine knows nothing about the language it parses. Each token type may
own a prefix rule, called when the token starts an expression, and an infix
rule, called when the token continues one. Rules receive the parse Context
and call ``context.parse(precedence)`` to read sub-expressions, which is how
grouping, unary operators and associativity are expressed.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..security.exceptions import (  # pylint: disable=redefined-builtin
    ErrorReporter,
    PrattError,
    SyntaxError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig, ParseLimits
from .constants import DEFAULT_PSEUDO_LEVELS, NO_PRECEDENCE
from .tokenizer import Token, Tokenizer

logger = logging.getLogger(__name__)

V = TypeVar("V")

PrefixRule = Callable[[Token, "Context[Any]"], Any]
InfixRule = Callable[[Any, Token, "Context[Any]"], Any]
Precedence = Union[int, str, None]


class PrecedenceTable:
    """Ranks token types by binding power.

    Levels are listed lowest first and the types in level ``i`` have
    precedence ``i + 1``. A level holding only one of ``pseudo_levels`` is a
    pseudo-level: nothing binds at it, but rules can recurse at its rank
    (``context.parse("unary")``). Any other name must be a token type.
    """

    def __init__(
        self,
        levels: Sequence[Sequence[str]],
        token_types: Sequence[str],
        pseudo_levels: Sequence[str] = DEFAULT_PSEUDO_LEVELS,
    ):
        known = set(token_types)
        pseudo = set(pseudo_levels) - known
        ranks: dict[str, int] = {}

        for index, level in enumerate(levels):
            names = [level] if isinstance(level, str) else list(level)
            if not names:
                raise SyntaxError(f"precedence level {index} is empty")
            for name in names:
                if name not in known and name not in pseudo:
                    raise SyntaxError(
                        f"precedence level {index} references unknown token type {name}"
                    )
                if name in pseudo and len(names) > 1:
                    raise SyntaxError(
                        f"pseudo-level {name} must be alone in precedence level {index}"
                    )
                if name in ranks:
                    raise SyntaxError(f"{name} appears in more than one precedence level")
                ranks[name] = index + 1

        self._ranks = MappingProxyType(ranks)

    def __len__(self) -> int:
        return len(set(self._ranks.values()))

    def rank(self, token_type: str) -> int:
        """Binding power of a token type; types outside the table never bind."""
        return self._ranks.get(token_type, NO_PRECEDENCE)

    def resolve(self, precedence: Precedence) -> int:
        """Turn a level name, a rank or None into a rank."""
        if precedence is None:
            return NO_PRECEDENCE
        if isinstance(precedence, str):
            if precedence not in self._ranks:
                raise SyntaxError(f"unknown precedence level {precedence}")
            return self._ranks[precedence]
        return precedence


class Context(Generic[V]):
    """Mutable state of one parse, threaded through every rule it calls.

    The context owns the token stream, so it must not be shared between
    parses. The cursor only moves forward.
    """

    def __init__(
        self,
        parser: "PrattParser[V]",
        source: str,
        tokens: Iterator[Token],
        bindings: Mapping[str, Any],
        reporter: ErrorReporter,
        validator: LimitValidator,
    ):
        self.parser = parser
        self.source = source
        self.bindings = bindings
        self.reporter = reporter
        self._tokens = tokens
        self._validator = validator
        self._lookahead: Optional[Token] = None
        self._exhausted = False

    def peek(self) -> Optional[Token]:
        """Look at the next token without consuming it."""
        if self._lookahead is None and not self._exhausted:
            self._lookahead = next(self._tokens, None)
            if self._lookahead is None:
                self._exhausted = True
        return self._lookahead

    def _advance(self) -> Optional[Token]:
        token = self.peek()
        self._lookahead = None
        return token

    def attempt(self, *token_types: str) -> Optional[Token]:
        """Consume the next token if it is one of the given types (or any, if none given)."""
        token = self.peek()
        if token is None:
            return None
        if token_types and token.type not in token_types:
            return None
        return self._advance()

    def require(self, *token_types: str) -> Token:
        """Consume the next token, failing unless it is one of the given types."""
        token = self._advance()
        if token is None:
            raise self.syntax_error("unexpected end of input")
        if token_types and token.type not in token_types:
            expected = " or ".join(token_types)
            raise self.syntax_error(f"found {token.type}, expected {expected}", token)
        return token

    def precedence_of(self, name: str) -> int:
        """Rank of a token type or pseudo-level."""
        return self.parser.precedence.resolve(name)

    def syntax_error(self, message: str, token: Optional[Token] = None) -> PrattError:
        """Build a SyntaxError pointing at a token, or at the end of input."""
        position = token.position if token is not None else len(self.source)
        return self.reporter.create_syntax_error(message, position)

    def parse(self, precedence: Precedence = None) -> V:
        """Parse an expression whose operators bind tighter than ``precedence``."""
        min_precedence = self.parser.precedence.resolve(precedence)
        try:
            self._validator.enter_expression()
            return self._parse_expression(min_precedence)
        finally:
            self._validator.exit_expression()

    def _parse_expression(self, min_precedence: int) -> V:
        token = self._advance()
        if token is None:
            raise self.reporter.create_syntax_error(
                "unexpected end of input",
                len(self.source),
                ["Check for a missing operand or an unclosed bracket"],
            )

        prefix = self.parser.prefix_rules.get(token.type)
        if prefix is None:
            raise self.syntax_error(f"no prefix rule for token {token.type}", token)
        left = prefix(token, self)

        while True:
            token = self.peek()
            if token is None:
                break
            if self.parser.precedence.rank(token.type) <= min_precedence:
                break
            self._advance()

            infix = self.parser.infix_rules.get(token.type)
            if infix is None:
                raise self.syntax_error(f"no infix rule for token {token.type}", token)
            left = infix(left, token, self)

        return left


class PrattParser(Generic[V]):
    """Operator-precedence parser assembled from token patterns and rule tables.

    The tables are frozen at construction, so one parser may serve any number
    of parses, including concurrent ones; each parse gets its own Context.
    """

    def __init__(
        self,
        ignore: Optional[str] = None,
        patterns: Optional[Mapping[str, str]] = None,
        tokens: Sequence[str] = (),
        precedence: Sequence[Sequence[str]] = (),
        prefix_rules: Optional[Mapping[str, PrefixRule]] = None,
        infix_rules: Optional[Mapping[str, InfixRule]] = None,
        config: Optional[ParseConfig] = None,
        pseudo_levels: Sequence[str] = DEFAULT_PSEUDO_LEVELS,
    ):
        self.config = config or ParseConfig()
        try:
            self.tokenizer = Tokenizer(
                ignore, patterns or {}, tokens, self.config.error_reporting
            )
            self.precedence = PrecedenceTable(
                precedence, self.tokenizer.token_types, pseudo_levels
            )
            self.prefix_rules = self._check_rules("prefix", prefix_rules or {})
            self.infix_rules = self._check_rules("infix", infix_rules or {})
        except SyntaxError as e:
            logger.debug("Rejected parser configuration: %s", e.message)
            raise

        logger.debug(
            "Built Pratt parser: %d token types, %d precedence levels, "
            "%d prefix rules, %d infix rules",
            len(self.tokenizer.token_types),
            len(self.precedence),
            len(self.prefix_rules),
            len(self.infix_rules),
        )

    def _check_rules(
        self, kind: str, rules: Mapping[str, Callable[..., Any]]
    ) -> Mapping[str, Callable[..., Any]]:
        for token_type, rule in rules.items():
            if token_type not in self.tokenizer.token_types:
                raise SyntaxError(f"{kind} rule given for unknown token type {token_type}")
            if not callable(rule):
                raise SyntaxError(f"{kind} rule for token {token_type} is not callable")
        return MappingProxyType(dict(rules))

    def _new_context(
        self, source: str, offset: int, bindings: Optional[Mapping[str, Any]]
    ) -> Context[V]:
        validator = LimitValidator(self.config.limits or ParseLimits())
        validator.validate_input_size(source)
        return Context(
            self,
            source,
            self.tokenizer.tokenize(source, offset),
            bindings if bindings is not None else {},
            ErrorReporter(source, self.config.error_reporting),
            validator,
        )

    def parse(
        self,
        source: str,
        bindings: Optional[Mapping[str, Any]] = None,
        min_precedence: Precedence = 0,
    ) -> V:
        """Parse the longest expression at the start of source.

        Parsing stops quietly at the first token that cannot continue the
        expression; trailing input is left unread.
        """
        context = self._new_context(source, 0, bindings)
        return context.parse(min_precedence)

    def parse_complete(
        self, source: str, bindings: Optional[Mapping[str, Any]] = None
    ) -> V:
        """Parse source as a single expression, rejecting trailing input."""
        context = self._new_context(source, 0, bindings)
        result = context.parse()
        leftover = context.attempt()
        if leftover is not None:
            raise context.syntax_error(f"unexpected token {leftover.type}", leftover)
        return result

    def parse_until_terminator(
        self,
        source: str,
        offset: int,
        terminator: str,
        bindings: Optional[Mapping[str, Any]] = None,
    ) -> tuple[V, int]:
        """Parse an expression embedded in source, ending at a terminator token.

        Returns the value and the offset just past the terminator, for
        callers that interleave expressions with other text (``${a + b}``).
        """
        if terminator not in self.tokenizer.token_types:
            raise SyntaxError(f"unknown terminator token type {terminator}")
        context = self._new_context(source, offset, bindings)
        result = context.parse()
        token = context.require(terminator)
        return result, token.position + len(token.value)
