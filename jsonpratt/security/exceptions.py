"""
Exception classes and error reporting for jsonpratt.

Every failure surfaces as a subclass of PrattError. The parser never
recovers from an error: the first one raised aborts the parse and reaches
the caller unchanged.
"""

# pylint: disable=redefined-builtin

from typing import Optional

from ..core.error_handling import ErrorContext, ErrorContextBuilder
from ..utils.config import ErrorReporting


class PrattError(Exception):
    """Base exception for jsonpratt errors."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location, context and suggestions."""
        msg = self.message

        if self.context is not None:
            msg += f" at line {self.context.line}, column {self.context.column}"
        elif self.position is not None:
            msg += f" at position {self.position}"

        if self.context is not None and self.context.line_text:
            msg += "\n\nContext:"
            msg += f"\n  {self.context.line_text}"
            msg += f"\n  {self.context.column_indicator}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class SyntaxError(PrattError):
    """Raised for malformed input and invalid parser configuration."""


class InterpreterError(PrattError):
    """Raised by rule handlers when an expression is well formed but meaningless."""


class SecurityError(PrattError):
    """Raised when a parse exceeds the configured resource limits."""


class ErrorReporter:
    """Creates errors that carry position and context for one source text."""

    def __init__(self, text: str, settings: Optional[ErrorReporting] = None):
        self.text = text
        self.settings = settings or ErrorReporting()

    def create_error(
        self,
        error_class: type[PrattError],
        message: str,
        position: Optional[int] = None,
        suggestions: Optional[list[str]] = None,
    ) -> PrattError:
        """Create an error of the given class positioned in the source text."""
        if position is None or not self.settings.include_position:
            return error_class(message, suggestions=suggestions)

        context = None
        if self.settings.include_context:
            context = ErrorContextBuilder.build_context(
                position, self.text, self.settings.max_error_context
            )
        return error_class(
            message, position=position, context=context, suggestions=suggestions
        )

    def create_syntax_error(
        self,
        message: str,
        position: Optional[int] = None,
        suggestions: Optional[list[str]] = None,
    ) -> PrattError:
        """Create a SyntaxError with appropriate context."""
        return self.create_error(SyntaxError, message, position, suggestions)

    def create_interpreter_error(
        self, message: str, position: Optional[int] = None
    ) -> PrattError:
        """Create an InterpreterError with appropriate context."""
        return self.create_error(InterpreterError, message, position)
