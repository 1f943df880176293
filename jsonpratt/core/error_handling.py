"""
Common error handling utilities for expression parsing.

This module turns a character offset into line, column and a printable
excerpt of the source so errors can point at the offending input.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorContext:
    """Context information for parsing errors."""

    position: int
    line: int
    column: int
    line_text: str
    column_indicator: str
    context_text: str
    original_text: Optional[str] = None


class ErrorContextBuilder:
    """Builds error context information from a source offset."""

    @staticmethod
    def build_context(
        position: int, original_text: str, context_length: int = 50
    ) -> ErrorContext:
        """Build error context from position and original text."""
        if not original_text:
            return ErrorContext(
                position=position,
                line=1,
                column=position + 1,
                line_text="",
                column_indicator="^",
                context_text="",
                original_text=original_text,
            )

        position = max(0, min(position, len(original_text)))

        # Calculate line and column
        line = original_text[:position].count("\n") + 1
        line_start = original_text.rfind("\n", 0, position) + 1
        line_end = original_text.find("\n", position)
        if line_end == -1:
            line_end = len(original_text)
        column = position - line_start + 1

        # Extract context text
        start = max(0, position - context_length // 2)
        end = min(len(original_text), position + context_length // 2)
        context_text = original_text[start:end]

        return ErrorContext(
            position=position,
            line=line,
            column=column,
            line_text=original_text[line_start:line_end],
            column_indicator=" " * (column - 1) + "^",
            context_text=context_text,
            original_text=original_text,
        )
