"""
Configuration and limits for jsonpratt parsing.

This module defines resource limits and error reporting options. A parser
reads its configuration once, at construction.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ParseLimits:
    """Resource limits that bound the work a single parse may do."""

    max_input_size: int = 1024 * 1024
    max_depth: int = 100

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_depth <= 0:
            raise ValueError("max_depth must be positive")


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""

    include_position: bool = True
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for jsonpratt parsing."""

    limits: Optional[ParseLimits] = None
    error_reporting: Optional[ErrorReporting] = None

    def __post_init__(self) -> None:
        if self.limits is None:
            self.limits = ParseLimits()
        if self.error_reporting is None:
            self.error_reporting = ErrorReporting()

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.limits is not None
        return self.limits.max_input_size

    @property
    def max_depth(self) -> int:
        """Maximum nesting of sub-expression parses."""
        assert self.limits is not None
        return self.limits.max_depth

    @property
    def include_position(self) -> bool:
        """Whether to include position information in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_position

    @property
    def include_context(self) -> bool:
        """Whether to include the offending source line in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @classmethod
    def terse(cls) -> "ParseConfig":
        """Create a configuration whose errors carry only a message."""
        return cls(
            error_reporting=ErrorReporting(
                include_position=False,
                include_context=False,
            )
        )
