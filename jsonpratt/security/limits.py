"""
Resource limits for jsonpratt.
This module bounds input size and recursion depth so that hostile input
cannot exhaust memory or the interpreter stack.
"""

from ..utils.config import ParseLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates parsing limits to prevent resource exhaustion attacks."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits
        self.depth = 0

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def enter_expression(self) -> None:
        """Track entering a sub-expression parse and validate depth."""
        self.depth += 1
        if self.depth > self.limits.max_depth:
            raise SecurityError(
                f"Expression depth {self.depth} exceeds limit "
                f"{self.limits.max_depth}"
            )

    def exit_expression(self) -> None:
        """Track leaving a sub-expression parse."""
        if self.depth > 0:
            self.depth -= 1

    def reset(self) -> None:
        """Reset validator state for reuse."""
        self.depth = 0
