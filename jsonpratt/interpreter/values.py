"""
Helpers for the JSON-like values the interpreter produces.

Values are plain Python objects: None, bool, int or float, str, list and
dict. Booleans are never numbers here, even though Python says they are.
"""

from typing import Any, Optional


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    return is_number(value) and float(value).is_integer()


def is_truthy(value: Any) -> bool:
    """Null, false, zero and empty strings, arrays and objects are false."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if is_number(value):
        return value != 0
    if isinstance(value, (str, list, dict)):
        return len(value) > 0
    return True


def type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__


def values_equal(left: Any, right: Any) -> bool:
    """Deep equality that keeps booleans apart from numbers."""
    if is_number(left) and is_number(right):
        return left == right
    if type_name(left) != type_name(right):
        return False
    if isinstance(left, list):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(
            values_equal(left[key], right[key]) for key in left
        )
    return left == right


def resolve_index(index: int, length: int) -> Optional[int]:
    """Map a possibly negative index onto range(length), or None if outside it."""
    if index < 0:
        index += length
    if 0 <= index < length:
        return index
    return None
