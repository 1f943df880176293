"""
Prefix and infix rules of the JSON expression language.

Rules evaluate as they parse: each one returns the value of the
sub-expression it recognized rather than a syntax tree.
"""

import operator
from typing import Any, Callable, Optional

from ..core.engine import Context
from ..core.tokenizer import Token
from .values import (
    is_integral,
    is_number,
    is_truthy,
    resolve_index,
    type_name,
    values_equal,
)

# Token types usable as bare object keys and property names; keywords included
NAME_TOKENS = ("identifier", "true", "false", "in", "null")

# ---------------------------------------------------------------------------
# Prefix rules
# ---------------------------------------------------------------------------


def parse_number(token: Token, context: Context[Any]) -> float:
    try:
        return float(token.value)
    except ValueError as e:
        raise context.reporter.create_interpreter_error(
            f"invalid number literal {token.value!r}", token.position
        ) from e


def parse_string(token: Token, context: Context[Any]) -> str:  # pylint: disable=unused-argument
    return token.value[1:-1]


def parse_true(token: Token, context: Context[Any]) -> bool:  # pylint: disable=unused-argument
    return True


def parse_false(token: Token, context: Context[Any]) -> bool:  # pylint: disable=unused-argument
    return False


def parse_null(token: Token, context: Context[Any]) -> None:  # pylint: disable=unused-argument
    return None


def parse_identifier(token: Token, context: Context[Any]) -> Any:
    if token.value not in context.bindings:
        raise context.reporter.create_interpreter_error(
            f"unknown context value {token.value}", token.position
        )
    return context.bindings[token.value]


def _unary_operand(token: Token, context: Context[Any]) -> Any:
    value = context.parse("unary")
    if not is_number(value):
        raise context.reporter.create_interpreter_error(
            "this operator expects a number", token.position
        )
    return value


def unary_minus(token: Token, context: Context[Any]) -> Any:
    return -_unary_operand(token, context)


def unary_plus(token: Token, context: Context[Any]) -> Any:
    return _unary_operand(token, context)


def logical_not(token: Token, context: Context[Any]) -> bool:  # pylint: disable=unused-argument
    return not is_truthy(context.parse("unary"))


def parse_group(token: Token, context: Context[Any]) -> Any:  # pylint: disable=unused-argument
    value = context.parse()
    context.require(")")
    return value


def _parse_sequence(context: Context[Any], closer: str) -> list[Any]:
    """Parse comma separated expressions up to and including the closer."""
    items: list[Any] = []
    if context.attempt(closer):
        return items
    while True:
        items.append(context.parse())
        if context.attempt(closer):
            return items
        context.require(",")


def parse_array(token: Token, context: Context[Any]) -> list[Any]:  # pylint: disable=unused-argument
    return _parse_sequence(context, "]")


def parse_object(token: Token, context: Context[Any]) -> dict[str, Any]:  # pylint: disable=unused-argument
    obj: dict[str, Any] = {}
    if context.attempt("}"):
        return obj
    while True:
        key_token = context.require("string", *NAME_TOKENS)
        key = key_token.value
        if key_token.type == "string":
            key = key[1:-1]
        context.require(":")
        obj[key] = context.parse()
        if context.attempt("}"):
            return obj
        context.require(",")


# ---------------------------------------------------------------------------
# Infix rules
# ---------------------------------------------------------------------------


def _operator_error(token: Token, context: Context[Any], expected: str) -> Exception:
    return context.reporter.create_interpreter_error(
        f"infix: {token.value} expects {expected}", token.position
    )


def add(left: Any, token: Token, context: Context[Any]) -> Any:
    right = context.parse(token.type)
    if is_number(left) and is_number(right):
        return left + right
    if isinstance(left, str) and isinstance(right, str):
        return left + right
    raise _operator_error(token, context, "number + number or string + string")


_ARITHMETIC: dict[str, Callable[[Any, Any], Any]] = {
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def arithmetic(left: Any, token: Token, context: Context[Any]) -> Any:
    right = context.parse(token.type)
    if not (is_number(left) and is_number(right)):
        raise _operator_error(token, context, f"number {token.value} number")
    if token.type == "/" and right == 0:
        raise context.reporter.create_interpreter_error("division by zero", token.position)
    return _ARITHMETIC[token.type](left, right)


def power(left: Any, token: Token, context: Context[Any]) -> Any:
    # One level below its own precedence, so a ** b ** c groups to the right
    right = context.parse(context.precedence_of(token.type) - 1)
    if not (is_number(left) and is_number(right)):
        raise _operator_error(token, context, "number ** number")
    try:
        result = left**right
    except (OverflowError, ZeroDivisionError) as e:
        raise context.reporter.create_interpreter_error(
            f"cannot compute {left} ** {right}: {e}", token.position
        ) from e
    if isinstance(result, complex):
        raise context.reporter.create_interpreter_error(
            f"{left} ** {right} is not a real number", token.position
        )
    return result


_COMPARISONS: dict[str, Callable[[Any, Any], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def compare(left: Any, token: Token, context: Context[Any]) -> bool:
    right = context.parse(token.type)
    comparable = (is_number(left) and is_number(right)) or (
        isinstance(left, str) and isinstance(right, str)
    )
    if not comparable:
        raise _operator_error(
            token, context, f"numbers or strings, got {type_name(left)} and {type_name(right)}"
        )
    return _COMPARISONS[token.type](left, right)


def equality(left: Any, token: Token, context: Context[Any]) -> bool:
    right = context.parse(token.type)
    equal = values_equal(left, right)
    return equal if token.type == "==" else not equal


def logical(left: Any, token: Token, context: Context[Any]) -> bool:
    # Both sides are always parsed; evaluation happens as part of parsing
    right = context.parse(token.type)
    if token.type == "&&":
        return is_truthy(left) and is_truthy(right)
    return is_truthy(left) or is_truthy(right)


def membership(left: Any, token: Token, context: Context[Any]) -> bool:
    right = context.parse(token.type)
    if isinstance(right, dict):
        if not isinstance(left, str):
            raise _operator_error(token, context, "string in object")
        return left in right
    if isinstance(right, str):
        if not isinstance(left, str):
            raise _operator_error(token, context, "string in string")
        return left in right
    if isinstance(right, list):
        return any(values_equal(left, item) for item in right)
    raise _operator_error(token, context, "something in array, object or string")


def member(left: Any, token: Token, context: Context[Any]) -> Any:
    key = context.require(*NAME_TOKENS).value
    if not isinstance(left, dict):
        raise _operator_error(token, context, f"an object, got {type_name(left)}")
    if key not in left:
        raise context.reporter.create_interpreter_error(
            f"object has no property {key}", token.position
        )
    return left[key]


def _as_index(value: Any, token: Token, context: Context[Any]) -> int:
    if not is_integral(value):
        raise context.reporter.create_interpreter_error(
            f"should only use integers to access arrays or strings, got {type_name(value)}",
            token.position,
        )
    return int(value)


def _index(left: Any, index: Any, token: Token, context: Context[Any]) -> Any:
    if isinstance(left, dict):
        if not isinstance(index, str):
            raise context.reporter.create_interpreter_error(
                "object keys must be strings", token.position
            )
        return left.get(index)
    if isinstance(left, (list, str)):
        position = resolve_index(_as_index(index, token, context), len(left))
        if position is None:
            raise context.reporter.create_interpreter_error(
                "index out of bounds", token.position
            )
        return left[position]
    raise _operator_error(token, context, f"an array, string or object, got {type_name(left)}")


def _slice(
    left: Any, start: Optional[Any], stop: Optional[Any], token: Token, context: Context[Any]
) -> Any:
    if not isinstance(left, (list, str)):
        raise _operator_error(token, context, f"an array or string to slice, got {type_name(left)}")
    lower = None if start is None else _as_index(start, token, context)
    upper = None if stop is None else _as_index(stop, token, context)
    return left[lower:upper]


def subscript(left: Any, token: Token, context: Context[Any]) -> Any:
    """Index (``a[i]``, ``o["k"]``) or slice (``a[i:j]``, ``a[:j]``, ``a[i:]``)."""
    start = None
    is_slice = context.attempt(":") is not None
    if not is_slice:
        start = context.parse()
        is_slice = context.attempt(":") is not None

    if not is_slice:
        context.require("]")
        return _index(left, start, token, context)

    stop = None
    if not context.attempt("]"):
        stop = context.parse()
        context.require("]")
    return _slice(left, start, stop, token, context)


def call(left: Any, token: Token, context: Context[Any]) -> Any:
    args = _parse_sequence(context, ")")
    if not callable(left):
        raise _operator_error(token, context, f"a function, got {type_name(left)}")
    return left(*args)
