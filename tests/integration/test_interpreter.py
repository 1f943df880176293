"""
Test cases for the JSON expression interpreter.

These run whole expressions through create_interpreter() and evaluate()
and check the resulting values and errors.
"""

import unittest
from unittest.mock import patch

import jsonpratt
from jsonpratt import InterpreterError, ParseConfig, PrattParser, SecurityError
from jsonpratt import SyntaxError as PrattSyntaxError
from jsonpratt.interpreter import create_interpreter


class TestNumericExpressions(unittest.TestCase):
    """Test number literals and the unary operators."""

    def setUp(self):
        self.interpreter = create_interpreter()

    def _parse(self, text):
        return self.interpreter.parse(text, {}, 0)

    def test_parse_number_expression(self):
        self.assertEqual(self._parse("23.67"), 23.67)

    def test_minus_expression_negative_number(self):
        self.assertEqual(self._parse("-7"), -7)

    def test_minus_expression_double_negative(self):
        self.assertEqual(self._parse("--7"), 7)

    def test_minus_expression_plus(self):
        self.assertEqual(self._parse("-+10"), -10)

    def test_minus_expression_zero(self):
        self.assertEqual(self._parse("-0"), 0)

    def test_plus_expression_positive_number(self):
        self.assertEqual(self._parse("+5"), 5)

    def test_plus_expression_zero(self):
        self.assertEqual(self._parse("+0"), 0)

    def test_plus_expression_minus(self):
        self.assertEqual(self._parse("+-10"), -10)

    def test_unary_plus_is_identity(self):
        for text in ["0", "1", "42.5", "1000000"]:
            with self.subTest(text=text):
                self.assertEqual(self._parse("+" + text), self._parse(text))

    def test_numbers_are_floats(self):
        self.assertIsInstance(self._parse("7"), float)

    def test_unary_minus_expects_number(self):
        for text in ["-'text'", "+true", "-null", "-[1]"]:
            with self.subTest(text=text):
                with self.assertRaises(InterpreterError) as cm:
                    self._parse(text)
                self.assertEqual(cm.exception.message, "this operator expects a number")

    def test_unary_minus_binds_tighter_than_power(self):
        self.assertEqual(self._parse("-2 ** 2"), 4)


class TestOperators(unittest.TestCase):
    """Test the infix operators of the language."""

    def test_arithmetic_precedence(self):
        cases = [
            ("2 + 3 * 4", 14),
            ("(2 + 3) * 4", 20),
            ("10 - 4 - 3", 3),
            ("12 / 3 / 2", 2),
            ("2 ** 3 ** 2", 512),
            ("2 * 3 ** 2", 18),
            ("1 + 2 == 3", True),
        ]
        for expression, expected in cases:
            with self.subTest(expression=expression):
                self.assertEqual(jsonpratt.evaluate(expression), expected)

    def test_string_concatenation(self):
        self.assertEqual(jsonpratt.evaluate("'a' + \"b\""), "ab")
        with self.assertRaises(InterpreterError):
            jsonpratt.evaluate("'a' + 1")

    def test_arithmetic_type_errors(self):
        for expression in ["'a' - 'b'", "[] * 2", "null / 1", "true ** 2"]:
            with self.subTest(expression=expression):
                with self.assertRaises(InterpreterError):
                    jsonpratt.evaluate(expression)

    def test_division_by_zero(self):
        with self.assertRaises(InterpreterError) as cm:
            jsonpratt.evaluate("1 / 0")
        self.assertEqual(cm.exception.message, "division by zero")

    def test_power_edge_cases(self):
        with self.assertRaises(InterpreterError):
            jsonpratt.evaluate("0 ** -1")
        with self.assertRaises(InterpreterError):
            jsonpratt.evaluate("10 ** 400")
        with self.assertRaises(InterpreterError):
            jsonpratt.evaluate("(-8) ** 0.5")

    def test_comparisons(self):
        cases = [
            ("1 < 2", True), ("2 <= 2", True), ("3 > 4", False), ("4 >= 5", False),
            ("'abc' < 'abd'", True), ("'b' > 'a'", True),
        ]
        for expression, expected in cases:
            with self.subTest(expression=expression):
                self.assertIs(jsonpratt.evaluate(expression), expected)
        with self.assertRaises(InterpreterError):
            jsonpratt.evaluate("1 < 'a'")

    def test_equality(self):
        cases = [
            ("1 == 1", True), ("1 != 1", False), ("'a' == 'a'", True),
            ("[1, [2]] == [1, [2]]", True), ("{a: 1} == {a: 1}", True),
            ("{a: 1} != {a: 2}", True), ("null == null", True), ("1 == true", False),
        ]
        for expression, expected in cases:
            with self.subTest(expression=expression):
                self.assertIs(jsonpratt.evaluate(expression), expected)

    def test_logical_operators(self):
        cases = [
            ("true && false", False), ("true || false", True), ("!true", False),
            ("!!1", True), ("0 || ''", False), ("[1] && {a: 1}", True),
            ("1 < 2 && 3 < 4", True), ("false || 1 == 1", True),
        ]
        for expression, expected in cases:
            with self.subTest(expression=expression):
                self.assertIs(jsonpratt.evaluate(expression), expected)

    def test_membership(self):
        bindings = {"obj": {"k": 1}, "arr": [1, "two", [3]], "s": "haystack"}
        cases = [
            ("'k' in obj", True), ("'x' in obj", False),
            ("1 in arr", True), ("'two' in arr", True), ("[3] in arr", True), ("true in arr", False),
            ("'hay' in s", True), ("'needle' in s", False),
            ("1 + 1 in [2]", True),
        ]
        for expression, expected in cases:
            with self.subTest(expression=expression):
                self.assertIs(jsonpratt.evaluate(expression, bindings), expected)

        for expression in ["1 in obj", "1 in s", "1 in 2"]:
            with self.subTest(expression=expression):
                with self.assertRaises(InterpreterError):
                    jsonpratt.evaluate(expression, bindings)


class TestLiteralsAndAccess(unittest.TestCase):
    """Test literals, identifiers, member access, indexing and calls."""

    def setUp(self):
        self.bindings = {
            "user": {"name": "Ada", "tags": ["a", "b", "c"], "meta": {"age": 36}},
            "nums": [10, 20, 30, 40],
            "word": "python",
            "double": lambda x: x * 2,
        }

    def _eval(self, expression):
        return jsonpratt.evaluate(expression, self.bindings)

    def test_literals(self):
        self.assertIs(self._eval("true"), True)
        self.assertIs(self._eval("false"), False)
        self.assertIsNone(self._eval("null"))
        self.assertEqual(self._eval("'single'"), "single")
        self.assertEqual(self._eval('"double"'), "double")
        self.assertEqual(self._eval("[]"), [])
        self.assertEqual(self._eval("[1, 'a', [null]]"), [1, "a", [None]])
        self.assertEqual(self._eval("{}"), {})
        self.assertEqual(self._eval("{a: 1, 'b c': [2], \"d\": {}}"), {"a": 1, "b c": [2], "d": {}})

    def test_keywords_as_keys(self):
        """Test that keyword names work as bare object keys and properties."""
        self.assertEqual(
            self._eval("{in: 1, null: 2, true: 3, false: 4}"),
            {"in": 1, "null": 2, "true": 3, "false": 4},
        )
        flags = {"flags": {"true": "yes", "null": "none", "in": "inside"}}
        self.assertEqual(jsonpratt.evaluate("flags.true", flags), "yes")
        self.assertEqual(jsonpratt.evaluate("flags.null", flags), "none")
        self.assertEqual(jsonpratt.evaluate("flags.in", flags), "inside")

    def test_identifiers(self):
        self.assertEqual(self._eval("word"), "python")
        with self.assertRaises(InterpreterError) as cm:
            self._eval("missing")
        self.assertEqual(cm.exception.message, "unknown context value missing")

    def test_member_access(self):
        self.assertEqual(self._eval("user.name"), "Ada")
        self.assertEqual(self._eval("user.meta.age + 1"), 37)
        with self.assertRaises(InterpreterError):
            self._eval("user.nope")
        with self.assertRaises(InterpreterError):
            self._eval("word.length")

    def test_indexing(self):
        self.assertEqual(self._eval("nums[0]"), 10)
        self.assertEqual(self._eval("nums[-1]"), 40)
        self.assertEqual(self._eval("nums[1 + 1]"), 30)
        self.assertEqual(self._eval("word[1]"), "y")
        self.assertEqual(self._eval("user['name']"), "Ada")
        self.assertIsNone(self._eval("user['nope']"))
        self.assertEqual(self._eval("user.tags[2]"), "c")

    def test_indexing_errors(self):
        for expression in ["nums[4]", "nums[-5]", "nums[0.5]", "nums['a']", "user[1]", "5[0]"]:
            with self.subTest(expression=expression):
                with self.assertRaises(InterpreterError):
                    self._eval(expression)

    def test_slicing(self):
        cases = [
            ("nums[1:3]", [20, 30]),
            ("nums[:2]", [10, 20]),
            ("nums[2:]", [30, 40]),
            ("nums[:]", [10, 20, 30, 40]),
            ("nums[-2:]", [30, 40]),
            ("word[1:-1]", "ytho"),
        ]
        for expression, expected in cases:
            with self.subTest(expression=expression):
                self.assertEqual(self._eval(expression), expected)
        with self.assertRaises(InterpreterError):
            self._eval("user[1:2]")

    def test_calls(self):
        self.assertEqual(self._eval("double(21)"), 42)
        self.assertEqual(self._eval("double('ab')"), "abab")
        with self.assertRaises(InterpreterError):
            self._eval("word(1)")

    def test_unary_applies_before_member_access(self):
        """Unary operators sit above member access in the precedence table."""
        with self.assertRaises(InterpreterError):
            self._eval("-user.meta.age")
        self.assertEqual(self._eval("-(user.meta.age)"), -36)


class TestInterpreterSyntax(unittest.TestCase):
    """Test syntax errors and parser-level behavior of the language."""

    def test_trailing_input(self):
        with self.assertRaises(PrattSyntaxError):
            jsonpratt.evaluate("1 2")
        self.assertEqual(create_interpreter().parse("1 2"), 1)

    def test_missing_prefix_rule(self):
        with self.assertRaises(PrattSyntaxError) as cm:
            jsonpratt.evaluate("* 2")
        self.assertEqual(cm.exception.message, "no prefix rule for token *")

    def test_unclosed_structures(self):
        for expression in ["(1 + 2", "[1, 2", "{a: 1", "{a 1}", "[1 2]"]:
            with self.subTest(expression=expression):
                with self.assertRaises(PrattSyntaxError):
                    jsonpratt.evaluate(expression)

    def test_unknown_character(self):
        with self.assertRaises(PrattSyntaxError) as cm:
            jsonpratt.evaluate("1 + #")
        self.assertEqual(cm.exception.position, 4)

    def test_interpreter_is_reusable(self):
        interpreter = create_interpreter()
        self.assertIsInstance(interpreter, PrattParser)
        self.assertEqual(interpreter.parse("1 + 1"), interpreter.parse("1 + 1"))
        with self.assertRaises(InterpreterError):
            interpreter.parse("x", {})
        self.assertEqual(interpreter.parse("x", {"x": 3}), 3)

    def test_embedded_expression(self):
        template = "Hello ${user.name}!"
        interpreter = create_interpreter()
        value, end = interpreter.parse_until_terminator(
            template, template.index("{") + 1, "}", {"user": {"name": "Ada"}}
        )
        self.assertEqual(value, "Ada")
        self.assertEqual(template[end:], "!")

    def test_evaluate_reuses_default_interpreter(self):
        jsonpratt.evaluate("0")
        with patch("jsonpratt.interpreter.language.create_interpreter") as factory:
            self.assertEqual(jsonpratt.evaluate("1 + 1"), 2)
            self.assertEqual(jsonpratt.evaluate("x * 2", {"x": 4}), 8)
        factory.assert_not_called()

    def test_depth_limit(self):
        config = ParseConfig()
        config.limits.max_depth = 10
        with self.assertRaises(SecurityError):
            jsonpratt.evaluate("(" * 20 + "1" + ")" * 20, config=config)
        self.assertEqual(jsonpratt.evaluate("((1))", config=config), 1)


if __name__ == '__main__':
    unittest.main()
