"""
jsonpratt demonstration script.
"""

import jsonpratt
from jsonpratt import PrattParser


def main():
    print("jsonpratt - JSON Expression Interpreter Demo")
    print("=" * 44)

    bindings = {
        "user": {"name": "Ada", "roles": ["admin", "dev"], "age": 36},
        "limits": [10, 20, 30],
    }

    examples = [
        ("23.67", "Number literal"),
        ("--7", "Chained unary minus"),
        ("2 + 3 * 4", "Operator precedence"),
        ("2 ** 3 ** 2", "Right-associative power"),
        ("user.name + ' (' + user.roles[0] + ')'", "Member access and concatenation"),
        ("'admin' in user.roles && user.age >= 18", "Membership and logic"),
        ("limits[-1] - limits[0]", "Negative indexing"),
        ("limits[1:]", "Slicing"),
        ("{total: limits[0] + limits[1], ok: !false}", "Object literal"),
        ("-'text'", "Unary minus on a string (error)"),
        ("2 +", "Unexpected end of input (error)"),
    ]

    for i, (expression, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {expression}")

        try:
            result = jsonpratt.evaluate(expression, bindings)
            print(f"Output: {result}")
        except jsonpratt.PrattError as e:
            print(f"Error:  {e}")

    # A language of its own: integers and right-associative exponentiation
    print(f"\n{len(examples) + 1}. Custom grammar")
    parser = PrattParser(
        patterns={"int": "[0-9]+"},
        tokens=["^", "int"],
        precedence=[["^"]],
        prefix_rules={"int": lambda token, context: int(token.value)},
        infix_rules={
            "^": lambda left, token, context: left
            ** context.parse(context.precedence_of("^") - 1)
        },
    )
    print("Input:  2 ^ 3 ^ 2")
    print(f"Output: {parser.parse('2 ^ 3 ^ 2')}")


if __name__ == "__main__":
    main()
