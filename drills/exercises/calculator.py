"""Calculator exercise — two doubles and an operator, one attempt.

Supported operators are + - * /. Division by zero and any other operator
print an invalid-input message instead of a result. There is no retry loop.
"""

from __future__ import annotations

from rich.console import Console

from drills.console_io import TokenReader
from drills.models import Calculation, Operator

NAME = "calculator"
DESCRIPTION = "Apply +, -, * or / to two numbers"
CHAPTER = "4"

DOUBLE_PROMPT = "Enter a double value: "
OPERATOR_PROMPT = "Enter one of the following: +, -, *, or /: "


def get_double(reader: TokenReader) -> float:
    return reader.read_double(DOUBLE_PROMPT)


def get_operator(reader: TokenReader) -> str:
    return reader.read_char(OPERATOR_PROMPT)


def calculate(num1: float, num2: float, op: str) -> Calculation:
    """Apply ``op`` to the operands.

    Returns a Calculation whose result is None for an unsupported operator
    or a zero divisor.
    """
    operator = Operator.parse(op)
    if operator is Operator.ADD:
        result = num1 + num2
    elif operator is Operator.SUBTRACT:
        result = num1 - num2
    elif operator is Operator.MULTIPLY:
        result = num1 * num2
    elif operator is Operator.DIVIDE and num2 != 0:
        result = num1 / num2
    else:
        return Calculation(left=num1, op=op, right=num2)
    return Calculation(left=num1, op=op, right=num2, result=result)


def calculate_expression(num1: float, num2: float, op: str, console: Console) -> Calculation:
    """Calculate and print the result line (or the invalid-input message)."""
    calc = calculate(num1, num2, op)
    console.out(calc.render(), highlight=False)
    return calc


def main(reader: TokenReader, console: Console) -> Calculation:
    num1 = get_double(reader)
    num2 = get_double(reader)
    op = get_operator(reader)
    return calculate_expression(num1, num2, op, console)
