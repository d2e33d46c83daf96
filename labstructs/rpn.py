"""Infix to postfix conversion and postfix evaluation of integer expressions."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

_NUMBER = re.compile(r"[0-9]+")


def precedence(op: str) -> int:
    """Return the binding strength of *op*: 2 for ``*`` and ``/``, 1 for ``+`` and ``-``, else -1."""
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(line: str) -> str:
    """Convert an infix expression to postfix form.

    Every number and operator in the result is followed by one space.
    Whitespace in the input is ignored; any other character that is not a
    digit or a parenthesis is treated as an operator.  A closing
    parenthesis without a matching opening one raises ``ValueError``; an
    unmatched opening parenthesis is passed through to the output.
    """
    tokens: list[str] = []
    operators: list[str] = []
    pos = 0
    while pos < len(line):
        char = line[pos]
        number = _NUMBER.match(line, pos)
        if number:
            tokens.append(number.group())
            pos = number.end()
            continue
        pos += 1
        if char.isspace():
            continue
        if char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                tokens.append(operators.pop())
            if not operators:
                raise ValueError("Unbalanced parenthesis")
            operators.pop()
        else:
            while operators and precedence(char) <= precedence(operators[-1]):
                tokens.append(operators.pop())
            operators.append(char)
    tokens.extend(reversed(operators))
    return "".join(f"{token} " for token in tokens)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(line: str) -> int:
    """Evaluate a whitespace-separated postfix expression of integers.

    For each operator the value on top of the stack is the left operand
    and the one beneath it the right operand.  Division truncates toward
    zero.  Raises ``ValueError`` for missing operands, unknown operators or
    leftover values, and ``ZeroDivisionError`` for division by zero.
    """
    values: list[int] = []
    for token in line.split():
        number = _NUMBER.match(token)
        if number:
            values.append(int(number.group()))
            continue
        if len(values) < 2:
            raise ValueError("insufficient values in stack")
        a = values.pop()
        b = values.pop()
        op = token[0]
        if op == "+":
            result = a + b
        elif op == "-":
            result = a - b
        elif op == "*":
            result = a * b
        elif op == "/":
            if b == 0:
                raise ZeroDivisionError("division by zero")
            result = _truncating_div(a, b)
        else:
            raise ValueError(f"Invalid operator: {op}")
        values.append(result)
    if len(values) != 1:
        raise ValueError("expression does not reduce to a single value")
    return values[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate an infix expression given as argument or as the first word on stdin."""
    parser = argparse.ArgumentParser(description="Evaluate an integer infix expression.")
    parser.add_argument("expression", nargs="?")
    options = parser.parse_args(argv)
    expression = options.expression
    if expression is None:
        words = sys.stdin.read().split()
        expression = words[0] if words else ""
    try:
        print(evaluate_postfix(infix_to_postfix(expression)))
    except (ValueError, ZeroDivisionError) as exc:
        print(f"Error: {exc}")
        return 1
    return 0