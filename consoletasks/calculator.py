"""Integer calculator for one binary operation."""

from __future__ import annotations

import argparse
import operator
import sys
from typing import Callable, TextIO


class CalculatorError(ValueError):
    """Raised for an unknown operator, a bad number or a division by zero."""


def _truncating_division(first: int, second: int) -> int:
    if second == 0:
        raise CalculatorError("Error! Divison by zero is not allowed.")
    quotient = abs(first) // abs(second)
    return quotient if (first < 0) == (second < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_division,
}


def calculate(first: int, second: int, operation: str) -> int:
    """Apply *operation* to two integers; division truncates toward zero."""
    try:
        function = _OPERATIONS[operation]
    except KeyError:
        raise CalculatorError("Invalid operator entered!") from None
    return function(first, second)


def _next_token(stream: TextIO) -> str | None:
    while line := stream.readline():
        words = line.split()
        if words:
            return words[0]
    return None


def _read_number(stream: TextIO) -> int:
    token = _next_token(stream)
    try:
        return int(token) if token is not None else int("")
    except ValueError:
        raise CalculatorError("Invalid number entered!") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="calculator", description="Apply +, -, * or / to two integers."
    )
    parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    stdout.write("Welcome to Calculator!")
    try:
        stdout.write("Enter the First number: \n")
        first = _read_number(stdin)
        stdout.write("Enter the Second number: \n")
        second = _read_number(stdin)
        stdout.write("Choose an operation to perfrom (+, -, *, /): ")
        stdout.flush()
        token = _next_token(stdin) or ""
        result = calculate(first, second, token[:1])
    except CalculatorError as error:
        stdout.write(f"{error}\n")
        return 1
    stdout.write(f"Result : {result}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())