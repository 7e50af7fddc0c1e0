"""Interactive integer calculator for the four basic operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


class CalculatorError(ValueError):
    """Raised when a calculation cannot be carried out."""


def _truncating_divide(num1: int, num2: int) -> int:
    quotient = abs(num1) // abs(num2)
    return -quotient if (num1 < 0) != (num2 < 0) else quotient


def calculate(num1: int, num2: int, operator: str) -> int:
    """Apply ``operator`` (one of + - * /) to two integers.

    Division truncates toward zero.
    """
    if operator == "+":
        return num1 + num2
    if operator == "-":
        return num1 - num2
    if operator == "*":
        return num1 * num2
    if operator == "/":
        if num2 == 0:
            raise CalculatorError("Cannot divide by zero.")
        return _truncating_divide(num1, num2)
    raise CalculatorError("Invalid operator entered.")


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Prompt for two integers and an operator, then print the result."""
    parser = argparse.ArgumentParser(
        prog="calculator", description="Integer calculator reading from standard input."
    )
    parser.parse_args(argv)

    print("Hello Calculator starting…")
    tokens = _tokens(sys.stdin)
    print("Enter two numbers: ", end="", flush=True)
    try:
        num1 = int(next(tokens))
        num2 = int(next(tokens))
    except (StopIteration, ValueError):
        print("\nError: expected two integers.")
        return 1
    print(f"You just entered {num1} and {num2}")

    print("Enter operator: ", end="", flush=True)
    try:
        op = next(tokens)[0]
    except StopIteration:
        print("\nError: expected an operator.")
        return 1
    print(f"You just entered {op}")

    try:
        result = calculate(num1, num2, op)
    except CalculatorError as exc:
        if op == "/":
            print(f"Error: {exc}")
        else:
            print(exc)
    else:
        print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())