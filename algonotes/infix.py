"""Convert infix arithmetic to postfix and evaluate it with a stack."""

from __future__ import annotations

import argparse
import sys

_OPERATORS = "+-*/"
_DEFAULT_EXPRESSION = "(3+4)*2"


def precedence(op: str) -> int:
    """Return 2 for ``*``/``/``, 1 for ``+``/``-`` and -1 for anything else."""
    if op in "+-" and op:
        return 1
    if op in "*/" and op:
        return 2
    return -1


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Whitespace is ignored. Raises ``ValueError`` on unbalanced parentheses or
    an unknown character.
    """
    stack: list[str] = []
    output: list[str] = []

    for c in infix:
        if c.isspace():
            continue
        if c.isalnum():
            output.append(c)
        elif c == "(":
            stack.append(c)
        elif c == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        elif c in _OPERATORS:
            while stack and precedence(c) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(c)
        else:
            raise ValueError(f"unknown operator {c!r}")

    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(top)

    return "".join(output)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero. Raises ``ValueError`` on malformed input
    and ``ZeroDivisionError`` on division by zero.
    """
    stack: list[int] = []
    for c in postfix:
        if c.isdigit():
            stack.append(int(c))
            continue
        if c not in _OPERATORS:
            raise ValueError(f"unexpected character {c!r} in postfix expression")
        if len(stack) < 2:
            raise ValueError(f"operator {c!r} is missing an operand")
        arg2 = stack.pop()
        arg1 = stack.pop()
        if c == "+":
            stack.append(arg1 + arg2)
        elif c == "-":
            stack.append(arg1 - arg2)
        elif c == "*":
            stack.append(arg1 * arg2)
        else:
            stack.append(_truncating_div(arg1, arg2))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def solve(infix: str) -> int:
    """Evaluate an infix expression by way of its postfix form."""
    return evaluate_postfix(infix_to_postfix(infix))


def main(argv: list[str] | None = None) -> int:
    """Print an expression, its postfix form and its value."""
    parser = argparse.ArgumentParser(description="Solve an infix expression.")
    parser.add_argument("expression", nargs="?", default=_DEFAULT_EXPRESSION)
    args = parser.parse_args(argv)

    try:
        postfix = infix_to_postfix(args.expression)
        result = evaluate_postfix(postfix)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Infix: {args.expression}")
    print(f"Postfix: {postfix}")
    print(f"Solution: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())