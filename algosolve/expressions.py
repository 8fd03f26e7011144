"""Expression evaluation: reverse Polish notation, infix calculators and a min-tracking stack."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable

_LEXEME = re.compile(r"\d+|\S")


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


class MinStack:
    """A stack of integers that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Push ``x`` onto the stack."""
        smallest = min(x, self._items[-1][1]) if self._items else x
        self._items.append((x, smallest))

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._items.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for item in tokens:
        operation = _OPERATIONS.get(item)
        if operation is None:
            try:
                stack.append(int(item))
            except ValueError:
                raise ValueError(f"not a number or operator: {item!r}") from None
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {item!r} needs two operands")
        second = stack.pop()
        first = stack.pop()
        stack.append(operation(first, second))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def _tokenize(source: str, allowed: str) -> list[str]:
    lexemes = _LEXEME.findall(source)
    for lexeme in lexemes:
        if not lexeme.isdigit() and lexeme not in allowed:
            raise ValueError(f"unexpected character {lexeme!r} in {source!r}")
    return lexemes


class _Parser:
    def __init__(self, lexemes: list[str]) -> None:
        self.lexemes = lexemes
        self.pos = 0

    def peek(self) -> str | None:
        return self.lexemes[self.pos] if self.pos < len(self.lexemes) else None

    def take(self) -> str:
        lexeme = self.peek()
        if lexeme is None:
            raise ValueError("unexpected end of expression")
        self.pos += 1
        return lexeme

    def operand(self) -> int:
        lexeme = self.take()
        if lexeme == "(":
            value = self.sum()
            if self.take() != ")":
                raise ValueError("missing closing parenthesis")
            return value
        if lexeme.isdigit():
            return int(lexeme)
        raise ValueError(f"expected a number, got {lexeme!r}")

    def sum(self) -> int:
        value = 0
        if self.peek() not in (None, ")", "+", "-"):
            value = self.operand()
        while self.peek() not in (None, ")"):
            op = self.take()
            if op not in "+-":
                raise ValueError(f"expected an operator, got {op!r}")
            value = _OPERATIONS[op](value, self.operand())
        return value


def calculate(source: str) -> int:
    """Evaluate an expression of non-negative integers, ``+``, ``-`` and parentheses.

    A leading sign inside a group acts on an implicit zero.
    """
    parser = _Parser(_tokenize(source, "+-()"))
    value = parser.sum()
    if parser.peek() is not None:
        raise ValueError("unmatched closing parenthesis")
    return value


def calculate_arithmetic(source: str) -> int:
    """Evaluate an expression of non-negative integers with ``+ - * /`` and usual precedence.

    Division truncates toward zero; an empty expression is 0.
    """
    lexemes = _tokenize(source, "+-*/")
    if not lexemes:
        return 0
    if lexemes[0] in "+-":
        lexemes.insert(0, "0")
    terms: list[int] = []
    pending_sign = "+"
    position = 0
    while position < len(lexemes):
        lexeme = lexemes[position]
        if not lexeme.isdigit():
            raise ValueError(f"expected a number, got {lexeme!r}")
        term = int(lexeme)
        position += 1
        while position < len(lexemes) and lexemes[position] in "*/":
            if position + 1 >= len(lexemes) or not lexemes[position + 1].isdigit():
                raise ValueError("operator without a right operand")
            term = _OPERATIONS[lexemes[position]](term, int(lexemes[position + 1]))
            position += 2
        terms.append(term if pending_sign == "+" else -term)
        if position < len(lexemes):
            pending_sign = lexemes[position]
            if pending_sign not in "+-" or position + 1 >= len(lexemes):
                raise ValueError("operator without a right operand")
            position += 1
    return sum(terms)