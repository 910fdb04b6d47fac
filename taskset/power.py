"""Repeated application of a binary operation by binary exponentiation."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class IntType:
    """An integer under addition."""

    value: int = 0

    @staticmethod
    def identity() -> IntType:
        return IntType(0)

    def __add__(self, other: IntType) -> IntType:
        return IntType(self.value + other.value)

    @staticmethod
    def add(n: IntType, m: IntType) -> IntType:
        return n + m


@dataclass(frozen=True)
class StringType:
    """A string under concatenation."""

    value: str = ""

    @staticmethod
    def identity() -> StringType:
        return StringType("")

    def __add__(self, other: StringType) -> StringType:
        return StringType(self.value + other.value)

    @staticmethod
    def add(n: StringType, m: StringType) -> StringType:
        return n + m


def calculate(n: int, value: T, f: Callable[[T, T], T]) -> T:
    """Combine ``n`` copies of ``value`` with ``f`` in O(log n) applications.

    The value's type must provide an ``identity()`` factory.
    """
    identity = getattr(type(value), "identity", None)
    if not callable(identity):
        raise TypeError(f"{type(value).__name__} has no identity()")
    if n <= 0:
        raise ValueError("calculate: n must be non-negative")

    result = identity()
    acc = value
    while n > 0:
        if n & 1:
            result = f(result, acc)
        acc = f(acc, acc)
        n >>= 1
    return result


def main(argv: list[str] | None = None) -> int:
    """Print a string repeated three times, computed two ways."""
    parser = argparse.ArgumentParser(description="Demonstrate repeated concatenation.")
    parser.parse_args(argv)

    f = StringType.add
    x = StringType("Hello World ")
    result1 = calculate(3, x, f)
    result2 = f(f(x, x), x)
    print(f"result 1: {result1.value}\nresult 2: {result2.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())