"""Fixed-width unsigned decimal integers of 35 base-10**9 limbs (315 digits)."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

BASE = 10**9
BASE_DIGITS = 9
LIMBS = 35
MODULUS = BASE**LIMBS
MAX_INPUT_DIGITS = 309
UINT_MAX = 2**32 - 1


def _check_digits(text: str) -> str:
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"not an unsigned decimal number: {text!r}")
    return text


@dataclass(frozen=True, order=True)
class UInt1024:
    """An unsigned integer that wraps modulo 10**315.

    Addition and multiplication drop whatever overflows the top limb;
    subtraction yields zero unless the left operand is strictly greater.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("value must be an int")
        if not 0 <= self.value < MODULUS:
            raise ValueError("value out of range for UInt1024")

    @classmethod
    def from_uint(cls, value: int) -> UInt1024:
        """Build from a 32-bit unsigned integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("value must be an int")
        if not 0 <= value <= UINT_MAX:
            raise ValueError(f"{value} is not a 32-bit unsigned integer")
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> UInt1024:
        """Parse a decimal string of at most 309 digits."""
        digits = _check_digits(text.strip())
        if len(digits) > MAX_INPUT_DIGITS:
            raise ValueError(f"more than {MAX_INPUT_DIGITS} digits")
        return cls(int(digits))

    @property
    def limbs(self) -> tuple[int, ...]:
        """The base-10**9 limbs, least significant first."""
        rest = self.value
        out = []
        for _ in range(LIMBS):
            rest, limb = divmod(rest, BASE)
            out.append(limb)
        return tuple(out)

    def compare(self, other: UInt1024) -> int:
        """Return 1 if self is greater, -1 if smaller, 0 if equal."""
        if not isinstance(other, UInt1024):
            raise TypeError("can only compare with UInt1024")
        return (self.value > other.value) - (self.value < other.value)

    def __add__(self, other: object) -> UInt1024:
        if not isinstance(other, UInt1024):
            return NotImplemented
        return UInt1024((self.value + other.value) % MODULUS)

    def __sub__(self, other: object) -> UInt1024:
        if not isinstance(other, UInt1024):
            return NotImplemented
        if self.value <= other.value:
            return UInt1024(0)
        return UInt1024(self.value - other.value)

    def __mul__(self, other: object) -> UInt1024:
        if not isinstance(other, UInt1024):
            return NotImplemented
        return UInt1024((self.value * other.value) % MODULUS)

    def __str__(self) -> str:
        return str(self.value)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read n, x and y from standard input and print the arithmetic results."""
    parser = argparse.ArgumentParser(
        prog="uint1024",
        description="Read n, x and y from standard input and show "
        "from_uint(n), x + y, x - y and x * y.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter n: ")
        n_token = _check_digits(_next_token(tokens))
        n = UInt1024.from_uint(int(n_token))
        _prompt("Enter x: ")
        x = UInt1024.parse(_next_token(tokens))
        _prompt("Enter y: ")
        y = UInt1024.parse(_next_token(tokens))
    except ValueError as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print("from_uint(n):")
    print(n)
    print("x + y =")
    print(x + y)
    print("x - y =")
    print(x - y)
    print("x * y =")
    print(x * y)
    return 0


if __name__ == "__main__":
    sys.exit(main())