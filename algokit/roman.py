"""Roman numeral conversion."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_value(char: str) -> int:
    """Value of a single Roman numeral letter."""
    try:
        return VALUES[char]
    except KeyError:
        raise ValueError(f"not a Roman numeral: {char!r}") from None


def roman_to_decimal(text: str) -> int:
    """Read a numeral left to right, pairing a smaller letter with a larger next one."""
    total = 0
    position = 0
    while position < len(text):
        current = roman_value(text[position])
        if position + 1 < len(text):
            following = roman_value(text[position + 1])
            if current >= following:
                total += current
            else:
                total += following - current
                position += 1
        else:
            total += current
        position += 1
    return total


def parse_roman(text: str) -> int:
    """Read a numeral right to left after checking every letter is a numeral."""
    if any(char not in VALUES for char in text):
        raise ValueError("invalid string of roman numerals")
    total = 0
    position = len(text) - 1
    while position >= 0:
        current = VALUES[text[position]]
        if position > 0 and current > VALUES[text[position - 1]]:
            total += current - VALUES[text[position - 1]]
            position -= 2
        else:
            total += current
            position -= 1
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the value of the Roman numeral given as the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: please provide a string of roman numerals", file=sys.stderr)
        return 1
    try:
        value = parse_roman(args[0])
    except ValueError:
        print("Error: invalid string of roman numerals", file=sys.stderr)
        return 1
    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())