"""
Radix decoding of share values.

Share values arrive as digit strings in a base between 2 and 36, using
0-9 then a-z (case-insensitive) as digits, and can be far wider than any
machine integer.
"""

from typing import Union

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36


def _digit_value(char: str, base: int) -> int:
    # ASCII only; str.lower() maps some non-ASCII letters into a-z
    if not char.isascii():
        raise InvalidDigit(char, base)
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    lower = char.lower()
    if "a" <= lower <= "z":
        return 10 + ord(lower) - ord("a")
    raise InvalidDigit(char, base)


def decode(digits: str, base: int) -> int:
    """
    Decode a non-negative digit string in the given base.

    Args:
        digits: Digit characters, most significant first. No sign or prefix.
        base: Radix, 2 to 36 inclusive.

    Returns:
        The decoded integer (0 for an empty string).

    Raises:
        InvalidBase: If base is outside 2..36.
        InvalidDigit: If a character is not a digit of `base`.
    """
    if isinstance(base, bool) or not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base!r}")

    value = 0
    for char in digits:
        digit = _digit_value(char, base)
        if digit >= base:
            raise InvalidDigit(char, base)
        value = value * base + digit
    return value


def parse_base(raw: Union[str, int]) -> int:
    """Parse a base given as an int or a decimal string and range-check it."""
    if isinstance(raw, bool):
        raise InvalidBase(f"Invalid base: {raw!r}")
    if isinstance(raw, int):
        base = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdecimal():
        base = int(raw.strip())
    else:
        raise InvalidBase(f"Invalid base: {raw!r}")

    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    return base
