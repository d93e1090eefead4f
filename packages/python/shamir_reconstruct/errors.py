"""
Error kinds raised while reconstructing a secret from shares.
"""

from typing import Optional


class ReconstructionError(Exception):
    """Base class for every failure of the reconstruction core."""

    def __init__(self, message: str, share_index: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.share_index = share_index

    def for_share(self, index: str) -> "ReconstructionError":
        """Attribute this error to the share keyed by `index`."""
        self.share_index = index
        return self

    def __str__(self) -> str:
        if self.share_index is None:
            return self.message
        return f"share {self.share_index}: {self.message}"


class InvalidDigit(ReconstructionError):
    """A share value contains a character that is not a digit of its base."""

    def __init__(self, char: str, base: int):
        super().__init__(f"Digit {char!r} not valid for base {base}")
        self.char = char
        self.base = base


class InvalidBase(ReconstructionError):
    """Radix outside 2..36, or not an integer at all."""


class DivisionByZero(ReconstructionError):
    """Zero denominator, usually caused by two shares with the same x."""


class NonIntegerResult(ReconstructionError):
    """An exact integer was requested from a non-integer rational."""


class NoModelFound(ReconstructionError):
    """No k-subset of the shares produced a polynomial model."""
