"""
Shamir Reconstruction Kit - Python SDK

Recovers a threshold-shared secret from shares that may be corrupted.

Every k-subset of the shares is interpolated exactly; the polynomial that
agrees with the most shares gives the secret f(0), and the shares it does
not reproduce are reported as wrong.
"""

__version__ = "0.1.0"

from .errors import (
    ReconstructionError,
    InvalidDigit,
    InvalidBase,
    DivisionByZero,
    NonIntegerResult,
    NoModelFound,
)
from .rational import Rational
from .digits import decode, parse_base
from .lagrange import evaluate
from .search import (
    find_best,
    iter_subsets,
    Candidate,
    Mismatch,
    Share,
)
from .share_input import (
    load_input,
    verify_input,
    split_input,
    InputError,
)
from .reconstruct import (
    reconstruct,
    reconstruct_input,
    decode_shares,
    analyze_input,
    ReconstructionResult,
    WrongShare,
)

__all__ = [
    # Errors
    "ReconstructionError",
    "InvalidDigit",
    "InvalidBase",
    "DivisionByZero",
    "NonIntegerResult",
    "NoModelFound",
    # Arithmetic
    "Rational",
    "decode",
    "parse_base",
    "evaluate",
    # Search
    "find_best",
    "iter_subsets",
    "Candidate",
    "Mismatch",
    "Share",
    # Input
    "load_input",
    "verify_input",
    "split_input",
    "InputError",
    # Reconstruction
    "reconstruct",
    "reconstruct_input",
    "decode_shares",
    "analyze_input",
    "ReconstructionResult",
    "WrongShare",
]
