"""
Secret reconstruction for Shamir Reconstruction Kit.

Recovers the secret f(0) from a set of shares using:
- Radix decoding of share values
- Exhaustive k-subset consistency search
- Exact Lagrange evaluation at x=0

Shares that disagree with the winning polynomial are reported instead of
failing the run, so a few corrupted shares do not prevent recovery.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .digits import decode, parse_base
from .errors import NoModelFound, ReconstructionError
from .rational import Rational
from .search import Candidate, Mismatch, Share, find_best
from .share_input import split_input

_logger = logging.getLogger(__name__)

INCONSISTENT_MARKER = "non-integer (inconsistent)"


@dataclass
class WrongShare:
    """Reporting form of a mismatching share."""
    index: str
    given: str
    expected: str

    @classmethod
    def from_mismatch(cls, mismatch: Mismatch) -> "WrongShare":
        expected = INCONSISTENT_MARKER if mismatch.expected is None else str(mismatch.expected)
        return cls(
            index=str(mismatch.share.x),
            given=str(mismatch.share.y),
            expected=expected,
        )

    def to_dict(self) -> Dict[str, str]:
        return {"index": self.index, "given": self.given, "expected": self.expected}


@dataclass
class ReconstructionResult:
    """Outcome of one reconstruction run."""
    n: int
    k: int
    secret: Rational
    candidate: Candidate
    wrong_shares: List[WrongShare] = field(default_factory=list)

    @property
    def secret_text(self) -> str:
        """Decimal integer, or "num/den" when the secret is not an integer."""
        return str(self.secret)

    @property
    def consistent(self) -> bool:
        """False when the recovered secret is not an integer."""
        return self.secret.is_integer()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "n": self.n,
            "k": self.k,
            "secret": self.secret_text,
            "wrongShares": [w.to_dict() for w in self.wrong_shares],
        }


def decode_shares(raw_shares: Mapping[str, Mapping[str, Any]]) -> List[Share]:
    """
    Decode raw share entries into Shares sorted by ascending x.

    Args:
        raw_shares: Mapping of decimal share index to {"value": str, "base": str | int}

    Returns:
        Decoded shares, sorted by x (stable)

    Raises:
        ReconstructionError: Any decoding failure, with `share_index` set
    """
    shares = []
    for index, entry in raw_shares.items():
        try:
            x = decode(str(index), 10)
            if not isinstance(entry, Mapping):
                raise ReconstructionError(f"Share entry must be an object, got {entry!r}")
            if "value" not in entry or "base" not in entry:
                raise ReconstructionError("Share entry needs both 'value' and 'base'")
            value = entry["value"]
            if not isinstance(value, str):
                raise ReconstructionError(f"Share value must be a digit string, got {value!r}")
            y = decode(value, parse_base(entry["base"]))
        except ReconstructionError as e:
            raise e.for_share(str(index))
        shares.append(Share(x, y))

    shares.sort(key=lambda s: s.x)
    return shares


def reconstruct(raw_shares: Mapping[str, Mapping[str, Any]], n: int, k: int) -> ReconstructionResult:
    """
    Reconstruct the secret from possibly corrupted shares.

    Args:
        raw_shares: Mapping of share index to {"value", "base"}
        n: Declared total number of shares
        k: Threshold (points defining the polynomial)

    Returns:
        ReconstructionResult with the secret and the shares that disagree

    Raises:
        NoModelFound: If no k-subset of the shares yields a model
        ReconstructionError: If a share cannot be decoded
    """
    shares = decode_shares(raw_shares)
    if len(shares) != n:
        _logger.warning("Declared n=%d but %d share(s) supplied", n, len(shares))

    best = find_best(shares, k)
    if best is None:
        raise NoModelFound(f"No valid polynomial found for k={k} over {len(shares)} share(s)")

    result = ReconstructionResult(
        n=n,
        k=k,
        secret=best.secret,
        candidate=best,
        wrong_shares=[WrongShare.from_mismatch(m) for m in best.mismatches],
    )
    if not result.consistent:
        _logger.warning("Recovered secret %s is not an integer", result.secret_text)
    return result


def reconstruct_input(document: Mapping[str, Any]) -> ReconstructionResult:
    """Reconstruct from a whole input document (`keys` plus share entries)."""
    n, k, raw_shares = split_input(document)
    return reconstruct(raw_shares, n, k)


def analyze_input(document: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Analyze whether reconstruction is possible without running the search.

    Args:
        document: Input document (`keys` plus share entries)

    Returns:
        Analysis dict with feasibility assessment
    """
    n, k, raw_shares = split_input(document)
    present = len(raw_shares)
    feasible = 1 <= k <= present

    return {
        "n": n,
        "k": k,
        "shares_declared": n,
        "shares_present": present,
        "candidate_subsets": math.comb(present, k) if feasible else 0,
        "feasible": feasible,
        "redundancy_margin": present - k,
        "message": (
            "Reconstruction possible" if feasible
            else "Threshold must be at least 1" if k < 1
            else f"Need {k - present} more share(s)"
        ),
    }
