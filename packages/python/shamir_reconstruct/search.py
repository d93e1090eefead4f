"""
Consistency search over k-subsets of the shares.

Every k-subset defines a candidate polynomial of degree k-1. A candidate is
scored by how many of the supplied shares it reproduces exactly; the best
candidate is the one whose polynomial agrees with the most shares.

Enumeration is lexicographic over share positions, so with shares sorted by
x the first maximal candidate wins ties. A perfect fit ends the search early.
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

from .errors import DivisionByZero
from .lagrange import evaluate
from .rational import Rational

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Share(NamedTuple):
    """One decoded (x, y) point; x is the share index."""
    x: int
    y: int


@dataclass(frozen=True)
class Mismatch:
    """A share the candidate polynomial does not reproduce."""
    share: Share
    expected: Optional[int]  # None when the prediction is not an integer

    @property
    def inconsistent(self) -> bool:
        return self.expected is None


@dataclass
class Candidate:
    """A scored k-subset of the shares."""
    subset: Tuple[Share, ...]
    mismatches: List[Mismatch] = field(default_factory=list)
    score: int = 0
    secret: Optional[Rational] = None

    @property
    def perfect(self) -> bool:
        return not self.mismatches


def iter_subsets(items: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """Yield every k-element subset of `items` in lexicographic index order."""
    if k < 1 or k > len(items):
        return
    yield from itertools.combinations(items, k)


def score_subset(subset: Sequence[Share], shares: Sequence[Share]) -> List[Mismatch]:
    """
    Check every share against the polynomial through `subset`.

    Raises:
        DivisionByZero: If the subset holds two shares with the same x.
    """
    mismatches = []
    for share in shares:
        predicted = evaluate(subset, share.x)
        if not predicted.is_integer():
            mismatches.append(Mismatch(share, None))
        elif predicted.numerator != share.y:
            mismatches.append(Mismatch(share, predicted.numerator))
    return mismatches


def find_best(shares: Sequence[Share], k: int) -> Optional[Candidate]:
    """
    Find the k-subset whose polynomial agrees with the most shares.

    Args:
        shares: All shares, already sorted by ascending x.
        k: Threshold, i.e. points per candidate polynomial.

    Returns:
        The best Candidate, with its secret evaluated at x=0, or None when
        no k-subset exists (k < 1 or k > len(shares)) or none is usable.
    """
    total = len(shares)
    best: Optional[Candidate] = None
    examined = 0

    for subset in iter_subsets(shares, k):
        examined += 1
        try:
            mismatches = score_subset(subset, shares)
        except DivisionByZero:
            _logger.debug("Skipping subset %s: duplicate x", [s.x for s in subset])
            continue

        score = total - len(mismatches)
        if best is None or score > best.score:
            best = Candidate(
                subset=tuple(subset),
                mismatches=mismatches,
                score=score,
                secret=evaluate(subset, 0),
            )
            if best.perfect:
                _logger.debug(
                    "Perfect fit after %d subset(s): %s", examined, [s.x for s in subset]
                )
                break

    return best
