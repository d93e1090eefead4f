"""
Exact Lagrange evaluation.

Evaluates the unique polynomial of degree < len(points) through `points`
at a single x, without ever materializing its coefficients.
"""

from typing import Iterable, Sequence, Tuple

from .errors import DivisionByZero
from .rational import Rational

Point = Tuple[int, int]


def evaluate(points: Iterable[Point], x0: int) -> Rational:
    """
    Evaluate the interpolating polynomial through `points` at `x0`.

    For each point i the basis value is
        L_i(x0) = prod_{j != i} (x0 - x_j) / prod_{j != i} (x_i - x_j)
    and the result is sum_i y_i * L_i(x0), accumulated in input order.

    Args:
        points: (x, y) integer pairs with pairwise distinct x.
        x0: Query point.

    Returns:
        f(x0) as an exact, reduced Rational.

    Raises:
        DivisionByZero: If two points share the same x.
    """
    pts: Sequence[Point] = [(x, y) for x, y in points]

    acc = Rational(0)
    for i, (xi, yi) in enumerate(pts):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(pts):
            if i == j:
                continue
            num *= x0 - xj
            den *= xi - xj
        if den == 0:
            raise DivisionByZero(f"Duplicate x={xi} among interpolation points")
        acc = acc + Rational(yi * num, den)
    return acc
