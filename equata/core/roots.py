"""Real root isolation and domain derivation for the enemy polynomial.

Roots are located by scanning a fixed window for sign changes and refining
each bracket with bisection. A sampled value of exactly zero counts as
negative, so a root sitting on a sample point is reported once.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .linspace import LinSpace
from .polynomial import evaluate
from ..utils.config import Config


def _is_negative(value: float) -> bool:
    return value <= 0.0


def bisect(
    coefs: Sequence[float],
    start: float,
    end: float,
    max_iterations: int = Config.BISECTION_MAX_ITERATIONS,
    tolerance: float = Config.BISECTION_TOLERANCE,
) -> float:
    """Refine a root inside ``[start, end]``.

    The endpoint whose sign agrees with the midpoint is moved to it. Stops
    after ``max_iterations`` or once ``|f(mid)| <= tolerance`` and returns
    the last midpoint either way.
    """
    start_negative = _is_negative(evaluate(coefs, start))
    mid = (start + end) / 2.0
    for _ in range(max_iterations):
        mid = (start + end) / 2.0
        value = evaluate(coefs, mid)
        if abs(value) <= tolerance:
            break
        if _is_negative(value) == start_negative:
            start = mid
        else:
            end = mid
    return mid


def find_roots(
    coefs: Sequence[float],
    lower: float = Config.SCAN_START,
    upper: float = Config.SCAN_END,
    step: float = Config.SCAN_STEP,
) -> List[float]:
    """Return the roots found in ``[lower, upper]``, in increasing order."""
    samples = LinSpace(lower, upper, step)
    prev_x = next(samples, None)
    if prev_x is None:
        return []

    prev_negative = _is_negative(evaluate(coefs, prev_x))
    roots = []
    for x in samples:
        negative = _is_negative(evaluate(coefs, x))
        if negative != prev_negative:
            roots.append(bisect(coefs, prev_x, x))
        prev_negative = negative
        prev_x = x
    return roots


def value_range(
    coefs: Sequence[float],
    start: float,
    end: float,
    step: float = Config.RANGE_STEP,
) -> Tuple[float, float]:
    """Minimum and maximum of the polynomial sampled over ``[start, end]``."""
    low = high = evaluate(coefs, start)
    for x in LinSpace(start, end, step):
        y = evaluate(coefs, x)
        if y < low:
            low = y
        elif y > high:
            high = y
    return low, high
