"""Polynomial helpers. Coefficients are ordered highest degree first."""

from __future__ import annotations

import string
from typing import List, Sequence


def evaluate(coefs: Sequence[float], x: float) -> float:
    """Evaluate the polynomial at ``x`` with Horner's method.

    An empty coefficient list is the zero polynomial.
    """
    y = 0.0
    for c in coefs:
        y = c + x * y
    return y


def degree(coefs: Sequence[float]) -> int:
    return len(coefs) - 1


def coefficient_labels(count: int) -> List[str]:
    """Letters naming each coefficient: ``['a', 'b', 'c']`` for a quadratic."""
    if count > len(string.ascii_lowercase):
        raise ValueError(f"Cannot label more than {len(string.ascii_lowercase)} coefficients")
    return list(string.ascii_lowercase[:count])


def equation_template(count: int) -> str:
    """Symbolic form shown to the player, e.g. ``ax^2 + bx + c``."""
    terms = []
    for i, label in enumerate(coefficient_labels(count)):
        power = count - 1 - i
        if power == 0:
            terms.append(label)
        elif power == 1:
            terms.append(f"{label}x")
        else:
            terms.append(f"{label}x^{power}")
    return " + ".join(terms)
