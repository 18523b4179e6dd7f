"""Input validation utilities for equata.

Reusable checks applied to host-supplied values before they reach the
level model.
"""

import math
import numbers
from collections.abc import Sequence as SequenceABC
from typing import Any, List, Sequence

import numpy as np

from .exceptions import ValidationError


def validate_coefficient(value: Any, name: str = "coefficient") -> float:
    """Validate a single polynomial coefficient.

    Raises:
        ValidationError: If the value is not a finite real number.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return float(value)


def validate_coefficients(coefs: Sequence[Any], allow_empty: bool = False) -> List[float]:
    """Validate a polynomial coefficient sequence (highest degree first).

    Args:
        coefs: Sequence or 1-D numpy array of real numbers.
        allow_empty: Accept an empty sequence.

    Returns:
        The coefficients converted to a list of floats.

    Raises:
        ValidationError: If coefs is a string or not a sequence, is empty,
            or holds a non-numeric or non-finite value.
    """
    if isinstance(coefs, np.ndarray):
        if coefs.ndim != 1:
            raise ValidationError(
                f"coefficients must be one-dimensional, got shape {coefs.shape}"
            )
        coefs = coefs.tolist()
    elif isinstance(coefs, (str, bytes)) or not isinstance(coefs, SequenceABC):
        raise ValidationError(
            f"coefficients must be a sequence of numbers, got {type(coefs).__name__}"
        )

    if len(coefs) == 0 and not allow_empty:
        raise ValidationError("coefficients must not be empty")

    return [validate_coefficient(c, f"coefficients[{i}]") for i, c in enumerate(coefs)]


def validate_max_time(max_time: Any) -> float:
    """Validate a level time budget in seconds.

    Raises:
        ValidationError: If max_time is not a positive finite number.
    """
    if isinstance(max_time, bool) or not isinstance(max_time, numbers.Real):
        raise ValidationError(
            f"max_time must be a number, got {type(max_time).__name__}"
        )
    if not math.isfinite(max_time) or max_time <= 0:
        raise ValidationError(f"max_time must be positive, got {max_time!r}")
    return float(max_time)


def validate_spacing(spacing: Any) -> float:
    """Validate the step of a sampled domain.

    Raises:
        ValidationError: If spacing is not a positive finite number.
    """
    if isinstance(spacing, bool) or not isinstance(spacing, numbers.Real):
        raise ValidationError(
            f"spacing must be a number, got {type(spacing).__name__}"
        )
    if not math.isfinite(spacing) or spacing <= 0:
        raise ValidationError(f"spacing must be positive, got {spacing!r}")
    return float(spacing)


def validate_delta(delta_seconds: Any) -> float:
    """Validate elapsed time passed to a level.

    Raises:
        ValidationError: If the delta is negative or not a finite number.
    """
    if isinstance(delta_seconds, bool) or not isinstance(delta_seconds, numbers.Real):
        raise ValidationError(
            f"delta_seconds must be a number, got {type(delta_seconds).__name__}"
        )
    if not math.isfinite(delta_seconds) or delta_seconds < 0:
        raise ValidationError(
            f"delta_seconds must be non-negative, got {delta_seconds!r}"
        )
    return float(delta_seconds)


def validate_difficulty(difficulty: str, choices: Sequence[str]) -> str:
    """Validate and normalize a difficulty name.

    Returns:
        The lower-cased difficulty.

    Raises:
        ValidationError: If the difficulty is not one of ``choices``.
    """
    if not isinstance(difficulty, str):
        raise ValidationError(
            f"difficulty must be a string, got {type(difficulty).__name__}"
        )
    level = difficulty.strip().lower()
    if level not in choices:
        raise ValidationError(
            f"Unknown difficulty '{difficulty}'. "
            f"Must be one of: {', '.join(choices)}"
        )
    return level


def validate_index(index: Any, size: int) -> int:
    """Validate a coefficient index against the polynomial size.

    Raises:
        ValidationError: If index is not an int in ``range(size)``.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError(f"index must be an integer, got {index!r}")
    if not 0 <= index < size:
        raise ValidationError(f"index {index} out of range for {size} coefficients")
    return index
