"""Level domain model: sampling, polynomial evaluation, root finding."""

from .linspace import LinSpace
from .polynomial import evaluate, degree, coefficient_labels, equation_template
from .roots import bisect, find_roots, value_range
from .level import Level, LevelStatus, Point

__all__ = [
    "LinSpace",
    "evaluate", "degree", "coefficient_labels", "equation_template",
    "bisect", "find_roots", "value_range",
    "Level", "LevelStatus", "Point",
]
