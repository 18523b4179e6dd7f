"""Level catalog: three levels for each difficulty, plus random levels."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .core.level import Level
from .core.roots import find_roots
from .utils.exceptions import ValidationError
from .utils.logger import logger
from .utils.validation import validate_difficulty


DIFFICULTIES = ("easy", "medium", "hard")
LEVELS_PER_DIFFICULTY = 3

# Per difficulty: polynomial degree, leading coefficient choices, time budget
RANDOM_PRESETS = {
    "easy": (2, (1.0, -1.0), 60.0),
    "medium": (3, (0.5, -0.5, 1.0, -1.0), 90.0),
    "hard": (4, (0.25, -0.25, 0.5, -0.5, 2.0, -2.0), 120.0),
}


class LevelSpec(BaseModel):
    """Static definition of a level, checked before it is ever played."""

    model_config = ConfigDict(frozen=True)

    number: Optional[int] = Field(default=None, ge=1)
    difficulty: str
    coefficients: Tuple[float, ...] = Field(min_length=1)
    max_time: float = Field(gt=0)

    @field_validator("difficulty")
    @classmethod
    def _known_difficulty(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty '{value}'")
        return level

    @model_validator(mode="after")
    def _has_playable_interval(self) -> "LevelSpec":
        roots = find_roots(self.coefficients)
        if len(roots) < 2:
            raise ValueError(
                f"Level needs at least two roots, found {len(roots)} "
                f"for coefficients {list(self.coefficients)}"
            )
        return self

    @property
    def title(self) -> str:
        if self.number is None:
            return f"Random {self.difficulty.capitalize()}"
        return f"Level {self.number} {self.difficulty.capitalize()}"

    def build(self) -> Level:
        return Level(self.coefficients, self.max_time)


def _spec(number: int, difficulty: str, coefficients: List[float], max_time: float) -> LevelSpec:
    return LevelSpec(number=number, difficulty=difficulty, coefficients=coefficients, max_time=max_time)


CATALOG: Dict[Tuple[int, str], LevelSpec] = {
    (spec.number, spec.difficulty): spec
    for spec in (
        # x^2 - 1, -x^2 + 4, (x - 2)(x + 1)
        _spec(1, "easy", [1.0, 0.0, -1.0], 60.0),
        _spec(2, "easy", [-1.0, 0.0, 4.0], 60.0),
        _spec(3, "easy", [1.0, -1.0, -2.0], 60.0),
        # 0.5x^2 - 2, x(x - 2)(x + 2), (x - 1)(x + 2)(x - 3)
        _spec(1, "medium", [0.5, 0.0, -2.0], 90.0),
        _spec(2, "medium", [1.0, 0.0, -4.0, 0.0], 90.0),
        _spec(3, "medium", [1.0, -2.0, -5.0, 6.0], 90.0),
        # -0.5(x - 4)(x + 2), (x^2 - 1)(x^2 - 4), 0.5(x + 3)(x - 1)(x - 2)
        _spec(1, "hard", [-0.5, 1.0, 4.0], 120.0),
        _spec(2, "hard", [1.0, 0.0, -5.0, 0.0, 4.0], 120.0),
        _spec(3, "hard", [0.5, 0.0, -3.5, 3.0], 120.0),
    )
}


def get_spec(number: int, difficulty: str) -> LevelSpec:
    """Look up a catalog level.

    Raises:
        ValidationError: If the difficulty or level number is unknown.
    """
    level = validate_difficulty(difficulty, DIFFICULTIES)
    spec = CATALOG.get((number, level))
    if spec is None:
        raise ValidationError(
            f"Unknown level {number!r}. Must be between 1 and {LEVELS_PER_DIFFICULTY}"
        )
    return spec


def load_level(number: int, difficulty: str) -> Level:
    spec = get_spec(number, difficulty)
    logger.info(f"Loading {spec.title}")
    return spec.build()


def random_spec(difficulty: str, seed: Optional[int] = None) -> LevelSpec:
    """A level whose polynomial has distinct integer roots in [-8, 8].

    Roots never coincide, so every one of them is a sign change the root
    scan can find.
    """
    level = validate_difficulty(difficulty, DIFFICULTIES)
    degree, leading_choices, max_time = RANDOM_PRESETS[level]
    rng = random.Random(seed)

    roots = sorted(rng.sample(range(-8, 9), degree))
    leading = rng.choice(leading_choices)
    coefficients = (leading * np.poly(roots)).tolist()

    logger.debug(f"Random {level} level: roots={roots}, leading={leading}")
    return LevelSpec(difficulty=level, coefficients=coefficients, max_time=max_time)
