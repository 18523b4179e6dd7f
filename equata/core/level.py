"""Level domain model.

A level holds the hidden enemy polynomial and the player's guess, derives
the plotting area from the enemy's first two roots and tracks the time
budget. The reveal window grows linearly from the first root towards the
second as time passes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from .linspace import LinSpace
from .polynomial import evaluate
from .roots import find_roots, value_range
from ..utils.config import Config
from ..utils.exceptions import InsufficientRootsError
from ..utils.logger import logger
from ..utils.validation import (
    validate_coefficients,
    validate_delta,
    validate_max_time,
    validate_spacing,
)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


class LevelStatus(str, Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class Level:
    """One play session against a hidden polynomial.

    Raises:
        ValidationError: If the coefficients or time budget are malformed.
        InsufficientRootsError: If fewer than two roots lie in the scan
            window, in which case no playable interval exists.

    Usage:
        >>> level = Level([1.0, 0.0, -1.0], max_time=30.0)
        >>> level.advance(0.5)
        >>> level.player_coefs[1] = 0.0
        >>> level.player_coefs[2] = -1.0
        >>> level.confirm()
        True
    """

    def __init__(self, enemy_coefs: Sequence[float], max_time: float = Config.DEFAULT_MAX_TIME):
        coefs = validate_coefficients(enemy_coefs, allow_empty=True)
        self.max_time = validate_max_time(max_time)

        roots = find_roots(coefs)
        if len(roots) < 2:
            raise InsufficientRootsError(
                f"Level needs at least two roots in "
                f"[{Config.SCAN_START}, {Config.SCAN_END}], found {len(roots)}",
                roots=roots,
            )

        self.enemy_coefs: Tuple[float, ...] = tuple(coefs)
        self._start_x, self._end_x = roots[0], roots[1]

        low, high = value_range(self.enemy_coefs, self._start_x, self._end_x)
        margin = Config.PLOT_MARGIN
        self.limits: Tuple[Point, Point] = (
            Point(self._start_x - margin, low - margin),
            Point(self._end_x + margin, high + margin),
        )

        self.player_coefs: List[float] = []
        self.time_taken = 0.0
        self.won = False
        self.lost = False
        self.restart()

        logger.debug(
            f"Level created: degree={len(coefs) - 1}, roots={len(roots)}, "
            f"interval=[{self._start_x:.4f}, {self._end_x:.4f}], max_time={self.max_time}s"
        )

    @classmethod
    def default(cls) -> "Level":
        return cls(Config.DEFAULT_COEFFICIENTS, Config.DEFAULT_MAX_TIME)

    @property
    def start_x(self) -> float:
        return self._start_x

    @property
    def end_x(self) -> float:
        return self._end_x

    @property
    def status(self) -> LevelStatus:
        if self.won:
            return LevelStatus.WON
        if self.lost:
            return LevelStatus.LOST
        return LevelStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return not (self.won or self.lost)

    @property
    def time_left(self) -> float:
        return max(0.0, self.max_time - self.time_taken)

    def advance(self, delta_seconds: float) -> None:
        """Add elapsed time. Has no effect once the level is won or lost."""
        delta = validate_delta(delta_seconds)
        if not self.is_active:
            return
        self.time_taken += delta
        self._check_time()

    def _check_time(self) -> None:
        if self.time_taken >= self.max_time and not self.lost:
            self.lost = True
            logger.info(f"Level lost: time budget of {self.max_time}s used up")

    def check_won(self) -> bool:
        """Compare every player coefficient with the enemy's.

        Sets ``won`` on every call, clearing it on a mismatch. A lost level
        never becomes won.
        """
        matches = all(
            abs(enemy - player) <= Config.WIN_TOLERANCE
            for enemy, player in zip(self.enemy_coefs, self.player_coefs)
        )
        self.won = matches and not self.lost
        return self.won

    def confirm(self) -> bool:
        """Submit the current guess, charging a time penalty when it is wrong."""
        if not self.is_active:
            return self.won
        if self.check_won():
            logger.info(f"Level won after {self.time_taken:.2f}s")
            return True
        self.time_taken += Config.WRONG_GUESS_PENALTY
        logger.debug(
            f"Wrong guess, {Config.WRONG_GUESS_PENALTY}s penalty "
            f"(time taken: {self.time_taken:.2f}s)"
        )
        self._check_time()
        return False

    def restart(self) -> None:
        """Reset the play state. The enemy polynomial and limits are kept."""
        self.time_taken = 0.0
        self.player_coefs[:] = [1.0] * len(self.enemy_coefs)
        self.won = False
        self.lost = False

    def domain_range_time(self, spacing: float) -> LinSpace:
        """The revealed part of the playable interval.

        Grows from ``start_x`` to ``end_x`` in proportion to the time taken.
        Not clamped, so it overshoots ``end_x`` past the budget.
        """
        spacing = validate_spacing(spacing)
        fraction = self.time_taken / self.max_time
        end = self._start_x + (self._end_x - self._start_x) * fraction
        return LinSpace(self._start_x, end, spacing)

    def domain_range_limits(self, spacing: float) -> LinSpace:
        """The full horizontal extent of the plot."""
        spacing = validate_spacing(spacing)
        return LinSpace(self.limits[0].x, self.limits[1].x, spacing)

    def eval_enemy_poly(self, x: float) -> float:
        return evaluate(self.enemy_coefs, x)

    def eval_player_poly(self, x: float) -> float:
        return evaluate(self.player_coefs, x)

    def sample_enemy_path(self, spacing: float = Config.ENEMY_PATH_SPACING) -> Tuple[np.ndarray, np.ndarray]:
        """(xs, ys) of the revealed enemy path."""
        xs = np.fromiter(self.domain_range_time(spacing), dtype=np.float64)
        ys = np.array([self.eval_enemy_poly(x) for x in xs], dtype=np.float64)
        return xs, ys

    def sample_player_path(self, spacing: float = Config.PLAYER_PATH_SPACING) -> Tuple[np.ndarray, np.ndarray]:
        """(xs, ys) of the player's prediction over the whole plot."""
        xs = np.fromiter(self.domain_range_limits(spacing), dtype=np.float64)
        ys = np.array([self.eval_player_poly(x) for x in xs], dtype=np.float64)
        return xs, ys

    def __repr__(self) -> str:
        return (
            f"Level(enemy_coefs={list(self.enemy_coefs)!r}, max_time={self.max_time!r}, "
            f"status={self.status.value!r})"
        )
