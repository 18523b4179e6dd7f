"""Entry point for the path prediction game.

The host engine drives an ``Actor``: it ticks elapsed time every frame,
forwards coefficient edits and confirm clicks, and reads back the paths to
draw.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Sequence

from . import levels
from .core.level import Level
from .core.polynomial import coefficient_labels, equation_template
from .utils.config import Config
from .utils.logger import logger
from .utils.validation import validate_coefficient, validate_difficulty, validate_index


class PlayState(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"


class Actor:
    def __init__(self, level: int = 1, difficulty: str = "easy"):
        self.spec_def = levels.get_spec(level, difficulty)
        self.level = self.spec_def.build()
        self.play_state = PlayState.PLAYING

    async def reset(
        self,
        level: int = 1,
        difficulty: str = "easy",
        seed: Optional[int] = None,
        random_level: bool = False,
        coefficients: Optional[Sequence[float]] = None,
        max_time: Optional[float] = None,
    ) -> dict:
        if coefficients is not None:
            # Level first, so callers see EquataError subclasses, not pydantic errors
            difficulty = validate_difficulty(difficulty, levels.DIFFICULTIES)
            budget = Config.DEFAULT_MAX_TIME if max_time is None else max_time
            custom = Level(coefficients, budget)
            self.spec_def = levels.LevelSpec(
                difficulty=difficulty,
                coefficients=custom.enemy_coefs,
                max_time=custom.max_time,
            )
        elif random_level:
            self.spec_def = levels.random_spec(difficulty, seed)
        else:
            self.spec_def = levels.get_spec(level, difficulty)
        self.level = self.spec_def.build()
        self.play_state = PlayState.PLAYING
        logger.info(f"Started {self.spec_def.title}")
        return await self.spec()

    async def spec(self) -> dict:
        n = len(self.level.enemy_coefs)
        low, high = self.level.limits
        return {
            "task": "Predict the enemy path",
            "title": self.spec_def.title,
            "equation": equation_template(n),
            "coefficients": coefficient_labels(n),
            "max_time": self.level.max_time,
            "limits": [[low.x, low.y], [high.x, high.y]],
        }

    @property
    def playing(self) -> bool:
        return self.play_state is PlayState.PLAYING and self.level.is_active

    async def tick(self, delta_seconds: float) -> dict:
        """Advance the clock; time only runs while playing."""
        if self.playing:
            self.level.advance(delta_seconds)
        return await self.state()

    async def pause(self) -> dict:
        self.play_state = PlayState.PAUSED
        return await self.state()

    async def resume(self) -> dict:
        if self.level.is_active:
            self.play_state = PlayState.PLAYING
        return await self.state()

    async def set_coefficient(self, index: int, value: float) -> dict:
        """Edit one coefficient of the prediction. Ignored unless playing."""
        validate_index(index, len(self.level.player_coefs))
        value = validate_coefficient(value, f"coefficients[{index}]")
        if self.playing:
            self.level.player_coefs[index] = value
        return await self.state()

    async def confirm(self) -> dict:
        correct = self.level.confirm() if self.playing else self.level.won
        result = await self.state()
        result["correct"] = correct
        return result

    async def restart(self) -> dict:
        self.level.restart()
        self.play_state = PlayState.PLAYING
        return await self.state()

    async def state(self) -> dict:
        return {
            "status": self.level.status.value,
            "play_state": self.play_state.value,
            "time_taken": self.level.time_taken,
            "time_left": self.level.time_left,
            "player_coefs": list(self.level.player_coefs),
        }

    async def paths(self) -> Dict[str, list]:
        enemy_x, enemy_y = self.level.sample_enemy_path()
        player_x, player_y = self.level.sample_player_path()
        return {
            "enemy": [enemy_x.tolist(), enemy_y.tolist()],
            "player": [player_x.tolist(), player_y.tolist()],
        }
