"""equata - predict the enemy's polynomial path before time runs out."""

from .core import (
    LinSpace,
    Level,
    LevelStatus,
    Point,
    evaluate,
    find_roots,
    value_range,
)
from .game import Actor, PlayState
from .levels import CATALOG, DIFFICULTIES, LevelSpec, get_spec, load_level, random_spec
from .utils.config import Config
from .utils.exceptions import (
    EquataError,
    ValidationError,
    LevelError,
    InsufficientRootsError,
)

__version__ = "0.1.0"

__all__ = [
    "LinSpace", "Level", "LevelStatus", "Point",
    "evaluate", "find_roots", "value_range",
    "Actor", "PlayState",
    "CATALOG", "DIFFICULTIES", "LevelSpec", "get_spec", "load_level", "random_spec",
    "Config",
    "EquataError", "ValidationError", "LevelError", "InsufficientRootsError",
]
