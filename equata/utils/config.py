"""Global configuration for equata."""

import os


class Config:
    """Numeric constants shared by the level model."""

    # Root scan window
    SCAN_START = -10.0
    SCAN_END = 10.0
    SCAN_STEP = 0.1

    # Bisection refinement
    BISECTION_MAX_ITERATIONS = 20
    BISECTION_TOLERANCE = 1e-10

    # Domain derivation
    RANGE_STEP = 0.01
    PLOT_MARGIN = 1.0

    # Gameplay
    WIN_TOLERANCE = 0.01
    WRONG_GUESS_PENALTY = 1.0
    DEFAULT_MAX_TIME = 100.0
    DEFAULT_COEFFICIENTS = (-1.0, 0.0, 1.0)

    # Sampling used for the rendered paths
    ENEMY_PATH_SPACING = 0.01
    PLAYER_PATH_SPACING = 0.025

    @staticmethod
    def get_log_level() -> str:
        """Log level name, overridable through EQUATA_LOG_LEVEL."""
        return os.getenv("EQUATA_LOG_LEVEL", "INFO").upper()
