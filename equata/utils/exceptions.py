"""Exception hierarchy for equata."""

from typing import List, Optional, Sequence


class EquataError(Exception):
    """Base class for every error raised by equata."""


class ValidationError(EquataError):
    """Caller supplied an invalid argument."""


class LevelError(EquataError):
    """A level could not be built from its definition."""


class InsufficientRootsError(LevelError):
    """The enemy polynomial does not have two roots inside the scan window."""

    def __init__(self, message: str, roots: Optional[Sequence[float]] = None):
        super().__init__(message)
        self.roots: List[float] = list(roots or [])
