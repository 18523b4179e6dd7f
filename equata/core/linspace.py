"""Lazy arithmetic progression used to sample a continuous domain."""

from __future__ import annotations

from typing import Iterator


class LinSpace:
    """Iterate ``start, start + spacing, ...`` while the value is <= ``end``.

    The step is accumulated by repeated addition, so values drift slightly
    from ``start + i * spacing`` on long runs. An exhausted instance stays
    exhausted; build a new one to sample the range again.

    >>> list(LinSpace(0.0, 1.0, 0.5))
    [0.0, 0.5, 1.0]
    """

    __slots__ = ("start", "end", "spacing", "_current")

    def __init__(self, start: float, end: float, spacing: float):
        self.start = start
        self.end = end
        self.spacing = spacing
        self._current = start

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        value = self._current
        if value > self.end:
            raise StopIteration
        self._current = value + self.spacing
        return value

    def __repr__(self) -> str:
        return f"LinSpace(start={self.start!r}, end={self.end!r}, spacing={self.spacing!r})"
