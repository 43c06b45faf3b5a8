"""Low level audio descriptors for the analysis of input signals."""

from __future__ import annotations

from collections import deque

from .common import clip


class ZeroCrossing:
    """Zero crossing rate over a sliding analysis window.

    Samples are fed one at a time to :meth:`process`. Each time a hop is
    complete, the rate of sign changes in the most recent ``size`` samples
    is returned; between hops the method returns ``None``.
    """

    def __init__(self, size: int, overlap: float = 0.0) -> None:
        if size < 1:
            raise ValueError("window size must be positive")
        self._size = size
        self._window: deque[float] = deque([0.0] * size, maxlen=size)
        self._count = 0
        self._skip = size
        self._overlap = 0.0
        self.overlap = overlap

    @property
    def size(self) -> int:
        """Length of the analysis window, in samples."""
        return self._size

    @property
    def overlap(self) -> float:
        """Window overlap ratio: 0 means no overlap, 1 total overlap."""
        return self._overlap

    @overlap.setter
    def overlap(self, value: float) -> None:
        self._overlap = value
        self._skip = clip((1.0 - value) * self._size, 1, self._size)

    @property
    def hop(self) -> int:
        """Number of samples between two consecutive outputs."""
        return self._skip

    def process(self, sample: float) -> float | None:
        """Take one input sample; return the crossing rate when a hop ends."""
        self._window.append(sample)
        self._count = (self._count + 1) % self._skip
        if self._count:
            return None
        samples = list(self._window)
        crossings = sum(
            (prev >= 0.0 and cur < 0.0) or (prev <= 0.0 and cur > 0.0)
            for prev, cur in zip(samples, samples[1:])
        )
        return crossings / self._size