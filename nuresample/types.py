from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import Any
import numpy as np

from nuresample.errors import InvalidGridError
from nuresample.dsp.windowing import lanczos_window


@dataclass(frozen=True)
class UniformGrid:
    """Strictly increasing arithmetic sequence ``start + k * step``, k < count."""
    start: float
    step: float
    count: int

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.step)):
            raise InvalidGridError("UniformGrid start and step must be finite.")
        if self.step <= 0:
            raise InvalidGridError(f"UniformGrid step must be positive, got {self.step}.")
        if int(self.count) != self.count or self.count < 2:
            raise InvalidGridError(f"UniformGrid needs at least 2 points, got {self.count}.")
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "step", float(self.step))
        object.__setattr__(self, "count", int(self.count))

    @classmethod
    def from_range(cls, start: float, stop: float, count: int) -> "UniformGrid":
        """Build the grid running from ``start`` to ``stop`` inclusive."""
        if int(count) != count or count < 2:
            raise InvalidGridError(f"UniformGrid needs at least 2 points, got {count}.")
        start = float(start)
        stop = float(stop)
        if not stop > start:
            raise InvalidGridError("UniformGrid stop must be greater than start.")
        return cls(start, (stop - start) / (int(count) - 1), int(count))

    @property
    def stop(self) -> float:
        return self.start + self.step * (self.count - 1)

    def positions(self) -> np.ndarray:
        return self.start + self.step * np.arange(self.count, dtype=np.float64)

    def __len__(self) -> int:
        return int(self.count)


@dataclass(frozen=True)
class ResampleOptions:
    """
    Engine configuration.

    Attributes:
        min_supporting_points: Genuine input samples a window must hold before
            it is averaged directly; below this the window is upsampled.
        upsampling: Window (width in input steps) or factory used to
            interpolate virtual samples.
        workers: Threads used to process output points; 1 runs inline.
    """
    min_supporting_points: int = 4
    upsampling: Any = field(default_factory=lanczos_window)
    workers: int = 1


@dataclass(frozen=True)
class SmoothingProfile:
    name: str
    version: str
    xout: np.ndarray
    smoothing: Any
    options: ResampleOptions
