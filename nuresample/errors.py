"""Error types raised by the resampling engine and window library."""
from __future__ import annotations


class ResampleError(ValueError):
    """Base class for all nuresample input and coverage errors."""


class InvalidGridError(ResampleError):
    """Input or output grid is not strictly increasing, too short or non-finite."""


class InvalidKernelParameterError(ResampleError):
    """Window constructed with a non-positive width or lobe count."""


class InvalidOptionsError(ResampleError):
    """Engine options are out of range or of the wrong type."""


class InsufficientCoverageError(ResampleError):
    """Output point cannot be supported by input data, even after upsampling."""

    def __init__(self, index: int, position: float, detail: str = ""):
        self.index = int(index)
        self.position = float(position)
        msg = (
            f"Not enough input points around output point {self.index} "
            f"(x={self.position:g}). Narrow the requested output range"
        )
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg + ".")


class DegenerateWeightError(ResampleError):
    """Window weights sum to zero at an output point."""

    def __init__(self, index: int, position: float):
        self.index = int(index)
        self.position = float(position)
        super().__init__(
            f"Window weights sum to zero at output point {self.index} "
            f"(x={self.position:g})."
        )
