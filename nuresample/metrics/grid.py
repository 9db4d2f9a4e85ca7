from __future__ import annotations
import math
import numpy as np

from nuresample.errors import InvalidGridError
from nuresample.types import UniformGrid


def octspace(low: float, high: float, step: float) -> np.ndarray:
    """
    Geometric sequence from ``low`` to ``high`` inclusive, spaced by at most ``step`` octaves.

    Produces ``ceil(log2(high / low) / step) + 1`` points.
    """
    low = float(low)
    high = float(high)
    step = float(step)
    if not (math.isfinite(low) and math.isfinite(high) and math.isfinite(step)):
        raise InvalidGridError("octspace bounds and step must be finite.")
    if low <= 0:
        raise InvalidGridError("octspace lower bound must be positive.")
    if high <= low:
        raise InvalidGridError("octspace upper bound must exceed the lower bound.")
    if step <= 0:
        raise InvalidGridError("octspace step must be positive.")
    # tolerate float noise when the span is an exact multiple of the step
    n_steps = max(1, math.ceil(math.log2(high / low) / step - 1e-9))
    out = np.geomspace(low, high, n_steps + 1)
    out[0] = low
    out[-1] = high
    return out


def as_output_grid(xout) -> np.ndarray:
    """Validate an output grid and return it as a new 1D float64 array."""
    if np.ndim(xout) != 1:
        raise InvalidGridError("Output grid must be a 1D sequence.")
    x = np.array(xout, dtype=np.float64)
    if x.size < 1:
        raise InvalidGridError("Output grid must contain at least 1 point.")
    if not np.all(np.isfinite(x)):
        raise InvalidGridError("Output grid must contain only finite values.")
    if np.any(np.diff(x) <= 0):
        raise InvalidGridError("Output grid must be strictly increasing.")
    return x


def local_spacing(xout: np.ndarray, fallback: float) -> np.ndarray:
    """
    Local distance between neighbouring output points.

    Interior points use half the distance between their two neighbours; the
    end points use the one-sided distance to their single neighbour. A
    single-point grid has no neighbours and gets ``fallback``.
    """
    x = np.asarray(xout, dtype=np.float64)
    if x.size == 1:
        return np.array([float(fallback)], dtype=np.float64)
    ds = np.empty_like(x)
    ds[0] = x[1] - x[0]
    ds[-1] = x[-1] - x[-2]
    ds[1:-1] = 0.5 * (x[2:] - x[:-2])
    return ds


def uniform_grid_from_samples(freqs: np.ndarray, *, tolerance: float = 0.01) -> UniformGrid:
    """
    Approximate linearly spaced sample positions with an exact UniformGrid.

    Args:
        freqs: Measured positions (e.g. FFT bin frequencies), strictly increasing
        tolerance: Largest allowed deviation from the fitted grid, in steps

    Returns:
        UniformGrid spanning ``freqs[0]`` to ``freqs[-1]`` with ``len(freqs)`` points
    """
    f = np.asarray(freqs, dtype=np.float64)
    if f.ndim != 1 or f.size < 2:
        raise InvalidGridError("uniform_grid_from_samples expects a 1D array with at least 2 points.")
    if not np.all(np.isfinite(f)):
        raise InvalidGridError("Sample positions must be finite.")
    if np.any(np.diff(f) <= 0):
        raise InvalidGridError("Sample positions must be strictly increasing.")
    grid = UniformGrid.from_range(f[0], f[-1], f.size)
    dev = float(np.max(np.abs(f - grid.positions()))) / grid.step
    if dev > tolerance:
        raise InvalidGridError(
            f"Sample positions are not uniformly spaced (max deviation {dev:.3g} steps)."
        )
    return grid
