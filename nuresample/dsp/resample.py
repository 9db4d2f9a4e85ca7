"""Nonuniform resampling with output-spacing-adaptive smoothing windows."""
from __future__ import annotations
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Any, Callable
import numpy as np

from nuresample.dsp.windowing import Window, rect_window
from nuresample.errors import (
    DegenerateWeightError,
    InsufficientCoverageError,
    InvalidGridError,
    InvalidKernelParameterError,
    InvalidOptionsError,
)
from nuresample.metrics.grid import as_output_grid, local_spacing
from nuresample.types import ResampleOptions, UniformGrid

logger = logging.getLogger(__name__)

# index slack so samples sitting exactly on a window edge are not lost to rounding
_INDEX_EPS = 1e-9


def _as_factory(obj: Any, name: str) -> Callable[[float], Any]:
    """Turn a Window or a width factory into a factory."""
    if isinstance(obj, Window):
        return obj.scaled
    if callable(obj):
        return obj
    raise InvalidOptionsError(
        f"{name} must be a Window or a callable returning one, got {obj!r}."
    )


def _kernel_width(kernel: Any, name: str) -> float:
    if not callable(getattr(kernel, "weight", None)) or not hasattr(kernel, "width"):
        raise InvalidOptionsError(f"{name} factory returned {kernel!r}, which is not a window.")
    width = float(kernel.width)
    if not math.isfinite(width) or width <= 0:
        raise InvalidKernelParameterError(f"{name} width must be positive, got {width}.")
    return width


def _weights(kernel: Any, distance: np.ndarray) -> np.ndarray:
    return np.asarray(kernel.weight(distance), dtype=np.float64).reshape(distance.shape)


def _index_range(grid: UniformGrid, lo: float, hi: float) -> tuple[int, int]:
    """Half-open index range of grid samples in ``[lo, hi]``, clipped to the grid."""
    j0 = math.ceil((lo - grid.start) / grid.step - _INDEX_EPS)
    j1 = math.floor((hi - grid.start) / grid.step + _INDEX_EPS) + 1
    return max(0, j0), min(grid.count, j1)


def _check_options(options: ResampleOptions) -> tuple[int, int]:
    m = options.min_supporting_points
    if isinstance(m, bool) or not isinstance(m, (int, np.integer)) or m < 1:
        raise InvalidOptionsError(f"min_supporting_points must be a positive int, got {m!r}.")
    workers = options.workers
    if isinstance(workers, bool) or not isinstance(workers, (int, np.integer)) or workers < 1:
        raise InvalidOptionsError(f"workers must be a positive int, got {workers!r}.")
    return int(m), int(workers)


def _check_input(grid: UniformGrid, values) -> np.ndarray:
    if not isinstance(grid, UniformGrid):
        raise InvalidGridError(f"Input grid must be a UniformGrid, got {type(grid).__name__}.")
    y = np.array(values, dtype=np.float64)
    if y.ndim != 1:
        raise InvalidGridError("Input values must be 1D.")
    if y.size != grid.count:
        raise InvalidGridError(
            f"Input values length {y.size} does not match grid length {grid.count}."
        )
    return y


class _Plan:
    """Per-call state shared read-only by all output points."""

    def __init__(self, grid, y, xout, kernels, reaches, upsampler, min_points):
        self.grid = grid
        self.y = y
        self.xout = xout
        self.kernels = kernels
        self.reaches = reaches
        self.upsampler = upsampler
        self.min_points = min_points

    def interpolate(self, p: float) -> float | None:
        """Upsampled value at ``p``; None when the upsampling weights vanish."""
        grid = self.grid
        j0, j1 = _index_range(grid, p - self.upsampler.width, p + self.upsampler.width)
        if j1 <= j0:
            return None
        x = grid.start + grid.step * np.arange(j0, j1, dtype=np.float64)
        w = _weights(self.upsampler, x - p)
        wsum = float(np.sum(w))
        if wsum == 0.0 or not math.isfinite(wsum):
            return None
        return float(np.sum(w * self.y[j0:j1]) / wsum)

    def point(self, i: int) -> float:
        c = float(self.xout[i])
        r = float(self.reaches[i])
        kernel = self.kernels[i]
        j0, j1 = _index_range(self.grid, c - r, c + r)
        if j1 - j0 >= self.min_points:
            x = self.grid.start + self.grid.step * np.arange(j0, j1, dtype=np.float64)
            yy = self.y[j0:j1]
        else:
            m = self.min_points
            x = _virtual_positions(c, r, m)
            yy = np.empty(m, dtype=np.float64)
            for k in range(m):
                v = self.interpolate(float(x[k]))
                if v is None:
                    raise DegenerateWeightError(i, c)
                yy[k] = v
        w = _weights(kernel, x - c)
        wsum = float(np.sum(w))
        if wsum == 0.0 or not math.isfinite(wsum):
            raise DegenerateWeightError(i, c)
        return float(np.sum(w * yy) / wsum)

    def chunk(self, idx: np.ndarray) -> list[float]:
        return [self.point(int(i)) for i in idx]


def _virtual_positions(c: float, r: float, m: int) -> np.ndarray:
    """Centres of ``m`` equal slices of ``[c - r, c + r]``."""
    return c + r * ((2.0 * np.arange(m, dtype=np.float64) + 1.0) / m - 1.0)


def _check_coverage(grid: UniformGrid, xout, reaches, counts, support: float, min_points: int) -> int:
    """
    Raise for the first output point the input cannot support; return upsampled count.

    Output positions must lie inside ``[start, stop]``. An upsampled window is
    only accepted when every virtual sample has the upsampling kernel's full
    support ``[p - support, p + support]`` inside the grid.
    """
    last = grid.count - 1
    upsampled = 0
    for i, (c, r, n) in enumerate(zip(xout, reaches, counts)):
        pos = (c - grid.start) / grid.step
        if pos < -_INDEX_EPS or pos > last + _INDEX_EPS:
            logger.debug("output point %d at %g outside input range", i, c)
            raise InsufficientCoverageError(i, c, "output position lies outside the input range")
        if n >= min_points:
            continue
        upsampled += 1
        p = _virtual_positions(float(c), float(r), min_points)
        lo = (p[0] - support - grid.start) / grid.step
        hi = (p[-1] + support - grid.start) / grid.step
        if lo < -_INDEX_EPS or hi > last + _INDEX_EPS:
            logger.debug("output point %d at %g: upsampling support leaves the grid", i, c)
            raise InsufficientCoverageError(
                i, c,
                "upsampling the window would read input beyond the grid ends"
            )
    return upsampled


def resample(
    grid: UniformGrid,
    values,
    xout,
    smoothing: Window | Callable[[float], Any] | None = None,
    options: ResampleOptions | None = None
) -> np.ndarray:
    """
    Resample uniformly sampled data onto an arbitrary increasing grid.

    Each output point is the weighted average of the input samples under a
    smoothing window whose width is scaled by the local output spacing, so a
    logarithmic output grid gives constant smoothing in octaves. Windows that
    hold fewer than ``options.min_supporting_points`` input samples are filled
    with samples interpolated by ``options.upsampling`` (width in input steps).

    Args:
        grid: Positions of the input samples
        values: Input samples, one per grid position
        xout: Strictly increasing output positions
        smoothing: Window whose width is in units of output spacing, or a
            callable mapping the local spacing to a window (default rect 0.5)
        options: Engine options (default ResampleOptions())

    Returns:
        Array with one value per output position

    Raises:
        InvalidGridError: Malformed input or output grid
        InsufficientCoverageError: An output point lies outside the input grid,
            or its upsampled window needs input beyond the grid ends
        DegenerateWeightError: Window weights sum to zero at an output point
    """
    options = options or ResampleOptions()
    min_points, workers = _check_options(options)
    y = _check_input(grid, values)
    x = as_output_grid(xout)

    smooth_factory = _as_factory(rect_window() if smoothing is None else smoothing, "smoothing")
    upsampler = _as_factory(options.upsampling, "upsampling")(grid.step)
    support = _kernel_width(upsampler, "upsampling")

    spacing = local_spacing(x, grid.step)
    kernels = [smooth_factory(float(s)) for s in spacing]
    reaches = np.array([_kernel_width(k, "smoothing") for k in kernels], dtype=np.float64)
    counts = [
        j1 - j0 for j0, j1 in (
            _index_range(grid, c - r, c + r) for c, r in zip(x, reaches)
        )
    ]
    upsampled = _check_coverage(grid, x, reaches, counts, support, min_points)
    if upsampled:
        logger.debug("%d of %d output points upsampled", upsampled, x.size)

    plan = _Plan(grid, y, x, kernels, reaches, upsampler, min_points)
    if workers == 1 or x.size < 2:
        out = plan.chunk(np.arange(x.size))
    else:
        chunks = np.array_split(np.arange(x.size), min(workers, x.size))
        out = []
        with ThreadPoolExecutor(max_workers=len(chunks)) as ex:
            for part in ex.map(plan.chunk, chunks):
                out.extend(part)
    return np.array(out, dtype=np.float64)


def nuresample(
    grid: UniformGrid,
    values,
    xout,
    smoothing: Window | Callable[[float], Any] | None = None,
    *,
    min_supporting_points: int = 4,
    upsampling: Window | Callable[[float], Any] | None = None,
    workers: int = 1
) -> np.ndarray:
    """Keyword-argument form of ``resample``."""
    options = ResampleOptions(min_supporting_points=min_supporting_points, workers=workers)
    if upsampling is not None:
        options = replace(options, upsampling=upsampling)
    return resample(grid, values, xout, smoothing, options)
