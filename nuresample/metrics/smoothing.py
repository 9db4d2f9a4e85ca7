from __future__ import annotations
import numpy as np

from nuresample.algorithms.registry import DEFAULT_SMOOTHING_WIDTHS, build_window
from nuresample.dsp.resample import resample
from nuresample.dsp.windowing import Window
from nuresample.errors import InvalidGridError, InvalidOptionsError
from nuresample.metrics.grid import octspace, uniform_grid_from_samples
from nuresample.types import ResampleOptions, UniformGrid


def smooth_octave_fraction(
    freqs_hz,
    y: np.ndarray,
    octave_fraction: float = 1 / 12,
    *,
    f_low: float | None = None,
    f_high: float | None = None,
    oversampling: int = 1,
    window: str | Window = "rect",
    options: ResampleOptions | None = None
) -> tuple[np.ndarray, np.ndarray]:
    """
    Smooth a linearly sampled spectrum with constant width in octaves.

    Output points are spaced ``octave_fraction / oversampling`` octaves apart
    and the window width is multiplied by ``oversampling``, so oversampling
    adds points without changing the amount of smoothing.

    Args:
        freqs_hz: UniformGrid or linearly spaced frequencies in Hz
        y: Values to smooth (same length as freqs_hz)
        octave_fraction: Smoothing resolution in octaves
        f_low: Lowest output frequency (default: first positive input frequency)
        f_high: Highest output frequency (default: last input frequency)
        oversampling: Output points per resolution step
        window: Registered window type or a Window in units of output spacing
        options: Engine options

    Returns:
        Tuple of (output frequencies, smoothed values)
    """
    if isinstance(freqs_hz, UniformGrid):
        grid = freqs_hz
    else:
        grid = uniform_grid_from_samples(freqs_hz)
    if octave_fraction <= 0:
        raise InvalidGridError("octave_fraction must be positive.")
    if isinstance(oversampling, bool) or not isinstance(oversampling, int) or oversampling < 1:
        raise InvalidOptionsError("oversampling must be a positive int.")

    if f_low is None:
        # f=0 has no place on a log axis
        f_low = grid.start if grid.start > 0 else grid.start + grid.step * (int(-grid.start // grid.step) + 1)
    if f_high is None:
        f_high = grid.stop
    f_out = octspace(f_low, f_high, octave_fraction / oversampling)

    if isinstance(window, Window):
        base = window
    else:
        base = build_window({"window": window}, default_width=DEFAULT_SMOOTHING_WIDTHS.get(window))
    smoothing = base.scaled(oversampling)
    return f_out, resample(grid, y, f_out, smoothing, options)
