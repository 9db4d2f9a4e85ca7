"""
nuresample - Nonuniform Resampling and Logarithmic Smoothing

Resamples uniformly sampled data (e.g. a measured magnitude response) onto an
arbitrary increasing grid, smoothing with windows that scale with the local
output spacing.
"""
from nuresample.version import __version__
from nuresample.errors import (
    ResampleError,
    InvalidGridError,
    InvalidKernelParameterError,
    InvalidOptionsError,
    InsufficientCoverageError,
    DegenerateWeightError,
)
from nuresample.dsp.windowing import (
    Window,
    rect_window,
    tri_window,
    hann_window,
    lanczos_window,
)
from nuresample.types import UniformGrid, ResampleOptions, SmoothingProfile
from nuresample.metrics.grid import octspace, uniform_grid_from_samples
from nuresample.dsp.resample import resample, nuresample
from nuresample.metrics.smoothing import smooth_octave_fraction

__all__ = [
    "__version__",
    "ResampleError",
    "InvalidGridError",
    "InvalidKernelParameterError",
    "InvalidOptionsError",
    "InsufficientCoverageError",
    "DegenerateWeightError",
    "Window",
    "rect_window",
    "tri_window",
    "hann_window",
    "lanczos_window",
    "UniformGrid",
    "ResampleOptions",
    "SmoothingProfile",
    "octspace",
    "uniform_grid_from_samples",
    "resample",
    "nuresample",
    "smooth_octave_fraction",
]
