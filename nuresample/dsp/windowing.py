"""Window kernels used for smoothing and upsampling."""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
import math
import numpy as np

from nuresample.errors import InvalidKernelParameterError


@dataclass(frozen=True)
class Window(ABC):
    """
    Symmetric weighting function with compact support ``|distance| <= width``.

    ``width`` is measured in whatever unit the caller scales it to: the
    engine scales smoothing windows by the local output spacing and
    upsampling windows by the input step (see ``scaled``).
    """
    width: float = 1.0

    def __post_init__(self) -> None:
        w = self.width
        if isinstance(w, bool) or not isinstance(w, (int, float, np.integer, np.floating)):
            raise InvalidKernelParameterError(f"Window width must be a number, got {w!r}.")
        if not math.isfinite(w) or w <= 0:
            raise InvalidKernelParameterError(f"Window width must be positive, got {w}.")
        object.__setattr__(self, "width", float(w))

    @abstractmethod
    def _shape(self, u: np.ndarray) -> np.ndarray:
        """Weight as a function of ``u = |distance| / width``."""

    def weight(self, distance):
        """Weight at ``distance`` from the window centre (scalar or array)."""
        u = np.abs(np.asarray(distance, dtype=np.float64)) / self.width
        w = self._shape(u)
        if w.ndim == 0:
            return float(w)
        return w

    __call__ = weight

    def scaled(self, scale: float) -> "Window":
        """Return the same window shape with its width multiplied by ``scale``."""
        return replace(self, width=self.width * float(scale))


@dataclass(frozen=True)
class RectWindow(Window):
    def _shape(self, u: np.ndarray) -> np.ndarray:
        return np.where(u <= 1.0, 1.0, 0.0)


@dataclass(frozen=True)
class TriWindow(Window):
    def _shape(self, u: np.ndarray) -> np.ndarray:
        return np.maximum(0.0, 1.0 - u)


@dataclass(frozen=True)
class HannWindow(Window):
    def _shape(self, u: np.ndarray) -> np.ndarray:
        return np.where(u <= 1.0, 0.5 + 0.5 * np.cos(np.pi * np.minimum(u, 1.0)), 0.0)


@dataclass(frozen=True)
class LanczosWindow(Window):
    """
    Lanczos kernel with ``a`` lobes on each side and support radius ``width``.

    ``width`` is the support radius, not the width of one lobe: the weight is
    ``sinc(a * d / width) * sinc(d / width)`` for ``|d| < width`` and 0
    beyond, so the support is never ``a * width``. ``lanczos_window(a)``
    uses ``width == a``, which gives ``sinc(d) * sinc(d / a)`` for
    ``|d| < a``, the usual Lanczos-a interpolation kernel in units of input
    samples.
    """
    a: int = 3

    def __post_init__(self) -> None:
        a = self.a
        if isinstance(a, bool) or not isinstance(a, (int, np.integer)) or a < 1:
            raise InvalidKernelParameterError(
                f"Lanczos lobe count must be a positive integer, got {a!r}."
            )
        object.__setattr__(self, "a", int(a))
        super().__post_init__()

    def _shape(self, u: np.ndarray) -> np.ndarray:
        return np.where(u < 1.0, np.sinc(self.a * u) * np.sinc(u), 0.0)


def rect_window(width: float = 0.5) -> RectWindow:
    """Rectangular window; the default smoothing window."""
    return RectWindow(width=width)


def tri_window(width: float = 1.0) -> TriWindow:
    """Triangular window; linear interpolation when used for upsampling."""
    return TriWindow(width=width)


def hann_window(width: float = 1.0) -> HannWindow:
    """Raised cosine window."""
    return HannWindow(width=width)


def lanczos_window(a: int = 3, width: float | None = None) -> LanczosWindow:
    """Lanczos-a window; the default upsampling window."""
    if width is None:
        width = a
    return LanczosWindow(width=width, a=a)
