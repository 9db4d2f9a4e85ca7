"""Window kernels for nuresample."""

from nuresample.dsp.windowing import (
    Window,
    RectWindow,
    TriWindow,
    HannWindow,
    LanczosWindow,
    rect_window,
    tri_window,
    hann_window,
    lanczos_window,
)

__all__ = [
    "Window",
    "RectWindow",
    "TriWindow",
    "HannWindow",
    "LanczosWindow",
    "rect_window",
    "tri_window",
    "hann_window",
    "lanczos_window",
]
