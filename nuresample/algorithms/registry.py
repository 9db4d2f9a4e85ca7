"""Window registry: stable ids, constructors and descriptions."""
from __future__ import annotations

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


WINDOW_TYPES = ("rect", "tri", "hann", "lanczos")

# smoothing widths giving comparable smoothing at one output point per resolution step
DEFAULT_SMOOTHING_WIDTHS = {
    "rect": 0.5,
    "tri": 1.0,
    "hann": 1.0,
    "lanczos": 1.0,
}


def build_window(spec: dict, *, default_width: float | None = None) -> Window:
    """
    Build a window from a ``{"window": <type>, "width": ..., "a": ...}`` mapping.

    ``width`` falls back to ``default_width`` and then to the constructor default.
    """
    kind = spec.get("window")
    width = spec.get("width", default_width)
    if kind == "rect":
        return rect_window() if width is None else rect_window(width)
    if kind == "tri":
        return tri_window() if width is None else tri_window(width)
    if kind == "hann":
        return hann_window() if width is None else hann_window(width)
    if kind == "lanczos":
        return lanczos_window(spec.get("a", 3), width)
    raise ValueError(f"Unknown window type {kind!r}; expected one of {', '.join(WINDOW_TYPES)}.")


def window_type(window: Window) -> str:
    """Registry type name of a window instance."""
    for cls, name in (
        (RectWindow, "rect"),
        (TriWindow, "tri"),
        (HannWindow, "hann"),
        (LanczosWindow, "lanczos"),
    ):
        if isinstance(window, cls):
            return name
    raise ValueError(f"Window {window!r} is not a registered window type.")


def describe_window(window: Window) -> dict:
    """Describe a window as a plain ``{"id", "params"}`` dict."""
    kind = window_type(window)
    params: dict = {"type": kind, "width": float(window.width)}
    if isinstance(window, LanczosWindow):
        params["a"] = int(window.a)
    return {"id": f"window_{kind}_v1", "params": params}

