"""Smoothing profile validation helpers."""
from __future__ import annotations
from typing import Any
import math

from nuresample.algorithms.registry import WINDOW_TYPES


def _is_number(v: Any) -> bool:
    return (
        isinstance(v, (int, float))
        and not isinstance(v, bool)
        and not math.isnan(v)
        and not math.isinf(v)
    )


def _validate_window(name: str, spec: Any, err) -> None:
    if not isinstance(spec, dict):
        err(f"{name} must be an object.")
        return
    kind = spec.get("window")
    if kind not in WINDOW_TYPES:
        err(f"{name}.window must be one of {', '.join(WINDOW_TYPES)}.")
    width = spec.get("width")
    if width is not None and (not _is_number(width) or width <= 0):
        err(f"{name}.width must be > 0.")
    if kind == "lanczos":
        a = spec.get("a", 3)
        if not isinstance(a, int) or isinstance(a, bool) or a < 1:
            err(f"{name}.a must be a positive int.")


def validate_smoothing_profile_dict(j: dict) -> None:
    """Validate smoothing profile structure and core constraints."""
    errors: list[str] = []

    def err(msg: str) -> None:
        errors.append(msg)

    for k in ("profile", "output_grid", "smoothing"):
        if k not in j:
            err(f"missing key: {k}")

    if errors:
        raise ValueError("; ".join(errors))

    profile = j["profile"]
    if not isinstance(profile, dict) or not isinstance(profile.get("name"), str) or not profile.get("name"):
        err("profile.name must be a non-empty string.")

    grid = j["output_grid"]
    grid_type = grid.get("type") if isinstance(grid, dict) else None
    if grid_type == "octspace":
        lo = grid.get("f_low_hz")
        hi = grid.get("f_high_hz")
        step = grid.get("octave_step")
        if not _is_number(lo) or lo <= 0:
            err("output_grid.f_low_hz must be > 0.")
        if not _is_number(hi) or (_is_number(lo) and hi <= lo):
            err("output_grid.f_high_hz must be greater than f_low_hz.")
        if not _is_number(step) or step <= 0:
            err("output_grid.octave_step must be > 0.")
    elif grid_type == "explicit":
        points = grid.get("points")
        if not isinstance(points, list) or not points:
            err("output_grid.points must be a non-empty list.")
        else:
            last = None
            for i, p in enumerate(points):
                if not _is_number(p):
                    err(f"output_grid.points[{i}] must be a finite number.")
                    break
                if last is not None and p <= last:
                    err("output_grid.points must be strictly increasing.")
                    break
                last = p
    else:
        err("output_grid.type must be octspace or explicit.")

    _validate_window("smoothing", j["smoothing"], err)
    if "upsampling" in j:
        _validate_window("upsampling", j["upsampling"], err)

    options = j.get("options", {})
    if not isinstance(options, dict):
        err("options must be an object.")
    else:
        m = options.get("min_supporting_points", 4)
        if not isinstance(m, int) or isinstance(m, bool) or m < 1:
            err("options.min_supporting_points must be a positive int.")
        workers = options.get("workers", 1)
        if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
            err("options.workers must be a positive int.")

    if errors:
        raise ValueError("; ".join(errors))
