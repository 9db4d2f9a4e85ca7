from __future__ import annotations
import json
import numpy as np

from nuresample.algorithms.registry import DEFAULT_SMOOTHING_WIDTHS, build_window
from nuresample.dsp.resample import resample
from nuresample.metrics.grid import octspace
from nuresample.profiles.validator import validate_smoothing_profile_dict
from nuresample.types import ResampleOptions, SmoothingProfile, UniformGrid


def smoothing_profile_from_dict(j: dict) -> SmoothingProfile:
    """
    Build a smoothing profile from its parsed JSON form.

    Args:
        j: Profile mapping (validated here)

    Returns:
        SmoothingProfile with the output grid, windows and engine options
    """
    validate_smoothing_profile_dict(j)

    grid = j["output_grid"]
    if grid["type"] == "octspace":
        xout = octspace(
            float(grid["f_low_hz"]),
            float(grid["f_high_hz"]),
            float(grid["octave_step"])
        )
    else:
        xout = np.array(grid["points"], dtype=np.float64)

    smoothing_spec = j["smoothing"]
    smoothing = build_window(
        smoothing_spec,
        default_width=DEFAULT_SMOOTHING_WIDTHS[smoothing_spec["window"]]
    )

    opts = j.get("options", {})
    options = ResampleOptions(
        min_supporting_points=int(opts.get("min_supporting_points", 4)),
        workers=int(opts.get("workers", 1)),
    )
    if "upsampling" in j:
        options = ResampleOptions(
            min_supporting_points=options.min_supporting_points,
            upsampling=build_window(j["upsampling"]),
            workers=options.workers,
        )

    return SmoothingProfile(
        name=j["profile"]["name"],
        version=str(j["profile"].get("version", "1.0")),
        xout=xout,
        smoothing=smoothing,
        options=options,
    )


def load_smoothing_profile(path: str) -> SmoothingProfile:
    """Load and validate a smoothing profile from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        j = json.load(f)
    return smoothing_profile_from_dict(j)


def apply_smoothing_profile(
    profile: SmoothingProfile,
    grid: UniformGrid,
    values: np.ndarray
) -> np.ndarray:
    """Resample ``values`` onto the profile's output grid."""
    return resample(grid, values, profile.xout, profile.smoothing, profile.options)
