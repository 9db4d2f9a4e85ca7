from __future__ import annotations

import numpy as np
import pytest

from nuresample.dsp.windowing import HannWindow, LanczosWindow, TriWindow
from nuresample.profiles.loader import (
    apply_smoothing_profile,
    load_smoothing_profile,
    smoothing_profile_from_dict,
)
from nuresample.profiles.validator import validate_smoothing_profile_dict
from nuresample.types import UniformGrid

from tests.conftest import build_profile_dict, write_profile


def test_validate_smoothing_profile_accepts_defaults():
    validate_smoothing_profile_dict(build_profile_dict())


def test_validate_smoothing_profile_rejects_missing_key():
    profile = build_profile_dict()
    profile.pop("smoothing")
    with pytest.raises(ValueError, match="missing key: smoothing"):
        validate_smoothing_profile_dict(profile)


def test_validate_collects_all_errors():
    profile = build_profile_dict(
        smoothing={"window": "gauss", "width": -1},
        options={"min_supporting_points": 0}
    )
    with pytest.raises(ValueError) as exc:
        validate_smoothing_profile_dict(profile)
    msg = str(exc.value)
    assert "smoothing.window must be one of" in msg
    assert "smoothing.width must be > 0." in msg
    assert "options.min_supporting_points must be a positive int." in msg


def test_validate_rejects_unsorted_explicit_grid():
    profile = build_profile_dict()
    profile["output_grid"] = {"type": "explicit", "points": [100.0, 50.0]}
    with pytest.raises(ValueError, match="strictly increasing"):
        validate_smoothing_profile_dict(profile)


def test_load_smoothing_profile_builds_windows(tmp_path):
    profile = build_profile_dict(
        smoothing={"window": "hann"},
        upsampling={"window": "tri"},
        options={"min_supporting_points": 2, "workers": 2}
    )
    loaded = load_smoothing_profile(str(write_profile(tmp_path, profile)))
    assert loaded.name == "test_profile"
    assert isinstance(loaded.smoothing, HannWindow)
    assert loaded.smoothing.width == 1.0
    assert isinstance(loaded.options.upsampling, TriWindow)
    assert loaded.options.min_supporting_points == 2
    assert loaded.options.workers == 2
    assert loaded.xout[0] == 20.0
    assert loaded.xout[-1] == 20000.0
    assert loaded.options.upsampling.width == 1.0


def test_profile_default_upsampling_is_lanczos3():
    loaded = smoothing_profile_from_dict(build_profile_dict())
    assert isinstance(loaded.options.upsampling, LanczosWindow)
    assert loaded.options.upsampling.a == 3
    assert loaded.options.upsampling.width == 3.0
    assert loaded.options.min_supporting_points == 4


def test_apply_smoothing_profile():
    profile = build_profile_dict()
    profile["output_grid"] = {"type": "explicit", "points": [100.0, 200.0, 400.0]}
    loaded = smoothing_profile_from_dict(profile)
    grid = UniformGrid.from_range(20.0, 20000.0, 10000)
    out = apply_smoothing_profile(loaded, grid, np.full(10000, -3.0))
    assert np.allclose(out, -3.0)
