from __future__ import annotations

import json
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def build_profile_dict(
    *,
    smoothing: dict | None = None,
    upsampling: dict | None = None,
    options: dict | None = None
) -> dict:
    profile = {
        "profile": {"name": "test_profile", "version": "1.0"},
        "output_grid": {
            "type": "octspace",
            "f_low_hz": 20.0,
            "f_high_hz": 20000.0,
            "octave_step": 1 / 12
        },
        "smoothing": smoothing or {"window": "rect", "width": 0.5},
        "options": options or {"min_supporting_points": 4, "workers": 1},
    }
    if upsampling is not None:
        profile["upsampling"] = upsampling
    return profile


def write_profile(tmp_path: Path, profile: dict) -> Path:
    path = tmp_path / "profile.smooth.json"
    path.write_text(json.dumps(profile), encoding="utf-8")
    return path


def noisy_sawtooth(n: int, period: int, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    saw = (np.arange(n) % period) / period
    return saw + 0.3 * rng.standard_normal(n)
