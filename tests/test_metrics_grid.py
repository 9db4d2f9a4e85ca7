from __future__ import annotations

import math

import numpy as np
import pytest

from nuresample.errors import InvalidGridError
from nuresample.metrics.grid import local_spacing, octspace, uniform_grid_from_samples
from nuresample.types import UniformGrid


def test_octspace_point_count_and_bounds():
    f = octspace(20.0, 20000.0, 1 / 12)
    assert f.size == math.ceil(math.log2(1000.0) * 12) + 1
    assert f[0] == 20.0
    assert f[-1] == 20000.0
    ratios = f[1:] / f[:-1]
    assert np.allclose(ratios, ratios[0])
    assert np.log2(ratios[0]) <= 1 / 12


def test_octspace_exact_octaves():
    f = octspace(100.0, 800.0, 1.0)
    assert np.allclose(f, [100.0, 200.0, 400.0, 800.0])


@pytest.mark.parametrize("args", [(0.0, 10.0, 0.1), (10.0, 5.0, 0.1), (1.0, 10.0, 0.0)])
def test_octspace_rejects_bad_arguments(args):
    with pytest.raises(InvalidGridError):
        octspace(*args)


def test_local_spacing_one_sided_at_ends():
    ds = local_spacing(np.array([1.0, 2.0, 4.0, 8.0]), fallback=0.5)
    assert np.allclose(ds, [1.0, 3.0 / 2.0, 3.0, 4.0])
    assert np.allclose(local_spacing(np.array([3.0]), fallback=0.5), [0.5])


def test_uniform_grid_from_range():
    g = UniformGrid.from_range(20.0, 20000.0, 10000)
    assert g.count == 10000
    assert g.stop == pytest.approx(20000.0)
    pos = g.positions()
    assert pos[0] == 20.0
    assert np.allclose(np.diff(pos), g.step)


@pytest.mark.parametrize("args", [(0.0, 0.0, 10), (0.0, -1.0, 10), (0.0, 1.0, 1)])
def test_uniform_grid_rejects_bad_parameters(args):
    with pytest.raises(InvalidGridError):
        UniformGrid(*args)


def test_uniform_grid_from_samples_tolerates_rounding():
    f = np.round(np.linspace(0.0, 24000.0, 4097), 2)
    g = uniform_grid_from_samples(f)
    assert g.count == 4097
    assert g.step == pytest.approx(24000.0 / 4096)


def test_uniform_grid_from_samples_rejects_nonuniform():
    with pytest.raises(InvalidGridError, match="not uniformly spaced"):
        uniform_grid_from_samples(np.array([1.0, 2.0, 4.0, 8.0]))
    with pytest.raises(InvalidGridError, match="strictly increasing"):
        uniform_grid_from_samples(np.array([1.0, 1.0, 2.0]))
