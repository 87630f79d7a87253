"""Tests for random parameters and the matplotlib preview."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from pixelstretch import Direction, StretchParams  # noqa: E402
from pixelstretch.misc import random_params, show_before_after  # noqa: E402


@pytest.mark.unit
def test_random_params_reproducible():
    assert random_params(100, 50, seed=7) == random_params(100, 50, seed=7)


@pytest.mark.unit
def test_random_params_ranges():
    seen = set()
    for seed in range(200):
        params = random_params(30, 8, seed=seed)
        assert isinstance(params, StretchParams)
        assert 1 <= params.intensity <= 13
        dim = 8 if params.direction.vertical else 30
        assert 0 <= params.starting_pixel < dim
        seen.add(params.direction)
    assert seen == set(Direction)


@pytest.mark.unit
def test_preview_figure(buffers, tmp_path):
    original = buffers.random(6, 4)
    out_path = tmp_path / "preview.png"
    fig = show_before_after(original, original.copy(), title="test", output_path=out_path, show=False)
    assert len(fig.axes) == 2
    assert out_path.exists()
    plt.close(fig)
