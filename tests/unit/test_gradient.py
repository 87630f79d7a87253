"""Tests for row gradient interpolation."""

import numpy as np
import pytest

from pixelstretch.stretch import interpolate


def _row(*pixels):
    return np.array(pixels, dtype=np.uint8)


def _reference(a, b, n):
    """Round-half-up linear blend computed with plain integers."""
    a = a.astype(np.int64)
    b = b.astype(np.int64)
    d = n + 1
    rows = [a.copy()]
    for k in range(1, n + 1):
        row = (2 * a * d + 2 * (b - a) * k + d) // (2 * d)
        row[:, 3] = 255
        rows.append(row)
    rows.append(b.copy())
    return np.stack(rows).astype(np.uint8)


@pytest.mark.unit
def test_zero_size_returns_endpoints():
    a = _row((10, 20, 30, 40), (1, 2, 3, 4))
    b = _row((50, 60, 70, 80), (5, 6, 7, 8))
    run = interpolate(a, b, 0)
    assert run.shape == (2, 2, 4)
    np.testing.assert_array_equal(run[0], a)
    np.testing.assert_array_equal(run[1], b)


@pytest.mark.unit
def test_black_to_white_midpoint_rounds_up():
    run = interpolate(_row((0, 0, 0, 255)), _row((255, 255, 255, 255)), 1)
    np.testing.assert_array_equal(run[1, 0], [128, 128, 128, 255])


@pytest.mark.unit
def test_exact_steps():
    run = interpolate(_row((0, 100, 200, 255)), _row((100, 0, 200, 255)), 3)
    np.testing.assert_array_equal(run[1:4, 0, 0], [25, 50, 75])
    np.testing.assert_array_equal(run[1:4, 0, 1], [75, 50, 25])
    np.testing.assert_array_equal(run[1:4, 0, 2], [200, 200, 200])


@pytest.mark.unit
def test_descending_rounding():
    # 10 -> 0 in 3 steps: 6.67 -> 7, 3.33 -> 3
    run = interpolate(_row((10, 0, 0, 255)), _row((0, 0, 0, 255)), 2)
    np.testing.assert_array_equal(run[:, 0, 0], [10, 7, 3, 0])


@pytest.mark.unit
def test_alpha_forced_on_interpolated_rows_only():
    a = _row((0, 0, 0, 10), (9, 9, 9, 0))
    b = _row((90, 90, 90, 20), (9, 9, 9, 0))
    run = interpolate(a, b, 3)
    assert run[0, 0, 3] == 10
    assert run[-1, 0, 3] == 20
    assert np.all(run[1:-1, :, 3] == 255)


@pytest.mark.unit
@pytest.mark.parametrize("n", [1, 2, 7, 34])
def test_identical_rows_stay_identical(n):
    rng = np.random.default_rng(n)
    a = rng.integers(0, 256, size=(5, 4), dtype=np.uint8)
    run = interpolate(a, a, n)
    for k in range(n + 2):
        np.testing.assert_array_equal(run[k, :, :3], a[:, :3])


@pytest.mark.unit
@pytest.mark.parametrize("n", [1, 3, 5, 13, 89])
def test_matches_integer_reference(n):
    rng = np.random.default_rng(100 + n)
    a = rng.integers(0, 256, size=(16, 4), dtype=np.uint8)
    b = rng.integers(0, 256, size=(16, 4), dtype=np.uint8)
    np.testing.assert_array_equal(interpolate(a, b, n), _reference(a, b, n))


@pytest.mark.unit
def test_flat_rows_and_width():
    a = np.zeros(8, dtype=np.uint8)
    b = np.full(8, 200, dtype=np.uint8)
    run = interpolate(a, b, 1, width=2)
    assert run.shape == (3, 2, 4)
    np.testing.assert_array_equal(run[1, :, 0], [100, 100])


@pytest.mark.unit
def test_deterministic():
    rng = np.random.default_rng(3)
    a = rng.integers(0, 256, size=(9, 4), dtype=np.uint8)
    b = rng.integers(0, 256, size=(9, 4), dtype=np.uint8)
    np.testing.assert_array_equal(interpolate(a, b, 21), interpolate(a, b, 21))


@pytest.mark.unit
def test_invalid_inputs():
    a = np.zeros((2, 4), dtype=np.uint8)
    with pytest.raises(ValueError):
        interpolate(a, a, -1)
    with pytest.raises(ValueError):
        interpolate(a, np.zeros((3, 4), dtype=np.uint8), 1)
    with pytest.raises(ValueError):
        interpolate(a, a, 1, width=5)
    with pytest.raises(ValueError):
        interpolate(np.zeros(6, dtype=np.uint8), np.zeros(6, dtype=np.uint8), 1)
