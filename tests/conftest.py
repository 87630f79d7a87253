"""
Pytest configuration and fixtures for PixelStretch test suite.

Taichi is initialized once for the whole session (CPU backend); tests must not
call ti.init again since pooled fields belong to the active runtime.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in (
        "unit: fast tests of a single component",
        "integration: end-to-end workflows",
        "importtest: import checks",
        "slow: longer running tests",
    ):
        config.addinivalue_line("markers", marker)

    import taichi as ti
    from pixelstretch import pool

    ti.init(arch=ti.cpu, offline_cache=False)
    pool.reset()


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


class BufferFactory:
    """Helper class for building test buffers."""

    @staticmethod
    def solid(width, height, color=RED):
        from pixelstretch import PixelBuffer

        return PixelBuffer.blank(width, height, color)

    @staticmethod
    def rows(colors):
        """1 pixel wide buffer, one color per row."""
        from pixelstretch import PixelBuffer

        arr = np.array(colors, dtype=np.uint8).reshape(len(colors), 1, 4)
        return PixelBuffer.from_array(arr)

    @staticmethod
    def columns(colors):
        """1 pixel high buffer, one color per column."""
        from pixelstretch import PixelBuffer

        arr = np.array(colors, dtype=np.uint8).reshape(1, len(colors), 4)
        return PixelBuffer.from_array(arr)

    @staticmethod
    def random(width, height, seed=42, opaque=False):
        from pixelstretch import PixelBuffer

        rng = np.random.default_rng(seed)
        arr = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
        if opaque:
            arr[..., 3] = 255
        return PixelBuffer.from_array(arr)


@pytest.fixture
def buffers():
    """Provide access to test buffer builders."""
    return BufferFactory()


@pytest.fixture
def stripes():
    """1x4 image with rows black, white, black, white."""
    return BufferFactory.rows([BLACK, WHITE, BLACK, WHITE])
