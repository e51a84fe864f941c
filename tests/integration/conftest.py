"""Integration test configuration and fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from pcmwav.config import Format


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def sine_frames():
    """Factory fixture for integer sine-wave frames in a given format.

    Returns:
        Callable returning a ``(num_samples, num_channels)`` integer array;
        each channel gets a different frequency.
    """
    def _create(fmt: Format, num_channels: int = 2, num_samples: int = 256) -> np.ndarray:
        t = np.arange(num_samples) / 8000.0
        freqs = 220.0 * (np.arange(num_channels) + 1)
        wave = 0.8 * np.sin(2 * np.pi * t[:, None] * freqs[None, :])
        if fmt is Format.U8:
            return np.rint(wave * 127.0 + 128.0).astype(np.uint8)
        scale = float((1 << (fmt.bits_per_sample - 1)) - 1)
        return np.rint(wave * scale).astype(np.int64)

    return _create
