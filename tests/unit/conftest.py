"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on in-memory sources and sinks and fast execution.
"""

from __future__ import annotations

import pytest

from pcmwav.config import Format, SaveInfo


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def save_info_factory():
    """Factory fixture for creating SaveInfo records with sensible defaults.

    Example:
        >>> info = save_info_factory(num_channels=2, data=b"\\x00" * 8)
        >>> assert info.block_align == 4
    """
    def _create(
        num_channels: int = 1,
        sample_rate: int = 44100,
        format: Format = Format.S16LSB,
        data: bytes = b"\x00" * 8,
    ) -> SaveInfo:
        return SaveInfo(
            num_channels=num_channels,
            sample_rate=sample_rate,
            format=format,
            data=data,
        )

    return _create
