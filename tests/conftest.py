"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless
- Independent of the codec under test (headers are built with ``struct``)
- Well-documented with clear purpose
"""

from __future__ import annotations

import struct
from typing import Any

import pytest
from pytest_mock import MockerFixture


# =============================================================================
# WAV Byte Builders
# =============================================================================

@pytest.fixture
def wav_header_factory():
    """Factory fixture for building canonical 44-byte WAV headers.

    Every field can be overridden, including the derived ``byte_rate``,
    ``block_align`` and ``data_size`` fields, so tests can produce both
    valid and deliberately inconsistent headers.

    Returns:
        Callable that returns the header bytes.

    Example:
        >>> header = wav_header_factory(num_channels=2, data_size=8)
        >>> assert len(header) == 44
    """
    def _create(
        num_channels: int = 1,
        sample_rate: int = 44100,
        bits_per_sample: int = 16,
        data_size: int = 0,
        *,
        riff_id: bytes = b"RIFF",
        wave_id: bytes = b"WAVE",
        fmt_id: bytes = b"fmt ",
        data_id: bytes = b"data",
        fmt_size: int = 16,
        audio_format: int = 1,
        byte_rate: int | None = None,
        block_align: int | None = None,
        riff_size: int | None = None,
    ) -> bytes:
        width = max(bits_per_sample // 8, 1)
        if block_align is None:
            block_align = num_channels * width
        if byte_rate is None:
            byte_rate = sample_rate * num_channels * width
        if riff_size is None:
            riff_size = 36 + data_size
        return (
            riff_id
            + struct.pack("<I", riff_size)
            + wave_id
            + fmt_id
            + struct.pack(
                "<IHHIIHH",
                fmt_size,
                audio_format,
                num_channels,
                sample_rate,
                byte_rate,
                block_align,
                bits_per_sample,
            )
            + data_id
            + struct.pack("<I", data_size)
        )

    return _create


@pytest.fixture
def wav_bytes_factory(wav_header_factory):
    """Factory fixture for building a complete WAV stream around a payload.

    Returns:
        Callable taking the payload plus any ``wav_header_factory`` overrides.
    """
    def _create(payload: bytes = b"", **overrides: Any) -> bytes:
        overrides.setdefault("data_size", len(payload))
        return wav_header_factory(**overrides) + payload

    return _create


@pytest.fixture
def mono_clip_payload() -> bytes:
    """88 bytes of distinct 16-bit mono samples (44 frames)."""
    return b"".join(struct.pack("<h", (i * 731) - 16000) for i in range(44))


# =============================================================================
# Mock Diagnostics Fixtures
# =============================================================================

@pytest.fixture
def mock_diagnostics(mocker: MockerFixture):
    """Create a mock DiagnosticSink for dependency injection.

    Returns:
        Mock object implementing the DiagnosticSink protocol.
    """
    sink = mocker.MagicMock()
    sink.info = mocker.MagicMock()
    sink.warning = mocker.MagicMock()
    sink.error = mocker.MagicMock()
    return sink


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "interop: Tests reading codec output with other WAV readers")
