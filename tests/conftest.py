"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bitconverter import FixedWidthCodec


@pytest.fixture
def big_codec() -> FixedWidthCodec:
    """Codec configured for network byte order."""
    return FixedWidthCodec.big()
