"""Pytest configuration and shared fixtures for text chart tests."""

from __future__ import annotations

import pytest

from textcharts.domain import Record, StyleParameters


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests spanning several layers")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def two_records() -> list[Record]:
    """Two records where the second is twice the first."""
    return [Record("A", 10), Record("B", 20)]


@pytest.fixture
def traffic_records() -> list[Record]:
    """Realistic two-record dataset."""
    return [Record("External", 14), Record("Internal", 23)]


@pytest.fixture
def hash_style() -> StyleParameters:
    """Style using ASCII glyphs so assertions stay readable."""
    return StyleParameters(
        bar_char="#",
        area_chars=("*", "."),
        pie_chars=("#", "*", "+", "o"),
    )
