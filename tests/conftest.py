"""Pytest configuration for overlay-tools tests."""

from typing import Any


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "render: mark test as rasterizing pixels through the Pillow engine",
    )
