"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def identifiers() -> list[str]:
    """Mixed-convention identifiers, as found in generated code."""
    base = [
        "parseHTTPResponse",
        "user_profile_id",
        "XMLHttpRequest",
        "content-length",
        "  Hello, World!  ",
        "version2Beta",
    ]
    return base * 200


@pytest.fixture
def lines() -> list[str]:
    """A few thousand short lines of text."""
    return [f"line {i}: {'x' * (i % 40)}" for i in range(5000)]
