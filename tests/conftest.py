"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def unreserved_text() -> str:
    """Every character the encoder leaves alone by default."""
    return "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVQXYZ0123456789-_."


@pytest.fixture
def mixed_text() -> str:
    """Text mixing ASCII, accented letters and a supplementary-plane emoji."""
    return "%#okékÉȢ smile!😁"


@pytest.fixture
def mixed_encoded() -> str:
    """Encoded form of ``mixed_text``."""
    return "%25%23ok%C3%A9k%C3%89%C8%A2%20smile%21%F0%9F%98%81"
