"""
Pytest configuration and shared fixtures.

This module provides fixtures that are available to all test modules.
"""

import os
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from deck_gallery.config.settings import get_settings
from deck_gallery.services.gallery_service import reset_gallery_service
from tests.fixtures import sample_decks


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """
    Clear settings cache before each test.

    This ensures each test gets fresh settings.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_gallery():
    """Reset the global gallery so tests don't share presentations."""
    reset_gallery_service()
    yield
    reset_gallery_service()


@pytest.fixture
def config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Write a minimal config file and point DECK_GALLERY_CONFIG at it.

    Returns:
        Path to the temporary config file
    """
    path = tmp_path / "config.yaml"
    path.write_text(
        "environment: test\n"
        "api:\n  port: 9000\n"
        "logging:\n  level: debug\n  format: json\n"
        "upload:\n  max_files: 3\n",
        encoding="utf-8",
    )
    with patch.dict(os.environ, {"DECK_GALLERY_CONFIG": str(path)}, clear=False):
        yield path


@pytest.fixture
def three_slide_deck() -> str:
    return sample_decks.THREE_SLIDE_DECK


@pytest.fixture
def nested_deck() -> str:
    return sample_decks.NESTED_DECK


@pytest.fixture
def single_slide_deck() -> str:
    return sample_decks.SINGLE_SLIDE_DECK
