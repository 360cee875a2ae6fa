"""Utility modules."""

from deck_gallery.utils.deck_splitter import split_deck, split_uploads
from deck_gallery.utils.error_handling import (
    AppException,
    ConfigurationError,
    ResourceNotFoundError,
    SlideDeletionError,
    ValidationError,
    format_exception_for_logging,
)
from deck_gallery.utils.logging_config import get_logger, setup_logging
from deck_gallery.utils.viewport_fitter import fit_to_viewport

__all__ = [
    # Error handling
    "AppException",
    "ConfigurationError",
    "ResourceNotFoundError",
    "SlideDeletionError",
    "ValidationError",
    "format_exception_for_logging",
    # HTML transforms
    "fit_to_viewport",
    "split_deck",
    "split_uploads",
    # Logging
    "get_logger",
    "setup_logging",
]
