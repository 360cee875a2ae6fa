"""Application exception hierarchy.

The HTML transforms (deck splitting, viewport fitting) never raise; they fall
back to returning their input. These exceptions are raised by the gallery
service layer and translated into HTTP responses by the API routes.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human readable error message
            details: Optional structured context for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(AppException):
    """Raised when configuration loading or validation fails."""

    pass


class ValidationError(AppException):
    """Raised when user supplied input is invalid."""

    pass


class ResourceNotFoundError(AppException):
    """Raised when a presentation or slide does not exist."""

    pass


class SlideDeletionError(AppException):
    """Raised when deleting a slide would leave a presentation empty."""

    pass


def format_exception_for_logging(exc: BaseException) -> Dict[str, Any]:
    """Build a flat dict describing an exception for structured log records.

    Args:
        exc: The exception to describe

    Returns:
        Dictionary with error type, message and any AppException details
    """
    info: Dict[str, Any] = {
        "error_type": type(exc).__name__,
        "error_message": str(exc),
    }
    if isinstance(exc, AppException) and exc.details:
        info["error_details"] = exc.details
    return info
