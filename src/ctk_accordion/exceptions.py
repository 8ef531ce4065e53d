"""
Custom exceptions for the accordion widget package.

Accordion operations themselves never raise; these exceptions are used at
the configuration and host-binding seams where a caller can act on them.
"""

from typing import Any, Dict, Optional


class AccordionError(Exception):
    """Base exception for all accordion-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigurationError(AccordionError):
    """Raised when configuration is invalid or missing."""
    pass


class ThemeError(AccordionError):
    """Raised when a theme cannot be built or installed."""
    pass


class GUIError(AccordionError):
    """Raised when GUI operations fail."""
    pass


class ErrorCodes:
    """Standard error codes for the package."""

    # Configuration errors (1000-1099)
    CONFIG_INVALID = "E1001"
    CONFIG_FILE_MISSING = "E1002"
    CONFIG_SAVE_FAILED = "E1003"

    # Theme errors (1100-1199)
    THEME_INVALID = "E1101"

    # GUI errors (1800-1899)
    GUI_INITIALIZATION_FAILED = "E1801"
    GUI_COMPONENT_ERROR = "E1802"
    GUI_NOT_PLACEABLE = "E1803"
