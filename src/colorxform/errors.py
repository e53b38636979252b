"""Error handling utilities for colorxform conversions."""

from typing import Optional


class ColorxformError(Exception):
    """Base exception for colorxform-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class DegenerateProfileError(ColorxformError):
    """Raised when a profile's primaries cannot span XYZ space."""

    def __init__(self, profile_name: str, detail: str):
        self.profile_name = profile_name
        message = f"Degenerate primaries in profile '{profile_name}': {detail}"
        suggestions = [
            "Check that the red, green and blue chromaticities are distinct",
            "Primaries must not lie on a single line in the chromaticity diagram",
        ]
        super().__init__(message, suggestions)


class ProfileNotFoundError(ColorxformError):
    """Raised when a profile or white point name is not recognized."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        message = f"Unknown profile: '{name}'"
        suggestions = [
            f"Available names: {', '.join(sorted(available))}",
            "Check spelling (names are case-insensitive)",
        ]
        super().__init__(message, suggestions)


class UnsupportedColorError(ColorxformError):
    """Raised when a conversion is given something that is not a color value."""

    def __init__(self, value: object):
        message = f"Cannot convert value of type {type(value).__name__}"
        suggestions = [
            "Pass one of LinearRGB, GammaRGB, CMY, CMYK, HSV, HLS, YUV, XYZ or CIELab",
            "Wrap raw channel tuples with LinearRGB(r, g, b) first",
        ]
        super().__init__(message, suggestions)


class NumericDomainWarning(RuntimeWarning):
    """Issued when finite channel values produce NaN or infinity."""


def format_error(error: Exception) -> str:
    """Render an error for display.

    Args:
        error: Exception to render

    Returns:
        Single string starting with ``Error:``; colorxform errors include
        their suggestions
    """
    return f"Error: {error}"
