"""
Custom exception hierarchy for pickplace-tools.

Provides consistent error handling with context, suggestions, and actionable guidance.
All exceptions include:
- Context information (board, device, config file, etc.)
- Suggestions for how to fix the issue
- Clear, formatted error messages

Placement generation itself never raises; these errors come from the
surrounding layers (board validation, configuration loading).

Example::

    from pickplace_tools.exceptions import ValidationError

    errors = ["Device 3 has an empty designator", "Duplicate designator: R1"]
    raise ValidationError(errors, context={"board": "default"})
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class PickPlaceToolsError(Exception):
    """
    Base exception for all pickplace-tools errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information (board, device, file)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ValidationError(PickPlaceToolsError):
    """
    Board data validation failed with one or more errors.

    Collects all validation errors instead of failing on the first one,
    providing a complete list of issues to fix.

    Example::

        errors = [
            "Component name must not be empty (device #2)",
            "Duplicate component name: U1",
        ]
        raise ValidationError(errors, context={"board": "main"})

    Attributes:
        errors: List of individual validation error messages
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.errors = errors
        message = f"Validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  {i + 1}. {e}" for i, e in enumerate(errors))
        super().__init__(message, context, suggestions)


class BoardModelError(PickPlaceToolsError):
    """
    Board model is inconsistent.

    Raised while building the in-memory board snapshot, e.g. when a
    value cannot be interpreted as an assembly type or pad function.

    Example::

        raise BoardModelError(
            "Unknown assembly type",
            context={"value": "press_fit", "available": ["none", "tht", "smt"]},
            suggestions=["Use one of the available assembly types"]
        )
    """

    pass


class ConfigurationError(PickPlaceToolsError):
    """
    Configuration or settings error.

    Raised when configuration is invalid, missing, or incompatible.

    Example::

        raise ConfigurationError(
            "Invalid designator separator",
            context={"separator": ""},
            suggestions=["Use a non-empty separator such as ':'"]
        )
    """

    pass


__all__ = [
    "PickPlaceToolsError",
    "ValidationError",
    "BoardModelError",
    "ConfigurationError",
]
