from __future__ import annotations

from typing import Any

from fluent_dialogs.exceptions.base import FluentDialogsError


class ConfigError(FluentDialogsError):
    """Exception for settings loading, parsing, and validation errors.

    Raised when a settings file cannot be parsed or when the merged settings
    fail Pydantic validation.

    Attributes:
        message: Human-readable error message describing the problem.
        field: Optional dotted field name that caused the error.
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        raise ConfigError(
            "Invalid configuration value",
            field="layout.anchor_min_width",
            value=-1,
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)
