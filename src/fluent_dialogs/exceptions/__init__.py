"""fluent-dialogs exception hierarchy.

All exceptions can be imported from this package:
    from fluent_dialogs.exceptions import ConfigError, PresentationError
"""

from __future__ import annotations

from fluent_dialogs.exceptions.base import FluentDialogsError
from fluent_dialogs.exceptions.config import ConfigError
from fluent_dialogs.exceptions.presentation import HostError, PresentationError

__all__ = [
    "ConfigError",
    "FluentDialogsError",
    "HostError",
    "PresentationError",
]
