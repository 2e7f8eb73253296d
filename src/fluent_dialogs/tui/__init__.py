"""Textual host for fluent-dialogs.

Importing this package requires Textual.
"""

from __future__ import annotations

from fluent_dialogs.tui.host import AppSurface, ScreenSurface, TextualHost
from fluent_dialogs.tui.screen import DialogScreen

__all__ = [
    "AppSurface",
    "DialogScreen",
    "ScreenSurface",
    "TextualHost",
]
