"""TUI test fixtures and utilities.

Test Pattern:
    1. Create a minimal test app (DialogTestApp) with a host attached
    2. Use async with app.run_test() as pilot to get a pilot instance
    3. Build a dialog with the app's host, show it, and let the pilot settle
    4. Query the DialogScreen and assert on its state
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest
from textual.app import App
from textual.pilot import Pilot
from textual.widget import Widget
from textual.widgets import Button, Static

from fluent_dialogs.config import DialogSettings, LayoutConfig, PresentationConfig
from fluent_dialogs.tui import TextualHost

# =============================================================================
# Base Test App Classes
# =============================================================================


class DialogTestApp(App[None]):
    """Minimal app with a header and an anchor button, plus a TextualHost."""

    CSS_PATH = None

    def __init__(self, settings: DialogSettings) -> None:
        super().__init__()
        self.dialog_host = TextualHost(self, settings)

    def compose(self) -> Iterable[Widget]:
        yield Static("Header", id="header")
        yield Button("More", id="more")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def dialog_settings(clean_env: None) -> DialogSettings:
    """Settings with a 100-cell wide-layout threshold and no fade-in."""
    return DialogSettings(
        layout=LayoutConfig(anchor_min_width=100),
        presentation=PresentationConfig(animation_duration=0.0),
    )


@pytest.fixture
def dialog_app(dialog_settings: DialogSettings) -> DialogTestApp:
    return DialogTestApp(dialog_settings)


# =============================================================================
# Test Utilities
# =============================================================================


async def settle(
    pilot: Pilot[None], predicate: Callable[[], bool], attempts: int = 40
) -> None:
    """Pause the pilot until ``predicate`` holds.

    Raises:
        AssertionError: If the predicate is still false after all attempts.
    """
    for _ in range(attempts):
        if predicate():
            return
        await pilot.pause(0.05)
    assert predicate(), "condition not reached while the app settled"
