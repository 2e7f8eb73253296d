"""Pilot tests for the demo app behind ``fluent-dialogs demo``."""

from __future__ import annotations

import pytest

from fluent_dialogs import ActionKind, DialogErrorKind, DialogStyle
from fluent_dialogs.config import DialogSettings, PresentationConfig
from fluent_dialogs.constants import OK_TITLE
from fluent_dialogs.tui import DialogScreen
from fluent_dialogs.tui.demo import DemoAction, DemoApp, DemoOutcome, DemoRequest
from tests.tui.conftest import settle


@pytest.fixture
def demo_settings(clean_env: None) -> DialogSettings:
    return DialogSettings(presentation=PresentationConfig(animation_duration=0.0))


@pytest.mark.asyncio
async def test_selected_action_is_returned(demo_settings: DialogSettings) -> None:
    request = DemoRequest(
        title="Save changes?",
        fields=("Name",),
        actions=(DemoAction("Cancel", ActionKind.CANCEL), DemoAction("Save")),
        preferred="Save",
    )
    app = DemoApp(request, demo_settings)

    async with app.run_test(size=(80, 24)) as pilot:
        await settle(pilot, lambda: isinstance(app.screen, DialogScreen))
        screen = app.screen
        assert isinstance(screen, DialogScreen)
        assert screen.text_inputs[0].placeholder == "Name"
        assert screen.preferred_action is screen.actions[1]

        screen.text_inputs[0].value = "draft"
        await pilot.click("#action-1")
        await pilot.pause()

    outcome = app.return_value
    assert isinstance(outcome, DemoOutcome)
    assert outcome.failure is None
    assert outcome.action is not None
    assert outcome.action.title == "Save"
    assert outcome.text_values == ["draft"]


@pytest.mark.asyncio
async def test_defaults_to_single_ok_button(demo_settings: DialogSettings) -> None:
    app = DemoApp(DemoRequest(), demo_settings)

    async with app.run_test(size=(80, 24)) as pilot:
        await settle(pilot, lambda: isinstance(app.screen, DialogScreen))
        screen = app.screen
        assert isinstance(screen, DialogScreen)
        assert [a.title for a in screen.actions] == [OK_TITLE]


@pytest.mark.asyncio
async def test_unanchored_sheet_on_wide_terminal_fails(
    demo_settings: DialogSettings,
) -> None:
    request = DemoRequest(
        style=DialogStyle.ACTION_SHEET,
        actions=(DemoAction("Delete", ActionKind.DESTRUCTIVE),),
        anchored=False,
    )
    app = DemoApp(request, demo_settings)

    async with app.run_test(size=(120, 30)) as pilot:
        await pilot.pause()

    outcome = app.return_value
    assert isinstance(outcome, DemoOutcome)
    assert outcome.failure is not None
    assert outcome.failure.error is DialogErrorKind.ANCHOR_NOT_CONFIGURED


@pytest.mark.asyncio
async def test_anchored_sheet_on_wide_terminal_presents(
    demo_settings: DialogSettings,
) -> None:
    request = DemoRequest(
        style=DialogStyle.ACTION_SHEET,
        actions=(
            DemoAction("Cancel", ActionKind.CANCEL),
            DemoAction("Delete", ActionKind.DESTRUCTIVE),
        ),
    )
    app = DemoApp(request, demo_settings)

    async with app.run_test(size=(120, 30)) as pilot:
        await settle(pilot, lambda: isinstance(app.screen, DialogScreen))
        screen = app.screen
        assert isinstance(screen, DialogScreen)
        assert screen.has_class("-anchored")

        await pilot.press("escape")
        await pilot.pause()

    outcome = app.return_value
    assert isinstance(outcome, DemoOutcome)
    assert outcome.action is not None
    assert outcome.action.kind is ActionKind.CANCEL
    assert outcome.text_values is None
