"""Textual modal screen used as the dialog artifact."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.geometry import Region
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from fluent_dialogs.exceptions import HostError
from fluent_dialogs.logging import get_logger
from fluent_dialogs.models import (
    ActionKind,
    ActionSpec,
    AnchorConfiguration,
    DialogStyle,
    TextFieldConfigurator,
)

__all__ = ["DialogScreen"]

logger = get_logger(__name__)

_BUTTON_VARIANTS = {
    ActionKind.DEFAULT: "default",
    ActionKind.CANCEL: "default",
    ActionKind.DESTRUCTIVE: "error",
}


class DialogScreen(ModalScreen[ActionSpec | None]):
    """Alert or action sheet rendered as a Textual modal screen.

    Alerts are centered with their buttons in a row. Action sheets stack
    their buttons vertically, keep cancel actions last, and sit at the
    bottom of the screen unless an anchor is configured, in which case they
    open just below the anchor widget.

    The screen dismisses itself with the selected ActionSpec before running
    that action's fire callback.

    Args:
        title: Dialog title, omitted when empty.
        message: Dialog message, omitted when empty.
        style: Alert or action sheet.
        animation_duration: Fade-in time used for animated presentation.
    """

    DEFAULT_CSS = """
    DialogScreen {
        align: center middle;
    }

    DialogScreen.-action-sheet {
        align: center bottom;
    }

    DialogScreen.-anchored {
        align: left top;
    }

    DialogScreen > #dialog {
        width: 60;
        height: auto;
        border: solid $accent;
        background: $surface;
        padding: 1 2;
    }

    DialogScreen.-action-sheet > #dialog {
        width: 40;
        margin-bottom: 1;
    }

    DialogScreen #title {
        margin-bottom: 1;
    }

    DialogScreen #message {
        margin-bottom: 1;
    }

    DialogScreen #fields {
        height: auto;
    }

    DialogScreen #fields Input {
        margin-bottom: 1;
    }

    DialogScreen #buttons {
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    DialogScreen Horizontal#buttons Button {
        margin: 0 1;
    }

    DialogScreen Vertical#buttons Button {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def __init__(
        self,
        title: str | None = None,
        message: str | None = None,
        style: DialogStyle = DialogStyle.ALERT,
        *,
        animation_duration: float = 0.15,
    ) -> None:
        super().__init__(
            classes="-action-sheet" if style is DialogStyle.ACTION_SHEET else None
        )
        self.dialog_title = title
        self.dialog_message = message
        self._dialog_style = style
        self._fade_duration = animation_duration
        self._dialog_anchor = (
            AnchorConfiguration() if style is DialogStyle.ACTION_SHEET else None
        )
        self.text_inputs: list[Input] = []
        self.actions: list[ActionSpec] = []
        self.preferred_action: ActionSpec | None = None
        self._fire_callbacks: dict[int, Callable[[ActionSpec], None]] = {}
        self._animate_on_mount = False
        self._presented_callback: Callable[[], None] | None = None
        self._action_fired = False

    # -------------------------------------------------------------------------
    # Artifact protocol
    # -------------------------------------------------------------------------

    @property
    def style(self) -> DialogStyle:
        return self._dialog_style

    @property
    def anchor(self) -> AnchorConfiguration | None:
        return self._dialog_anchor

    def attach_text_input(self, configurator: TextFieldConfigurator | None) -> None:
        if self._dialog_style is not DialogStyle.ALERT:
            raise HostError("Text inputs can only be added to alert dialogs")
        text_input = Input(id=f"field-{len(self.text_inputs)}")
        if configurator is not None:
            configurator(text_input)
        self.text_inputs.append(text_input)
        if self.is_mounted:
            self.query_one("#fields", Vertical).mount(text_input)

    def attach_action(
        self, action: ActionSpec, on_fire: Callable[[ActionSpec], None]
    ) -> None:
        self.actions.append(action)
        self._fire_callbacks[id(action)] = on_fire
        if self.is_mounted:
            self.query_one("#buttons").mount(self._make_button(action))

    def set_preferred_action(self, action: ActionSpec) -> None:
        self.preferred_action = action
        if self.is_mounted:
            for button in self.query("#buttons Button").results(Button):
                button.variant = self._variant_for(self._action_for_button(button))

    def text_values(self) -> list[str]:
        return [text_input.value for text_input in self.text_inputs]

    def prepare_presentation(
        self, *, animated: bool, on_presented: Callable[[], None]
    ) -> None:
        """Record how the next presentation should run and whom to notify."""
        self._animate_on_mount = animated
        self._presented_callback = on_presented

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        with Container(id="dialog"):
            if self.dialog_title:
                yield Static(f"[bold]{self.dialog_title}[/bold]", id="title")
            if self.dialog_message:
                yield Static(self.dialog_message, id="message")
            with Vertical(id="fields"):
                yield from self.text_inputs
            buttons = Horizontal if self._dialog_style is DialogStyle.ALERT else Vertical
            with buttons(id="buttons"):
                for action in self._ordered_actions():
                    yield self._make_button(action)

    def _ordered_actions(self) -> list[ActionSpec]:
        if self._dialog_style is DialogStyle.ALERT:
            return list(self.actions)
        # Action sheets keep cancel actions at the bottom.
        return [a for a in self.actions if a.kind is not ActionKind.CANCEL] + [
            a for a in self.actions if a.kind is ActionKind.CANCEL
        ]

    def _make_button(self, action: ActionSpec) -> Button:
        index = self.actions.index(action)
        return Button(
            action.title or "",
            id=f"action-{index}",
            variant=self._variant_for(action),
        )

    def _variant_for(self, action: ActionSpec) -> str:
        if action is self.preferred_action and action.kind is not ActionKind.DESTRUCTIVE:
            return "primary"
        return _BUTTON_VARIANTS[action.kind]

    def _action_for_button(self, button: Button) -> ActionSpec:
        index = int((button.id or "").removeprefix("action-"))
        return self.actions[index]

    def on_mount(self) -> None:
        self._focus_initial()
        if self._animate_on_mount and self._fade_duration > 0:
            self.styles.opacity = 0.0
            self.styles.animate(
                "opacity",
                value=1.0,
                duration=self._fade_duration,
                on_complete=self._finish_presentation,
            )
        else:
            self.call_after_refresh(self._finish_presentation)
        if self._dialog_anchor is not None and self._dialog_anchor.is_configured:
            self.add_class("-anchored")
            self.call_after_refresh(self._position_at_anchor)

    def _focus_initial(self) -> None:
        if self.text_inputs:
            self.text_inputs[0].focus()
            return
        buttons = list(self.query("#buttons Button").results(Button))
        if not buttons:
            return
        target = buttons[0]
        if self.preferred_action is not None:
            for button in buttons:
                if self._action_for_button(button) is self.preferred_action:
                    target = button
        target.focus()

    def _finish_presentation(self) -> None:
        on_presented, self._presented_callback = self._presented_callback, None
        if on_presented is not None:
            on_presented()

    def anchor_region(self) -> Region | None:
        """Screen region the sheet points at, if an anchor is configured."""
        anchor = self._dialog_anchor
        if anchor is None or not anchor.is_configured:
            return None
        if anchor.source_view is not None:
            region = anchor.source_view.region
            if anchor.source_rect is not None:
                return Region(*anchor.source_rect).translate(region.offset)
            return region
        return anchor.anchor_control.region

    def _position_at_anchor(self) -> None:
        region = self.anchor_region()
        if region is None:
            return
        self.query_one("#dialog", Container).styles.offset = (region.x, region.bottom)

    # -------------------------------------------------------------------------
    # Firing
    # -------------------------------------------------------------------------

    def select(self, action: ActionSpec | str) -> None:
        """Fire ``action`` (an ActionSpec or a title) as if the user chose it.

        Selections after the first are ignored.

        Raises:
            HostError: If no attached action has the given title.
        """
        if isinstance(action, str):
            matches = [a for a in self.actions if a.title == action]
            if not matches:
                raise HostError(f"No action titled {action!r}")
            action = matches[0]
        if self._action_fired:
            return
        self._action_fired = True
        logger.debug("dialog_screen_selected", title=action.title)
        self.dismiss(action)
        self._fire_callbacks[id(action)](action)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.select(self._action_for_button(event.button))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self.preferred_action is not None:
            self.select(self.preferred_action)

    def action_cancel(self) -> None:
        """Fire the first cancel action, if the dialog has one."""
        for action in self.actions:
            if action.kind is ActionKind.CANCEL:
                self.select(action)
                return
