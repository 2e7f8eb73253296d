"""Small Textual app that shows one builder-made dialog and reports the outcome.

Backs the ``fluent-dialogs demo`` command.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from textual.app import App, ComposeResult
from textual.widgets import Footer, Static

from fluent_dialogs.builder import DialogBuilder
from fluent_dialogs.config import DialogSettings
from fluent_dialogs.constants import OK_TITLE
from fluent_dialogs.models import (
    ActionKind,
    ActionSpec,
    AnchorConfiguration,
    DialogStyle,
    Failure,
    PresentationResult,
)
from fluent_dialogs.tui.host import TextualHost

__all__ = ["DemoAction", "DemoApp", "DemoOutcome", "DemoRequest"]


@dataclass(frozen=True, slots=True)
class DemoAction:
    """One button requested on the command line."""

    title: str
    kind: ActionKind = ActionKind.DEFAULT


@dataclass(frozen=True, slots=True)
class DemoRequest:
    """Everything needed to build the demo dialog.

    Attributes:
        style: Alert or action sheet.
        title: Dialog title.
        message: Dialog message.
        fields: Placeholders of the text inputs (alerts only).
        actions: Buttons in order. An OK button is used when empty.
        preferred: Title of the preferred action.
        animated: Whether to animate presentation.
        anchored: Anchor action sheets to the header.
    """

    style: DialogStyle = DialogStyle.ALERT
    title: str | None = None
    message: str | None = None
    fields: tuple[str, ...] = ()
    actions: tuple[DemoAction, ...] = ()
    preferred: str | None = None
    animated: bool = True
    anchored: bool = True


@dataclass(slots=True)
class DemoOutcome:
    """What happened to the demo dialog."""

    failure: Failure | None = None
    action: ActionSpec | None = None
    text_values: list[str] | None = field(default=None)


class DemoApp(App[DemoOutcome]):
    """Shows the requested dialog and exits with a DemoOutcome."""

    TITLE = "fluent-dialogs demo"

    def __init__(
        self, request: DemoRequest, settings: DialogSettings | None = None
    ) -> None:
        super().__init__()
        self.demo_request = request
        self.dialog_host = TextualHost(self, settings)

    def compose(self) -> ComposeResult:
        yield Static("Choose an action", id="header")
        yield Footer()

    def on_mount(self) -> None:
        self.build_dialog().show(
            animated=self.demo_request.animated, completion=self._on_presented
        )

    def build_dialog(self) -> DialogBuilder:
        request = self.demo_request
        builder = DialogBuilder.create(
            request.style, request.title, request.message, host=self.dialog_host
        )
        for placeholder in request.fields:
            builder.add_text_field(
                lambda text_input, p=placeholder: setattr(text_input, "placeholder", p)
            )
        for action in request.actions or (DemoAction(OK_TITLE),):
            builder.add_action(
                action.title,
                kind=action.kind,
                preferred=action.title == request.preferred,
                handler=self._on_action,
            )
        if request.anchored:
            builder.configure_popover_presentation(self._anchor_to_header)
        return builder

    def _anchor_to_header(self, anchor: AnchorConfiguration) -> None:
        anchor.source_view = self.query_one("#header", Static)

    def _on_presented(self, result: PresentationResult) -> None:
        if isinstance(result, Failure):
            self.exit(DemoOutcome(failure=result))

    def _on_action(self, action: ActionSpec, text_values: list[str] | None) -> None:
        self.exit(DemoOutcome(action=action, text_values=text_values))
