"""In-memory dialog host.

HeadlessHost renders nothing. It records what was built and presented and
lets callers simulate a user selecting an action, which makes it useful for
scripts, for tests of code that builds dialogs, and as the fallback default
host.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fluent_dialogs.exceptions import HostError
from fluent_dialogs.logging import get_logger
from fluent_dialogs.models import (
    ActionSpec,
    AnchorConfiguration,
    DialogStyle,
    TextFieldConfigurator,
)

__all__ = [
    "HeadlessArtifact",
    "HeadlessHost",
    "HeadlessNavigationSurface",
    "HeadlessSurface",
    "HeadlessTextInput",
]

logger = get_logger(__name__)


@dataclass(slots=True)
class HeadlessTextInput:
    """Stand-in for a text input widget."""

    value: str = ""
    placeholder: str = ""
    password: bool = False


class HeadlessArtifact:
    """A dialog that lives only in memory."""

    def __init__(
        self,
        title: str | None,
        message: str | None,
        style: DialogStyle,
        *,
        provides_anchor: bool = True,
    ) -> None:
        self.title = title
        self.message = message
        self._style = style
        self._anchor = (
            AnchorConfiguration()
            if provides_anchor and style is DialogStyle.ACTION_SHEET
            else None
        )
        self.text_inputs: list[HeadlessTextInput] = []
        self.actions: list[ActionSpec] = []
        self.preferred_action: ActionSpec | None = None
        self.is_presented = False
        self.is_dismissed = False
        self._callbacks: dict[int, Callable[[ActionSpec], None]] = {}

    @property
    def style(self) -> DialogStyle:
        return self._style

    @property
    def anchor(self) -> AnchorConfiguration | None:
        return self._anchor

    def attach_text_input(self, configurator: TextFieldConfigurator | None) -> None:
        if self._style is not DialogStyle.ALERT:
            raise HostError("Text inputs can only be added to alert dialogs")
        text_input = HeadlessTextInput()
        if configurator is not None:
            configurator(text_input)
        self.text_inputs.append(text_input)

    def attach_action(
        self, action: ActionSpec, on_fire: Callable[[ActionSpec], None]
    ) -> None:
        self.actions.append(action)
        self._callbacks[id(action)] = on_fire

    def set_preferred_action(self, action: ActionSpec) -> None:
        self.preferred_action = action

    def text_values(self) -> list[str]:
        return [text_input.value for text_input in self.text_inputs]

    def action_titled(self, title: str) -> ActionSpec:
        """Find an attached action by its title.

        Raises:
            HostError: If no attached action has that title.
        """
        for action in self.actions:
            if action.title == title:
                return action
        raise HostError(f"No action titled {title!r}")

    def select(self, action: ActionSpec | str) -> None:
        """Simulate the user choosing ``action`` (an ActionSpec or a title).

        Raises:
            HostError: If the dialog is not on screen or was already dismissed.
        """
        if not self.is_presented:
            raise HostError("Cannot select an action on a dialog that is not presented")
        if self.is_dismissed:
            raise HostError("Dialog was already dismissed")
        if isinstance(action, str):
            action = self.action_titled(action)
        self.is_dismissed = True
        self.is_presented = False
        logger.debug("headless_action_selected", title=action.title)
        self._callbacks[id(action)](action)


class HeadlessSurface:
    """A presenting surface that records presentations.

    Args:
        name: Label used in logs and reprs.
        defer_completion: When True, completion callbacks are queued until
            ``finish_transitions`` is called, mimicking an animated host.
    """

    is_navigation_container = False

    def __init__(self, name: str = "surface", *, defer_completion: bool = False) -> None:
        self.name = name
        self.defer_completion = defer_completion
        self.presented: list[HeadlessArtifact] = []
        self.animated_flags: list[bool] = []
        self._pending: list[Callable[[], None]] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def visible_descendant(self) -> HeadlessSurface | None:
        return self

    def present(
        self,
        artifact: HeadlessArtifact,
        animated: bool,
        on_complete: Callable[[], None],
    ) -> None:
        self.presented.append(artifact)
        self.animated_flags.append(animated)
        artifact.is_presented = True
        if self.defer_completion:
            self._pending.append(on_complete)
        else:
            on_complete()

    def finish_transitions(self) -> None:
        """Run the queued completion callbacks."""
        pending, self._pending = self._pending, []
        for on_complete in pending:
            on_complete()


class HeadlessNavigationSurface(HeadlessSurface):
    """A container whose visible child does the presenting."""

    is_navigation_container = True

    def __init__(
        self, visible: HeadlessSurface | None = None, name: str = "navigation"
    ) -> None:
        super().__init__(name)
        self.visible = visible

    def visible_descendant(self) -> HeadlessSurface | None:
        return self.visible


@dataclass
class HeadlessHost:
    """Host backed entirely by in-memory objects.

    Attributes:
        root_surface: Surface returned as the current root, if any.
        requires_anchor: Whether the current layout needs anchored sheets.
        supports_preferred_action: Whether preferred actions are honored.
        provides_anchor: Whether action-sheet artifacts get an anchor object.
        artifacts: Every artifact this host created, in order.
    """

    root_surface: HeadlessSurface | None = None
    requires_anchor: bool = False
    supports_preferred_action: bool = True
    provides_anchor: bool = True
    artifacts: list[HeadlessArtifact] = field(default_factory=list)

    def create_artifact(
        self, title: str | None, message: str | None, style: DialogStyle
    ) -> HeadlessArtifact:
        artifact = HeadlessArtifact(
            title, message, style, provides_anchor=self.provides_anchor
        )
        self.artifacts.append(artifact)
        return artifact

    def resolve_current_root_surface(self) -> HeadlessSurface | None:
        return self.root_surface

    def wrap_surface(self, target: Any) -> HeadlessSurface | None:
        return target

    def current_layout_requires_anchor(self) -> bool:
        return self.requires_anchor
