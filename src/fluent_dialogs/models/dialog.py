"""Descriptors accumulated by DialogBuilder.

These are plain dataclasses; the builder owns exactly one DialogDescriptor
and hands the individual specs to the host artifact as they are added.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fluent_dialogs.models.enums import ActionKind, DialogStyle

__all__ = [
    "ActionHandler",
    "ActionSpec",
    "AnchorConfiguration",
    "DialogDescriptor",
    "TextFieldConfigurator",
    "TextFieldSpec",
]

#: Called against the host's text-input object when it is created
TextFieldConfigurator = Callable[[Any], None]

#: Called with the fired action and the text values (alerts only)
ActionHandler = Callable[["ActionSpec", list[str] | None], None]


@dataclass(slots=True)
class TextFieldSpec:
    """A text input requested on an alert.

    Attributes:
        configurator: Optional callback receiving the host text-input object.
    """

    configurator: TextFieldConfigurator | None = None


@dataclass(slots=True, eq=False)
class ActionSpec:
    """A button on the dialog.

    Actions compare by identity so the same title can appear twice.

    Attributes:
        title: Button label. Destructive actions may omit it.
        kind: Default, cancel or destructive.
        preferred: Whether this is the dialog's preferred action. Only the
            most recently designated action keeps this flag.
        handler: Optional callback run when the action fires.
    """

    title: str | None = None
    kind: ActionKind = ActionKind.DEFAULT
    preferred: bool = False
    handler: ActionHandler | None = None


@dataclass(slots=True)
class AnchorConfiguration:
    """Where an action sheet is anchored on layouts that need an anchor.

    The host owns this object and the caller mutates it through
    ``DialogBuilder.configure_popover_presentation``.

    Attributes:
        source_view: Host widget the sheet points at.
        source_rect: Host region, relative to ``source_view`` when it is set,
            otherwise in screen coordinates.
        anchor_control: Control-style anchor (a toolbar or footer item).
    """

    source_view: Any = None
    source_rect: Any = None
    anchor_control: Any = None

    @property
    def is_configured(self) -> bool:
        return self.source_view is not None or self.anchor_control is not None


@dataclass(slots=True)
class DialogDescriptor:
    """Everything the builder has been told about the dialog.

    Attributes:
        style: Alert or action sheet. Fixed for the descriptor's lifetime.
        title: Optional title.
        message: Optional message.
        anchor: The artifact's anchor object, once the popover was configured.
        text_fields: Text inputs in declaration order (alerts only).
        actions: Actions in declaration order.
        preferred_action: The current preferred action, if any.
    """

    style: DialogStyle
    title: str | None = None
    message: str | None = None
    anchor: AnchorConfiguration | None = None
    text_fields: list[TextFieldSpec] = field(default_factory=list)
    actions: list[ActionSpec] = field(default_factory=list)
    preferred_action: ActionSpec | None = None

    def designate_preferred(self, action: ActionSpec) -> None:
        """Make ``action`` the preferred action, clearing any earlier one."""
        if self.preferred_action is not None and self.preferred_action is not action:
            self.preferred_action.preferred = False
        action.preferred = True
        self.preferred_action = action
