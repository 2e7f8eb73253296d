"""Protocol definitions for dialog hosts.

A host is the UI framework that actually renders dialogs. DialogBuilder only
talks to the capabilities below, so any framework that satisfies these
protocols structurally can present builder-made dialogs.

The module also keeps the process-wide default host, used by
``DialogBuilder.create`` when no host is passed explicitly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from fluent_dialogs.models import (
    ActionSpec,
    AnchorConfiguration,
    DialogStyle,
    TextFieldConfigurator,
)

__all__ = [
    "DialogArtifact",
    "DialogHost",
    "Surface",
    "get_default_host",
    "install_default_host",
    "reset_default_host",
]


class DialogArtifact(Protocol):
    """The host's presentable dialog object."""

    @property
    def style(self) -> DialogStyle: ...

    @property
    def anchor(self) -> AnchorConfiguration | None:
        """Anchor object, or None when the host has no such concept here."""
        ...

    def attach_text_input(self, configurator: TextFieldConfigurator | None) -> None:
        """Create a text input, run ``configurator`` on it, and append it.

        Only legal on alert-style artifacts.
        """
        ...

    def attach_action(
        self, action: ActionSpec, on_fire: Callable[[ActionSpec], None]
    ) -> None:
        """Append a button; ``on_fire`` runs when the user selects it."""
        ...

    def set_preferred_action(self, action: ActionSpec) -> None: ...

    def text_values(self) -> list[str]:
        """Current values of the text inputs, in declaration order."""
        ...


class Surface(Protocol):
    """Something that can present a dialog artifact modally."""

    @property
    def is_navigation_container(self) -> bool: ...

    def visible_descendant(self) -> Surface | None:
        """The surface currently visible inside a navigation container."""
        ...

    def present(
        self,
        artifact: DialogArtifact,
        animated: bool,
        on_complete: Callable[[], None],
    ) -> None:
        """Present ``artifact`` asynchronously.

        ``on_complete`` must be invoked exactly once, after the presentation
        transition finished.
        """
        ...


class DialogHost(Protocol):
    """Factory and environment queries for one UI framework."""

    @property
    def supports_preferred_action(self) -> bool: ...

    def create_artifact(
        self, title: str | None, message: str | None, style: DialogStyle
    ) -> DialogArtifact: ...

    def resolve_current_root_surface(self) -> Surface | None: ...

    def wrap_surface(self, target: Any) -> Surface | None:
        """Adapt a caller-supplied target (a host object or a Surface)."""
        ...

    def current_layout_requires_anchor(self) -> bool:
        """True when unanchored action sheets are unsupported right now."""
        ...


_default_host: DialogHost | None = None


def install_default_host(host: DialogHost) -> None:
    """Make ``host`` the host used by ``DialogBuilder.create`` by default."""
    global _default_host
    _default_host = host


def reset_default_host() -> None:
    """Forget the installed default host."""
    global _default_host
    _default_host = None


def get_default_host() -> DialogHost:
    """Return the installed default host.

    Falls back to a fresh HeadlessHost, which has no root surface, so
    dialogs built without a real host fail with SURFACE_ABSENT on show.
    """
    if _default_host is not None:
        return _default_host

    from fluent_dialogs.hosts.headless import HeadlessHost

    return HeadlessHost()
