"""Textual implementation of the dialog host protocols.

The running ``App`` is the root surface and acts as a navigation container
whose visible child is the screen on top of the stack. Dialogs are pushed
onto the app's screen stack from whichever screen surface resolved.

Usage:
    class MyApp(App):
        def on_mount(self) -> None:
            TextualHost.install(self)

        def action_delete(self) -> None:
            (
                DialogBuilder.create(DialogStyle.ALERT, "Delete file?")
                .add_cancel()
                .add_destructive("Delete", handler=self._delete)
                .show()
            )
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from textual.app import App
from textual.screen import Screen

from fluent_dialogs.config import DialogSettings, load_settings
from fluent_dialogs.exceptions import HostError
from fluent_dialogs.host import DialogArtifact, install_default_host
from fluent_dialogs.logging import get_logger
from fluent_dialogs.models import DialogStyle
from fluent_dialogs.tui.screen import DialogScreen

__all__ = ["AppSurface", "ScreenSurface", "TextualHost"]

logger = get_logger(__name__)


class ScreenSurface:
    """Presents dialogs on top of a specific screen."""

    is_navigation_container = False

    def __init__(self, app: App[Any], screen: Screen[Any]) -> None:
        self.app = app
        self.screen = screen

    def __repr__(self) -> str:
        return f"ScreenSurface({type(self.screen).__name__})"

    def visible_descendant(self) -> ScreenSurface:
        return self

    def present(
        self,
        artifact: DialogArtifact,
        animated: bool,
        on_complete: Callable[[], None],
    ) -> None:
        """Push ``artifact`` onto the app's screen stack.

        Raises:
            HostError: If the artifact is not a DialogScreen or the app is
                not running.
        """
        if not isinstance(artifact, DialogScreen):
            raise HostError(
                f"Textual surfaces can only present DialogScreen, not "
                f"{type(artifact).__name__}"
            )
        if not self.app.is_running:
            raise HostError("Cannot present a dialog on an app that is not running")
        artifact.prepare_presentation(animated=animated, on_presented=on_complete)
        logger.debug("pushing_dialog_screen", surface=repr(self), animated=animated)
        self.app.push_screen(artifact)


class AppSurface:
    """The running app, resolving to the screen currently on top."""

    is_navigation_container = True

    def __init__(self, app: App[Any]) -> None:
        self.app = app

    def __repr__(self) -> str:
        return f"AppSurface({type(self.app).__name__})"

    def visible_descendant(self) -> ScreenSurface | None:
        if not self.app.screen_stack:
            return None
        return ScreenSurface(self.app, self.app.screen)

    def present(
        self,
        artifact: DialogArtifact,
        animated: bool,
        on_complete: Callable[[], None],
    ) -> None:
        surface = self.visible_descendant()
        if surface is None:
            raise HostError("App has no screen to present from")
        surface.present(artifact, animated, on_complete)


class TextualHost:
    """Dialog host backed by a Textual app.

    Args:
        app: The app dialogs are presented in.
        settings: Layout and presentation settings. Loaded from the usual
            sources when omitted.
    """

    def __init__(self, app: App[Any], settings: DialogSettings | None = None) -> None:
        self.app = app
        self.settings = settings if settings is not None else load_settings()

    @classmethod
    def install(
        cls, app: App[Any], settings: DialogSettings | None = None
    ) -> TextualHost:
        """Create a host for ``app`` and make it the default host."""
        host = cls(app, settings)
        install_default_host(host)
        return host

    @property
    def supports_preferred_action(self) -> bool:
        return self.settings.presentation.supports_preferred_action

    def create_artifact(
        self, title: str | None, message: str | None, style: DialogStyle
    ) -> DialogScreen:
        return DialogScreen(
            title,
            message,
            style,
            animation_duration=self.settings.presentation.animation_duration,
        )

    def resolve_current_root_surface(self) -> AppSurface | None:
        if not self.app.is_running:
            return None
        return AppSurface(self.app)

    def wrap_surface(self, target: Any) -> Any:
        """Accept an App, a Screen, or a ready Surface.

        Apps that are not running and screens that are not attached to a
        running app cannot present anything and resolve to None.
        """
        if isinstance(target, App):
            return AppSurface(target) if target.is_running else None
        if isinstance(target, Screen):
            if not target.is_attached or not target.app.is_running:
                logger.debug("screen_not_presentable", screen=type(target).__name__)
                return None
            return ScreenSurface(target.app, target)
        return target

    def current_layout_requires_anchor(self) -> bool:
        return self.app.size.width >= self.settings.layout.anchor_min_width
