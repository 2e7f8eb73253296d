"""Fluent dialog builder.

DialogBuilder accumulates a dialog descriptor through chained calls, keeps
the host artifact in sync with it, and on ``show`` validates presentability
and resolves the presenting surface before handing the artifact to the host.

Example:
    ```python
    (
        DialogBuilder.create(DialogStyle.ALERT, "Rename", "Choose a new name")
        .add_text_field(lambda field: setattr(field, "placeholder", "name"))
        .add_cancel()
        .add_ok(preferred=True, handler=lambda action, values: rename(values[0]))
        .show(completion=report)
    )
    ```
"""

from __future__ import annotations

import asyncio
import weakref
from collections.abc import Callable
from typing import Any

from fluent_dialogs.constants import CANCEL_TITLE, OK_TITLE
from fluent_dialogs.host import DialogArtifact, DialogHost, Surface, get_default_host
from fluent_dialogs.logging import dialog_context, get_logger
from fluent_dialogs.models import (
    ActionHandler,
    ActionKind,
    ActionSpec,
    AnchorConfiguration,
    DialogDescriptor,
    DialogErrorKind,
    DialogState,
    DialogStyle,
    Failure,
    PresentationResult,
    Success,
    TextFieldConfigurator,
    TextFieldSpec,
)

__all__ = ["DialogBuilder"]

logger = get_logger(__name__)


def _ignore_result(result: PresentationResult) -> None:
    return None


class DialogBuilder:
    """Builds, validates and presents one alert or action sheet.

    Create instances with ``DialogBuilder.create``. Every configuration
    method returns the builder so calls can be chained.

    The builder owns the host artifact until an action fires; at that point
    the artifact slot is cleared and a later ``show`` fails with
    ``DialogErrorKind.ARTIFACT_ABSENT``.
    """

    def __init__(self, descriptor: DialogDescriptor, host: DialogHost) -> None:
        self._descriptor = descriptor
        self._host = host
        self._artifact: DialogArtifact | None = host.create_artifact(
            descriptor.title, descriptor.message, descriptor.style
        )
        self._state = DialogState.CONFIGURING
        self._pending_completions: list[Callable[[PresentationResult], Any]] = []
        self._log = logger.bind(dialog_style=descriptor.style.value)
        self._log.debug("dialog_created", title=descriptor.title)

    # -------------------------------------------------------------------------
    # Creating
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        style: DialogStyle,
        title: str | None = None,
        message: str | None = None,
        *,
        host: DialogHost | None = None,
    ) -> DialogBuilder:
        """Create a builder for a new dialog.

        Args:
            style: Alert or action sheet.
            title: Optional title; may be empty.
            message: Optional message; may be empty.
            host: Host that creates and presents the artifact. Defaults to
                the installed default host.

        Returns:
            A builder in the configuring state.
        """
        descriptor = DialogDescriptor(style=style, title=title, message=message)
        return cls(descriptor, host if host is not None else get_default_host())

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def descriptor(self) -> DialogDescriptor:
        return self._descriptor

    @property
    def style(self) -> DialogStyle:
        return self._descriptor.style

    @property
    def state(self) -> DialogState:
        return self._state

    @property
    def artifact(self) -> DialogArtifact | None:
        """The host artifact, or None once an action fired."""
        return self._artifact

    def fetch(self, handler: Callable[[DialogArtifact], Any]) -> DialogBuilder:
        """Hand the host artifact to ``handler`` for direct configuration.

        Does nothing when the artifact was already released.
        """
        if self._artifact is not None:
            handler(self._artifact)
        return self

    # -------------------------------------------------------------------------
    # Text fields
    # -------------------------------------------------------------------------

    def add_text_field(
        self, configurator: TextFieldConfigurator | None = None
    ) -> DialogBuilder:
        """Add a text input to an alert.

        Ignored for action sheets. The configurator runs once against the
        host's freshly created text-input object.
        """
        if self._artifact is None or self._descriptor.style is not DialogStyle.ALERT:
            return self

        self._descriptor.text_fields.append(TextFieldSpec(configurator))
        self._artifact.attach_text_input(configurator)
        return self

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def add_action(
        self,
        title: str | None = None,
        kind: ActionKind = ActionKind.DEFAULT,
        preferred: bool = False,
        handler: ActionHandler | None = None,
    ) -> DialogBuilder:
        """Attach a button to the dialog.

        When the user selects it, ``handler`` receives the action and, for
        alerts, the current text-input values (None for action sheets).
        The builder then releases its artifact.

        Args:
            title: Button label.
            kind: Default, cancel or destructive.
            preferred: Make this the preferred action, replacing any earlier
                one. Ignored by hosts that do not support preferred actions.
            handler: Optional callback run when the action fires.
        """
        if self._artifact is None:
            return self

        action = ActionSpec(title=title, kind=kind, handler=handler)
        self._descriptor.actions.append(action)
        self._artifact.attach_action(action, self._make_fire_callback(self._artifact))

        if preferred:
            self._descriptor.designate_preferred(action)
            if self._host.supports_preferred_action:
                self._artifact.set_preferred_action(action)

        return self

    def add_ok(
        self,
        title: str = OK_TITLE,
        kind: ActionKind = ActionKind.DEFAULT,
        preferred: bool = False,
        handler: ActionHandler | None = None,
    ) -> DialogBuilder:
        return self.add_action(title, kind=kind, preferred=preferred, handler=handler)

    def add_cancel(
        self,
        title: str = CANCEL_TITLE,
        kind: ActionKind = ActionKind.CANCEL,
        preferred: bool = False,
        handler: ActionHandler | None = None,
    ) -> DialogBuilder:
        return self.add_action(title, kind=kind, preferred=preferred, handler=handler)

    def add_destructive(
        self,
        title: str | None = None,
        kind: ActionKind = ActionKind.DESTRUCTIVE,
        preferred: bool = False,
        handler: ActionHandler | None = None,
    ) -> DialogBuilder:
        return self.add_action(title, kind=kind, preferred=preferred, handler=handler)

    def _make_fire_callback(
        self, artifact: DialogArtifact
    ) -> Callable[[ActionSpec], None]:
        # The artifact owns this callback; neither reference may keep the
        # builder or the artifact alive.
        builder_ref = weakref.ref(self)
        artifact_ref = weakref.ref(artifact)
        is_alert = self._descriptor.style is DialogStyle.ALERT
        style = self._descriptor.style.value
        title = self._descriptor.title
        log = self._log

        def on_fire(action: ActionSpec) -> None:
            fired_from = artifact_ref()
            text_values = (
                fired_from.text_values() if is_alert and fired_from is not None else None
            )
            log.info("dialog_action_fired", title=action.title, kind=action.kind.value)
            try:
                if action.handler is not None:
                    with dialog_context(dialog_style=style, dialog_title=title):
                        action.handler(action, text_values)
            finally:
                builder = builder_ref()
                if builder is not None:
                    builder._release_artifact()

        return on_fire

    def _release_artifact(self) -> None:
        self._artifact = None
        self._state = DialogState.RELEASED
        self._log.debug("dialog_released")

    # -------------------------------------------------------------------------
    # Popover presentation
    # -------------------------------------------------------------------------

    def configure_popover_presentation(
        self, configurator: Callable[[AnchorConfiguration], Any] | None = None
    ) -> DialogBuilder:
        """Configure where an action sheet is anchored.

        ``configurator`` receives the artifact's anchor object and should set
        ``source_view`` (optionally with ``source_rect``) or
        ``anchor_control``. Nothing happens when the artifact has no anchor
        object. Required before showing an action sheet on layouts that need
        an anchor.
        """
        if self._artifact is None:
            return self

        anchor = self._artifact.anchor
        if anchor is None:
            return self

        self._descriptor.anchor = anchor
        if configurator is not None:
            configurator(anchor)
        return self

    # -------------------------------------------------------------------------
    # Showing
    # -------------------------------------------------------------------------

    def show(
        self,
        target_surface: Any = None,
        animated: bool = True,
        completion: Callable[[PresentationResult], Any] = _ignore_result,
    ) -> None:
        """Validate the dialog and ask the host to present it.

        Checks run in order and the first failure wins:

        1. the artifact must exist (ARTIFACT_ABSENT);
        2. on layouts that need an anchor, an action sheet must have one
           (ANCHOR_NOT_CONFIGURED);
        3. a presenting surface must resolve, either ``target_surface`` or
           the host's current root, descending into navigation containers
           (SURFACE_ABSENT).

        ``completion`` is called exactly once: synchronously with a Failure,
        or with Success once the host finished presenting. Showing a dialog
        that is already on screen does not present it again; ``completion``
        receives the Success of the presentation in progress.

        Args:
            target_surface: Surface (or host object the host can wrap) to
                present from. Defaults to the host's current root surface.
            animated: Whether the host should animate the transition.
            completion: Receives the PresentationResult.
        """
        artifact = self._artifact
        if artifact is None:
            self._reject(DialogErrorKind.ARTIFACT_ABSENT, completion)
            return

        if self._state is DialogState.PRESENTING:
            self._log.debug("dialog_presentation_in_progress")
            self._pending_completions.append(completion)
            return
        if self._state is DialogState.PRESENTED:
            self._log.debug("dialog_already_presented")
            completion(Success())
            return

        if (
            self._host.current_layout_requires_anchor()
            and self._descriptor.style is DialogStyle.ACTION_SHEET
            and not self._anchor_is_configured(artifact)
        ):
            self._reject(DialogErrorKind.ANCHOR_NOT_CONFIGURED, completion)
            return

        surface = self._resolve_surface(target_surface)
        if surface is None:
            self._reject(DialogErrorKind.SURFACE_ABSENT, completion)
            return

        delivered = False

        def on_presented() -> None:
            nonlocal delivered
            if delivered:
                return
            delivered = True
            if self._state is DialogState.PRESENTING:
                self._state = DialogState.PRESENTED
            self._log.info("dialog_presented", surface=repr(surface))
            pending, self._pending_completions = self._pending_completions, []
            for waiting in pending:
                waiting(Success())

        self._state = DialogState.PRESENTING
        self._pending_completions = [completion]
        surface.present(artifact, animated, on_presented)

    async def show_async(
        self, target_surface: Any = None, animated: bool = True
    ) -> PresentationResult:
        """Await the result of ``show`` on a running event loop."""
        future: asyncio.Future[PresentationResult] = (
            asyncio.get_running_loop().create_future()
        )

        def _on_result(result: PresentationResult) -> None:
            if not future.done():
                future.set_result(result)

        self.show(target_surface, animated=animated, completion=_on_result)
        return await future

    @staticmethod
    def _anchor_is_configured(artifact: DialogArtifact) -> bool:
        anchor = artifact.anchor
        return anchor is not None and anchor.is_configured

    def _resolve_surface(self, target_surface: Any) -> Surface | None:
        if target_surface is not None:
            surface = self._host.wrap_surface(target_surface)
        else:
            surface = self._host.resolve_current_root_surface()

        if surface is not None and surface.is_navigation_container:
            return surface.visible_descendant()
        return surface

    def _reject(
        self,
        error: DialogErrorKind,
        completion: Callable[[PresentationResult], Any],
    ) -> None:
        if self._state is not DialogState.RELEASED:
            self._state = DialogState.REJECTED
        self._log.warning("dialog_rejected", error=error.value)
        completion(Failure(error))
