from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_dialogs.exceptions.base import FluentDialogsError

if TYPE_CHECKING:
    from fluent_dialogs.models.enums import DialogErrorKind


class PresentationError(FluentDialogsError):
    """A dialog could not be presented.

    ``DialogBuilder.show`` never raises this; it is produced by
    ``Failure.raise_for_failure()`` for callers that prefer exceptions.

    Attributes:
        kind: The reason presentation was rejected.
    """

    def __init__(self, kind: DialogErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or f"Dialog presentation failed: {kind.value}")


class HostError(FluentDialogsError):
    """A host was asked to do something it cannot do.

    Examples are presenting on a Textual surface whose app is not running,
    or attaching a text input directly to an action-sheet artifact.
    """
