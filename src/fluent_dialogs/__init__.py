"""fluent-dialogs: chainable builder for alerts and action sheets.

Build a dialog with chained calls, then ``show`` it; the outcome arrives as
a PresentationResult instead of an exception.

    from fluent_dialogs import DialogBuilder, DialogStyle

    DialogBuilder.create(DialogStyle.ALERT, "Saved").add_ok().show()
"""

from __future__ import annotations

__version__ = "0.1.0"

from fluent_dialogs.builder import DialogBuilder  # noqa: E402
from fluent_dialogs.host import (  # noqa: E402
    DialogArtifact,
    DialogHost,
    Surface,
    get_default_host,
    install_default_host,
    reset_default_host,
)
from fluent_dialogs.models import (  # noqa: E402
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
    TextFieldSpec,
)

__all__ = [
    "ActionKind",
    "ActionSpec",
    "AnchorConfiguration",
    "DialogArtifact",
    "DialogBuilder",
    "DialogDescriptor",
    "DialogErrorKind",
    "DialogHost",
    "DialogState",
    "DialogStyle",
    "Failure",
    "PresentationResult",
    "Success",
    "Surface",
    "TextFieldSpec",
    "__version__",
    "get_default_host",
    "install_default_host",
    "reset_default_host",
]
