"""Data models for dialog descriptors and presentation results."""

from __future__ import annotations

from fluent_dialogs.models.dialog import (
    ActionHandler,
    ActionSpec,
    AnchorConfiguration,
    DialogDescriptor,
    TextFieldConfigurator,
    TextFieldSpec,
)
from fluent_dialogs.models.enums import (
    ActionKind,
    DialogErrorKind,
    DialogState,
    DialogStyle,
)
from fluent_dialogs.models.result import Failure, PresentationResult, Success

__all__ = [
    "ActionHandler",
    "ActionKind",
    "ActionSpec",
    "AnchorConfiguration",
    "DialogDescriptor",
    "DialogErrorKind",
    "DialogState",
    "DialogStyle",
    "Failure",
    "PresentationResult",
    "Success",
    "TextFieldConfigurator",
    "TextFieldSpec",
]
