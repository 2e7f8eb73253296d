"""Typed outcome of ``DialogBuilder.show``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from fluent_dialogs.exceptions import PresentationError
from fluent_dialogs.models.enums import DialogErrorKind

__all__ = ["Failure", "PresentationResult", "Success"]


@dataclass(frozen=True, slots=True)
class Success:
    """The dialog is on screen."""

    ok: Literal[True] = True

    def raise_for_failure(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Failure:
    """The dialog was not presented.

    Attributes:
        error: Why presentation was rejected.
    """

    error: DialogErrorKind
    ok: Literal[False] = False

    def raise_for_failure(self) -> None:
        """Raise the failure as a PresentationError.

        Raises:
            PresentationError: Always, carrying ``error`` as its kind.
        """
        raise PresentationError(self.error)


PresentationResult = Success | Failure
