"""Dialog hosts shipped with fluent-dialogs.

The Textual host lives in ``fluent_dialogs.tui`` so importing this package
does not pull in Textual.
"""

from __future__ import annotations

from fluent_dialogs.hosts.headless import (
    HeadlessArtifact,
    HeadlessHost,
    HeadlessNavigationSurface,
    HeadlessSurface,
    HeadlessTextInput,
)

__all__ = [
    "HeadlessArtifact",
    "HeadlessHost",
    "HeadlessNavigationSurface",
    "HeadlessSurface",
    "HeadlessTextInput",
]
