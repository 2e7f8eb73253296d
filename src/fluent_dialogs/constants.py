"""Shared constants for fluent-dialogs.

Default titles for the convenience actions and the names of the files and
environment variables the settings layer reads.
"""

from __future__ import annotations

# =============================================================================
# Convenience Action Titles
# =============================================================================

#: Default title used by ``DialogBuilder.add_ok``
OK_TITLE: str = "OK"

#: Default title used by ``DialogBuilder.add_cancel``
CANCEL_TITLE: str = "Cancel"

# =============================================================================
# Settings
# =============================================================================

#: Prefix for all environment variables read by the settings layer
ENV_PREFIX: str = "FLUENT_DIALOGS_"

#: Project-level settings file, resolved against the current directory
PROJECT_CONFIG_FILENAME: str = "fluent_dialogs.yaml"

#: Directory (under ~/.config) holding the user-level settings file
USER_CONFIG_DIRNAME: str = "fluent-dialogs"

# =============================================================================
# Layout
# =============================================================================

#: Terminal width (in cells) at which action sheets need an anchor
DEFAULT_ANCHOR_MIN_WIDTH: int = 100

#: Fade-in duration (seconds) for animated presentation
DEFAULT_ANIMATION_DURATION: float = 0.15
