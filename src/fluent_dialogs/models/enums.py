from enum import Enum


class DialogStyle(str, Enum):
    """Presentation style of a dialog."""

    ALERT = "alert"
    ACTION_SHEET = "action_sheet"


class ActionKind(str, Enum):
    """Visual and semantic kind of a dialog action."""

    DEFAULT = "default"
    CANCEL = "cancel"
    DESTRUCTIVE = "destructive"


class DialogErrorKind(str, Enum):
    """Reason a dialog was not presented."""

    ARTIFACT_ABSENT = "artifact_absent"
    ANCHOR_NOT_CONFIGURED = "anchor_not_configured"
    SURFACE_ABSENT = "surface_absent"


class DialogState(str, Enum):
    """Lifecycle state of a DialogBuilder."""

    CONFIGURING = "configuring"
    PRESENTING = "presenting"
    PRESENTED = "presented"
    REJECTED = "rejected"
    RELEASED = "released"
