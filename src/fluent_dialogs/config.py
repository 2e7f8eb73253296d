from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from fluent_dialogs.constants import (
    DEFAULT_ANCHOR_MIN_WIDTH,
    DEFAULT_ANIMATION_DURATION,
    ENV_PREFIX,
    PROJECT_CONFIG_FILENAME,
    USER_CONFIG_DIRNAME,
)
from fluent_dialogs.exceptions import ConfigError
from fluent_dialogs.logging import get_logger

__all__ = [
    "DialogSettings",
    "LayoutConfig",
    "PresentationConfig",
    "get_user_config_path",
    "load_settings",
]

logger = get_logger(__name__)


class LayoutConfig(BaseModel):
    """Settings deciding which layout class the terminal is in.

    Attributes:
        anchor_min_width: Terminal width (cells) at or above which the layout
            is "wide" and action sheets must be anchored.
    """

    anchor_min_width: int = Field(default=DEFAULT_ANCHOR_MIN_WIDTH, ge=20, le=1000)


class PresentationConfig(BaseModel):
    """Settings for how hosts present dialogs.

    Attributes:
        animation_duration: Fade-in duration in seconds for animated shows.
        supports_preferred_action: Whether the host honors preferred actions.
    """

    animation_duration: float = Field(default=DEFAULT_ANIMATION_DURATION, ge=0.0, le=2.0)
    supports_preferred_action: bool = True


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from a YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_file}: {e}") from e
            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    f"Expected a mapping at the top of {yaml_file}",
                    value=type(loaded).__name__,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class DialogSettings(BaseSettings):
    """Root settings object for fluent-dialogs."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
    )

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    presentation: PresentationConfig = Field(default_factory=PresentationConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Order settings sources, highest priority first.

        1. Init arguments
        2. Environment variables (FLUENT_DIALOGS_*)
        3. Project YAML (./fluent_dialogs.yaml or the path given to
           load_settings)
        4. User YAML (~/.config/fluent-dialogs/config.yaml)
        """
        project_config_path = _project_config_override or (
            Path.cwd() / PROJECT_CONFIG_FILENAME
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


# Set by load_settings while DialogSettings() is being constructed.
_project_config_override: Path | None = None


def get_user_config_path() -> Path:
    """Path to ~/.config/fluent-dialogs/config.yaml."""
    return Path.home() / ".config" / USER_CONFIG_DIRNAME / "config.yaml"


def load_settings(config_path: Path | None = None) -> DialogSettings:
    """Load settings with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional project settings file. Defaults to
            ./fluent_dialogs.yaml.

    Returns:
        Merged DialogSettings.

    Raises:
        ConfigError: If a settings file is malformed or a value is invalid.
    """
    global _project_config_override

    resolved = config_path or Path.cwd() / PROJECT_CONFIG_FILENAME
    if not resolved.exists():
        logger.debug("no_project_settings", path=str(resolved))

    _project_config_override = resolved
    try:
        return DialogSettings()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _project_config_override = None
