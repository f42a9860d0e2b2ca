"""Configuration — Pydantic Settings + YAML loading."""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from file_cleaner.models.file import Pattern
from file_cleaner.models.types import RunMode

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"

# YAML data for the Settings instance currently being built by ``load``.
_yaml_data: ContextVar[dict[str, Any] | None] = ContextVar("_yaml_data", default=None)


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Values read from the YAML config file, ranked below the environment."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {k: v for k, v in self._data.items() if k in self.settings_cls.model_fields}


class Settings(BaseSettings):
    """Root settings.

    Precedence, highest first: explicit overrides, ``FILE_CLEANER_*``
    environment variables, the YAML file, field defaults.
    """

    model_config = SettingsConfigDict(env_prefix="FILE_CLEANER_")

    target_dir: Path | None = None
    patterns: list[Pattern] = Field(default_factory=list)
    age_hours: float = Field(default=72.0, ge=0)
    log_dir: Path = Path("logs")
    log_retention_days: int = 14
    mode: RunMode = RunMode.TEST
    log_level: str = "INFO"

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, v: Any) -> RunMode:
        return RunMode.parse(v)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (
            init_settings, env_settings, dotenv_settings,
        )
        data = _yaml_data.get()
        if data:
            sources += (YamlSettingsSource(settings_cls, data),)
        return sources + (file_secret_settings,)

    @classmethod
    def load(cls, config_path: Path | str | None = None, **overrides: Any) -> Settings:
        """Load settings from YAML file, falling back to defaults.

        Environment variables win over the file; keyword *overrides* that
        are not None win over both.
        """
        data: dict[str, Any] = {}

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
                if isinstance(raw, dict):
                    data = raw

        token = _yaml_data.set(data)
        try:
            return cls(**{k: v for k, v in overrides.items() if v is not None})
        finally:
            _yaml_data.reset(token)
