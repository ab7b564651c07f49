"""Settings loaded from an optional YAML file and the environment."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from psl_common import ConfigurationError, get_bool_env, get_env
from psl_common.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_INCLUDE_PRIVATE,
    ENV_KNOWN_SUFFIXES_ONLY,
    ENV_LIST_PATH,
    ENV_LOG_LEVEL,
    ENV_PREFER_PRIVATE,
)
from psl_schemas import ClassifierConfig

logger = structlog.get_logger()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Runtime settings."""

    list_path: Optional[str] = Field(
        default=None, description="Suffix list file; the bundled snapshot when unset"
    )
    include_private_suffixes: bool = True
    known_suffixes_only: bool = False
    prefer_private: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(extra="forbid")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return value

    def classifier_config(self) -> ClassifierConfig:
        return ClassifierConfig(
            include_private_suffixes=self.include_private_suffixes,
            known_suffixes_only=self.known_suffixes_only,
            prefer_private=self.prefer_private,
        )


def _read_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(
            "Configuration file not found", {"config_path": str(config_path)}
        )

    logger.info("Loading configuration", config_path=str(config_path))

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Configuration file is not valid YAML", {"config_path": str(config_path)}, e
        ) from e

    section = config.get("suffix_list", {}) if isinstance(config, dict) else None
    if not isinstance(section, dict):
        raise ConfigurationError(
            "Configuration must contain a 'suffix_list' mapping",
            {"config_path": str(config_path), "field": "suffix_list"},
        )
    return section


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings.

    Values from the YAML file's ``suffix_list`` mapping are applied first,
    then environment variables override them.

    Args:
        config_path: Optional YAML configuration file

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If the file or any value is invalid
    """
    values: Dict[str, Any] = {}
    if config_path is not None:
        values.update(_read_config_file(config_path))

    list_path = get_env(ENV_LIST_PATH).strip()
    if list_path:
        values["list_path"] = list_path

    log_level = get_env(ENV_LOG_LEVEL).strip()
    if log_level:
        values["log_level"] = log_level

    for field, env_key in (
        ("include_private_suffixes", ENV_INCLUDE_PRIVATE),
        ("known_suffixes_only", ENV_KNOWN_SUFFIXES_ONLY),
        ("prefer_private", ENV_PREFER_PRIVATE),
    ):
        flag = get_bool_env(env_key)
        if flag is not None:
            values[field] = flag

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid settings",
            {"config_path": str(config_path) if config_path else None},
            e,
        ) from e
