"""Typed view of the ``[tasklab]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from tasklab.domain.errors import ConfigurationError


class TasklabConfigModel(BaseModel):
    """Validated, immutable settings for the exercise commands.

    Example:
        >>> TasklabConfigModel().email_separator
        ';'
        >>> TasklabConfigModel(json_sort_keys=True).json_sort_keys
        True
    """

    model_config = ConfigDict(frozen=True)

    email_separator: str = ";"
    json_sort_keys: bool = False
    json_indent: bool = False

    @field_validator("email_separator")
    @classmethod
    def _reject_empty_separator(cls, v: str) -> str:
        if not v:
            raise ValueError("email_separator must not be empty")
        return v


def load_tasklab_settings(config: Config) -> TasklabConfigModel:
    """Parse the ``[tasklab]`` section of *config*.

    Missing sections and keys fall back to the model defaults.

    Raises:
        ConfigurationError: If a value has the wrong type or is empty.

    Example:
        >>> from lib_layered_config import Config
        >>> load_tasklab_settings(Config({"tasklab": {"email_separator": ","}}, {})).email_separator
        ','
    """
    raw: object = config.get("tasklab", default={})
    try:
        return TasklabConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [tasklab] configuration: {exc}") from exc


__all__ = ["TasklabConfigModel", "load_tasklab_settings"]
