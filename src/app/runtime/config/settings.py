from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Process-level switches read before config.yaml is loaded.

    ``APP_ENVIRONMENT`` selects the environment (and the ``<ENV>_`` variable
    overrides), ``APP_CONFIG_FILE`` points at an alternative YAML file.
    """

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    config_file: str = Field(default="config.yaml")
