"""Loading of the templated config.yaml.

Placeholders are resolved from the process environment before the YAML is
parsed:

- ``${VAR}``: required, fails when unset
- ``${VAR:-default}``: falls back to ``default``
- ``${VAR:?message}``: required, fails with ``message``
"""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.app.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve_placeholder(match: re.Match) -> str:
    expression = match.group(1)

    if ":-" in expression:
        name, default = expression.split(":-", 1)
        return os.getenv(name, default)

    if ":?" in expression:
        name, message = expression.split(":?", 1)
        value = os.getenv(name)
        if value is None:
            raise ValueError(f"Required environment variable {name}: {message}")
        return value

    value = os.getenv(expression)
    if value is None:
        raise ValueError(f"Required environment variable {expression} not set")
    return value


def substitute_env_vars(text: str) -> str:
    """Replace every ``${...}`` placeholder in ``text``."""
    return _PLACEHOLDER.sub(_resolve_placeholder, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_FOO`` variables to ``FOO`` for the active environment.

    ``TEST_DATABASE_PATH=:memory:`` therefore only takes effect when the
    application runs with ``APP_ENVIRONMENT=test``.
    """
    prefix = f"{env_mode.upper()}_"
    promoted = {
        name[len(prefix):]: value
        for name, value in os.environ.items()
        if name.startswith(prefix)
    }
    if promoted:
        logger.info("Applying {} overrides: {}", env_mode, sorted(promoted))
    os.environ.update(promoted)


def parse_config(content: str) -> ConfigData:
    """Substitute placeholders in ``content`` and validate it as ConfigData."""
    try:
        loaded = yaml.safe_load(substitute_env_vars(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    if not loaded:
        raise ValueError("Failed to parse YAML: document is empty")

    try:
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """Read, substitute and validate the YAML configuration at ``file_path``.

    Raises:
        ValueError: a required variable is missing or the content is invalid.
        FileNotFoundError: the file does not exist.
    """
    content = Path(file_path).read_text()

    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    return parse_config(content)
