"""Configuration loading utilities.

Handles YAML file loading and ${VAR} environment variable expansion. JSON is
a subset of YAML, so ``config.json`` files load the same way.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from tokenline.core.config.models import Config

ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """Expand ${VAR} patterns in a string with environment variable values.

    Unknown variables are left as-is so check_unexpanded_vars can report them.

    Examples:
        >>> os.environ['SLACK_TOKEN'] = 'secret123'
        >>> expand_env_vars('${SLACK_TOKEN}')
        'secret123'
    """
    return ENV_VAR_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)


def expand_env_vars_recursive(obj: Any) -> Any:
    """Recursively expand environment variables in nested dicts and lists."""
    if isinstance(obj, dict):
        return {key: expand_env_vars_recursive(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [expand_env_vars_recursive(item) for item in obj]
    if isinstance(obj, str):
        return expand_env_vars(obj)
    return obj


def check_unexpanded_vars(data: Any, source: str) -> None:
    """Fail if any ${VAR} pattern survived expansion.

    Args:
        data: Expanded configuration data.
        source: Label for error messages (e.g., file path).

    Raises:
        ValueError: Naming every unresolved variable.
    """
    found: list[str] = []

    def walk(obj: Any) -> None:
        if isinstance(obj, dict):
            for value in obj.values():
                walk(value)
        elif isinstance(obj, list):
            for item in obj:
                walk(item)
        elif isinstance(obj, str):
            found.extend(f"${{{m.group(1)}}}" for m in ENV_VAR_PATTERN.finditer(obj))

    walk(data)
    if found:
        raise ValueError(
            f"Unresolved environment variable(s) in {source}: {', '.join(sorted(set(found)))}"
        )


def load_config(path: Path | str) -> Config:
    """Load configuration from a YAML (or JSON) file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed Config with all ${VAR} patterns expanded.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        yaml.YAMLError: If the file is malformed.
        ValueError: If the file is not a mapping or environment variables are unresolved.
        pydantic.ValidationError: If required settings are missing or invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

    # Flat {"token": ...} files predate the slack section
    if "token" in data and "slack" not in data:
        data = {**data, "slack": {"token": data["token"]}}
        del data["token"]

    data = expand_env_vars_recursive(data)
    check_unexpanded_vars(data, source=str(config_path))

    return Config(**data)
