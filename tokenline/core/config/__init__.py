"""Configuration package for Tokenline."""

from tokenline.core.config.loader import (
    check_unexpanded_vars,
    expand_env_vars,
    expand_env_vars_recursive,
    load_config,
)
from tokenline.core.config.models import ApiConfig, Config, LoggingConfig, SlackConfig

__all__ = [
    # Models
    "ApiConfig",
    "Config",
    "LoggingConfig",
    "SlackConfig",
    # Loaders
    "check_unexpanded_vars",
    "expand_env_vars",
    "expand_env_vars_recursive",
    "load_config",
]
