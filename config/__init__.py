"""Config package facade."""

from config.loader import config_from_dict, load_config
from config.models import Config, LoggingConfig, PromptConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "PromptConfig",
    "config_from_dict",
    "load_config",
]
