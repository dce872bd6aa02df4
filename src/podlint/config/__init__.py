"""Configuration loading for podlint."""

from podlint.config.loader import ConfigError, load_config
from podlint.config.models import PodlintConfig, PodspecsConfig, ShardConfig

__all__ = [
    "ConfigError",
    "PodlintConfig",
    "PodspecsConfig",
    "ShardConfig",
    "load_config",
]
