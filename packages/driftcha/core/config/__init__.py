"""Configuration management for driftcha."""

from driftcha.core.config.loader import detect_format, load_challenge_config, load_config
from driftcha.core.config.models import ChallengeConfig, ConfigBase, MotionConfig
from driftcha.core.config.presets import (
    DEFAULT_PRESET,
    PRESETS,
    Preset,
    PresetNotFoundError,
    apply_preset,
    get_preset,
)
from driftcha.core.config.query import (
    PARAM_KEYS,
    config_from_query,
    config_to_query,
    query_to_params,
)

__all__ = [
    "DEFAULT_PRESET",
    "PARAM_KEYS",
    "PRESETS",
    "ChallengeConfig",
    "ConfigBase",
    "MotionConfig",
    "Preset",
    "PresetNotFoundError",
    "apply_preset",
    "config_from_query",
    "config_to_query",
    "detect_format",
    "get_preset",
    "load_challenge_config",
    "load_config",
    "query_to_params",
]
