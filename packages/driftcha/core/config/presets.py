"""Named challenge presets.

Presets are partial parameter records (camelCase keys, as they appear in a
query string) merged over a base configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from driftcha.core.config.models import ChallengeConfig

logger = logging.getLogger(__name__)


class PresetNotFoundError(KeyError):
    pass


def _norm_key(s: str) -> str:
    """Normalize user-provided preset names to a stable lookup key."""
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


@dataclass(frozen=True)
class Preset:
    """A named, partial challenge parameter set."""

    name: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return _norm_key(self.name)


PRESETS: tuple[Preset, ...] = (
    Preset(
        name="It's all about speed",
        params={
            "speed": 2,
            "noiseSpeed": 10,
            "shapeRadius": 6,
            "length": 5,
            "noiseCount": 8,
            "noiseMovement": "random",
            "solutionShape": "vibrate",
            "solutionDirection": "clockwise",
            "noiseDirection": "clockwise",
            "solutionStyle": "separate",
            "colorVariationSpeed": 5,
            "colorVividness": 5,
        },
    ),
    Preset(
        name="Matrix",
        params={
            "speed": 2,
            "noiseSpeed": 10,
            "shapeRadius": 6,
            "length": 5,
            "noiseCount": 8,
            "noiseMovement": "matrix",
            "solutionShape": "matrix",
            "solutionDirection": "clockwise",
            "noiseDirection": "clockwise",
            "solutionStyle": "separate",
            "colorVariationSpeed": 5,
            "colorVividness": 5,
        },
    ),
    Preset(
        name="Order through chaos",
        params={
            "speed": 2,
            "noiseSpeed": 5,
            "shapeRadius": 9,
            "length": 6,
            "noiseCount": 21,
            "noiseMovement": "teleportation",
            "solutionShape": "circle",
            "solutionDirection": "clockwise",
            "noiseDirection": "clockwise",
            "solutionStyle": "global",
            "colorVariationSpeed": 2,
            "colorVividness": 10,
        },
    ),
    Preset(
        name="Can you spot the circle?",
        params={
            "solutionStyle": "global",
            "solutionShape": "circle",
            "speed": 4,
            "noiseMovement": "vibrate",
            "noiseSpeed": 3,
            "colorVariationSpeed": 5,
            "shapeRadius": 6,
        },
    ),
    Preset(
        name="Can you spot the circles?",
        params={
            "speed": 5,
            "noiseSpeed": 5,
            "shapeRadius": 5,
            "length": 5,
            "noiseCount": 15,
            "noiseMovement": "vibrate",
            "solutionShape": "circle",
            "solutionDirection": "clockwise",
            "noiseDirection": "clockwise",
            "solutionStyle": "separate",
            "colorVariationSpeed": 5,
        },
    ),
)

DEFAULT_PRESET = PRESETS[0]


def get_preset(key: int | str) -> Preset:
    """Look up a preset by position or by (case/punctuation-insensitive) name.

    Args:
        key: Index into PRESETS, a numeric string, or a preset name.

    Returns:
        The matching Preset.

    Raises:
        PresetNotFoundError: If no preset matches.
    """
    if isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
        idx = int(key)
        if 0 <= idx < len(PRESETS):
            return PRESETS[idx]
        raise PresetNotFoundError(f"Preset index out of range: {idx}")

    wanted = _norm_key(key)
    for preset in PRESETS:
        if preset.key == wanted:
            return preset
    raise PresetNotFoundError(f"Preset not found: {key}")


def apply_preset(key: int | str, base: ChallengeConfig | None = None) -> ChallengeConfig:
    """Merge a preset's parameters over a base configuration.

    Args:
        key: Preset index or name.
        base: Configuration to merge over. Defaults to ChallengeConfig().

    Returns:
        New validated ChallengeConfig.

    Raises:
        PresetNotFoundError: If no preset matches.
    """
    preset = get_preset(key)
    base = base or ChallengeConfig()
    merged = {**base.model_dump(by_alias=True, mode="json"), **preset.params}
    logger.debug(f"Applying preset {preset.name!r}")
    return ChallengeConfig.model_validate(merged)
