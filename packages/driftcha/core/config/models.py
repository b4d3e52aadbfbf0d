"""Configuration models for driftcha."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from driftcha.core.alphabet.generator import CLEAN_ALPHABET
from driftcha.core.layout.models import Point
from driftcha.core.paths.models import Direction, PathShape, SolutionStyle


class ConfigBase(BaseModel):
    """Base class for file-backed driftcha configurations.

    Subclasses implement default_path() to name their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, the default path, or fall back to defaults.

        An explicit path must exist. When no path is given and the default
        file is absent, the model defaults are used.

        Raises:
            FileNotFoundError: If an explicit config file doesn't exist
            ValidationError: If config is invalid
        """
        from driftcha.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
            if not Path(path).exists():
                return cls()
        raw = load_config(path)
        return cls.model_validate(raw)


class MotionConfig(BaseModel):
    """Motion parameters consumed by the path composer.

    Immutable so a frame is always sampled from one consistent snapshot.
    global_center is only used when solution_style is GLOBAL.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    speed: float = Field(default=2.0, gt=0.0, description="Solution cycles per time unit")
    noise_speed: float = Field(default=10.0, gt=0.0, description="Noise cycles per time unit")
    shape_radius: float = Field(
        default=6.0, ge=0.0, description="Path extent dial; 5 is neutral scale 1.0"
    )
    solution_shape: PathShape = Field(default=PathShape.VIBRATE)
    noise_movement: PathShape = Field(default=PathShape.RANDOM)
    solution_direction: Direction = Field(default=Direction.CLOCKWISE)
    noise_direction: Direction = Field(default=Direction.CLOCKWISE)
    solution_style: SolutionStyle = Field(default=SolutionStyle.SEPARATE)
    global_center: Point | None = Field(
        default=None, description="Shared path center for GLOBAL solution style"
    )


class ChallengeConfig(ConfigBase):
    """Complete parameter record for one challenge.

    Accepts snake_case names and their camelCase aliases
    (noiseSpeed, shapeRadius, ...). Defaults match the first preset.

    Example:
        >>> ChallengeConfig.model_validate({"noiseCount": 12}).noise_count
        12
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    speed: float = Field(default=2.0, gt=0.0, description="Solution cycles per time unit")
    noise_speed: float = Field(default=10.0, gt=0.0, description="Noise cycles per time unit")
    shape_radius: float = Field(default=6.0, ge=0.0, description="Path extent dial")
    length: int = Field(
        default=5, ge=1, le=len(CLEAN_ALPHABET), description="Number of solution characters"
    )
    noise_count: int = Field(default=8, ge=0, description="Number of decoy characters")
    noise_movement: PathShape = Field(default=PathShape.RANDOM)
    solution_shape: PathShape = Field(default=PathShape.VIBRATE)
    solution_direction: Direction = Field(default=Direction.CLOCKWISE)
    noise_direction: Direction = Field(default=Direction.CLOCKWISE)
    solution_style: SolutionStyle = Field(default=SolutionStyle.SEPARATE)
    color_variation_speed: float = Field(
        default=5.0, ge=0.0, description="Hue cycling speed (0 disables colour cycling)"
    )
    color_vividness: float = Field(
        default=5.0, ge=1.0, le=10.0, description="Saturation dial, 1 (muted) to 10 (vivid)"
    )

    @classmethod
    def default_path(cls) -> Path:
        return Path("challenge.yaml")

    def to_motion_config(self, global_center: Point | None = None) -> MotionConfig:
        """Project the motion fields into a MotionConfig."""
        return MotionConfig(
            speed=self.speed,
            noise_speed=self.noise_speed,
            shape_radius=self.shape_radius,
            solution_shape=self.solution_shape,
            noise_movement=self.noise_movement,
            solution_direction=self.solution_direction,
            noise_direction=self.noise_direction,
            solution_style=self.solution_style,
            global_center=global_center,
        )
