"""Tests for query-string encoding of parameters."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from driftcha.core.config.models import ChallengeConfig
from driftcha.core.config.presets import PRESETS, apply_preset
from driftcha.core.config.query import (
    PARAM_KEYS,
    config_from_query,
    config_to_query,
    query_to_params,
)
from driftcha.core.errors import ChallengeConfigError


class TestConfigToQuery:
    """Tests for config_to_query."""

    def test_integral_numbers_without_fraction(self) -> None:
        query = config_to_query(ChallengeConfig())
        assert query.startswith("speed=2&noiseSpeed=10&shapeRadius=6&length=5")
        assert "noiseMovement=random" in query

    def test_fractional_numbers_kept(self) -> None:
        assert "speed=2.5" in config_to_query(ChallengeConfig(speed=2.5))

    def test_every_key_written(self) -> None:
        query = config_to_query(ChallengeConfig())
        assert [pair.split("=")[0] for pair in query.split("&")] == list(PARAM_KEYS)


class TestQueryToParams:
    """Tests for query_to_params."""

    def test_known_keys_only(self) -> None:
        params = query_to_params("?speed=3&bogus=1&solutionShape=8")
        assert params == {"speed": 3, "solutionShape": "8"}

    def test_first_value_wins(self) -> None:
        assert query_to_params("length=4&length=9") == {"length": 4}

    def test_float_values(self) -> None:
        assert query_to_params("shapeRadius=2.5") == {"shapeRadius": 2.5}

    def test_bad_number_raises(self) -> None:
        with pytest.raises(ChallengeConfigError, match="noiseCount"):
            query_to_params("noiseCount=many")


class TestRoundTrip:
    """Tests for config_from_query."""

    def test_round_trip_preserves_every_field(self) -> None:
        config = ChallengeConfig(
            speed=3.5,
            noise_speed=7,
            shape_radius=2.25,
            length=9,
            noise_count=0,
            noise_movement="teleportation",
            solution_shape="8",
            solution_direction="counter",
            noise_direction="counter",
            solution_style="global",
            color_variation_speed=0,
            color_vividness=1,
        )
        assert config_from_query(config_to_query(config)) == config

    @pytest.mark.parametrize("index", range(len(PRESETS)))
    def test_presets_round_trip(self, index: int) -> None:
        config = apply_preset(index)
        assert config_from_query(config_to_query(config)) == config

    def test_partial_query_merges_over_base(self) -> None:
        base = ChallengeConfig(length=8)
        config = config_from_query("speed=4", base=base)
        assert config.speed == 4
        assert config.length == 8

    def test_invalid_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            config_from_query("solutionStyle=sideways")
