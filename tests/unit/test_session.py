"""Tests for the challenge lifecycle."""

from __future__ import annotations

import logging
import random

import numpy as np
import pytest

from driftcha.core.config.models import ChallengeConfig
from driftcha.core.errors import ChallengeConfigError
from driftcha.core.layout.models import ContentBox
from driftcha.core.session import start_challenge
from driftcha.core.validation.slots import AnswerSlots


class TestStartChallenge:
    """Tests for start_challenge."""

    def test_fresh_challenge(self, default_config: ChallengeConfig, box: ContentBox) -> None:
        challenge = start_challenge(default_config, box, rng=random.Random(1))
        assert len(challenge.solution) == 5
        assert len(challenge.noise) == 8
        assert len(challenge.placements) == len(challenge.paths) == 13
        assert not set(challenge.noise) & set(challenge.solution)
        assert challenge.global_center is None
        assert len(challenge.color_phases) == 13
        assert challenge.answer is None
        assert challenge.result is None

    def test_global_style_gets_center(self, box: ContentBox) -> None:
        config = ChallengeConfig(solution_style="global", solution_shape="circle")
        challenge = start_challenge(config, box, rng=random.Random(2))
        assert challenge.global_center is not None

    def test_no_color_phases_when_disabled(self, box: ContentBox) -> None:
        config = ChallengeConfig(color_variation_speed=0)
        assert start_challenge(config, box, rng=random.Random(3)).color_phases == ()

    def test_seeded_is_reproducible(self, default_config: ChallengeConfig, box: ContentBox) -> None:
        a = start_challenge(default_config, box, rng=random.Random(9))
        b = start_challenge(default_config, box, rng=random.Random(9))
        assert a.solution == b.solution
        assert a.placements == b.placements
        assert a.challenge_id != b.challenge_id

    def test_noise_saturates(self, box: ContentBox) -> None:
        """More noise than the alphabet allows fills the residual alphabet."""
        config = ChallengeConfig(length=28, noise_count=10)
        challenge = start_challenge(config, box, rng=random.Random(4))
        assert len(challenge.noise) == 3

    def test_invalid_length_raises(self, box: ContentBox) -> None:
        config = ChallengeConfig.model_construct(length=40)
        with pytest.raises(ChallengeConfigError):
            start_challenge(config, box, rng=random.Random(5))


class TestPreserveSolution:
    """Tests for regenerating a challenge while keeping its solution."""

    def test_preserves_solution_and_answer(
        self, default_config: ChallengeConfig, box: ContentBox
    ) -> None:
        """Geometry refresh keeps the solution and the typed answer."""
        first = start_challenge(default_config, box, rng=random.Random(1))
        typed = first.with_answer(AnswerSlots.from_text(5, first.solution[:3]))

        bigger = ContentBox(width=500, height=400, padding=12)
        second = start_challenge(
            default_config, bigger, previous=typed, preserve_solution=True, rng=random.Random(2)
        )
        assert second.solution == first.solution
        assert second.answer == typed.answer
        assert second.result is None
        assert second.box == bigger

    def test_preserved_complete_answer_is_revalidated(
        self, default_config: ChallengeConfig, box: ContentBox
    ) -> None:
        first = start_challenge(default_config, box, rng=random.Random(1))
        answered, _ = first.submit(first.solution[::-1])
        second = start_challenge(
            default_config, box, previous=answered, preserve_solution=True, rng=random.Random(2)
        )
        assert second.result is not None
        assert second.result.valid

    def test_length_change_regenerates(self, box: ContentBox) -> None:
        """A different configured length forces a new solution."""
        first = start_challenge(ChallengeConfig(length=5), box, rng=random.Random(1))
        second = start_challenge(
            ChallengeConfig(length=6),
            box,
            previous=first,
            preserve_solution=True,
            rng=random.Random(2),
        )
        assert len(second.solution) == 6
        assert second.answer is None

    def test_without_preserve_regenerates(
        self, default_config: ChallengeConfig, box: ContentBox
    ) -> None:
        first = start_challenge(default_config, box, rng=random.Random(1))
        second = start_challenge(default_config, box, previous=first, rng=random.Random(2))
        assert second.answer is None
        assert second.paths is not first.paths


class TestChallengeAnswers:
    """Tests for Challenge.submit and with_answer."""

    def test_submit_correct_any_order(
        self, default_config: ChallengeConfig, box: ContentBox
    ) -> None:
        challenge = start_challenge(default_config, box, rng=random.Random(1))
        updated, result = challenge.submit(challenge.solution[::-1].lower())
        assert result is not None
        assert result.valid
        assert updated.result == result
        assert challenge.result is None

    def test_submit_incomplete(self, default_config: ChallengeConfig, box: ContentBox) -> None:
        challenge = start_challenge(default_config, box, rng=random.Random(1))
        updated, result = challenge.submit(challenge.solution[:2])
        assert result is None
        assert updated.slots.value == challenge.solution[:2]

    def test_submit_wrong(self, default_config: ChallengeConfig, box: ContentBox) -> None:
        challenge = start_challenge(default_config, box, rng=random.Random(1))
        wrong = challenge.noise[0] + challenge.solution[1:]
        _, result = challenge.submit("".join(wrong))
        assert result is not None
        assert not result.valid
        assert result.invalid_slots[0]

    def test_slots_default_empty(self, default_config: ChallengeConfig, box: ContentBox) -> None:
        challenge = start_challenge(default_config, box, rng=random.Random(1))
        assert challenge.slots == AnswerSlots(length=5)


class TestChallengeSampling:
    """Tests for Challenge.sampler and initial_positions."""

    def test_initial_positions_shape(
        self, default_config: ChallengeConfig, box: ContentBox
    ) -> None:
        challenge = start_challenge(default_config, box, rng=random.Random(1))
        positions = challenge.initial_positions()
        assert positions.shape == (13, 2)
        assert np.all(np.isfinite(positions))

    def test_sampler_periods(self, default_config: ChallengeConfig, box: ContentBox) -> None:
        sampler = start_challenge(default_config, box, rng=random.Random(1)).sampler()
        assert sampler.solution_period == pytest.approx(5.0)
        assert sampler.noise_period == pytest.approx(1.0)


class TestChallengeLogging:
    """Tests for challenge-scoped log records."""

    def test_records_carry_challenge_id(
        self, default_config: ChallengeConfig, box: ContentBox, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Lifecycle records name their challenge through record context."""
        with caplog.at_level(logging.INFO, logger="driftcha.core.session"):
            challenge = start_challenge(default_config, box, rng=random.Random(1))
            challenge.submit(challenge.solution)

        records = [r for r in caplog.records if r.name == "driftcha.core.session"]
        assert [r.getMessage().split(":")[0] for r in records] == [
            "Started challenge",
            "Answer checked",
        ]
        assert {r.challenge_id for r in records} == {challenge.challenge_id}
        assert challenge.challenge_id not in caplog.text
