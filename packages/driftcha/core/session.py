"""Challenge lifecycle - the single entry point that owns challenge state.

A Challenge is an immutable snapshot of everything one challenge needs:
solution, noise, placements, one path per placement, colour phases and
the answer typed so far. ``start_challenge`` builds a new one (optionally
keeping the previous solution when only the geometry changed, e.g. on a
container resize). Callers hold the returned object and pass it back in;
there is no module-level "current challenge", and a previous challenge's
paths are unreachable from its replacement.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import random
from uuid import uuid4

import numpy as np

from driftcha.core.alphabet.generator import (
    generate_noise,
    generate_solution,
    get_clean_alphabet,
)
from driftcha.core.config.models import ChallengeConfig, MotionConfig
from driftcha.core.layout.engine import compute_placements
from driftcha.core.layout.models import ContentBox, Placement, Point
from driftcha.core.motion.color import random_color_phases
from driftcha.core.motion.composer import compose_paths, get_random_global_center
from driftcha.core.motion.sampler import AnimationSampler
from driftcha.core.paths.models import PathFunction, SolutionStyle
from driftcha.core.utils.logging import get_logger
from driftcha.core.utils.rng import resolve_rng
from driftcha.core.validation.slots import AnswerSlots
from driftcha.core.validation.validator import ValidationResult, check_answer


def _challenge_logger(challenge_id: str) -> logging.Logger | logging.LoggerAdapter:
    return get_logger(__name__, challenge_id=challenge_id)


@dataclass(frozen=True)
class Challenge:
    """One generated challenge and the answer typed into it so far."""

    config: ChallengeConfig
    motion: MotionConfig
    box: ContentBox
    solution: str
    noise: tuple[str, ...]
    placements: tuple[Placement, ...]
    paths: tuple[PathFunction, ...]
    color_phases: tuple[float, ...] = ()
    answer: AnswerSlots | None = None
    result: ValidationResult | None = None
    challenge_id: str = field(default_factory=lambda: uuid4().hex)

    @property
    def global_center(self) -> Point | None:
        return self.motion.global_center

    @property
    def slots(self) -> AnswerSlots:
        """Answer boxes (empty ones when nothing has been typed yet)."""
        return self.answer or AnswerSlots(length=len(self.solution))

    def sampler(self) -> AnimationSampler:
        """Sampling snapshot for the external frame driver."""
        return AnimationSampler.from_speeds(
            self.paths,
            [p.is_solution for p in self.placements],
            self.motion.speed,
            self.motion.noise_speed,
        )

    def initial_positions(self) -> np.ndarray:
        """Positions at t = 0, shape (N, 2), in placement order."""
        return self.sampler().initial_positions()

    def with_answer(self, slots: AnswerSlots) -> Challenge:
        """Record new answer-box state; validates once every box is filled.

        An incomplete answer clears any previous result.
        """
        result = check_answer(slots.value, self.solution) if slots.is_complete else None
        if result is not None:
            _challenge_logger(self.challenge_id).info(f"Answer checked: valid={result.valid}")
        return replace(self, answer=slots, result=result)

    def submit(self, text: str) -> tuple[Challenge, ValidationResult | None]:
        """Fill the answer boxes from text and validate when complete.

        Returns:
            The updated challenge and the validation result (None while the
            answer is still incomplete).
        """
        updated = self.with_answer(AnswerSlots.from_text(len(self.solution), text))
        return updated, updated.result


def start_challenge(
    config: ChallengeConfig,
    box: ContentBox,
    *,
    previous: Challenge | None = None,
    preserve_solution: bool = False,
    rng: random.Random | None = None,
) -> Challenge:
    """Generate a new challenge.

    Noise, placements, paths, colour phases and the global center are
    always regenerated. The solution is kept only when preserve_solution is
    set and the previous solution already has the configured length; the
    typed answer is then carried over and re-validated when complete.

    Args:
        config: Challenge parameters.
        box: Content box measured by the caller.
        previous: The challenge being replaced, if any.
        preserve_solution: Keep the previous solution (geometry-only refresh).
        rng: Random source, for reproducible challenges.

    Returns:
        The new challenge.

    Raises:
        ChallengeConfigError: If the parameters cannot produce a challenge.
    """
    rng = resolve_rng(rng)
    alphabet = get_clean_alphabet()

    keep = (
        preserve_solution
        and previous is not None
        and len(previous.solution) == config.length
    )
    solution = previous.solution if keep else generate_solution(config.length, alphabet, rng)
    noise = generate_noise(config.noise_count, alphabet, solution, rng)

    global_center = None
    if config.solution_style is SolutionStyle.GLOBAL:
        global_center = get_random_global_center(box, config.shape_radius, rng)
    motion = config.to_motion_config(global_center)

    placements = compute_placements(solution, noise, box, rng=rng)
    paths = compose_paths(placements, box, motion)

    color_phases: tuple[float, ...] = ()
    if config.color_variation_speed > 0:
        color_phases = random_color_phases(len(placements), rng)

    challenge = Challenge(
        config=config,
        motion=motion,
        box=box,
        solution=solution,
        noise=tuple(noise),
        placements=tuple(placements),
        paths=tuple(paths),
        color_phases=color_phases,
    )

    if keep and previous is not None and previous.answer is not None:
        challenge = challenge.with_answer(previous.answer)

    _challenge_logger(challenge.challenge_id).info(
        f"Started challenge: length={len(solution)}, noise={len(noise)}, preserved={keep}"
    )
    return challenge
