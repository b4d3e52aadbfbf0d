"""Path composer: picks and parametrizes a path for every placement.

Solution characters either share one large path around a global center
(evenly spaced along it, like beads on a string) or each get a small path
around their own placement. Noise characters always use the small,
per-character rule with the noise movement and direction.

Every path is fitted to the content box: its center moves just far enough
inward for the whole shape to fit, and a shape larger than the box is
clamped point by point.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
import random

from driftcha.core.config.models import MotionConfig
from driftcha.core.errors import ChallengeConfigError
from driftcha.core.layout.models import ContentBox, Placement, Point
from driftcha.core.paths.library import build_path
from driftcha.core.paths.models import Direction, PathFunction, PathShape, SolutionStyle
from driftcha.core.paths.phase import spread_phase, stepped_phase
from driftcha.core.utils.rng import resolve_rng

logger = logging.getLogger(__name__)

GLOBAL_SIZE_RATIO = 0.35
SEPARATE_SIZE_RATIO = 0.15
SEPARATE_PHASE_STEP = 0.17
NEUTRAL_SHAPE_RADIUS = 5.0


def shape_radius_to_factor(shape_radius: float) -> float:
    """Scale factor for the shape-radius dial; 5 is neutral (1.0)."""
    return shape_radius / NEUTRAL_SHAPE_RADIUS


def path_size(box: ContentBox, ratio: float, shape_radius: float) -> float:
    """Physical path extent: ratio of the box's smaller side, scaled by the dial.

    An unmeasured (non-positive) box gives size 0.
    """
    return max(0.0, box.min_extent) * ratio * shape_radius_to_factor(shape_radius)


def get_random_global_center(
    box: ContentBox,
    shape_radius: float,
    rng: random.Random | None = None,
) -> Point:
    """Pick a center that keeps the largest (global) path inside the box.

    When the path is larger than the box on an axis, that axis collapses
    to the box's midpoint.
    """
    rng = resolve_rng(rng)
    half = path_size(box, GLOBAL_SIZE_RATIO, shape_radius) / 2

    def _axis(extent: float) -> float:
        lo = box.padding + half
        hi = box.padding + extent - half
        if hi < lo:
            return box.padding + extent / 2
        return lo + rng.random() * (hi - lo)

    return Point(x=_axis(box.width), y=_axis(box.height))


def global_movement_path(
    shape: PathShape | str,
    box: ContentBox,
    char_index: int,
    total_chars: int,
    center: Point,
    shape_radius: float,
    direction: Direction | str,
) -> PathFunction:
    """Shared large path; members are spread evenly by phase index/total."""
    return build_path(
        shape,
        center_x=center.x,
        center_y=center.y,
        size=path_size(box, GLOBAL_SIZE_RATIO, shape_radius),
        box=box,
        phase=spread_phase(char_index, total_chars),
        index=char_index,
        direction=direction,
        bounds=box,
    )


def separate_movement_path(
    shape: PathShape | str,
    box: ContentBox,
    base_x: float,
    base_y: float,
    index: int,
    shape_radius: float,
    direction: Direction | str,
) -> PathFunction:
    """Small path around a character's own placement."""
    return build_path(
        shape,
        center_x=base_x,
        center_y=base_y,
        size=path_size(box, SEPARATE_SIZE_RATIO, shape_radius),
        box=box,
        phase=stepped_phase(index, SEPARATE_PHASE_STEP),
        index=index,
        direction=direction,
        bounds=box,
    )


def noise_movement_path(
    movement: PathShape | str,
    box: ContentBox,
    index: int,
    base_x: float,
    base_y: float,
    shape_radius: float,
    direction: Direction | str,
) -> PathFunction:
    """Noise path: always the separate-style size and phase rule."""
    return separate_movement_path(movement, box, base_x, base_y, index, shape_radius, direction)


def path_for_placement(
    placement: Placement,
    solution_count: int,
    box: ContentBox,
    config: MotionConfig,
) -> PathFunction:
    """Select and parametrize the path for one placement.

    Args:
        placement: The placed character.
        solution_count: Number of solution characters (for global phase spread).
        box: Content box.
        config: Motion configuration snapshot.

    Returns:
        The character's path function.

    Raises:
        ChallengeConfigError: If GLOBAL style is configured without a global center.
    """
    if not placement.is_solution:
        return noise_movement_path(
            config.noise_movement,
            box,
            placement.index,
            placement.x,
            placement.y,
            config.shape_radius,
            config.noise_direction,
        )

    if config.solution_style is SolutionStyle.GLOBAL:
        if config.global_center is None:
            raise ChallengeConfigError("Global solution style requires a global_center")
        return global_movement_path(
            config.solution_shape,
            box,
            placement.index,
            solution_count,
            config.global_center,
            config.shape_radius,
            config.solution_direction,
        )

    return separate_movement_path(
        config.solution_shape,
        box,
        placement.x,
        placement.y,
        placement.index,
        config.shape_radius,
        config.solution_direction,
    )


def compose_paths(
    placements: Sequence[Placement],
    box: ContentBox,
    config: MotionConfig,
) -> list[PathFunction]:
    """One path per placement, in placement order."""
    solution_count = sum(1 for p in placements if p.is_solution)
    paths = [path_for_placement(p, solution_count, box, config) for p in placements]
    logger.debug(
        f"Composed {len(paths)} paths: solution={config.solution_shape.value} "
        f"({config.solution_style.value}), noise={config.noise_movement.value}"
    )
    return paths
