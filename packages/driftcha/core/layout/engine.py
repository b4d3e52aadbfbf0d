"""Layout engine: content box and randomized character placement."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import random

from driftcha.core.layout.models import ContentBox, Placement, Point
from driftcha.core.utils.rng import resolve_rng

logger = logging.getLogger(__name__)

CHAR_SIZE = 20.0
DEFAULT_PADDING = 12.0


def compute_content_box(
    measured_width: float,
    measured_height: float,
    padding: float = DEFAULT_PADDING,
) -> ContentBox:
    """Derive the usable drawing box from a measured container size.

    No clamping happens here; a not-yet-measured container yields a box
    with non-positive dimensions.

    Example:
        >>> compute_content_box(300, 200, 12)
        ContentBox(width=276.0, height=176.0, padding=12.0)
    """
    return ContentBox(
        width=measured_width - 2 * padding,
        height=measured_height - 2 * padding,
        padding=padding,
    )


def random_position_in_box(
    box: ContentBox,
    char_size: float = CHAR_SIZE,
    rng: random.Random | None = None,
) -> Point:
    """Draw a uniformly random position that keeps a glyph inside the box.

    A half-glyph margin is kept on the leading edge and the usable range
    shrinks by a glyph plus that margin. Ranges are clamped at zero, so a
    degenerate box returns the margin corner instead of failing.

    Args:
        box: Content box.
        char_size: Glyph size in drawing units.
        rng: Random source.

    Returns:
        Position in drawing coordinates.
    """
    rng = resolve_rng(rng)
    margin = char_size / 2
    max_x = max(0.0, box.width - char_size - margin)
    max_y = max(0.0, box.height - char_size - margin)
    return Point(
        x=box.padding + margin + rng.random() * max_x,
        y=box.padding + margin + rng.random() * max_y,
    )


def compute_placements(
    solution: str,
    noise: Sequence[str],
    box: ContentBox,
    *,
    char_size: float = CHAR_SIZE,
    rng: random.Random | None = None,
) -> list[Placement]:
    """Place solution and noise characters at random positions in the box.

    Within-group indices follow the input order of each group. The
    combined list is shuffled (Fisher-Yates) so the groups interleave; the
    shuffle only affects the returned order, never the indices.

    Args:
        solution: Solution characters.
        noise: Noise characters.
        box: Content box to place into.
        char_size: Glyph size used for the margin rule.
        rng: Random source.

    Returns:
        One placement per character, len(solution) + len(noise) in total.
    """
    rng = resolve_rng(rng)

    entries: list[tuple[str, bool, int]] = [
        *((c, True, i) for i, c in enumerate(solution)),
        *((c, False, i) for i, c in enumerate(noise)),
    ]

    for i in range(len(entries) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        entries[i], entries[j] = entries[j], entries[i]

    placements: list[Placement] = []
    for char, is_solution, index in entries:
        pos = random_position_in_box(box, char_size, rng)
        placements.append(
            Placement(char=char, x=pos.x, y=pos.y, is_solution=is_solution, index=index)
        )

    logger.debug(
        f"Placed {len(solution)} solution and {len(noise)} noise characters "
        f"in {box.width:.0f}x{box.height:.0f} box"
    )
    return placements
