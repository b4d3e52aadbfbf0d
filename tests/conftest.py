"""Shared pytest fixtures for driftcha tests."""

from __future__ import annotations

import logging
import random

import pytest

from driftcha.core.config.models import ChallengeConfig, MotionConfig
from driftcha.core.layout.engine import compute_content_box
from driftcha.core.layout.models import ContentBox, Point

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop handlers installed by configure_logging() once a test ends."""
    root = logging.getLogger()
    before, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ============================================================================
# Random Fixtures
# ============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


# ============================================================================
# Layout Fixtures
# ============================================================================


@pytest.fixture
def box() -> ContentBox:
    """Content box of a 300x200 container with 12 padding (276x176)."""
    return compute_content_box(300, 200, 12)


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def default_config() -> ChallengeConfig:
    """Default challenge configuration."""
    return ChallengeConfig()


@pytest.fixture
def motion_config() -> MotionConfig:
    """Default motion configuration (separate style)."""
    return MotionConfig()


@pytest.fixture
def global_motion_config(box: ContentBox) -> MotionConfig:
    """Global-style motion configuration centered in the box."""
    return MotionConfig(
        solution_style="global",
        solution_shape="circle",
        global_center=Point(x=box.padding + box.width / 2, y=box.padding + box.height / 2),
    )
