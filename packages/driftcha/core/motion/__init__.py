"""Path composition, sampling and colour cycling."""

from driftcha.core.motion.color import (
    color_cycle_period,
    hue_at,
    random_color_phases,
    vividness_to_saturate,
)
from driftcha.core.motion.composer import (
    compose_paths,
    get_random_global_center,
    global_movement_path,
    noise_movement_path,
    path_for_placement,
    separate_movement_path,
    shape_radius_to_factor,
)
from driftcha.core.motion.sampler import AnimationSampler, group_time, sample, speed_to_period

__all__ = [
    "AnimationSampler",
    "color_cycle_period",
    "compose_paths",
    "get_random_global_center",
    "global_movement_path",
    "group_time",
    "hue_at",
    "noise_movement_path",
    "path_for_placement",
    "random_color_phases",
    "sample",
    "separate_movement_path",
    "shape_radius_to_factor",
    "speed_to_period",
    "vividness_to_saturate",
]
