"""Shared utilities for driftcha."""

from driftcha.core.utils.json import read_json, write_json
from driftcha.core.utils.math import clamp, distance, lerp, sine_hash

__all__ = [
    "clamp",
    "distance",
    "lerp",
    "read_json",
    "sine_hash",
    "write_json",
]
