"""Query-string encoding of challenge parameters.

Numbers are written as decimal literals (integral values without a
fractional part) and enums as their literal tokens, so a configuration
survives a round trip through a URL unchanged.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlencode

from driftcha.core.config.models import ChallengeConfig
from driftcha.core.errors import ChallengeConfigError

PARAM_KEYS: tuple[str, ...] = (
    "speed",
    "noiseSpeed",
    "shapeRadius",
    "length",
    "noiseCount",
    "noiseMovement",
    "solutionShape",
    "solutionDirection",
    "noiseDirection",
    "solutionStyle",
    "colorVariationSpeed",
    "colorVividness",
)

NUMERIC_KEYS = frozenset(
    {
        "speed",
        "noiseSpeed",
        "shapeRadius",
        "length",
        "noiseCount",
        "colorVariationSpeed",
        "colorVividness",
    }
)


def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_number(key: str, raw: str) -> int | float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ChallengeConfigError(f"Parameter {key!r} must be a number, got {raw!r}") from exc
    return int(value) if value.is_integer() else value


def config_to_query(config: ChallengeConfig) -> str:
    """Encode every parameter of config as a query string (no leading '?').

    Example:
        >>> config_to_query(ChallengeConfig())[:24]
        'speed=2&noiseSpeed=10&sh'
    """
    data = config.model_dump(by_alias=True, mode="json")
    pairs = [
        (key, _format_value(data[key]))
        for key in PARAM_KEYS
        if data.get(key) is not None and data.get(key) != ""
    ]
    return urlencode(pairs)


def query_to_params(query: str) -> dict[str, Any]:
    """Decode a query string into a partial parameter dict.

    Only known keys are kept; the first occurrence of a repeated key wins.

    Raises:
        ChallengeConfigError: If a numeric parameter is not a number.
    """
    parsed = parse_qs(query.lstrip("?"), keep_blank_values=False)
    params: dict[str, Any] = {}
    for key in PARAM_KEYS:
        values = parsed.get(key)
        if not values:
            continue
        raw = values[0]
        params[key] = _parse_number(key, raw) if key in NUMERIC_KEYS else raw
    return params


def config_from_query(query: str, base: ChallengeConfig | None = None) -> ChallengeConfig:
    """Build a configuration from a query string merged over base.

    Raises:
        ChallengeConfigError: If a numeric parameter is not a number.
        ValidationError: If the merged parameters are invalid.
    """
    base = base or ChallengeConfig()
    merged = {**base.model_dump(by_alias=True, mode="json"), **query_to_params(query)}
    return ChallengeConfig.model_validate(merged)
