from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

ENV_PREFIX = "FUZZIER_"


@dataclass(frozen=True)
class ScoringConfig:
    """
    Scoring weights, in tenths: a weight of 10 counts a matched character once.
    """

    multi_match: bool = False
    match_weight_single_char: int = 5
    match_weight_streak_modifier: int = 10
    match_weight_partial_path: int = 10
    match_weight_filename: int = 10

    def as_dict(self) -> dict:
        return asdict(self)


_WEIGHT_KEYS = {
    "WEIGHT_SINGLE_CHAR": "match_weight_single_char",
    "WEIGHT_STREAK_MODIFIER": "match_weight_streak_modifier",
    "WEIGHT_PARTIAL_PATH": "match_weight_partial_path",
    "WEIGHT_FILENAME": "match_weight_filename",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _as_weight(value: Any, *, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid config: {name} must be an int")
    if isinstance(value, int):
        out = value
    elif isinstance(value, str):
        try:
            out = int(value.strip())
        except ValueError:
            raise ValueError(f"Invalid config: {name} must be an int") from None
    else:
        raise ValueError(f"Invalid config: {name} must be an int")
    if out < 0:
        raise ValueError(f"Invalid config: {name} must be >= 0")
    return out


def _as_bool(value: Any, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
    raise ValueError(f"Invalid config: {name} must be a boolean")


def load_scoring_config(env: Optional[Mapping[str, str]] = None) -> ScoringConfig:
    """
    Build a ScoringConfig from FUZZIER_* environment variables.
    Unset variables keep their defaults.
    """
    source = os.environ if env is None else env
    values: dict[str, Any] = {}

    flag = source.get(f"{ENV_PREFIX}MULTI_MATCH")
    if flag is not None:
        values["multi_match"] = _as_bool(flag, name=f"{ENV_PREFIX}MULTI_MATCH")

    for suffix, attr in _WEIGHT_KEYS.items():
        key = f"{ENV_PREFIX}{suffix}"
        raw = source.get(key)
        if raw is not None:
            values[attr] = _as_weight(raw, name=key)

    return ScoringConfig(**values)
