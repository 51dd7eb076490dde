"""Environment-driven defaults for analysis runs."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)

_THRESHOLD_ENV = "DRAFTLENS_EXPOSURE_THRESHOLD"
_TOP_N_ENV = "DRAFTLENS_COMBO_TOP_N"
_ADP_SOURCE_ENV = "DRAFTLENS_ADP_SOURCE"

_THRESHOLD_DEFAULT = 15.0
_TOP_N_DEFAULT = 5


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class AnalysisSettings:
    exposure_threshold: float = _THRESHOLD_DEFAULT
    combo_top_n: int = _TOP_N_DEFAULT
    adp_source: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AnalysisSettings":
        adp_source = (os.getenv(_ADP_SOURCE_ENV) or "").strip() or None
        return cls(
            exposure_threshold=_env_float(_THRESHOLD_ENV, _THRESHOLD_DEFAULT, clamp_min=0.0, clamp_max=100.0),
            combo_top_n=_env_int(_TOP_N_ENV, _TOP_N_DEFAULT, min_value=1),
            adp_source=adp_source,
        )
