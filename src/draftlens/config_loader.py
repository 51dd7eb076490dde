"""Persist and load CLI analysis profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class AnalysisProfile:
    exposure_threshold: Optional[float] = None
    combo_top_n: Optional[int] = None
    adp_source: Optional[str] = None

    @classmethod
    def load(cls, path: Path) -> "AnalysisProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            exposure_threshold=data.get("exposure_threshold"),
            combo_top_n=data.get("combo_top_n"),
            adp_source=data.get("adp_source"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "exposure_threshold": self.exposure_threshold,
            "combo_top_n": self.combo_top_n,
            "adp_source": self.adp_source,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
