"""External ADP reference records."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class AdpRecord(BaseModel):
    """One row of the reference ADP list (e.g. the draft site's published board)."""

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    team: str | None = None
    position: str | None = None
    adp: float

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def full_name(self) -> str:
        return f"{self.first_name.strip()} {self.last_name.strip()}".strip()
