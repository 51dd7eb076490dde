from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class PlayerRefResponse(BaseModel):
    name: str
    team: str
    position: str


class PickPointResponse(BaseModel):
    picked_at: str
    pick: float
    timestamp_ms: int


class PlayerRowResponse(BaseModel):
    name: str
    team: str
    position: str
    exposure: float | None
    count: int
    my_adp: float | None
    reference_adp: float | None
    clv: float | None
    clv_pct: float | None
    month_counts: Dict[str, int] | None = None
    tournament_counts: Dict[str, int] | None = None
    total_tournament_entry_fee: float | None = None
    pick_timeline: List[PickPointResponse] | None = None


class RosterEntryResponse(BaseModel):
    name: str
    team: str
    position: str
    pick_number: float | None


class DraftResponse(BaseModel):
    draft_id: str
    date: str
    tournament: str
    slot: float | None
    positions: List[str]
    roster: Dict[str, List[RosterEntryResponse]]


class ExposurePairResponse(BaseModel):
    first: PlayerRefResponse
    second: PlayerRefResponse
    first_exposure: float
    second_exposure: float
    combined_exposure: float


class ComboResponse(BaseModel):
    members: List[PlayerRefResponse]
    count: int
    exposure: float | None


class CombosResponse(BaseModel):
    player: PlayerRefResponse
    combo_size: int
    combos: List[ComboResponse]


class SummaryResponse(BaseModel):
    total_picks: int
    total_drafts: int
    unique_teams: int
    avg_pick_number: float
    most_picked_team: str
    total_draft_prizes: float
    total_tournament_prizes: float


class StackedChartResponse(BaseModel):
    series: List[str]
    rows: List[Dict[str, Any]]


class TeamPlayerCountResponse(BaseModel):
    team: str
    unique_players: int


class RoundShareResponse(BaseModel):
    round: int
    total: int
    shares: Dict[str, float]


class ChartsResponse(BaseModel):
    team_players: List[TeamPlayerCountResponse]
    team_positions: StackedChartResponse
    draft_slots: StackedChartResponse
    positions: List[str]
    round_shares: List[RoundShareResponse]


class PortfolioResponse(BaseModel):
    threshold: float
    total_drafts: int
    pairs: List[ExposurePairResponse]


class AnalysisResponse(BaseModel):
    summary: SummaryResponse
    players: List[PlayerRowResponse]
    drafts: List[DraftResponse]
    portfolio: PortfolioResponse
    charts: ChartsResponse
    reference_players: int = Field(default=0, ge=0)


class ValidationResponse(BaseModel):
    rows: int
    missing_fields: List[str]
    valid: bool
