"""Pydantic models for API I/O."""

from .analysis import (
    AnalysisResponse,
    ChartsResponse,
    ComboResponse,
    CombosResponse,
    DraftResponse,
    ExposurePairResponse,
    PickPointResponse,
    PlayerRefResponse,
    PlayerRowResponse,
    PortfolioResponse,
    RosterEntryResponse,
    RoundShareResponse,
    StackedChartResponse,
    SummaryResponse,
    TeamPlayerCountResponse,
    ValidationResponse,
)

__all__ = [
    "AnalysisResponse",
    "ChartsResponse",
    "ComboResponse",
    "CombosResponse",
    "DraftResponse",
    "ExposurePairResponse",
    "PickPointResponse",
    "PlayerRefResponse",
    "PlayerRowResponse",
    "PortfolioResponse",
    "RosterEntryResponse",
    "RoundShareResponse",
    "StackedChartResponse",
    "SummaryResponse",
    "TeamPlayerCountResponse",
    "ValidationResponse",
]
