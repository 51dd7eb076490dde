"""REST API exposing draft portfolio analytics."""

from __future__ import annotations

import csv
import logging
from dataclasses import asdict
from typing import Any, Sequence, cast, get_args

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from draftlens.analysis import (
    DraftReport,
    PlayerTableRow,
    SortColumn,
    analyze_rows,
    filter_pairs,
    find_player,
    group_exposure,
    player_combos,
    player_detail,
)
from draftlens.api.schemas import (
    AnalysisResponse,
    ChartsResponse,
    ComboResponse,
    CombosResponse,
    DraftResponse,
    ExposurePairResponse,
    PlayerRefResponse,
    PlayerRowResponse,
    PortfolioResponse,
    RoundShareResponse,
    StackedChartResponse,
    SummaryResponse,
    TeamPlayerCountResponse,
    ValidationResponse,
)
from draftlens.config import AnalysisSettings
from draftlens.ingest import (
    EmptyInputError,
    IngestError,
    MissingFieldsError,
    load_adp_reference,
    read_pick_rows,
    validate_headers,
)
from draftlens.models import AdpRecord, Draft, ExposurePair, Player, PlayerKey


logger = logging.getLogger(__name__)

SORT_COLUMNS = get_args(SortColumn)


def _player_ref(key: PlayerKey | Player) -> PlayerRefResponse:
    return PlayerRefResponse(name=key.name, team=key.team, position=key.position)


def _pair_response(pair: ExposurePair) -> ExposurePairResponse:
    return ExposurePairResponse(
        first=_player_ref(pair.first),
        second=_player_ref(pair.second),
        first_exposure=pair.first_exposure,
        second_exposure=pair.second_exposure,
        combined_exposure=pair.combined_exposure,
    )


def _portfolio_response(report: DraftReport, pairs: Sequence[ExposurePair], threshold: float) -> PortfolioResponse:
    return PortfolioResponse(
        threshold=threshold,
        total_drafts=report.total_drafts,
        pairs=[_pair_response(pair) for pair in pairs],
    )


def _charts_response(report: DraftReport) -> ChartsResponse:
    return ChartsResponse(
        team_players=[
            TeamPlayerCountResponse(team=item.team, unique_players=item.unique_players)
            for item in report.team_players
        ],
        team_positions=StackedChartResponse(
            series=list(report.team_positions.series), rows=report.team_positions.rows
        ),
        draft_slots=StackedChartResponse(series=list(report.draft_slots.series), rows=report.draft_slots.rows),
        positions=list(report.round_shares.positions),
        round_shares=[
            RoundShareResponse(round=item.round, total=item.total, shares=item.shares)
            for item in report.round_shares.rounds
        ],
    )


def _player_row_response(report: DraftReport, row: PlayerTableRow) -> PlayerRowResponse:
    player = report.player_for(row)
    detail = player_detail(player) if player is not None else {}
    return PlayerRowResponse(**asdict(row), **detail)


def _report_to_response(
    report: DraftReport,
    reference_players: int,
    *,
    table: Sequence[PlayerTableRow],
    drafts: Sequence[Draft],
) -> AnalysisResponse:
    summary = report.summary
    return AnalysisResponse(
        summary=SummaryResponse(
            total_picks=summary.total_picks,
            total_drafts=summary.total_drafts,
            unique_teams=summary.unique_teams,
            avg_pick_number=summary.avg_pick_number,
            most_picked_team=summary.most_picked_team,
            total_draft_prizes=summary.total_draft_prizes,
            total_tournament_prizes=summary.total_tournament_prizes,
        ),
        players=[_player_row_response(report, row) for row in table],
        drafts=[DraftResponse.model_validate(draft.as_dict()) for draft in drafts],
        portfolio=_portfolio_response(report, report.pairs, report.exposure_threshold),
        charts=_charts_response(report),
        reference_players=reference_players,
    )


def _ingest_error(exc: IngestError) -> HTTPException:
    if isinstance(exc, MissingFieldsError):
        detail: dict[str, Any] = {"error": "missing_fields", "message": str(exc), "missing": exc.missing}
    elif isinstance(exc, EmptyInputError):
        detail = {"error": "empty_input", "message": str(exc)}
    else:
        detail = {"error": "invalid_input", "message": str(exc)}
    return HTTPException(status_code=400, detail=detail)


async def _read_rows(upload: UploadFile) -> list[dict[str, str]]:
    contents = await upload.read()
    try:
        text = contents.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=400, detail={"error": "invalid_input", "message": f"CSV is not UTF-8: {exc}"}
        ) from exc
    try:
        return read_pick_rows(text)
    except csv.Error as exc:
        raise HTTPException(
            status_code=400, detail={"error": "invalid_input", "message": f"Malformed CSV: {exc}"}
        ) from exc


def create_app(
    settings: AnalysisSettings | None = None,
    *,
    adp_records: Sequence[AdpRecord] | None = None,
) -> FastAPI:
    settings = settings or AnalysisSettings.from_env()
    app = FastAPI(title="draftlens analytics")
    if adp_records is None:
        adp_records = load_adp_reference(settings.adp_source)
    app.state.settings = settings
    app.state.adp_records = list(adp_records)

    async def analyze_upload(upload: UploadFile, threshold: float, top_n: int) -> DraftReport:
        rows = await _read_rows(upload)
        try:
            return analyze_rows(
                rows,
                adp_records=app.state.adp_records,
                exposure_threshold=threshold,
                combo_top_n=top_n,
            )
        except IngestError as exc:
            logger.info("Rejected upload %s: %s", upload.filename, exc)
            raise _ingest_error(exc) from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/validate", response_model=ValidationResponse)
    async def validate(picks: UploadFile = File(...)) -> ValidationResponse:
        rows = await _read_rows(picks)
        missing = validate_headers(rows[0] if rows else None)
        return ValidationResponse(rows=len(rows), missing_fields=missing, valid=bool(rows) and not missing)

    @app.post("/analyze", response_model=AnalysisResponse)
    async def analyze(
        picks: UploadFile = File(...),
        threshold: float | None = Form(None),
        query: str | None = Form(None),
        sort_by: str = Form("my_adp"),
        descending: bool = Form(False),
        names: str | None = Form(None),
    ) -> AnalysisResponse:
        effective = settings.exposure_threshold if threshold is None else threshold
        if not 0.0 <= effective <= 100.0:
            raise HTTPException(status_code=400, detail="threshold must be between 0 and 100")
        if sort_by not in SORT_COLUMNS:
            raise HTTPException(status_code=400, detail="sort_by must be one of: " + ", ".join(SORT_COLUMNS))
        report = await analyze_upload(picks, effective, settings.combo_top_n)
        wanted = [name.strip() for name in (names or "").split(",")]
        return _report_to_response(
            report,
            len(app.state.adp_records),
            table=report.table(query, cast(SortColumn, sort_by), descending=descending),
            drafts=report.drafts_with(wanted),
        )

    @app.post("/portfolio", response_model=PortfolioResponse)
    async def portfolio(
        picks: UploadFile = File(...),
        threshold: float | None = Form(None),
        query: str | None = Form(None),
    ) -> PortfolioResponse:
        effective = settings.exposure_threshold if threshold is None else threshold
        if not 0.0 <= effective <= 100.0:
            raise HTTPException(status_code=400, detail="threshold must be between 0 and 100")
        report = await analyze_upload(picks, effective, settings.combo_top_n)
        return _portfolio_response(report, filter_pairs(report.pairs, query), effective)

    @app.post("/combos", response_model=CombosResponse)
    async def combos(
        picks: UploadFile = File(...),
        name: str = Form(...),
        team: str = Form(""),
        position: str = Form(""),
        combo_size: int = Form(2),
        top_n: int | None = Form(None),
    ) -> CombosResponse:
        if combo_size < 2:
            raise HTTPException(status_code=400, detail="combo_size must be at least 2")
        limit = settings.combo_top_n if top_n is None else max(1, top_n)
        report = await analyze_upload(picks, settings.exposure_threshold, limit)
        player = find_player(report.players, PlayerKey(name.strip(), team.strip(), position.strip()))
        if player is None:
            raise HTTPException(status_code=404, detail="Player not found")

        members_by_key = {candidate.key: candidate for candidate in report.players}
        found = player_combos(player, report.index, combo_size=combo_size, top_n=limit)
        return CombosResponse(
            player=_player_ref(player),
            combo_size=combo_size,
            combos=[
                ComboResponse(
                    members=[_player_ref(member) for member in combo.members],
                    count=combo.count,
                    exposure=group_exposure(
                        [player, *(members_by_key[member] for member in combo.members)],
                        report.total_drafts,
                    ),
                )
                for combo in found
            ],
        )

    return app
