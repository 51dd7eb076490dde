"""Command-line interface for analyzing a draft pick export."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import List, get_args

from draftlens.analysis import (
    DraftReport,
    PlayerTableRow,
    SortColumn,
    analyze_rows,
    player_detail,
    player_pick_timeline,
)
from draftlens.config import AnalysisSettings
from draftlens.config_loader import AnalysisProfile
from draftlens.ingest import IngestError, load_adp_reference, load_pick_csv
from draftlens.models import Draft

PLAYER_TABLE_HEADER = [
    "name",
    "team",
    "position",
    "exposure",
    "count",
    "my_adp",
    "reference_adp",
    "clv",
    "clv_pct",
]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize exposure, combos and portfolio pairs from draft picks")
    parser.add_argument("picks", type=Path, help="Path to the pick export CSV")
    parser.add_argument("--adp", default=None, help="ADP reference JSON (path or URL)")
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Minimum exposure percentage for portfolio pairs (0-100)",
    )
    parser.add_argument("--top-n", type=int, default=None, help="Number of combos to show per player")
    parser.add_argument(
        "--combos",
        action="append",
        default=[],
        metavar="NAME|TEAM|POS",
        help="Print the top 2- and 3-player combos for a player key",
    )
    parser.add_argument(
        "--sort",
        choices=get_args(SortColumn),
        default="my_adp",
        help="Column to sort the player table by",
    )
    parser.add_argument("--descending", action="store_true", help="Sort the player table in descending order")
    parser.add_argument("--filter", default=None, help="Only keep players whose name contains this text")
    parser.add_argument(
        "--drafts-with",
        action="append",
        default=[],
        metavar="NAME",
        help="Only report drafts holding every given player (full name)",
    )
    parser.add_argument("--output", type=Path, default=Path("players.csv"), help="Player table CSV path")
    parser.add_argument("--report", type=Path, default=None, help="Optional path to write a JSON report")
    parser.add_argument("--load-profile", type=Path, help="Load analysis options JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save analysis options JSON", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _write_player_table(table: List[PlayerTableRow], path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=PLAYER_TABLE_HEADER)
        writer.writeheader()
        for row in table:
            writer.writerow(row.as_display())


def _player_payload(report: DraftReport, row: PlayerTableRow) -> dict:
    player = report.player_for(row)
    payload = row.as_display()
    if player is not None:
        payload.update(player_detail(player))
    return payload


def _report_payload(report: DraftReport, table: List[PlayerTableRow], drafts: List[Draft]) -> dict:
    summary = report.summary
    return {
        "summary": {
            "total_picks": summary.total_picks,
            "total_drafts": summary.total_drafts,
            "unique_teams": summary.unique_teams,
            "avg_pick_number": summary.avg_pick_number,
            "most_picked_team": summary.most_picked_team,
            "total_draft_prizes": summary.total_draft_prizes,
            "total_tournament_prizes": summary.total_tournament_prizes,
        },
        "players": [_player_payload(report, row) for row in table],
        "drafts": [draft.as_dict() for draft in drafts],
        "portfolio": {
            "threshold": report.exposure_threshold,
            "pairs": [
                {
                    "first": pair.first.key.label,
                    "second": pair.second.key.label,
                    "first_exposure": round(pair.first_exposure, 1),
                    "second_exposure": round(pair.second_exposure, 1),
                }
                for pair in report.pairs
            ],
        },
        "charts": {
            "team_players": [
                {"team": item.team, "unique_players": item.unique_players} for item in report.team_players
            ],
            "team_positions": {"series": list(report.team_positions.series), "rows": report.team_positions.rows},
            "draft_slots": {"series": list(report.draft_slots.series), "rows": report.draft_slots.rows},
            "round_shares": [
                {"round": item.round, "total": item.total, **item.shares} for item in report.round_shares.rounds
            ],
        },
    }


def _print_combos(report: DraftReport, label: str) -> None:
    player = next((candidate for candidate in report.players if candidate.key.label == label), None)
    if player is None:
        print(f"No player matches {label!r}")
        return
    timeline = player_pick_timeline(player)
    print(f"{player.name} ({player.team} {player.position}): drafted {player.count}x")
    if timeline:
        print(f"  First pick {timeline[0].picked_at:%Y-%m-%d} at {timeline[0].pick}, latest {timeline[-1].picked_at:%Y-%m-%d} at {timeline[-1].pick}")
    for size in (2, 3):
        combos = report.combos_for(player.key, combo_size=size)
        print(f"  Top {size}-player combos:")
        if not combos:
            print("    (none)")
        for combo in combos:
            members = ", ".join(member.name for member in combo.members)
            print(f"    {combo.count}x  {members}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = AnalysisSettings.from_env()
    profile = AnalysisProfile.load(args.load_profile) if args.load_profile else AnalysisProfile()

    threshold = args.threshold
    if threshold is None:
        threshold = profile.exposure_threshold if profile.exposure_threshold is not None else settings.exposure_threshold
    threshold = max(0.0, min(100.0, threshold))
    top_n = args.top_n or profile.combo_top_n or settings.combo_top_n
    adp_source = args.adp or profile.adp_source or settings.adp_source

    if args.save_profile:
        AnalysisProfile(exposure_threshold=threshold, combo_top_n=top_n, adp_source=adp_source).save(args.save_profile)
        print(f"Saved analysis profile to {args.save_profile}")

    try:
        rows = load_pick_csv(args.picks)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        print(f"Could not read {args.picks}: {exc}", file=sys.stderr)
        return 2
    adp_records = load_adp_reference(adp_source)
    if adp_source and not adp_records:
        print("ADP reference unavailable; reference columns will show '-'")

    try:
        report = analyze_rows(rows, adp_records=adp_records, exposure_threshold=threshold, combo_top_n=top_n)
    except IngestError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    summary = report.summary
    print(
        f"Analyzed {summary.total_picks} picks across {summary.total_drafts} drafts "
        f"({len(report.players)} players, avg pick {summary.avg_pick_number:.2f}, most picked team {summary.most_picked_team})"
    )

    table = report.table(args.filter, args.sort, descending=args.descending)
    _write_player_table(table, args.output)
    print(f"Wrote player table to {args.output}")

    if report.pairs:
        preview = ", ".join(f"{pair.first.name} + {pair.second.name}" for pair in report.pairs[:5])
        more = len(report.pairs) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Portfolio pairs above {threshold:.1f}% exposure: {preview}{suffix}")
    else:
        print(f"No portfolio pairs above {threshold:.1f}% exposure")

    for label in args.combos:
        _print_combos(report, label)

    drafts = report.drafts_with(args.drafts_with)
    if args.drafts_with:
        print(f"{len(drafts)} of {len(report.drafts)} drafts include {', '.join(args.drafts_with)}")
        for draft in drafts:
            print(f"  {draft.draft_id}  {draft.date or '-'}  {draft.tournament or '-'}  slot {draft.slot}")

    if args.report:
        args.report.write_text(json.dumps(_report_payload(report, table, drafts), indent=2), encoding="utf-8")
        print(f"Wrote report to {args.report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
