"""Lightweight REST client for the draftlens API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the draftlens REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("picks", type=Path, help="Pick export CSV")
    parser.add_argument("--threshold", type=float, default=None, help="Exposure threshold for portfolio pairs")
    parser.add_argument("--validate-only", action="store_true", help="Check CSV headers without analyzing")
    parser.add_argument("--portfolio", action="store_true", help="Only fetch portfolio pairs")
    parser.add_argument("--query", default=None, help="Filter portfolio pairs or the player table by player name")
    parser.add_argument("--combos", metavar="NAME", help="Fetch combos for a player name")
    parser.add_argument("--team", default="", help="Team for --combos")
    parser.add_argument("--position", default="", help="Position for --combos")
    parser.add_argument("--combo-size", type=int, default=2, help="Combo size for --combos")
    parser.add_argument("--sort-by", default=None, help="Player table sort column for the full analysis")
    parser.add_argument("--descending", action="store_true", help="Sort the player table in descending order")
    parser.add_argument("--drafts-with", default=None, help="Comma-separated full names every listed draft must hold")
    args = parser.parse_args()

    def make_files() -> dict[str, tuple[str, bytes, str]]:
        return {"picks": (args.picks.name, args.picks.read_bytes(), "text/csv")}

    data: dict[str, str] = {}
    if args.threshold is not None:
        data["threshold"] = str(args.threshold)

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/validate", files=make_files())
        resp.raise_for_status()
        validation = resp.json()
        print("Validation:", json.dumps(validation, indent=2))
        if args.validate_only or not validation["valid"]:
            return

        if args.combos:
            combo_data = {
                "name": args.combos,
                "team": args.team,
                "position": args.position,
                "combo_size": str(args.combo_size),
            }
            resp = client.post("/combos", files=make_files(), data=combo_data)
            if resp.status_code == 404:
                raise SystemExit(f"player {args.combos} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.portfolio:
            if args.query:
                data["query"] = args.query
            resp = client.post("/portfolio", files=make_files(), data=data)
            resp.raise_for_status()
            payload = resp.json()
            print(f"Received {len(payload['pairs'])} pairs above {payload['threshold']}%")
            print(json.dumps(payload["pairs"][:10], indent=2))
            return

        if args.query:
            data["query"] = args.query
        if args.sort_by:
            data["sort_by"] = args.sort_by
        if args.descending:
            data["descending"] = "true"
        if args.drafts_with:
            data["names"] = args.drafts_with
        resp = client.post("/analyze", files=make_files(), data=data)
        resp.raise_for_status()
        payload = resp.json()
        print("Summary:", json.dumps(payload["summary"], indent=2))
        print(f"Received {len(payload['players'])} players, {len(payload['drafts'])} drafts")
        if payload["players"]:
            print(json.dumps(payload["players"][0], indent=2))


if __name__ == "__main__":
    main()
