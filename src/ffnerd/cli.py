"""Command-line interface that prints feed records as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

import httpx
from pydantic import BaseModel

from ffnerd.client import PPR_RANKINGS_LIMIT, STANDARD_RANKINGS_LIMIT, FFNerdClient
from ffnerd.config_loader import ClientSettings
from ffnerd.errors import FFNerdError


def _week(value: str) -> int | str:
    if value.lower() == "all":
        return "all"
    return int(value)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the Fantasy Football Nerd XML feeds")
    parser.add_argument("--api-key", default=None, help="API key (default: $FFNERD_API_KEY)")
    parser.add_argument("--profile", type=Path, default=None, help="Load settings from a JSON profile")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save resolved settings to JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("players", help="List all players")

    player = sub.add_parser("player", help="Player details and news")
    player.add_argument("player_id", type=int)

    projections = sub.add_parser("projections", help="Weekly projections")
    projections.add_argument("week", type=int)
    projections.add_argument("--position", default="all")

    injuries = sub.add_parser("injuries", help="Weekly injury reports")
    injuries.add_argument("week", type=int)

    schedule = sub.add_parser("schedule", help="Season schedule")
    schedule.add_argument("week", type=_week, nargs="?", default="all")

    rankings = sub.add_parser("rankings", help="Preseason draft rankings")
    rankings.add_argument("--position", default="all")
    rankings.add_argument("--limit", type=int, default=None)
    rankings.add_argument("--ppr", action="store_true", help="PPR rankings instead of standard")
    rankings.add_argument(
        "--sos",
        dest="sos",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Apply strength of schedule (default depends on --ppr)",
    )

    merged = sub.add_parser("merged", help="Projections joined with injuries")
    merged.add_argument("week", type=int)
    merged.add_argument("--position", default="all")
    merged.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an injured player is missing from the projections",
    )
    return parser


def _run(client: FFNerdClient, args: argparse.Namespace) -> object:
    if args.command == "players":
        return client.player_list()
    if args.command == "player":
        return client.player_detail(args.player_id)
    if args.command == "projections":
        return client.projections(args.week, args.position)
    if args.command == "injuries":
        return client.injuries(args.week)
    if args.command == "schedule":
        return client.schedule(args.week)
    if args.command == "rankings":
        if args.ppr:
            return client.ppr_rankings(
                args.position,
                PPR_RANKINGS_LIMIT if args.limit is None else args.limit,
                True if args.sos is None else args.sos,
            )
        return client.standard_rankings(
            args.position,
            STANDARD_RANKINGS_LIMIT if args.limit is None else args.limit,
            False if args.sos is None else args.sos,
        )
    if args.command == "merged":
        return client.merged_players(args.week, args.position, strict=args.strict or None)
    raise ValueError(f"Unknown command {args.command!r}")


def _to_json(result: object) -> object:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [_to_json(item) for item in result]
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = ClientSettings.load(args.profile) if args.profile else ClientSettings.from_env()
    if args.api_key:
        settings = replace(settings, api_key=args.api_key)
    if args.save_profile:
        settings.save(args.save_profile)
        print(f"Saved settings profile to {args.save_profile}", file=sys.stderr)

    try:
        with FFNerdClient(settings=settings) as client:
            result = _run(client, args)
    except (FFNerdError, httpx.HTTPError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(_to_json(result), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
