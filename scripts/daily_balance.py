"""
scripts/daily_balance.py
────────────────────────────────────────────────────────────────────────
Compute a day's calorie breakdown from a JSON file of logged meals.

    python -m scripts.daily_balance meals.json
    python -m scripts.daily_balance meals.json --burned 320
    python -m scripts.daily_balance meals.json --steps 9500

Uses the remote endpoint when CALORIES_FUNCTION_URL is set and falls
back to the in-process calculation otherwise.
"""
from __future__ import annotations

import asyncio
import json
import sys
from argparse import ArgumentParser
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from core.activity import steps_to_burn
from core.errors import EnergyError
from scripts.helpers import extract_clean_json, meals_from_payload
from services.calories_client import CaloriesClient


def _parser() -> ArgumentParser:
    ap = ArgumentParser(description="Daily calorie totals and energy balance")
    ap.add_argument("path", help="JSON file with meals ('-' for stdin)")
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--burned", type=float, help="calories burned today")
    group.add_argument("--steps", type=int, help="derive calories burned from a step count")
    ap.add_argument("--url", help="override CALORIES_FUNCTION_URL")
    return ap


async def _async_main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    raw = sys.stdin.read() if args.path == "-" else Path(args.path).read_text(encoding="utf-8")

    try:
        meals, burned = meals_from_payload(extract_clean_json(raw))
        if args.steps is not None:
            burned = steps_to_burn(args.steps)["calories_burned"]
        elif args.burned is not None:
            burned = args.burned
    except (ValueError, EnergyError) as exc:
        print(f"! {exc}", file=sys.stderr)
        return 2

    client = CaloriesClient(url=args.url)
    breakdown, source = await client.calculate_totals(meals, burned or 0)
    print(json.dumps({**breakdown, "source": source}, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(asyncio.run(_async_main()))
