"""
frogger.py

Command line entrypoint for inspecting a lane and the player records.

Commands
- road [--pattern P] [POSITION ...]
    Query each position and print is_valid / is_occupied / occupancy as JSON.
    With --pattern the config is not read.
- records [--add FIELDS ...]
    Seed records from config, add each "first,last,phone,zip,state,gender" entry
    and print the per-add result plus the final list.

Config is read only when a command needs it (see config.py). --config overrides the search path.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from config import AppConfig, build_records, build_road, get_config, load_config
from frogger_models import FroggerID
from road import Road

RECORD_FIELD_NAMES = [field_info.name for field_info in fields(FroggerID)]


def _parse_record_fields(text: str) -> FroggerID:
    parts = str(text).split(",")
    if len(parts) != len(RECORD_FIELD_NAMES):
        raise ValueError(
            f"Record must have {len(RECORD_FIELD_NAMES)} comma separated fields "
            f"(first,last,phone,zip,state,gender), got {len(parts)}: {text!r}"
        )
    return FroggerID.from_mapping(dict(zip(RECORD_FIELD_NAMES, parts)))


def _load_app_config(config_path: Optional[Path]) -> AppConfig:
    if config_path is None:
        app_config, _resolved_path = get_config()
    else:
        app_config, _resolved_path = load_config(config_path)
    return app_config


def _road_payload(road: Road, positions: Sequence[int]) -> Dict[str, Any]:
    queries = []
    for position in positions:
        queries.append(
            {
                "position": position,
                "is_valid": road.is_valid(position),
                "is_occupied": road.is_occupied(position),
                "occupancy": road.occupancy_at(position).value,
            }
        )
    return {"ok": True, "pattern": road.to_pattern(), "length": road.length(), "queries": queries}


def _build_argument_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(description="Frogger road and records tool")
    argument_parser.add_argument("--config", type=Path, default=None, help="Path to a frogger_config.json file.")
    argument_parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = argument_parser.add_subparsers(dest="command", required=True)

    road_parser = subparsers.add_parser("road", help="Query lane occupancy.")
    road_parser.add_argument("--pattern", default=None, help="Lane pattern such as .X..X (overrides config).")
    road_parser.add_argument("positions", nargs="*", type=int, help="Positions to query.")

    records_parser = subparsers.add_parser("records", help="Add and list player records.")
    records_parser.add_argument(
        "--add",
        action="append",
        default=[],
        metavar="FIELDS",
        help="Record as first,last,phone,zip,state,gender. May be repeated.",
    )
    return argument_parser


def main(argv: Optional[List[str]] = None) -> int:
    parsed_args = _build_argument_parser().parse_args(argv)

    if parsed_args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        # basicConfig is a no-op when the root logger already has handlers
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if parsed_args.command == "road":
            if parsed_args.pattern is not None:
                road = Road.from_pattern(parsed_args.pattern.strip())
            else:
                road = build_road(_load_app_config(parsed_args.config))
            payload = _road_payload(road, parsed_args.positions)
        else:
            records = build_records(_load_app_config(parsed_args.config))
            added = []
            for record_text in parsed_args.add:
                frogger_id = _parse_record_fields(record_text)
                added.append({"record": frogger_id.to_dict(), "added": records.add_record(frogger_id)})
            payload = {
                "ok": True,
                "added": added,
                "records": [frogger_id.to_dict() for frogger_id in records.records()],
            }
    except (OSError, ValueError) as exception:
        print(json.dumps({"ok": False, "error": str(exception)}, ensure_ascii=False, indent=2))
        return 2

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
