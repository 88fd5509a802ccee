"""Run park/unpark actions against a parking and print its diagram.

Run from the repository root with:
  PYTHONPATH=src python scripts/parking_demo.py --layout standard park:C park:D unpark:6

  PYTHONPATH=src python scripts/parking_demo.py \
    --lane-size 4 --exit 0 --exit 10 --disabled 5 \
    park:C park:T park:D

Actions run in order:
  park:<tag>     park a vehicle with a one-character tag ("D" for disabled)
  unpark:<index> free the bay at the given index

--list-layouts prints the bundled layout ids and exits.
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback

from parkinggrid import Parking
from parkinggrid.exceptions import ParkingGridError
from parkinggrid.loader import get_layout, list_layouts

_LOGGER = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Park and unpark vehicles on a square parking.")
    parser.add_argument("--layout", dest="layout", help="Bundled layout id.")
    parser.add_argument("--lane-size", dest="lane_size", type=int, help="Bays per lane.")
    parser.add_argument(
        "--exit",
        dest="exits",
        action="append",
        type=int,
        default=[],
        help="Pedestrian exit index (repeatable).",
    )
    parser.add_argument(
        "--disabled",
        dest="disabled",
        action="append",
        type=int,
        default=[],
        help="Disabled bay index (repeatable).",
    )
    parser.add_argument(
        "--list-layouts",
        dest="list_layouts",
        action="store_true",
        help="Print bundled layout ids and exit.",
    )
    parser.add_argument(
        "--traceback",
        dest="traceback",
        action="store_true",
        help="Print full tracebacks on errors.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING).",
    )
    parser.add_argument("actions", nargs="*", help="park:<tag> or unpark:<index>.")
    return parser.parse_args()


def _build_parking(args: argparse.Namespace) -> Parking:
    if args.layout:
        if args.lane_size is not None or args.exits or args.disabled:
            print("Use either --layout or --lane-size/--exit/--disabled.", file=sys.stderr)
            raise SystemExit(2)
        layout = get_layout(args.layout)
        print(f"Layout: {layout.name} ({layout.id})")
        return Parking.from_layout(layout.id)
    if args.lane_size is None:
        print("Missing required value: --layout or --lane-size", file=sys.stderr)
        raise SystemExit(2)
    return Parking(args.lane_size, args.exits, args.disabled)


def _run_action(parking: Parking, action: str) -> str:
    verb, _, value = action.partition(":")
    if verb == "park":
        index = parking.park(value)
        return f"park {value!r}: " + ("no bay found" if index is None else f"bay {index}")
    if verb == "unpark":
        try:
            index = int(value)
        except ValueError:
            print(f"Invalid bay index in action: {action}", file=sys.stderr)
            raise SystemExit(2) from None
        removed = parking.unpark(index)
        return f"unpark {index}: " + ("removed" if removed else "nothing to remove")
    print(f"Unknown action: {action}", file=sys.stderr)
    raise SystemExit(2)


def main() -> int:
    args = _parse_args()
    logging.basicConfig(level=args.log_level.upper())
    if args.list_layouts:
        for layout_id in list_layouts():
            print(layout_id)
        return 0
    try:
        parking = _build_parking(args)
        for action in args.actions:
            print(_run_action(parking, action))
    except ParkingGridError as exc:
        print(f"{exc.__class__.__name__}: {exc}", file=sys.stderr)
        if args.traceback:
            traceback.print_exc()
        return 2
    _LOGGER.info("Parked cars: %s", parking.parked_cars)
    print(f"Available bays: {parking.available_bays()}")
    print(parking.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
