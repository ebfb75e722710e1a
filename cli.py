"""Parking Allocation Platform — line-oriented command interface."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from engine.parking_lot import ParkingLot
from data.loader import load_layout_path
from models.vehicle import Vehicle, InvalidRequest
from models.allocation import AllocationStatus
from config.defaults import COMMAND_USAGE, DEFAULT_LOG_LEVEL

log = logging.getLogger(__name__)

PROMPT = "\nEnter command: "


def print_banner(out: TextIO):
    print("Parking Lot System", file=out)
    print("Commands:", file=out)
    for usage in COMMAND_USAGE.values():
        print(f"  {usage}", file=out)


def _park(lot: ParkingLot, args: List[str], out: TextIO):
    if len(args) < 2:
        print(f"Invalid input. Usage: {COMMAND_USAGE['park_vehicle']}", file=out)
        return
    plate, category = args[0], args[1]
    try:
        vehicle = Vehicle(plate, category)
    except InvalidRequest:
        print("Unknown vehicle type.", file=out)
        return

    result = lot.park(vehicle)
    if result.status is AllocationStatus.PARKED:
        print(f"Parked {plate} on {result.location.describe()}", file=out)
    elif result.status is AllocationStatus.ALREADY_PARKED:
        print(f"Vehicle {plate} is already parked.", file=out)
    else:
        print(f"Parking Lot Full or no suitable spot available for {plate}", file=out)


def _remove(lot: ParkingLot, args: List[str], out: TextIO):
    if not args:
        print(f"Usage: {COMMAND_USAGE['remove_vehicle']}", file=out)
        return
    result = lot.release(args[0])
    if result.ok:
        print(f"Vehicle {args[0]} removed from floor {result.floor_index}", file=out)
    else:
        print(f"Vehicle {args[0]} not found.", file=out)


def _available(lot: ParkingLot, out: TextIO):
    for i, count in enumerate(lot.available_per_floor()):
        print(f"Floor {i}: {count} spots available.", file=out)


def _is_full(lot: ParkingLot, out: TextIO):
    if lot.is_full():
        print("Parking lot is full.", file=out)
    else:
        print("Parking lot has available spots.", file=out)


def _find(lot: ParkingLot, args: List[str], out: TextIO):
    if not args:
        print(f"Usage: {COMMAND_USAGE['find_vehicle']}", file=out)
        return
    result = lot.locate(args[0])
    if result.ok:
        print(f"Vehicle {args[0]} is parked on {result.location.describe()}", file=out)
    else:
        print(f"Vehicle {args[0]} not found.", file=out)


def run_command(lot: ParkingLot, line: str, out: TextIO = sys.stdout) -> bool:
    """Execute one command line. Returns False when the loop should stop."""
    tokens = line.split()
    if not tokens:
        return True
    command, args = tokens[0], tokens[1:]

    if command == "park_vehicle":
        _park(lot, args, out)
    elif command == "remove_vehicle":
        _remove(lot, args, out)
    elif command == "available_spots":
        _available(lot, out)
    elif command == "is_full":
        _is_full(lot, out)
    elif command == "find_vehicle":
        _find(lot, args, out)
    elif command == "help":
        print_banner(out)
    elif command == "exit":
        return False
    else:
        print("Invalid command.", file=out)
    return True


def run_loop(lot: ParkingLot, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout, prompt: str = PROMPT):
    """Read commands until `exit` or end of input."""
    while True:
        if prompt:
            out.write(prompt)
            out.flush()
        line = stdin.readline()
        if not line:
            break
        if not run_command(lot, line, out):
            break


def _read_int(stdin: TextIO, out: TextIO, prompt: str) -> int:
    out.write(prompt)
    out.flush()
    line = stdin.readline()
    if not line:
        raise ValueError("Unexpected end of input while reading lot dimensions.")
    return int(line.strip())


def prompt_dimensions(stdin: TextIO = sys.stdin, out: TextIO = sys.stdout) -> tuple:
    """Ask for floor count and spots per floor, in that order."""
    num_floors = _read_int(stdin, out, "Enter the number of floors: ")
    spots_per_floor = _read_int(stdin, out, "Enter the number of spots per floor: ")
    return num_floors, spots_per_floor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parking-lot",
        description="Interactive multi-floor parking lot allocator.",
    )
    parser.add_argument("--floors", type=int, help="number of floors")
    parser.add_argument("--spots", type=int, help="spots per floor")
    parser.add_argument("--layout", help="CSV/XLSX layout file with per-floor spot counts")
    parser.add_argument(
        "--log-level", default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser


def create_lot(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> ParkingLot:
    if args.layout:
        return ParkingLot(load_layout_path(args.layout))
    num_floors, spots_per_floor = args.floors, args.spots
    if num_floors is None or spots_per_floor is None:
        num_floors, spots_per_floor = prompt_dimensions(stdin, out)
    return ParkingLot.uniform(num_floors, spots_per_floor)


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        lot = create_lot(args, stdin, out)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=out)
        return 1

    log.info("Created lot with %d floors, %d spots", lot.num_floors, lot.total_capacity)
    print_banner(out)
    run_loop(lot, stdin, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
