#!/usr/bin/env python3
"""
CLI for car rental bookings.

Commands:
  report   - Show every rental with its length and price
  merge    - Collapse overlapping bookings of the same customer and car
  upgrade  - Quote the extra cost of moving a rental to a better car
"""

import argparse
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List

from rental import Car, CarType, Rent, load_rentals

HEADERS = ["#", "Name", "Car", "Type", "From", "To", "Days", "Price"]

SORT_KEYS = {
    "pickup": lambda r: r.pick_date.ordinal,
    "price": lambda r: r.get_price(),
    "name": lambda r: r.name.lower(),
}

# =============================================================================
# Formatting helpers
# =============================================================================


def format_price(price: int) -> str:
    """Format a price for display."""
    return f"{price:,}"


def format_car(car: Car) -> str:
    """Short car description (brand and gearbox)."""
    return f"{car.brand} ({car.gear})"


def make_rent_table(rents: List[Rent]) -> List[List[str]]:
    """Convert rentals to table rows, numbered from 1."""
    rows = []
    for index, rent in enumerate(rents, start=1):
        car = rent.car
        rows.append(
            [
                str(index),
                rent.name,
                format_car(car),
                car.car_type.value,
                str(rent.pick_date),
                str(rent.return_date),
                str(rent.how_many_days()),
                format_price(rent.get_price()),
            ]
        )
    return rows


def total_price(rents: List[Rent]) -> int:
    return sum(rent.get_price() for rent in rents)


# =============================================================================
# Merging
# =============================================================================


def merge_rentals(rents: List[Rent]) -> List[Rent]:
    """
    Merge overlapping bookings until no pair can be merged any more.

    A merged booking can bridge two bookings that did not touch each other,
    so every new result is checked against the remaining ones again.
    Order follows the first booking of each merged group.
    """
    merged: List[Rent] = []
    for rent in rents:
        current = rent
        changed = True
        while changed:
            changed = False
            for i, existing in enumerate(merged):
                combined = existing.overlap(current)
                if combined is not None:
                    del merged[i]
                    current = combined
                    changed = True
                    break
        merged.append(current)
    return merged


# =============================================================================
# Commands
# =============================================================================


def cmd_report(args):
    """Show every rental with its length and price."""
    rents = load_rentals(args.bookings_file)
    if args.name:
        needle = args.name.lower()
        rents = [r for r in rents if needle in r.name.lower()]
    if args.sort:
        rents = sorted(rents, key=SORT_KEYS[args.sort])

    print(f"Bookings: {args.bookings_file}")
    print(f"Rentals: {len(rents)}")
    print()

    if not rents:
        print("No rentals found.")
        return 0

    print(tabulate(make_rent_table(rents), headers=HEADERS, tablefmt="simple"))
    print()
    print(f"Total: {format_price(total_price(rents))}")
    return 0


def cmd_merge(args):
    """Collapse overlapping bookings of the same customer and car."""
    rents = load_rentals(args.bookings_file)
    merged = merge_rentals(rents)

    print(f"Rentals: {len(rents)}")
    print(f"After merge: {len(merged)}")
    print()

    if merged:
        print(tabulate(make_rent_table(merged), headers=HEADERS, tablefmt="simple"))
        print()
        print(f"Total: {format_price(total_price(merged))}")
    return 0


def cmd_upgrade(args):
    """Quote the extra cost of moving a rental to a better car."""
    rents = load_rentals(args.bookings_file)
    if args.index < 1 or args.index > len(rents):
        print(f"Error: Rental {args.index} out of range (1..{len(rents)})")
        return 1

    rent = rents[args.index - 1]
    current = rent.car
    new_car = Car(
        args.id if args.id is not None else current.car_id,
        args.type,
        args.brand or current.brand,
        not args.auto,
    )

    print(f"Rental: {rent}")
    print(f"Current car: {current}")
    print(f"Offered car: {new_car}")
    print()

    if not new_car.better(current):
        print("No upgrade: offered car is not better than the current one.")
        return 0

    cost = rent.upgrade(new_car)
    print(f"Upgrade cost: {format_price(cost)}")
    print(f"New price: {format_price(rent.get_price())}")
    return 0


# =============================================================================
# Main
# =============================================================================


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Car rental bookings tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s bookings/june.yaml report
  %(prog)s bookings/june.yaml report --name doe --sort price
  %(prog)s bookings/june.yaml merge
  %(prog)s bookings/june.yaml upgrade 2 --type C --brand BMW --auto
""",
    )
    parser.add_argument(
        "bookings_file",
        type=Path,
        help="Path to bookings YAML file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Report subcommand
    report_parser = subparsers.add_parser(
        "report", help="Show every rental with its length and price"
    )
    report_parser.add_argument(
        "--name",
        type=str,
        help="Only show rentals whose customer name contains text (case-insensitive)",
    )
    report_parser.add_argument(
        "--sort",
        choices=sorted(SORT_KEYS),
        help="Sort order (default: file order)",
    )

    # Merge subcommand
    subparsers.add_parser(
        "merge", help="Collapse overlapping bookings of the same customer and car"
    )

    # Upgrade subcommand
    upgrade_parser = subparsers.add_parser(
        "upgrade", help="Quote the extra cost of moving a rental to a better car"
    )
    upgrade_parser.add_argument(
        "index",
        type=int,
        help="Rental number as shown by 'report' (file order, from 1)",
    )
    upgrade_parser.add_argument(
        "--type",
        required=True,
        choices=[t.value for t in CarType],
        help="Type of the offered car",
    )
    upgrade_parser.add_argument(
        "--brand",
        type=str,
        help="Brand of the offered car (default: same as current)",
    )
    upgrade_parser.add_argument(
        "--id",
        type=int,
        help="Id of the offered car (default: same as current)",
    )
    upgrade_parser.add_argument(
        "--auto",
        action="store_true",
        help="Offered car has an automatic gearbox",
    )

    args = parser.parse_args(argv)

    # Validate bookings file exists
    if not args.bookings_file.exists():
        print(f"Error: File not found: {args.bookings_file}")
        return 1

    try:
        if args.command == "report":
            return cmd_report(args)
        elif args.command == "merge":
            return cmd_merge(args)
        elif args.command == "upgrade":
            return cmd_upgrade(args)
    except (KeyError, ValueError) as e:
        print(f"Error: Could not read {args.bookings_file}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
