"""Command-line front end for the registry.

Usage:
    roadregistry register 23ab!#XYKZ John Doe "12|Main Street|Melbourne|Victoria|Australia" 15-04-1995
    roadregistry update 23ab!#XYKZ John Doe "7|Elm St|Geelong|Victoria|Australia" 15-04-1995
    roadregistry offenses 23ab!#XYKZ 01-03-2026:3 14-07-2026:4
    roadregistry show 23ab!#XYKZ

Storage location and backend come from ROADREGISTRY_* environment
variables (see roadregistry.core.config).
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

from roadregistry.core.config import AppSettings
from roadregistry.core.exceptions import RoadRegistryError
from roadregistry.core.logging import configure_logging
from roadregistry.models.outcome import OperationResult
from roadregistry.models.person import PendingUpdate, PersonDraft
from roadregistry.persistence.record_store import format_offense, format_person
from roadregistry.registry import RoadRegistry, create_registry

_POINTS = re.compile(r"-?[0-9]+")


def _add_person_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("identity", help="10-character person ID")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument("address", help="StreetNumber|Street|City|State|Country")
    parser.add_argument("birthdate", help="DD-MM-YYYY")


def parse_offense_arg(value: str) -> tuple[str | None, int | str | None]:
    """Split ``DD-MM-YYYY:POINTS``; bad values are left for the registry to reject."""
    offense_date, _, points = value.partition(":")
    if _POINTS.fullmatch(points):
        return offense_date or None, int(points)
    return offense_date or None, points or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roadregistry",
                                     description="Road registry people and demerit points")
    sub = parser.add_subparsers(dest="command", required=True)

    register = sub.add_parser("register", help="Register a new person")
    _add_person_arguments(register)

    update = sub.add_parser("update", help="Update a person's details")
    _add_person_arguments(update)
    update.add_argument("--current-id", default=None,
                        help="Identity currently on file, when changing the ID")

    offenses = sub.add_parser("offenses", help="Record offenses and re-evaluate suspension")
    offenses.add_argument("identity")
    offenses.add_argument("offense", nargs="*", type=parse_offense_arg,
                          help="DD-MM-YYYY:POINTS")

    show = sub.add_parser("show", help="Print a person's record and offense history")
    show.add_argument("identity")
    return parser


def _report(result: OperationResult) -> int:
    status = "ok" if result else f"failed ({result.outcome})"
    print(f"{status}: {result.reason}")
    return 0 if result else 1


def _show(registry: RoadRegistry, identity: str) -> int:
    try:
        person = registry.get_person(identity)
        history = registry.offense_history(identity)
    except RoadRegistryError as exc:
        print(f"failed: {exc}")
        return 1
    if person is None:
        print(f"failed (NOT_FOUND): no person registered with identity {identity!r}")
        return 1
    print(format_person(person))
    for offense in history:
        print(f"  {format_offense(offense)}")
    return 0


def main(argv: Sequence[str] | None = None, registry: RoadRegistry | None = None) -> int:
    args = build_parser().parse_args(argv)
    if registry is None:
        settings = AppSettings()
        configure_logging(settings.environment, settings.log_level)
        registry = create_registry(settings)

    if args.command == "show":
        return _show(registry, args.identity)
    if args.command == "offenses":
        return _report(registry.record_offenses(args.identity, args.offense))

    details = {
        "identity": args.identity,
        "first_name": args.first_name,
        "last_name": args.last_name,
        "address": args.address,
        "birthdate": args.birthdate,
    }
    if args.command == "register":
        return _report(registry.register(PersonDraft(**details)))
    return _report(registry.update(PendingUpdate(**details), current_identity=args.current_id))


if __name__ == "__main__":
    sys.exit(main())
