#!/usr/bin/env python3
"""Print the seed employee directory, optionally filtered by a search query.

Run from the backend/ directory:

    python3 scripts/directory_report.py [--query TEXT] [--json] [--verbose]
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from employee_directory.models.employee import Employee  # noqa: E402
from employee_directory.services.directory import Directory  # noqa: E402
from employee_directory.services.profile_card import build_detail, phone_suffix  # noqa: E402
from employee_directory.services.seed import build_seed  # noqa: E402

logger = logging.getLogger(__name__)


def format_row(position: int, employee: Employee) -> str:
    return (
        f"{position:>3}. {employee.name} | {employee.department} | "
        f"{employee.email} | ***{phone_suffix(employee.phone)}"
    )


def render(employees: list[Employee], *, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(
            [build_detail(e).model_dump() for e in employees],
            ensure_ascii=False,
            indent=2,
        )
    return "\n".join(format_row(i, e) for i, e in enumerate(employees))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the employee directory")
    parser.add_argument(
        "--query",
        default="",
        help="Case-insensitive filter on name, email and department",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit employee details as a JSON array",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    directory = Directory(build_seed())
    matches = directory.search(args.query)
    logger.info("%d of %d employees match query=%r", len(matches), len(directory), args.query)

    print(render(matches, as_json=args.json))


if __name__ == "__main__":
    main()
