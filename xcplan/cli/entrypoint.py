from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from xcplan.core.resolution.inclusion import is_test_included
from xcplan.plans.parser import find_target, get_target_names
from xcplan.plans.repository import load_all
from xcplan.plans.summary import print_plan_summary, summarize_plan

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_targets(args: argparse.Namespace) -> int:
    plans = load_all(args.plans, validate_schema=args.validate_schema)
    if not plans:
        print("Error: no test plan could be loaded.", file=sys.stderr)
        return EXIT_FAILURE

    for parsed in plans:
        print(f"{parsed.name} ({parsed.path})")
        for name in get_target_names(parsed.plan):
            print(f"  {name}")
    return EXIT_OK


def _cmd_summary(args: argparse.Namespace) -> int:
    plans = load_all(args.plans, validate_schema=args.validate_schema)
    if not plans:
        print("Error: no test plan could be loaded.", file=sys.stderr)
        return EXIT_FAILURE

    for parsed in plans:
        print_plan_summary(summarize_plan(parsed))
    return EXIT_OK


def _cmd_resolve(args: argparse.Namespace) -> int:
    plans = load_all([args.plan], validate_schema=args.validate_schema)
    if not plans:
        print(f"Error: test plan {args.plan} could not be loaded.", file=sys.stderr)
        return EXIT_FAILURE

    parsed = plans[0]
    target = find_target(parsed.plan, args.target)
    if target is None:
        print(
            f"Error: target {args.target} not found in test plan {parsed.name}.",
            file=sys.stderr,
        )
        return EXIT_FAILURE

    LOGGER.debug(
        "resolving %d test id(s) against target %s of %s",
        len(args.test_ids),
        args.target,
        parsed.path,
    )

    for test_id in args.test_ids:
        marker = "+" if is_test_included(test_id, target) else "-"
        print(f"{marker} {test_id}")
    return EXIT_OK


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xcplan",
        description="Inspect .xctestplan files and resolve test inclusion",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )

    parser.add_argument(
        "--validate-schema",
        action="store_true",
        help="Validate plan documents against the JSON Schema before parsing.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    targets = sub.add_parser("targets", help="List the test targets of each plan.")
    targets.add_argument("plans", type=Path, nargs="+")
    targets.set_defaults(func=_cmd_targets)

    summary = sub.add_parser("summary", help="Print a summary of each plan.")
    summary.add_argument("plans", type=Path, nargs="+")
    summary.set_defaults(func=_cmd_summary)

    resolve = sub.add_parser(
        "resolve",
        help="Print '+ id' for included and '- id' for excluded tests.",
    )
    resolve.add_argument("plan", type=Path)
    resolve.add_argument("--target", required=True, help="Target name in the plan.")
    resolve.add_argument(
        "test_ids",
        nargs="+",
        help="Test identifiers, as Class, Class/method or Class.method.",
    )
    resolve.set_defaults(func=_cmd_resolve)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
