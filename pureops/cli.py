"""Command Line — list and run check programs, evaluate core functions.

Invariants:
    - Exit 0 on success; a PureOpsError maps to its exit_code (1 check/overflow, 2 usage)
    - Program output on stdout, diagnostics on stderr via logging
    - Settings read once per invocation; explicit flags override them
    - Invalid PUREOPS_* settings exit 2 with a one-line message, never a traceback

Design Decisions:
    - argparse subcommands with one handle_* function each: no dispatch magic
    - main(argv) returns the status instead of exiting, so tests call it directly
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from pureops.config import get_settings
from pureops.core.domain_types import OverflowPolicy
from pureops.core.errors import CheckFailedError, PureOpsError
from pureops.core.math_ops import add, multiply
from pureops.core.string_ops import concat, reverse
from pureops.infrastructure.observability import setup_logging
from pureops.services.check_programs import get_program, list_programs
from pureops.services.run_checks import run_all

logger = logging.getLogger("pureops.cli")

_MATH = {"add": add, "multiply": multiply}


def handle_list(args: argparse.Namespace) -> int:
    for name in list_programs():
        print(name)
    return 0


def handle_run(args: argparse.Namespace) -> int:
    names = list_programs() if args.all else args.programs
    if not names:
        logger.error("No programs given. Pass program names or --all.")
        return 2
    # Resolve every name before running anything
    programs = [get_program(name) for name in names]
    run_all(programs)
    return 0


def handle_calc(args: argparse.Namespace) -> int:
    if args.operation in _MATH:
        settings = get_settings()
        policy = args.policy or settings.overflow_policy
        bits = args.bits if args.bits is not None else settings.int_bits
        result = _MATH[args.operation](args.a, args.b, policy=policy, bits=bits)
    elif args.operation == "reverse":
        result = reverse(args.s)
    else:
        result = concat(args.a, args.b)
    print(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pureops", description="Pure math/string operations and their check programs",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    list_parser = subparsers.add_parser("list", help="List check programs")
    list_parser.set_defaults(handler=handle_list)

    # run
    run_parser = subparsers.add_parser("run", help="Run check programs")
    run_parser.add_argument("programs", nargs="*", help="Program names (see `list`)")
    run_parser.add_argument("--all", action="store_true", help="Run every program")
    run_parser.set_defaults(handler=handle_run)

    # calc
    calc_parser = subparsers.add_parser("calc", help="Evaluate one operation")
    ops = calc_parser.add_subparsers(dest="operation", required=True)
    for name in _MATH:
        op_parser = ops.add_parser(name, help=f"Integer {name}")
        op_parser.add_argument("a", type=int)
        op_parser.add_argument("b", type=int)
        op_parser.add_argument(
            "--policy", type=OverflowPolicy,
            choices=list(OverflowPolicy), metavar="{unbounded,wrap,trap}",
            help="Overflow policy (default: PUREOPS_OVERFLOW_POLICY)",
        )
        op_parser.add_argument(
            "--bits", type=int, help="Integer width (default: PUREOPS_INT_BITS)",
        )
    reverse_parser = ops.add_parser(
        "reverse", help="Reverse text", epilog="Text starting with - goes after --",
    )
    reverse_parser.add_argument("s")
    concat_parser = ops.add_parser(
        "concat", help="Concatenate two texts", epilog="Text starting with - goes after --",
    )
    concat_parser.add_argument("a")
    concat_parser.add_argument("b")
    calc_parser.set_defaults(handler=handle_calc)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        # Logging is not configured yet; report straight to stderr
        fields = ", ".join(".".join(str(p) for p in e["loc"]) for e in exc.errors())
        print(f"pureops: invalid settings: {fields}", file=sys.stderr)
        return 2
    setup_logging(settings.log_level, settings.log_format)

    try:
        return args.handler(args)
    except CheckFailedError as exc:
        return exc.exit_code  # already logged by the runner
    except PureOpsError as exc:
        logger.error(exc.message, extra=exc.log_extra())
        return exc.exit_code


def run() -> None:
    sys.exit(main())
