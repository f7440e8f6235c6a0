"""Check Runner — evaluates a check program with abort-on-first-failure semantics.

Invariants:
    - Writes "Running <name>..." before the first check
    - Checks run strictly in declaration order
    - First mismatch raises CheckFailedError: no later check runs, no PASSED line
    - "<name>: PASSED" is written only after every check matched
    - Program output goes to `out`; diagnostics go to logging
    - A failed check is logged here, once; callers do not log it again

Design Decisions:
    - Raise instead of sys.exit: the shell (CLI, pytest) owns the exit status
    - No retries and no partial results — a failed check is fatal to its program
"""

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from pureops.core.errors import CheckFailedError
from pureops.services.check_programs import CheckProgram

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgramResult:
    name: str
    checks_run: int
    passed: bool


def run_program(program: CheckProgram, out: TextIO | None = None) -> ProgramResult:
    """Run every check of one program, raising CheckFailedError on the first mismatch."""
    out = out if out is not None else sys.stdout
    print(f"Running {program.name}...", file=out)

    for check in program.checks:
        actual = check.actual()
        if actual != check.expected:
            err = CheckFailedError(program.name, check.label, check.expected, actual)
            logger.error(err.message, extra=err.log_extra())
            raise err
        logger.debug(
            f"Check passed: {check.label}",
            extra={"program": program.name, "check": check.label},
        )

    print(f"{program.name}: PASSED", file=out)
    logger.info(
        f"{program.name} passed {len(program.checks)} checks",
        extra={"program": program.name},
    )
    return ProgramResult(program.name, len(program.checks), True)


def run_all(
    programs: Iterable[CheckProgram], out: TextIO | None = None,
) -> list[ProgramResult]:
    """Run programs in order; the first failure propagates and stops the batch."""
    return [run_program(p, out) for p in programs]
