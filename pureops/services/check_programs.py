"""Check Programs — the fixed, named sequences of checks run against the core.

Invariants:
    - One program per core function, plus test_integration which uses both modules
    - Programs are immutable data: no check runs until the runner evaluates it
    - list_programs() order is registration order (stable for `run --all`)
    - Unknown names raise UnknownProgramError (never return None)

Design Decisions:
    - Each check holds a zero-argument callable so a failing call surfaces inside
      the runner, where the program and check label are known
    - Explicit dict registry over module scanning: every program visible in one place
"""

from dataclasses import dataclass
from typing import Any, Callable

from pureops.core.domain_types import CheckLabel, ProgramName
from pureops.core.errors import UnknownProgramError
from pureops.core.math_ops import add, multiply
from pureops.core.string_ops import concat, reverse


@dataclass(frozen=True)
class Check:
    """One expectation: actual() must equal expected."""
    label: CheckLabel
    actual: Callable[[], Any]
    expected: Any


@dataclass(frozen=True)
class CheckProgram:
    name: ProgramName
    checks: tuple[Check, ...]


def _check(label: str, actual: Callable[[], Any], expected: Any) -> Check:
    return Check(CheckLabel(label), actual, expected)


# ─── Programs ────────────────────────────────────────────────────

TEST_MATH_ADD = CheckProgram(ProgramName("test_math_add"), (
    _check("add(2, 3)", lambda: add(2, 3), 5),
    _check("add(-1, 1)", lambda: add(-1, 1), 0),
    _check("add(0, 0)", lambda: add(0, 0), 0),
    _check("add(100, 200)", lambda: add(100, 200), 300),
    _check("add(-5, -10)", lambda: add(-5, -10), -15),
))

TEST_MATH_MULTIPLY = CheckProgram(ProgramName("test_math_multiply"), (
    _check("multiply(2, 3)", lambda: multiply(2, 3), 6),
    _check("multiply(-1, 5)", lambda: multiply(-1, 5), -5),
    _check("multiply(0, 100)", lambda: multiply(0, 100), 0),
    _check("multiply(10, 10)", lambda: multiply(10, 10), 100),
    _check("multiply(-3, -4)", lambda: multiply(-3, -4), 12),
))

TEST_STRING_CONCAT = CheckProgram(ProgramName("test_string_concat"), (
    _check('concat("hello", " world")', lambda: concat("hello", " world"), "hello world"),
    _check('concat("", "")', lambda: concat("", ""), ""),
    _check('concat("test", "")', lambda: concat("test", ""), "test"),
    _check('concat("", "test")', lambda: concat("", "test"), "test"),
    _check('concat("foo", "bar")', lambda: concat("foo", "bar"), "foobar"),
))

TEST_STRING_REVERSE = CheckProgram(ProgramName("test_string_reverse"), (
    _check('reverse("hello")', lambda: reverse("hello"), "olleh"),
    _check('reverse("")', lambda: reverse(""), ""),
    _check('reverse("a")', lambda: reverse("a"), "a"),
    _check('reverse("12345")', lambda: reverse("12345"), "54321"),
    _check('reverse("racecar")', lambda: reverse("racecar"), "racecar"),
))

# Both modules: sum and product, then the combined string and its reversal
TEST_INTEGRATION = CheckProgram(ProgramName("test_integration"), (
    _check("add(5, 3)", lambda: add(5, 3), 8),
    _check("multiply(2, 4)", lambda: multiply(2, 4), 8),
    _check('concat("hello", "world")', lambda: concat("hello", "world"), "helloworld"),
    _check(
        'reverse(concat("hello", "world"))',
        lambda: reverse(concat("hello", "world")), "dlrowolleh",
    ),
    _check(
        'concat(reverse("hello"), "world")',
        lambda: concat(reverse("hello"), "world"), "ollehworld",
    ),
))

_PROGRAMS: dict[str, CheckProgram] = {
    p.name: p for p in (
        TEST_MATH_ADD,
        TEST_MATH_MULTIPLY,
        TEST_STRING_CONCAT,
        TEST_STRING_REVERSE,
        TEST_INTEGRATION,
    )
}


def list_programs() -> list[str]:
    """Program names in registration order."""
    return list(_PROGRAMS)


def get_program(name: str) -> CheckProgram:
    try:
        return _PROGRAMS[name]
    except KeyError:
        raise UnknownProgramError(name) from None
