"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Integer widths are counted in bits and are always >= 1
    - All valid overflow policies encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: round-trip through env vars and CLI flags without custom parsing
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

ProgramName = NewType("ProgramName", str)   # e.g. "test_math_add"
CheckLabel = NewType("CheckLabel", str)     # e.g. "add(2, 3)"
IntWidth = NewType("IntWidth", int)         # bits, >= 1

DEFAULT_INT_BITS = IntWidth(32)


# ─── Enums ───────────────────────────────────────────────────────

class OverflowPolicy(str, Enum):
    """What integer operations do when the exact result leaves the signed range."""
    UNBOUNDED = "unbounded"
    WRAP = "wrap"
    TRAP = "trap"


class MathOperation(str, Enum):
    """Integer operations — names used in overflow errors and log extras."""
    ADD = "add"
    MULTIPLY = "multiply"
