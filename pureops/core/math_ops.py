"""Math Operations — integer addition and multiplication.

Invariants:
    - add and multiply are total, deterministic and commutative
    - Default policy is UNBOUNDED: the exact Python integer result
    - WRAP / TRAP emulate a fixed-width signed integer of `bits` bits
"""

from pureops.core.domain_types import DEFAULT_INT_BITS, MathOperation, OverflowPolicy
from pureops.core.int_width import fit_to_width


def add(
    a: int,
    b: int,
    *,
    policy: OverflowPolicy = OverflowPolicy.UNBOUNDED,
    bits: int = DEFAULT_INT_BITS,
) -> int:
    """Return a + b."""
    return fit_to_width(a + b, MathOperation.ADD.value, policy, bits)


def multiply(
    a: int,
    b: int,
    *,
    policy: OverflowPolicy = OverflowPolicy.UNBOUNDED,
    bits: int = DEFAULT_INT_BITS,
) -> int:
    """Return a * b."""
    return fit_to_width(a * b, MathOperation.MULTIPLY.value, policy, bits)
