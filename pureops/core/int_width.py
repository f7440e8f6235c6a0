"""Integer Width — fit exact Python integers into a fixed-width signed range.

Invariants:
    - signed_range(bits) == (-2**(bits-1), 2**(bits-1) - 1)
    - The width is validated under every policy, UNBOUNDED included
    - UNBOUNDED never changes the value; WRAP always lands inside the range
    - TRAP raises IntegerOverflowError instead of returning an out-of-range value

Design Decisions:
    - Python ints are arbitrary precision, so wraparound is computed explicitly
      (two's complement via modulo 2**bits) rather than inherited from the host
"""

from pureops.core.domain_types import DEFAULT_INT_BITS, OverflowPolicy
from pureops.core.errors import IntegerOverflowError, InvalidWidthError


def signed_range(bits: int) -> tuple[int, int]:
    """Inclusive (min, max) of a signed integer with the given width."""
    if bits < 1:
        raise InvalidWidthError(bits)
    half = 1 << (bits - 1)
    return -half, half - 1


def wrap_signed(value: int, bits: int) -> int:
    """Two's-complement wraparound of value into `bits` bits."""
    low, _ = signed_range(bits)
    modulus = 1 << bits
    return (value - low) % modulus + low


def fit_to_width(
    value: int,
    operation: str,
    policy: OverflowPolicy = OverflowPolicy.UNBOUNDED,
    bits: int = DEFAULT_INT_BITS,
) -> int:
    """Apply an overflow policy to an exact result."""
    low, high = signed_range(bits)
    if policy == OverflowPolicy.UNBOUNDED:
        return value
    if low <= value <= high:
        return value
    if policy == OverflowPolicy.WRAP:
        return wrap_signed(value, bits)
    raise IntegerOverflowError(operation, value, bits)
