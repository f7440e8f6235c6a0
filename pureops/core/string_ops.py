"""String Operations — reversal and concatenation of text values.

Invariants:
    - reverse(reverse(s)) == s
    - len(concat(a, b)) == len(a) + len(b); "" is a left and right identity
    - Inputs are never modified (str is immutable); results are new values

Design Decisions:
    - Reversal is by code point, the unit of Python str. Combining sequences
      (e.g. "é") are reversed mark-first, same as slicing
"""


def reverse(s: str) -> str:
    """Return s with its characters in reverse order."""
    return s[::-1]


def concat(a: str, b: str) -> str:
    """Return b appended after a."""
    return a + b
