"""Deterministic position hashing and C-style integer division.

Wandering and random encounters are not random: they bucket a position
with a remainder. Division truncates toward zero and the remainder keeps
the sign of the dividend (as in C), so negative coordinates land in
negative buckets instead of wrapping around like Python's ``%``.
Recorded playthroughs depend on this.
"""

from __future__ import annotations


def truncated_div(value: int, divisor: int) -> int:
    """Quotient rounded toward zero.

    Example:
        >>> truncated_div(-6, 4), -6 // 4
        (-1, -2)
    """
    quotient = abs(value) // abs(divisor)
    return -quotient if (value < 0) != (divisor < 0) else quotient


def truncated_mod(value: int, modulus: int) -> int:
    """Remainder of truncating division.

    Example:
        >>> truncated_mod(7, 4), truncated_mod(-6, 4)
        (3, -2)
    """
    remainder = abs(value) % abs(modulus)
    return -remainder if value < 0 else remainder


def wander_bucket(x: int, y: int) -> int:
    """Bucket used to pick a wander direction."""
    return truncated_mod(x + y, 4)


def encounter_bucket(x: int, y: int) -> int:
    """Bucket used to decide whether a tile triggers an encounter."""
    return truncated_mod(x * 31 + y * 17, 10)


__all__ = [
    "truncated_div",
    "truncated_mod",
    "wander_bucket",
    "encounter_bucket",
]
