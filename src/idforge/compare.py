"""Constant-time string comparison for identifiers and tokens."""

import hmac


def constant_time_eq(a: str, b: str) -> bool:
    """Compare two strings without leaking where they first differ.

    Both strings are encoded as UTF-32 so every code point occupies exactly
    four bytes, then compared with ``hmac.compare_digest``. The shorter input
    is padded to the longer length so the comparison always covers the same
    number of code points; the length check is folded in afterwards.

    Args:
        a: First string
        b: Second string

    Returns:
        True if both strings contain the same code points

    Raises:
        TypeError: If either argument is not a str
    """
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("constant_time_eq expects two str arguments")

    a_units = a.encode("utf-32-be", "surrogatepass")
    b_units = b.encode("utf-32-be", "surrogatepass")
    width = max(len(a_units), len(b_units))

    same_content = hmac.compare_digest(
        a_units.ljust(width, b"\0"), b_units.ljust(width, b"\0")
    )
    same_length = len(a_units) == len(b_units)
    return same_content & same_length
