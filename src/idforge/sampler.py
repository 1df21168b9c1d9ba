"""Bitmask parameters for unbiased index extraction.

A random byte ``b`` is turned into a candidate index ``b & mask`` and kept only
when that index is inside the alphabet. Masking plus rejection keeps every
character exactly equally likely, which plain ``b % len`` does not when the
alphabet size does not divide 256.
"""

from idforge.errors import MAX_ALPHABET_SIZE


def mask_for(alphabet_len: int) -> int:
    """Return the smallest ``2**k - 1`` that covers ``alphabet_len - 1``.

    Args:
        alphabet_len: Alphabet size, 1..256

    Returns:
        Bitmask (0 for a single character alphabet, 255 for 256 characters)

    Raises:
        ValueError: If alphabet_len is outside 1..256
    """
    if not 1 <= alphabet_len <= MAX_ALPHABET_SIZE:
        raise ValueError(
            f"alphabet_len must be between 1 and {MAX_ALPHABET_SIZE}, got {alphabet_len}"
        )

    mask = 0
    while mask < alphabet_len - 1:
        mask = (mask << 1) | 1
    return mask


def step_for(alphabet_len: int, mask: int, id_len: int) -> int:
    """Return how many random bytes to request per round.

    Uses the usual nanoid heuristic ``ceil(1.6 * mask * id_len / alphabet_len)``
    so a single round is normally enough. With mask 0 every byte is accepted,
    so exactly ``id_len`` bytes are needed.

    Args:
        alphabet_len: Alphabet size
        mask: Value returned by mask_for(alphabet_len)
        id_len: Requested identifier length

    Returns:
        Batch size, at least 1
    """
    if mask == 0:
        return max(id_len, 1)

    # ceil(8 * mask * id_len / (5 * alphabet_len)) without floats
    step = -(-8 * mask * id_len // (5 * alphabet_len))
    return max(step, 1)
