"""Alphabet validation.

An alphabet is an ordered tuple of unique characters. Characters are counted
by code point, so multi-byte characters such as emoji or CJK count once.
"""

from typing import Dict, Tuple

from idforge.errors import (
    MAX_ALPHABET_SIZE,
    DuplicateCharacter,
    EmptyAlphabet,
    Err,
    Ok,
    OversizedAlphabet,
    Result,
)

Alphabet = Tuple[str, ...]


def validate_alphabet(raw: str) -> Result[Alphabet]:
    """Validate a raw alphabet string and split it into code points.

    Duplicates are detected in the same forward pass that builds the result.

    Args:
        raw: Candidate alphabet

    Returns:
        Ok(tuple of characters) or Err with EmptyAlphabet, OversizedAlphabet
        or DuplicateCharacter

    Raises:
        TypeError: If raw is not a string
    """
    if not isinstance(raw, str):
        raise TypeError(f"alphabet must be a str, got {type(raw).__name__}")

    length = len(raw)
    if length == 0:
        return Err(EmptyAlphabet())
    if length > MAX_ALPHABET_SIZE:
        return Err(OversizedAlphabet(length))

    seen: Dict[str, int] = {}
    for index, char in enumerate(raw):
        first_index = seen.setdefault(char, index)
        if first_index != index:
            return Err(DuplicateCharacter(char, first_index, index))

    return Ok(tuple(seen))
