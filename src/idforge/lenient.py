"""Forgiving wrappers around the strict generator.

These helpers substitute defaults for missing or invalid parameters instead of
reporting them. They are kept apart from ``idforge.id_generator`` so that
callers who need exact control over length and alphabet never get corrected
input they did not ask for.
"""

import logging
from typing import Optional

from idforge.alphabet import validate_alphabet
from idforge.alphabets import URL_ALPHABET
from idforge.cache import DEFAULT_SIZE
from idforge.errors import MAX_ID_SIZE, Err
from idforge.id_generator import generate
from idforge.random_source import RandomSource

# Configure logging
logger = logging.getLogger(__name__)


def generate_with_defaults(
    alphabet: Optional[str] = None,
    size: Optional[int] = None,
    random_source: Optional[RandomSource] = None,
) -> str:
    """Generate an identifier, falling back to defaults for bad parameters.

    - Missing, empty or non-str alphabet: URL_ALPHABET
    - Missing, non-int, zero or negative size: 21
    - Size above the ceiling: clamped to the ceiling

    Args:
        alphabet: Characters to draw from
        size: Identifier length
        random_source: Byte source (default: process-wide secure source)

    Returns:
        The identifier, or an empty string if generation still fails
    """
    if not alphabet or not isinstance(alphabet, str):
        logger.warning("No alphabet given, using the default URL-safe alphabet")
        alphabet = URL_ALPHABET

    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        logger.warning(f"Invalid size {size}, using default size {DEFAULT_SIZE}")
        size = DEFAULT_SIZE
    elif size > MAX_ID_SIZE:
        logger.warning(f"Size {size} above ceiling, clamping to {MAX_ID_SIZE}")
        size = MAX_ID_SIZE

    result = generate(alphabet, size, random_source)
    if isinstance(result, Err):
        logger.error(f"Identifier generation failed: {result.error}")
        return ""
    return result.value


def is_valid_alphabet(raw: str) -> bool:
    """Return True if ``raw`` is a usable alphabet."""
    if not isinstance(raw, str):
        return False
    return not isinstance(validate_alphabet(raw), Err)
