"""Identifier generation using bitmask rejection sampling.

This module turns random bytes into identifiers drawn uniformly from an
alphabet. Each byte is masked down to the smallest power-of-two range covering
the alphabet and discarded when it lands outside it, so no character is
favoured over another.
"""

import logging
from typing import List, Optional

from idforge.alphabets import URL_ALPHABET
from idforge.cache import DEFAULT_SIZE, AlphabetCache, CachedAlphabet, default_cache
from idforge.errors import (
    MAX_ID_SIZE,
    Err,
    Ok,
    Result,
    SizeTooLarge,
    SizeTooSmall,
)
from idforge.random_source import RandomSource, default_random_source

# Configure logging
logger = logging.getLogger(__name__)


def check_size(size: int, max_size: int = MAX_ID_SIZE) -> Optional[Err]:
    """Validate a requested identifier length.

    Args:
        size: Requested length
        max_size: Largest length allowed

    Returns:
        None if the size is acceptable, otherwise Err(SizeTooSmall | SizeTooLarge)

    Raises:
        TypeError: If size is not an integer
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an int, got {type(size).__name__}")
    if size <= 0:
        return Err(SizeTooSmall(size))
    if size > max_size:
        return Err(SizeTooLarge(size, max_size))
    return None


def _sample(
    cached: CachedAlphabet, size: int, random_source: RandomSource
) -> Result[str]:
    """Draw ``size`` characters from ``cached`` using rejection sampling."""
    characters = cached.characters
    alphabet_len = len(characters)
    mask = cached.mask
    step = cached.step_for_size(size)

    output: List[str] = []
    while True:
        filled = random_source.fill(step)
        if isinstance(filled, Err):
            return filled

        for byte in filled.value:
            index = byte & mask
            if index < alphabet_len:
                output.append(characters[index])
                if len(output) == size:
                    return Ok("".join(output))


def generate(
    alphabet: str,
    size: int,
    random_source: Optional[RandomSource] = None,
    cache: Optional[AlphabetCache] = None,
    max_size: int = MAX_ID_SIZE,
) -> Result[str]:
    """Generate one identifier.

    Size and alphabet are validated before any random bytes are drawn. Errors
    from the random source abort generation and are returned as-is.

    Args:
        alphabet: Characters to draw from (unique, 1 to 256 code points)
        size: Number of characters in the identifier
        random_source: Byte source; the process-wide secure source if omitted
        cache: Alphabet cache; the process-wide cache if omitted
        max_size: Ceiling for ``size``

    Returns:
        Ok(identifier) or Err(NanoidError)
    """
    size_error = check_size(size, max_size)
    if size_error is not None:
        return size_error

    if cache is None:
        cache = default_cache()
    resolved = cache.get_or_validate(alphabet)
    if isinstance(resolved, Err):
        return resolved

    if random_source is None:
        random_source = default_random_source()
    return _sample(resolved.value, size, random_source)


class IDGenerator:
    """Generates identifiers from a fixed alphabet and length.

    Holds the generator configuration (alphabet, size, random source, cache).
    Use ``IDGenerator.create`` to validate everything up front; the plain
    constructor defers validation to the first ``generate`` call.
    """

    def __init__(
        self,
        alphabet: str = URL_ALPHABET,
        size: int = DEFAULT_SIZE,
        random_source: Optional[RandomSource] = None,
        cache: Optional[AlphabetCache] = None,
        max_size: int = MAX_ID_SIZE,
    ):
        """Initialize ID generator.

        Args:
            alphabet: Characters to draw from
            size: Length of generated IDs (default: 21)
            random_source: Byte source (default: process-wide secure source)
            cache: Alphabet cache (default: process-wide cache)
            max_size: Ceiling for any requested size
        """
        self.alphabet = alphabet
        self.size = size
        self.random_source = (
            random_source if random_source is not None else default_random_source()
        )
        self.cache = cache if cache is not None else default_cache()
        self.max_size = max_size

    @classmethod
    def create(
        cls,
        alphabet: str = URL_ALPHABET,
        size: int = DEFAULT_SIZE,
        random_source: Optional[RandomSource] = None,
        cache: Optional[AlphabetCache] = None,
        max_size: int = MAX_ID_SIZE,
    ) -> "Result[IDGenerator]":
        """Build a generator after validating its alphabet and size.

        Returns:
            Ok(IDGenerator) or Err with the first validation failure
        """
        size_error = check_size(size, max_size)
        if size_error is not None:
            return size_error

        generator = cls(alphabet, size, random_source, cache, max_size)
        resolved = generator.cache.get_or_validate(alphabet)
        if isinstance(resolved, Err):
            return resolved

        logger.debug(
            f"ID generator ready: {len(resolved.value)} characters, size {size}"
        )
        return Ok(generator)

    def generate(self, size: Optional[int] = None) -> Result[str]:
        """Generate an identifier.

        Args:
            size: Override the configured length for this call

        Returns:
            Ok(identifier) or Err(NanoidError)
        """
        return generate(
            self.alphabet,
            self.size if size is None else size,
            random_source=self.random_source,
            cache=self.cache,
            max_size=self.max_size,
        )

    def __call__(self) -> str:
        """Generate an identifier, raising the NanoidError on failure."""
        return self.generate().unwrap()

    def __repr__(self) -> str:
        return (
            f"IDGenerator(alphabet={self.alphabet!r}, size={self.size}, "
            f"random_source={self.random_source!r})"
        )


def nanoid(
    size: int = DEFAULT_SIZE,
    alphabet: str = URL_ALPHABET,
    random_source: Optional[RandomSource] = None,
) -> str:
    """Generate an identifier or raise.

    Strict counterpart of ``generate`` for callers that prefer exceptions.

    Raises:
        NanoidError: On any validation or random source failure
    """
    return generate(alphabet, size, random_source).unwrap()
