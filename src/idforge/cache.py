"""Cache of validated alphabets.

Validation results are stored once per raw alphabet string as immutable
records. Inserts are insert-if-absent under a lock; reads hand out a fresh
copy of the record so callers never hold the stored object.
"""

import dataclasses
import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from idforge.alphabet import Alphabet, validate_alphabet
from idforge.errors import Err, Ok, Result
from idforge.sampler import mask_for, step_for

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_SIZE = 21


@dataclass(frozen=True)
class CachedAlphabet:
    """Validated alphabet with its sampling parameters.

    Attributes:
        characters: Unique characters in declaration order
        mask: Bitmask covering every index of ``characters``
        step: Random bytes per round for an id of DEFAULT_SIZE characters
    """

    characters: Alphabet
    mask: int
    step: int

    def __len__(self) -> int:
        return len(self.characters)

    def step_for_size(self, size: int) -> int:
        """Return the batch size for an id of ``size`` characters."""
        if size == DEFAULT_SIZE:
            return self.step
        return step_for(len(self.characters), self.mask, size)


class AlphabetCache:
    """Thread-safe, append-only mapping from raw alphabet to CachedAlphabet."""

    def __init__(self, max_entries: Optional[int] = None):
        """Initialize an empty cache.

        Args:
            max_entries: Stop inserting once this many alphabets are stored
                         (default: unbounded)
        """
        self.max_entries = max_entries
        self._entries: Dict[str, CachedAlphabet] = {}
        self._lock = threading.Lock()

    def get_or_validate(self, raw: str) -> Result[CachedAlphabet]:
        """Return the cached record for ``raw``, validating it on first use.

        Validation errors are returned unchanged and never cached.

        Args:
            raw: Alphabet string as supplied by the caller

        Returns:
            Ok(copy of the cached record) or the validation Err
        """
        with self._lock:
            entry = self._entries.get(raw)
        if entry is not None:
            return Ok(dataclasses.replace(entry))

        validated = validate_alphabet(raw)
        if isinstance(validated, Err):
            return validated

        characters = validated.value
        mask = mask_for(len(characters))
        built = CachedAlphabet(
            characters=characters,
            mask=mask,
            step=step_for(len(characters), mask, DEFAULT_SIZE),
        )

        with self._lock:
            entry = self._entries.get(raw)
            if entry is None:
                if self.max_entries is None or len(self._entries) < self.max_entries:
                    self._entries[raw] = built
                    logger.debug(
                        f"Alphabet cached: {len(characters)} characters, mask={mask:#x}"
                    )
                else:
                    logger.debug("Alphabet cache full, returning uncached entry")
                entry = built

        return Ok(dataclasses.replace(entry))

    def clear(self) -> None:
        """Drop every cached alphabet."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, raw: str) -> bool:
        with self._lock:
            return raw in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_default_cache = AlphabetCache()


def default_cache() -> AlphabetCache:
    """Return the process-wide alphabet cache."""
    return _default_cache
