"""Random byte sources used by the identifier generator.

A random source is anything that can produce N bytes on demand and may fail
doing so. The default source wraps the operating system CSPRNG and is shared
by the whole process; access to it is serialized with a lock.
"""

import logging
import random
import secrets
import threading
from typing import Callable, Optional, Protocol

from idforge.errors import Err, Ok, RandomGenerationError, Result

# Configure logging
logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Capability to produce random bytes, fallibly."""

    def fill(self, count: int) -> Result[bytes]:
        """Return exactly ``count`` random bytes or a RandomGenerationError."""
        ...


class CallableRandomSource:
    """Adapts a plain ``fn(count) -> bytes`` into a RandomSource.

    The wrapped function is called under a lock, so a single instance can be
    shared between threads even when the function itself keeps state.
    Exceptions raised by the function and short or malformed output are turned
    into RandomGenerationError results; nothing is padded or zero-filled.
    """

    def __init__(self, generate_bytes: Callable[[int], bytes], name: str = "custom"):
        """Initialize the source.

        Args:
            generate_bytes: Function returning ``count`` random bytes
            name: Label used in log messages and error reasons
        """
        self.generate_bytes = generate_bytes
        self.name = name
        self._lock = threading.Lock()

    def fill(self, count: int) -> Result[bytes]:
        """Draw ``count`` bytes from the wrapped function.

        Args:
            count: Number of bytes requested (must be positive)

        Returns:
            Ok(bytes) of length ``count``, or Err(RandomGenerationError)
        """
        if count <= 0:
            return Err(RandomGenerationError(f"byte count must be positive, got {count}"))

        try:
            with self._lock:
                data = self.generate_bytes(count)
        except Exception as e:
            logger.error(f"Random source '{self.name}' failed: {e}")
            return Err(RandomGenerationError(f"{self.name} source raised {e!r}"))

        if not isinstance(data, (bytes, bytearray)):
            logger.error(
                f"Random source '{self.name}' returned {type(data).__name__}, expected bytes"
            )
            return Err(
                RandomGenerationError(
                    f"{self.name} source returned {type(data).__name__}, expected bytes"
                )
            )

        if len(data) != count:
            logger.error(
                f"Random source '{self.name}' returned {len(data)} bytes, expected {count}"
            )
            return Err(
                RandomGenerationError(
                    f"{self.name} source returned {len(data)} of {count} bytes"
                )
            )

        return Ok(bytes(data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class SecureRandomSource(CallableRandomSource):
    """Cryptographically strong source backed by ``secrets.token_bytes``."""

    def __init__(self):
        super().__init__(secrets.token_bytes, name="secure")


class SeededRandomSource(CallableRandomSource):
    """Deterministic source for tests and reproducible runs.

    Not suitable for security-sensitive identifiers: the stream is fully
    determined by ``seed``.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)
        super().__init__(self._random.randbytes, name=f"seeded:{seed}")


_default_source: Optional[SecureRandomSource] = None
_default_source_lock = threading.Lock()


def default_random_source() -> SecureRandomSource:
    """Return the process-wide secure random source, creating it on first use."""
    global _default_source
    with _default_source_lock:
        if _default_source is None:
            _default_source = SecureRandomSource()
            logger.debug("Process-wide secure random source initialized")
        return _default_source
