"""Error taxonomy and result values for identifier generation.

Every failure the generator can hit is one of the variants below. Core
operations return them inside an ``Err`` instead of raising, so each call site
decides what to do. The variants still subclass ``Exception`` so that outer
layers (HTTP handlers, strict helpers) can raise them with ``unwrap()``.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")

MAX_ALPHABET_SIZE = 256
MAX_ID_SIZE = 1_000_000


class NanoidError(Exception):
    """Base class for all identifier generation failures."""

    def guidance(self) -> str:
        return super().__str__()

    def __str__(self) -> str:
        return self.guidance()


@dataclass(unsafe_hash=True)
class EmptyAlphabet(NanoidError):
    """The alphabet contains no characters."""

    def guidance(self) -> str:
        return "Alphabet is empty: provide at least 1 character"


@dataclass(unsafe_hash=True)
class OversizedAlphabet(NanoidError):
    """The alphabet has more characters than a single byte can index."""

    length: int

    def guidance(self) -> str:
        return (
            f"Alphabet has {self.length} characters: "
            f"use at most {MAX_ALPHABET_SIZE} unique characters"
        )


@dataclass(unsafe_hash=True)
class DuplicateCharacter(NanoidError):
    """A character appears more than once in the alphabet.

    Attributes:
        char: The repeated character
        first_index: Position of its first occurrence (code points)
        duplicate_index: Position of the repeat (code points)
    """

    char: str
    first_index: int
    duplicate_index: int

    def guidance(self) -> str:
        return (
            f"Alphabet repeats {self.char!r} at positions {self.first_index} "
            f"and {self.duplicate_index}: every character must be unique, "
            "duplicates skew the distribution"
        )


@dataclass(unsafe_hash=True)
class SizeTooSmall(NanoidError):
    """Requested identifier length is zero or negative."""

    size: int

    def guidance(self) -> str:
        return f"Invalid size {self.size}: size must be at least 1"


@dataclass(unsafe_hash=True)
class SizeTooLarge(NanoidError):
    """Requested identifier length exceeds the allowed ceiling."""

    size: int
    limit: int = MAX_ID_SIZE

    def guidance(self) -> str:
        return f"Invalid size {self.size}: size must be at most {self.limit}"


@dataclass(unsafe_hash=True)
class RandomGenerationError(NanoidError):
    """The random source failed to produce the requested bytes."""

    reason: str

    def guidance(self) -> str:
        return (
            f"Random source failed: {self.reason}. "
            "Check the entropy source and retry if appropriate"
        )


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed result carrying a NanoidError."""

    error: NanoidError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err]
