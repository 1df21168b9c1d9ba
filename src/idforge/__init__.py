"""Short, collision-resistant identifiers from configurable alphabets."""

from idforge.alphabet import Alphabet, validate_alphabet
from idforge.cache import AlphabetCache, CachedAlphabet
from idforge.compare import constant_time_eq
from idforge.errors import (
    DuplicateCharacter,
    EmptyAlphabet,
    Err,
    NanoidError,
    Ok,
    OversizedAlphabet,
    RandomGenerationError,
    Result,
    SizeTooLarge,
    SizeTooSmall,
)
from idforge.id_generator import IDGenerator, generate, nanoid
from idforge.random_source import (
    CallableRandomSource,
    RandomSource,
    SecureRandomSource,
    SeededRandomSource,
    default_random_source,
)

__all__ = [
    "Alphabet",
    "AlphabetCache",
    "CachedAlphabet",
    "CallableRandomSource",
    "DuplicateCharacter",
    "EmptyAlphabet",
    "Err",
    "IDGenerator",
    "NanoidError",
    "Ok",
    "OversizedAlphabet",
    "RandomGenerationError",
    "RandomSource",
    "Result",
    "SecureRandomSource",
    "SeededRandomSource",
    "SizeTooLarge",
    "SizeTooSmall",
    "constant_time_eq",
    "default_random_source",
    "generate",
    "nanoid",
    "validate_alphabet",
]
