"""Predefined alphabets."""

import string
from typing import Dict, Optional

NUMBERS = string.digits
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
ALPHANUMERIC = string.digits + string.ascii_letters
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

# 64 URL-safe characters, same set and order as the JavaScript nanoid default
URL_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"

# Without 1, l, I, 0, O, o, u, v, 5, S, s, 2, Z
NO_LOOKALIKES = "346789ABCDEFGHJKLMNPQRTUVWXYabcdefghijkmnopqrtwxyz"

# Also without vowels and 3, 4, x, X, V, to avoid accidental words
NO_LOOKALIKES_SAFE = "6789BCDFGHJKLMNPQRTWbcdfghjkmnpqrtwz"

# Ref. https://digitalbazaar.github.io/base58-spec/
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE62 = ALPHANUMERIC

PRESETS: Dict[str, str] = {
    "numbers": NUMBERS,
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "alphanumeric": ALPHANUMERIC,
    "hex": HEX_LOWER,
    "hex-upper": HEX_UPPER,
    "url": URL_ALPHABET,
    "nolookalikes": NO_LOOKALIKES,
    "nolookalikes-safe": NO_LOOKALIKES_SAFE,
    "base58": BASE58,
    "base62": BASE62,
}


def resolve_preset(name: str) -> Optional[str]:
    """Return the alphabet registered under ``name`` (case-insensitive), if any."""
    return PRESETS.get(name.strip().lower())
