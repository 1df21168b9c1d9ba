"""Property-based and unit tests for alphabet validation."""

import pytest
from hypothesis import given, settings, strategies as st

from idforge.alphabet import validate_alphabet
from idforge.errors import (
    DuplicateCharacter,
    EmptyAlphabet,
    Err,
    Ok,
    OversizedAlphabet,
)

unique_alphabets = st.lists(
    st.characters(), min_size=1, max_size=256, unique=True
).map("".join)


class TestValidateAlphabet:
    """Unit tests for validate_alphabet."""

    def test_valid_alphabet_keeps_declaration_order(self):
        assert validate_alphabet("cab") == Ok(("c", "a", "b"))

    def test_empty_alphabet(self):
        assert validate_alphabet("") == Err(EmptyAlphabet())

    def test_duplicate_reports_first_repeat(self):
        assert validate_alphabet("ABCA") == Err(DuplicateCharacter("A", 0, 3))

    def test_duplicate_found_in_single_pass_order(self):
        # "b" repeats before "a" does
        assert validate_alphabet("abba") == Err(DuplicateCharacter("b", 1, 2))

    def test_oversized_alphabet(self):
        raw = "".join(chr(0x100 + i) for i in range(257))
        assert validate_alphabet(raw) == Err(OversizedAlphabet(257))

    def test_exactly_256_characters_is_valid(self):
        raw = "".join(chr(0x100 + i) for i in range(256))
        result = validate_alphabet(raw)
        assert isinstance(result, Ok)
        assert len(result.value) == 256

    def test_emoji_counted_by_code_point(self):
        result = validate_alphabet("😀😁😂🤣😃😄")
        assert result == Ok(("😀", "😁", "😂", "🤣", "😃", "😄"))

    def test_duplicate_emoji_positions_are_code_points(self):
        assert validate_alphabet("😀a😀") == Err(DuplicateCharacter("😀", 0, 2))

    def test_256_emoji_not_rejected_by_byte_length(self):
        raw = "".join(chr(0x1F300 + i) for i in range(256))
        assert len(raw.encode("utf-8")) > 256
        assert isinstance(validate_alphabet(raw), Ok)

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError):
            validate_alphabet(["a", "b"])

    @settings(max_examples=100)
    @given(unique_alphabets)
    def test_property_unique_alphabets_validate(self, raw):
        """Any string of unique code points validates to its characters."""
        result = validate_alphabet(raw)
        assert result == Ok(tuple(raw))

    @settings(max_examples=100)
    @given(unique_alphabets, st.data())
    def test_property_duplicate_is_detected(self, raw, data):
        """Appending any existing character yields DuplicateCharacter."""
        if len(raw) == 256:
            raw = raw[:-1]
        index = data.draw(st.integers(min_value=0, max_value=len(raw) - 1))
        result = validate_alphabet(raw + raw[index])
        assert result == Err(DuplicateCharacter(raw[index], index, len(raw)))
