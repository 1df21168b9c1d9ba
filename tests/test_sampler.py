"""Tests for bitmask and batch size computation."""

import pytest

from idforge.sampler import mask_for, step_for


class TestMaskFor:
    """Unit tests for mask_for."""

    @pytest.mark.parametrize(
        "alphabet_len, expected",
        [(1, 0), (2, 1), (3, 3), (4, 3), (5, 7), (10, 15), (64, 63), (65, 127), (256, 255)],
    )
    def test_known_masks(self, alphabet_len, expected):
        assert mask_for(alphabet_len) == expected

    def test_mask_covers_every_length_without_modulo_bias(self):
        """For every size the mask covers all indices and is below 2 * len."""
        for alphabet_len in range(1, 257):
            mask = mask_for(alphabet_len)
            assert mask >= alphabet_len - 1
            assert mask < 2 * alphabet_len
            # 2**k - 1 form
            assert mask & (mask + 1) == 0

    def test_every_index_gets_equal_share_of_byte_values(self):
        """Accepted bytes map onto each index exactly equally often."""
        for alphabet_len in range(1, 257):
            mask = mask_for(alphabet_len)
            counts = [0] * alphabet_len
            for byte in range(256):
                index = byte & mask
                if index < alphabet_len:
                    counts[index] += 1
            assert len(set(counts)) == 1

    @pytest.mark.parametrize("alphabet_len", [0, -1, 257])
    def test_out_of_range_raises(self, alphabet_len):
        with pytest.raises(ValueError):
            mask_for(alphabet_len)


class TestStepFor:
    """Unit tests for step_for."""

    def test_classic_heuristic(self):
        # ceil(1.6 * 63 * 21 / 64) = ceil(33.075)
        assert step_for(64, 63, 21) == 34

    def test_exact_integer_ceiling(self):
        # 1.6 * 15 * 10 / 10 = 24 exactly, no rounding up
        assert step_for(10, 15, 10) == 24

    def test_single_character_alphabet_needs_id_len_bytes(self):
        assert step_for(1, 0, 7) == 7

    def test_never_below_one(self):
        assert step_for(256, 255, 1) >= 1
        assert step_for(2, 1, 1) == 1
