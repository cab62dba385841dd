"""
Unit tests for decoding and decode error reporting
"""

import pytest

from mnemonicode.context.dictionary import DEFAULT_DICTIONARY
from mnemonicode.context.encoding import (
    abbreviate, decode, decode_groups, encode, encode_with_format, split_groups, split_words,
)
from mnemonicode.errors import (
    AmbiguousWord, DecodeError, MalformedGrouping, UnknownWord, ValueOutOfRange,
)

REFERENCE = bytes([101, 2, 240, 6, 108, 11, 20, 97])
REFERENCE_TEXT = "digital-apollo-aroma--rival-artist-rebel"


class TestDecode:
    """Test decoding valid text"""

    def test_known_vectors(self, known_vector):
        data, text = known_vector
        assert decode(text) == data

    def test_reference_vector(self):
        assert list(decode(REFERENCE_TEXT)) == [101, 2, 240, 6, 108, 11, 20, 97]

    def test_empty_text(self):
        assert decode("") == b""
        assert decode("  \n") == b""
        assert decode("", strict=False) == b""

    def test_roundtrip_all_lengths(self, random_payloads):
        for data in random_payloads:
            assert decode(encode(data)) == data

    def test_roundtrip_boundary_values(self):
        for length in range(1, 9):
            for fill in (0x00, 0x7F, 0x80, 0xFF):
                data = bytes([fill]) * length
                assert decode(encode(data)) == data

    def test_trailing_newline_and_case(self):
        assert decode("Digital-APOLLO-aroma--rival-artist-rebel\n") == REFERENCE

    def test_prefix_tolerance(self, random_payloads):
        for data in random_payloads:
            assert decode(abbreviate(encode(data))) == data

    def test_four_letter_prefixes(self):
        assert decode("digi-apol-arom--riva-arti-rebe") == REFERENCE

    def test_decode_groups_returns_tokens(self):
        groups, data = decode_groups(REFERENCE_TEXT)
        assert groups == [["digital", "apollo", "aroma"], ["rival", "artist", "rebel"]]
        assert data == REFERENCE


class TestLenientDecode:
    """Test decoding free-form text"""

    def test_any_separators(self):
        assert decode("digital apollo aroma\nrival, artist; rebel", strict=False) == REFERENCE

    def test_group_boundaries_ignored(self):
        assert decode("digital-apollo--aroma-rival-artist--rebel", strict=False) == REFERENCE

    def test_custom_template_roundtrip(self, random_payloads):
        for data in random_payloads:
            text = encode_with_format(data, "<x x x>\n")
            assert decode(text, strict=False) == data

    def test_split_words(self):
        assert split_words(" a b  c\td ") == [["a", "b", "c"], ["d"]]

    def test_remainder_word_must_be_last(self):
        with pytest.raises(MalformedGrouping):
            decode("consul quiet fax digital", strict=False)

    def test_strict_rejects_spaces(self):
        with pytest.raises(DecodeError):
            decode("digital apollo aroma")


class TestMalformedGrouping:
    """Test structural errors in wire-format text"""

    @pytest.mark.parametrize("text", [
        "digital-apollo-aroma--",           # dangling group separator
        "digital-apollo-aroma-",            # dangling word separator
        "-digital",                         # leading separator
        "digital-apollo-aroma---rival",     # tripled separator
        "digital-apollo-aroma----rival",    # empty group
    ])
    def test_dangling_separators(self, text):
        with pytest.raises(MalformedGrouping):
            decode(text)

    def test_short_inner_group(self):
        with pytest.raises(MalformedGrouping) as exc_info:
            decode("digital-apollo--rival-artist-rebel")
        assert exc_info.value.group == 0

    def test_long_final_group(self):
        with pytest.raises(MalformedGrouping) as exc_info:
            decode("digital-apollo-aroma-rival")
        assert exc_info.value.group == 0

    def test_long_inner_group(self):
        with pytest.raises(MalformedGrouping):
            decode("digital-apollo-aroma-rival--artist")

    def test_remainder_word_in_inner_group(self):
        with pytest.raises(MalformedGrouping) as exc_info:
            decode("consul-quiet-fax--rival-artist-rebel")
        assert exc_info.value.group == 0
        assert exc_info.value.position == 2

    @pytest.mark.parametrize("text", ["fax", "consul-fax", "fax-quiet-consul"])
    def test_remainder_word_out_of_place(self, text):
        with pytest.raises(MalformedGrouping):
            decode(text)

    def test_split_groups(self):
        assert split_groups("a-b-c--d") == [["a", "b", "c"], ["d"]]
        assert split_groups("") == []


class TestWordErrors:
    """Test unknown and ambiguous words"""

    def test_unknown_word_position(self):
        with pytest.raises(UnknownWord) as exc_info:
            decode("digital-apollo-aroma--rival-xyzzy-rebel")

        err = exc_info.value
        assert err.token == "xyzzy"
        assert (err.group, err.position) == (1, 1)
        assert "group 1, word 1" in str(err)

    def test_ambiguous_word_position(self):
        with pytest.raises(AmbiguousWord) as exc_info:
            decode("acti-apollo-aroma")

        err = exc_info.value
        assert (err.group, err.position) == (0, 0)
        assert "active" in str(err)

    def test_unknown_word_lenient(self):
        with pytest.raises(UnknownWord) as exc_info:
            decode("digital apollo aroma rival xyzzy", strict=False)
        assert (exc_info.value.group, exc_info.value.position) == (1, 1)

    def test_no_partial_output(self):
        # decoding is all or nothing
        with pytest.raises(DecodeError):
            decode(REFERENCE_TEXT + "--xyzzy")


class TestValueOutOfRange:
    """Test range checks on recomposed chunk values"""

    def test_full_chunk_above_32_bits(self):
        # 1625 * 1626^2 > 2^32 - 1
        with pytest.raises(ValueOutOfRange) as exc_info:
            decode("academy-academy-amen")
        assert exc_info.value.group == 0

    def test_full_chunk_at_32_bit_limit(self):
        assert decode("natural-analyze-verbal") == b"\xff\xff\xff\xff"

    def test_full_chunk_just_above_limit(self):
        # 490 + 807 * 1626 + 1624 * 1626^2 == 2^32
        with pytest.raises(ValueOutOfRange):
            decode("%s-analyze-verbal" % DEFAULT_DICTIONARY.word_at(490))

    def test_one_word_tail_above_8_bits(self):
        with pytest.raises(ValueOutOfRange):
            decode("digital-apollo-aroma--gallery")

    def test_two_word_tail_above_16_bits(self):
        with pytest.raises(ValueOutOfRange):
            decode("academy-arctic")

    def test_three_byte_tail_above_24_bits(self):
        with pytest.raises(ValueOutOfRange):
            decode("amen-amen-yes")

    def test_inner_group_range_checked(self):
        with pytest.raises(ValueOutOfRange) as exc_info:
            decode("digital-apollo-aroma--academy-academy-amen--rival")
        assert exc_info.value.group == 1
