"""Tests for attribute and text decoding."""

import pytest

from opencorpora import EncodingError, FormatError, RestrictionKind, RestrictionScope
from opencorpora.decoding import (
    decode_int,
    decode_text,
    parse_restriction_kind,
    parse_restriction_scope,
)


class TestDecodeText:
    def test_utf8_bytes(self):
        assert decode_text("СУЩ".encode("utf-8")) == "СУЩ"

    def test_str_passes_through(self):
        assert decode_text("ёж") == "ёж"

    def test_empty(self):
        assert decode_text(b"") == ""

    def test_invalid_bytes(self):
        with pytest.raises(EncodingError):
            decode_text(b"\xd0")

    def test_lone_surrogate(self):
        with pytest.raises(EncodingError):
            decode_text("\ud800")


class TestDecodeInt:
    @pytest.mark.parametrize("raw, expected", [
        (b"0", 0),
        (b"42", 42),
        ("007", 7),
        ("403605", 403605),
    ])
    def test_valid(self, raw, expected):
        assert decode_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "-1", "+1", " 1", "1_000", "1.5", "abc", "٣"])
    def test_invalid(self, raw):
        with pytest.raises(FormatError):
            decode_int(raw)

    def test_invalid_utf8_is_encoding_error(self):
        with pytest.raises(EncodingError):
            decode_int(b"\xff")


class TestVocabularies:
    def test_restriction_kinds(self):
        assert parse_restriction_kind(b"maybe") is RestrictionKind.MAYBE
        assert parse_restriction_kind("obligatory") is RestrictionKind.OBLIGATORY
        assert parse_restriction_kind("forbidden") is RestrictionKind.FORBIDDEN

    def test_restriction_scopes(self):
        assert parse_restriction_scope(b"lemma") is RestrictionScope.LEMMA
        assert parse_restriction_scope("form") is RestrictionScope.FORM

    @pytest.mark.parametrize("raw", ["Maybe", "", "required"])
    def test_unknown_kind(self, raw):
        with pytest.raises(FormatError, match="restriction kind"):
            parse_restriction_kind(raw)

    @pytest.mark.parametrize("raw", ["Lemma", "", "word"])
    def test_unknown_scope(self, raw):
        with pytest.raises(FormatError, match="restriction scope"):
            parse_restriction_scope(raw)
