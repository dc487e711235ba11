"""Tests for the lxml-backed event source."""

import bz2

import pytest
from lxml import etree

from opencorpora import EncodingError, EndTag, MarkupError, StartTag, Text, iter_events, open_source


def _structural(events):
    return [e for e in events if not isinstance(e, Text) or e.content.strip()]


class TestIterEvents:
    def test_event_sequence(self):
        xml = b"<dictionary version='1'><grammemes><grammeme parent='POST'/></grammemes></dictionary>"
        assert list(iter_events(xml)) == [
            StartTag("dictionary", (("version", "1"),)),
            StartTag("grammemes"),
            StartTag("grammeme", (("parent", "POST"),)),
            EndTag("grammeme"),
            EndTag("grammemes"),
            EndTag("dictionary"),
        ]

    def test_attribute_order_is_kept(self):
        xml = b"<link to='2' from='1' id='3' type='4'/>"
        start = next(iter(iter_events(xml)))
        assert [name for name, _ in start.attributes] == ["to", "from", "id", "type"]

    def test_text_is_coalesced_across_chunks(self):
        xml = "<name>длинное название</name>".encode("utf-8")
        events = list(iter_events(xml, chunk_size=3))
        texts = [e for e in events if isinstance(e, Text)]
        assert texts == [Text("длинное название")]

    def test_entities_are_merged_into_text(self):
        events = list(iter_events(b"<alias>a &amp; b</alias>"))
        assert Text("a & b") in events
        assert len([e for e in events if isinstance(e, Text)]) == 1

    def test_whitespace_between_tags(self):
        events = list(iter_events(b"<a>\n  <b/>\n</a>"))
        assert Text("\n  ") in events
        assert _structural(events) == [StartTag("a"), StartTag("b"), EndTag("b"), EndTag("a")]

    def test_events_before_error_are_yielded(self):
        xml = b"<dictionary><grammemes><grammeme parent=></grammeme></grammemes></dictionary>"
        seen = []
        with pytest.raises(MarkupError) as exc_info:
            for event in iter_events(xml):
                seen.append(event)
        assert seen[:2] == [StartTag("dictionary"), StartTag("grammemes")]
        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)

    def test_unclosed_elements_end_the_stream(self):
        events = list(iter_events(b"<dictionary><grammemes>"))
        assert events == [StartTag("dictionary"), StartTag("grammemes")]

    def test_half_read_tag_is_dropped(self):
        events = list(iter_events(b"<dictionary><grammemes><gramm"))
        assert events == [StartTag("dictionary"), StartTag("grammemes")]

    def test_half_read_tag_split_across_chunks(self):
        events = list(iter_events(b"<dictionary><grammemes><grammeme parent='PO", chunk_size=4))
        assert _structural(events) == [StartTag("dictionary"), StartTag("grammemes")]

    def test_invalid_utf8_is_an_encoding_error(self):
        with pytest.raises(EncodingError) as exc_info:
            list(iter_events(b"<dictionary><alias>\xff</alias></dictionary>"))
        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)


class TestOpenSource:
    def test_plain_file(self, tmp_path):
        path = tmp_path / "dict.xml"
        path.write_bytes(b"<dictionary/>")
        with open_source(path) as f:
            assert f.read() == b"<dictionary/>"

    def test_bz2_file(self, tmp_path):
        path = tmp_path / "dict.xml.bz2"
        path.write_bytes(bz2.compress(b"<dictionary/>"))
        with open_source(str(path)) as f:
            assert f.read() == b"<dictionary/>"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            open_source(tmp_path / "nope.xml")
