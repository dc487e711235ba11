"""Tests for dictionary statistics."""

from opencorpora import Dictionary, compute_stats


class TestComputeStats:
    def test_sample(self, sample_dict):
        stats = compute_stats(sample_dict)
        assert stats.version == "0.92"
        assert stats.revision == 403605
        assert stats.grammeme_count == 11
        assert stats.restriction_count == 3
        assert stats.lemma_count == 3
        assert stats.form_count == 5
        assert stats.max_forms_in_lemma == 2
        # ёж: NOUN anim + sing nomn
        assert stats.max_grammemes_in_form == 4
        assert stats.link_kind_count == 2
        assert stats.link_count == 2

    def test_empty_dictionary(self):
        stats = compute_stats(Dictionary(version="", revision=0))
        assert stats.form_count == 0
        assert stats.max_forms_in_lemma == 0
        assert stats.max_grammemes_in_form == 0

    def test_as_dict(self, minimal_xml):
        stats = compute_stats(Dictionary.from_xml(minimal_xml))
        data = stats.as_dict()
        assert data["lemma_count"] == 1
        assert data["form_count"] == 0
        assert data["version"] == "1"
