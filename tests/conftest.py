"""Shared test fixtures for opencorpora."""

from pathlib import Path

import pytest

from opencorpora import read_dictionary

FIXTURES = Path(__file__).parent / "fixtures"

_GRAMMEMES = (
    "<grammemes>"
    "<grammeme parent=''><name>NOUN</name><alias>СУЩ</alias><description>noun</description></grammeme>"
    "<grammeme parent=''><name>sing</name><alias>ед</alias><description>singular</description></grammeme>"
    "</grammemes>"
)


@pytest.fixture
def minimal_xml():
    """The smallest complete document: one grammeme, one lemma."""
    return (FIXTURES / "minimal.xml").read_bytes()


@pytest.fixture
def sample_dict():
    """The sample dictionary parsed from tests/fixtures/sample.xml."""
    return read_dictionary(FIXTURES / "sample.xml")


@pytest.fixture
def build_xml():
    """Factory producing a document from section bodies.

    Grammemes NOUN and sing are declared unless ``grammemes`` is given.
    """

    def _build(
        *,
        grammemes=_GRAMMEMES,
        restrictions="",
        lemmata="",
        link_types="",
        links="",
    ):
        body = (
            "<dictionary version='0.92' revision='7'>"
            f"{grammemes}"
            f"<restrictions>{restrictions}</restrictions>"
            f"<lemmata>{lemmata}</lemmata>"
            f"<link_types>{link_types}</link_types>"
            f"<links>{links}</links>"
            "</dictionary>"
        )
        return body.encode("utf-8")

    return _build
