"""Tests for the domain models."""

import dataclasses

import pytest

from opencorpora import (
    DEFAULT_LINK_KIND,
    Form,
    Grammeme,
    Lemma,
    Link,
    RestrictionKind,
    RestrictionScope,
)


class TestModels:
    def test_entities_are_frozen(self):
        noun = Grammeme(name="NOUN")
        with pytest.raises(dataclasses.FrozenInstanceError):
            noun.name = "VERB"

    def test_value_equality(self):
        noun = Grammeme(name="NOUN", alias="СУЩ")
        assert Form("кот", (noun,)) == Form("кот", (Grammeme(name="NOUN", alias="СУЩ"),))
        assert Form("кот", (noun, noun)) != Form("кот", (noun,))

    def test_link_defaults_to_zero_kind(self):
        lemma = Lemma(id=1, revision=1, word="кот")
        link = Link(id=1, source=lemma, target=lemma)
        assert link.kind is DEFAULT_LINK_KIND
        assert (DEFAULT_LINK_KIND.id, DEFAULT_LINK_KIND.name) == (0, "")

    def test_enum_values(self):
        assert RestrictionKind("obligatory") is RestrictionKind.OBLIGATORY
        assert RestrictionScope.FORM.value == "form"
