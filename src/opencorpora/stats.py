"""Summary statistics over a parsed dictionary."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from opencorpora.models import Dictionary


@dataclass(frozen=True, slots=True)
class DictionaryStats:
    """Entity counts and size extremes of one dictionary."""

    version: str
    revision: int
    grammeme_count: int
    restriction_count: int
    lemma_count: int
    form_count: int
    max_forms_in_lemma: int
    max_grammemes_in_form: int
    link_kind_count: int
    link_count: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def compute_stats(dictionary: Dictionary) -> DictionaryStats:
    """Count entities; a form's grammemes include those of its lemma."""
    form_count = 0
    max_forms = 0
    max_grammemes = 0
    for lemma in dictionary.lemmata:
        form_count += len(lemma.forms)
        max_forms = max(max_forms, len(lemma.forms))
        for form in lemma.forms:
            max_grammemes = max(max_grammemes, len(lemma.grammemes) + len(form.grammemes))

    return DictionaryStats(
        version=dictionary.version,
        revision=dictionary.revision,
        grammeme_count=len(dictionary.grammemes),
        restriction_count=len(dictionary.restrictions),
        lemma_count=len(dictionary.lemmata),
        form_count=form_count,
        max_forms_in_lemma=max_forms,
        max_grammemes_in_form=max_grammemes,
        link_kind_count=len(dictionary.link_kinds),
        link_count=len(dictionary.links),
    )
