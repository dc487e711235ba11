"""Reference index resolving grammeme names and lemma ids during a parse."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from opencorpora.config import DuplicatePolicy
from opencorpora.exceptions import (
    DuplicateEntityError,
    GrammemeNotFoundError,
    LemmaNotFoundError,
    LinkKindNotFoundError,
)
from opencorpora.models import DEFAULT_LINK_KIND, Grammeme, Lemma, LinkKind

logger = logging.getLogger(__name__)


class ReferenceIndex:
    """Name -> Grammeme and id -> Lemma lookups for one parse.

    Entries are added as entities are finalized, so a lookup only sees
    entities declared earlier in the document.
    """

    def __init__(
        self,
        *,
        on_duplicate: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
        strict_link_kinds: bool = False,
    ) -> None:
        self._grammemes: dict[str, Grammeme] = {}
        self._lemmata: dict[int, Lemma] = {}
        self._on_duplicate = on_duplicate
        self._strict_link_kinds = strict_link_kinds

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add_grammeme(self, grammeme: Grammeme) -> None:
        if grammeme.name in self._grammemes:
            self._duplicate("grammeme", grammeme.name)
        self._grammemes[grammeme.name] = grammeme

    def add_lemma(self, lemma: Lemma) -> None:
        if lemma.id in self._lemmata:
            self._duplicate("lemma", lemma.id)
        self._lemmata[lemma.id] = lemma

    def _duplicate(self, entity: str, key: str | int) -> None:
        if self._on_duplicate is DuplicatePolicy.ERROR:
            raise DuplicateEntityError(f"Duplicate {entity}: {key!r}")
        logger.warning("Duplicate %s %r overrides the earlier declaration", entity, key)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def grammeme(self, name: str) -> Grammeme:
        try:
            return self._grammemes[name]
        except KeyError:
            raise GrammemeNotFoundError(name) from None

    def lemma(self, lemma_id: int) -> Lemma:
        try:
            return self._lemmata[lemma_id]
        except KeyError:
            raise LemmaNotFoundError(lemma_id) from None

    def link_kind(self, kind_id: int, kinds: Iterable[LinkKind]) -> LinkKind:
        """Find a link kind by scanning the kinds collected so far.

        The last kind with a matching id wins. Without a match the zero
        link kind is returned, unless the index is strict.
        """
        found = None
        for kind in kinds:
            if kind.id == kind_id:
                found = kind
        if found is not None:
            return found
        if self._strict_link_kinds:
            raise LinkKindNotFoundError(kind_id)
        logger.debug("Link type %d is not declared, using the default kind", kind_id)
        return DEFAULT_LINK_KIND
