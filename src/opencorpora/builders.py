"""Mutable builders for entities under construction.

A fresh builder is created when an element opens and is turned into a
frozen model by ``build()`` when it closes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from opencorpora.index import ReferenceIndex
from opencorpora.models import (
    Form,
    Grammeme,
    Lemma,
    LinkKind,
    Restriction,
    RestrictionKind,
    RestrictionScope,
)


@dataclass
class GrammemeBuilder:
    parent: str | None = None
    name: str = ""
    alias: str = ""
    description: str = ""

    def build(self) -> Grammeme:
        return Grammeme(
            name=self.name, parent=self.parent,
            alias=self.alias, description=self.description,
        )


@dataclass
class RestrictionBuilder:
    """Restriction sides collect their text and resolve it on close."""

    kind: RestrictionKind = RestrictionKind.MAYBE
    auto: int = 0
    left_scope: RestrictionScope = RestrictionScope.LEMMA
    left_text: str = ""
    left_grammeme: Grammeme | None = None
    right_scope: RestrictionScope = RestrictionScope.LEMMA
    right_text: str = ""
    right_grammeme: Grammeme | None = None

    def resolve_left(self, index: ReferenceIndex) -> None:
        self.left_grammeme = index.grammeme(self.left_text) if self.left_text else None

    def resolve_right(self, index: ReferenceIndex) -> None:
        self.right_grammeme = index.grammeme(self.right_text) if self.right_text else None

    def build(self) -> Restriction:
        return Restriction(
            kind=self.kind,
            auto=self.auto,
            left_scope=self.left_scope,
            left_grammeme=self.left_grammeme,
            right_scope=self.right_scope,
            right_grammeme=self.right_grammeme,
        )


@dataclass
class FormBuilder:
    word: str = ""
    grammemes: list[Grammeme] = field(default_factory=list)

    def build(self) -> Form:
        return Form(word=self.word, grammemes=tuple(self.grammemes))


@dataclass
class LemmaBuilder:
    id: int = 0
    revision: int = 0
    word: str = ""
    grammemes: list[Grammeme] = field(default_factory=list)
    forms: list[Form] = field(default_factory=list)

    def build(self) -> Lemma:
        return Lemma(
            id=self.id,
            revision=self.revision,
            word=self.word,
            grammemes=tuple(self.grammemes),
            forms=tuple(self.forms),
        )


@dataclass
class LinkKindBuilder:
    id: int = 0
    name: str = ""

    def build(self) -> LinkKind:
        return LinkKind(id=self.id, name=self.name)
