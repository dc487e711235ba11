"""Domain model dataclasses and enums for opencorpora."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from opencorpora.config import ParserConfig

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RestrictionKind(str, Enum):
    """Severity of a grammeme restriction."""

    MAYBE = "maybe"
    OBLIGATORY = "obligatory"
    FORBIDDEN = "forbidden"


class RestrictionScope(str, Enum):
    """Which entity one side of a restriction applies to."""

    LEMMA = "lemma"
    FORM = "form"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Grammeme:
    """A grammatical category (part of speech, case, number, ...).

    ``parent`` is kept as a plain name and is never resolved.
    """

    name: str
    parent: str | None = None
    alias: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class Restriction:
    """A rule constraining which grammemes may co-occur."""

    kind: RestrictionKind
    auto: int
    left_scope: RestrictionScope
    left_grammeme: Grammeme | None
    right_scope: RestrictionScope
    right_grammeme: Grammeme | None


@dataclass(frozen=True, slots=True)
class Form:
    """One inflected surface form of a lemma."""

    word: str
    grammemes: tuple[Grammeme, ...] = ()


@dataclass(frozen=True, slots=True)
class Lemma:
    """A lexeme: headword, its own grammemes and its forms."""

    id: int
    revision: int
    word: str
    grammemes: tuple[Grammeme, ...] = ()
    forms: tuple[Form, ...] = ()


@dataclass(frozen=True, slots=True)
class LinkKind:
    """A type of relation between two lemmata."""

    id: int
    name: str


# Zero value assigned to a link whose type id matches no declared link kind.
DEFAULT_LINK_KIND = LinkKind(id=0, name="")


@dataclass(frozen=True, slots=True)
class Link:
    """A typed, directed relation between two lemmata."""

    id: int
    source: Lemma
    target: Lemma
    kind: LinkKind = DEFAULT_LINK_KIND


@dataclass(frozen=True, slots=True)
class Dictionary:
    """The whole dictionary; owns every entity of one document."""

    version: str
    revision: int
    grammemes: tuple[Grammeme, ...] = ()
    restrictions: tuple[Restriction, ...] = ()
    lemmata: tuple[Lemma, ...] = ()
    link_kinds: tuple[LinkKind, ...] = ()
    links: tuple[Link, ...] = ()

    @classmethod
    def from_xml(
        cls,
        source: str | Path | bytes | IO[bytes],
        *,
        config: ParserConfig | None = None,
    ) -> Dictionary:
        """Read a dictionary from an XML file, bytes, or binary stream."""
        from opencorpora.parser import read_dictionary

        return read_dictionary(source, config=config)
