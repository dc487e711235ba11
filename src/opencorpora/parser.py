"""Streaming state machine that turns markup events into a Dictionary."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path
from typing import IO

from opencorpora.builders import (
    FormBuilder,
    GrammemeBuilder,
    LemmaBuilder,
    LinkKindBuilder,
    RestrictionBuilder,
)
from opencorpora.config import ParserConfig
from opencorpora.decoding import (
    RawText,
    decode_int,
    decode_text,
    parse_restriction_kind,
    parse_restriction_scope,
)
from opencorpora.events import (
    Attributes,
    EmptyTag,
    EndTag,
    Event,
    StartTag,
    Text,
    iter_events,
)
from opencorpora.exceptions import (
    MissingAttributeError,
    StructureError,
    TruncatedDocumentError,
)
from opencorpora.index import ReferenceIndex
from opencorpora.models import (
    DEFAULT_LINK_KIND,
    Dictionary,
    Grammeme,
    Lemma,
    Link,
    LinkKind,
    Restriction,
)

logger = logging.getLogger(__name__)


class ParsingState(str, Enum):
    """Position in the dictionary schema.

    The schema is a fixed tree at most five elements deep and every state
    has exactly one parent, so a single state value stands in for a stack.
    """

    START = "start"
    DICTIONARY = "dictionary"
    GRAMMEMES = "grammemes"
    GRAMMEME = "grammeme"
    GRAMMEME_NAME = "grammeme/name"
    GRAMMEME_ALIAS = "grammeme/alias"
    GRAMMEME_DESCRIPTION = "grammeme/description"
    RESTRICTIONS = "restrictions"
    RESTRICTION = "restr"
    RESTRICTION_LEFT = "restr/left"
    RESTRICTION_RIGHT = "restr/right"
    LEMMATA = "lemmata"
    LEMMA = "lemma"
    LEMMA_L = "lemma/l"
    LEMMA_F = "lemma/f"
    LEMMA_G = "lemma/l/g"
    FORM_G = "lemma/f/g"
    LINK_TYPES = "link_types"
    LINK_TYPE = "link_types/type"
    LINKS = "links"
    LINK = "links/link"
    END = "end"


_S = ParsingState

# (current state, opening tag) -> next state
_OPENING: dict[tuple[ParsingState, str], ParsingState] = {
    (_S.START, "dictionary"): _S.DICTIONARY,
    (_S.DICTIONARY, "grammemes"): _S.GRAMMEMES,
    (_S.GRAMMEMES, "grammeme"): _S.GRAMMEME,
    (_S.GRAMMEME, "name"): _S.GRAMMEME_NAME,
    (_S.GRAMMEME, "alias"): _S.GRAMMEME_ALIAS,
    (_S.GRAMMEME, "description"): _S.GRAMMEME_DESCRIPTION,
    (_S.DICTIONARY, "restrictions"): _S.RESTRICTIONS,
    (_S.RESTRICTIONS, "restr"): _S.RESTRICTION,
    (_S.RESTRICTION, "left"): _S.RESTRICTION_LEFT,
    (_S.RESTRICTION, "right"): _S.RESTRICTION_RIGHT,
    (_S.DICTIONARY, "lemmata"): _S.LEMMATA,
    (_S.LEMMATA, "lemma"): _S.LEMMA,
    (_S.LEMMA, "l"): _S.LEMMA_L,
    (_S.LEMMA, "f"): _S.LEMMA_F,
    (_S.LEMMA_L, "g"): _S.LEMMA_G,
    (_S.LEMMA_F, "g"): _S.FORM_G,
    (_S.DICTIONARY, "link_types"): _S.LINK_TYPES,
    (_S.LINK_TYPES, "type"): _S.LINK_TYPE,
    (_S.DICTIONARY, "links"): _S.LINKS,
    (_S.LINKS, "link"): _S.LINK,
}

# (current state, closing tag) -> next state
_CLOSING: dict[tuple[ParsingState, str], ParsingState] = {
    (child, tag): parent for (parent, tag), child in _OPENING.items()
}
_CLOSING[(_S.DICTIONARY, "dictionary")] = _S.END

_Handler = Callable[[str, Attributes], None]


class DictionaryParser:
    """Single-use parser: feed it one document's events, then close()."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()
        self._index = ReferenceIndex(
            on_duplicate=self._config.on_duplicate,
            strict_link_kinds=self._config.strict_link_kinds,
        )
        self._state = ParsingState.START

        self._version = ""
        self._revision = 0
        self._grammemes: list[Grammeme] = []
        self._restrictions: list[Restriction] = []
        self._lemmata: list[Lemma] = []
        self._link_kinds: list[LinkKind] = []
        self._links: list[Link] = []

        self._grammeme = GrammemeBuilder()
        self._restriction = RestrictionBuilder()
        self._lemma = LemmaBuilder()
        self._form = FormBuilder()
        self._link_kind = LinkKindBuilder()

        self._openers: dict[ParsingState, _Handler] = {
            _S.DICTIONARY: self._open_dictionary,
            _S.GRAMMEMES: self._open_section,
            _S.RESTRICTIONS: self._open_section,
            _S.LEMMATA: self._open_section,
            _S.LINK_TYPES: self._open_section,
            _S.LINKS: self._open_section,
            _S.GRAMMEME: self._open_grammeme,
            _S.RESTRICTION: self._open_restriction,
            _S.RESTRICTION_LEFT: self._open_restriction_left,
            _S.RESTRICTION_RIGHT: self._open_restriction_right,
            _S.LEMMA: self._open_lemma,
            _S.LEMMA_L: self._open_lemma_l,
            _S.LEMMA_F: self._open_lemma_f,
            _S.LEMMA_G: self._open_lemma_g,
            _S.FORM_G: self._open_form_g,
            _S.LINK_TYPE: self._open_link_type,
            _S.LINK: self._open_link,
        }
        # Keyed by the state being left
        self._closers: dict[ParsingState, Callable[[], None]] = {
            _S.GRAMMEME: self._close_grammeme,
            _S.RESTRICTION_LEFT: self._close_restriction_left,
            _S.RESTRICTION_RIGHT: self._close_restriction_right,
            _S.RESTRICTION: self._close_restriction,
            _S.LEMMA_F: self._close_lemma_f,
            _S.LEMMA: self._close_lemma,
            _S.LINK_TYPE: self._close_link_type,
        }
        self._text_handlers: dict[ParsingState, Callable[[str], None]] = {
            _S.GRAMMEME_NAME: self._text_grammeme_name,
            _S.GRAMMEME_ALIAS: self._text_grammeme_alias,
            _S.GRAMMEME_DESCRIPTION: self._text_grammeme_description,
            _S.RESTRICTION_LEFT: self._text_restriction_left,
            _S.RESTRICTION_RIGHT: self._text_restriction_right,
            _S.LINK_TYPE: self._text_link_type,
        }

    @property
    def state(self) -> ParsingState:
        return self._state

    # ------------------------------------------------------------------
    # Event dispatch
    # ------------------------------------------------------------------

    def feed(self, event: Event) -> None:
        """Apply one markup event, raising on the first error."""
        if isinstance(event, StartTag):
            self._start(event.name, event.attributes)
        elif isinstance(event, EmptyTag):
            self._start(event.name, event.attributes)
            self._end(event.name)
        elif isinstance(event, EndTag):
            self._end(event.name)
        elif isinstance(event, Text):
            self._text(event.content)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

    def close(self) -> Dictionary:
        """Finish the parse and return the dictionary."""
        if self._state is not ParsingState.END:
            raise TruncatedDocumentError(self._state.value)

        dictionary = Dictionary(
            version=self._version,
            revision=self._revision,
            grammemes=tuple(self._grammemes),
            restrictions=tuple(self._restrictions),
            lemmata=tuple(self._lemmata),
            link_kinds=tuple(self._link_kinds),
            links=tuple(self._links),
        )
        logger.info(
            "Read dictionary %s (revision %d): %d grammemes, %d restrictions, "
            "%d lemmata, %d link types, %d links",
            dictionary.version, dictionary.revision,
            len(dictionary.grammemes), len(dictionary.restrictions),
            len(dictionary.lemmata), len(dictionary.link_kinds),
            len(dictionary.links),
        )
        return dictionary

    def _start(self, tag: str, attributes: Attributes) -> None:
        next_state = _OPENING.get((self._state, tag))
        if next_state is None:
            raise StructureError(tag, self._state.value)
        opener = self._openers.get(next_state)
        if opener is not None:
            opener(tag, attributes)
        self._state = next_state

    def _end(self, tag: str) -> None:
        next_state = _CLOSING.get((self._state, tag))
        if next_state is None:
            raise StructureError(tag, self._state.value, closing=True)
        closer = self._closers.get(self._state)
        if closer is not None:
            closer()
        self._state = next_state

    def _text(self, content: RawText) -> None:
        handler = self._text_handlers.get(self._state)
        # Whitespace between structural tags lands here
        if handler is None:
            return
        handler(decode_text(content))

    # ------------------------------------------------------------------
    # Opening tags
    # ------------------------------------------------------------------

    def _open_dictionary(self, tag: str, attributes: Attributes) -> None:
        for name, value in attributes:
            if name == "version":
                self._version = decode_text(value)
            elif name == "revision":
                self._revision = decode_int(value)

    def _open_section(self, tag: str, attributes: Attributes) -> None:
        logger.debug("Reading <%s>", tag)

    def _open_grammeme(self, tag: str, attributes: Attributes) -> None:
        self._grammeme = GrammemeBuilder()
        for name, value in attributes:
            if name == "parent":
                parent = decode_text(value)
                self._grammeme.parent = parent or None

    def _open_restriction(self, tag: str, attributes: Attributes) -> None:
        self._restriction = RestrictionBuilder()
        for name, value in attributes:
            if name == "type":
                self._restriction.kind = parse_restriction_kind(value)
            elif name == "auto":
                self._restriction.auto = decode_int(value)

    def _open_restriction_left(self, tag: str, attributes: Attributes) -> None:
        self._restriction.left_scope = parse_restriction_scope(
            _required(tag, attributes, "type")
        )

    def _open_restriction_right(self, tag: str, attributes: Attributes) -> None:
        self._restriction.right_scope = parse_restriction_scope(
            _required(tag, attributes, "type")
        )

    def _open_lemma(self, tag: str, attributes: Attributes) -> None:
        self._lemma = LemmaBuilder()
        for name, value in attributes:
            if name == "id":
                self._lemma.id = decode_int(value)
            elif name == "rev":
                self._lemma.revision = decode_int(value)

    def _open_lemma_l(self, tag: str, attributes: Attributes) -> None:
        self._lemma.grammemes = []
        for name, value in attributes:
            if name == "t":
                self._lemma.word = decode_text(value)

    def _open_lemma_f(self, tag: str, attributes: Attributes) -> None:
        self._form = FormBuilder()
        for name, value in attributes:
            if name == "t":
                self._form.word = decode_text(value)

    def _open_lemma_g(self, tag: str, attributes: Attributes) -> None:
        grammeme_name = decode_text(_required(tag, attributes, "v"))
        self._lemma.grammemes.append(self._index.grammeme(grammeme_name))

    def _open_form_g(self, tag: str, attributes: Attributes) -> None:
        grammeme_name = decode_text(_required(tag, attributes, "v"))
        self._form.grammemes.append(self._index.grammeme(grammeme_name))

    def _open_link_type(self, tag: str, attributes: Attributes) -> None:
        self._link_kind = LinkKindBuilder()
        for name, value in attributes:
            if name == "id":
                self._link_kind.id = decode_int(value)

    def _open_link(self, tag: str, attributes: Attributes) -> None:
        link_id = 0
        source = target = None
        kind_id = None
        for name, value in attributes:
            if name == "id":
                link_id = decode_int(value)
            elif name == "from":
                source = self._index.lemma(decode_int(value))
            elif name == "to":
                target = self._index.lemma(decode_int(value))
            elif name == "type":
                kind_id = decode_int(value)

        if source is None:
            raise MissingAttributeError(tag, "from")
        if target is None:
            raise MissingAttributeError(tag, "to")

        kind = DEFAULT_LINK_KIND
        if kind_id is not None:
            kind = self._index.link_kind(kind_id, self._link_kinds)
        self._links.append(Link(id=link_id, source=source, target=target, kind=kind))

    # ------------------------------------------------------------------
    # Closing tags
    # ------------------------------------------------------------------

    def _close_grammeme(self) -> None:
        grammeme = self._grammeme.build()
        self._index.add_grammeme(grammeme)
        self._grammemes.append(grammeme)

    def _close_restriction_left(self) -> None:
        self._restriction.resolve_left(self._index)

    def _close_restriction_right(self) -> None:
        self._restriction.resolve_right(self._index)

    def _close_restriction(self) -> None:
        self._restrictions.append(self._restriction.build())

    def _close_lemma_f(self) -> None:
        self._lemma.forms.append(self._form.build())

    def _close_lemma(self) -> None:
        lemma = self._lemma.build()
        self._index.add_lemma(lemma)
        self._lemmata.append(lemma)

    def _close_link_type(self) -> None:
        self._link_kinds.append(self._link_kind.build())

    # ------------------------------------------------------------------
    # Text content
    # ------------------------------------------------------------------

    def _text_grammeme_name(self, text: str) -> None:
        self._grammeme.name += text

    def _text_grammeme_alias(self, text: str) -> None:
        self._grammeme.alias += text

    def _text_grammeme_description(self, text: str) -> None:
        self._grammeme.description += text

    def _text_restriction_left(self, text: str) -> None:
        self._restriction.left_text += text

    def _text_restriction_right(self, text: str) -> None:
        self._restriction.right_text += text

    def _text_link_type(self, text: str) -> None:
        self._link_kind.name += text


def _required(tag: str, attributes: Attributes, name: str) -> RawText:
    for attr_name, value in attributes:
        if attr_name == name:
            return value
    raise MissingAttributeError(tag, name)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def parse_events(
    events: Iterable[Event],
    *,
    config: ParserConfig | None = None,
) -> Dictionary:
    """Build a Dictionary from a sequence of markup events."""
    parser = DictionaryParser(config)
    for event in events:
        parser.feed(event)
    return parser.close()


def read_dictionary(
    source: str | Path | bytes | IO[bytes],
    *,
    config: ParserConfig | None = None,
) -> Dictionary:
    """Read a dictionary from an XML file path, raw bytes, or a binary stream.

    Paths ending in .bz2 or .gz are decompressed on the fly.
    """
    config = config or ParserConfig()
    with contextlib.closing(iter_events(source, chunk_size=config.chunk_size)) as events:
        return parse_events(events, config=config)
