"""Custom exception hierarchy for opencorpora."""

from __future__ import annotations


class DictionaryError(Exception):
    """Base exception for all dictionary reading errors."""


class EncodingError(DictionaryError):
    """Attribute or text content is not valid UTF-8."""


class FormatError(DictionaryError):
    """Bad integer literal or unrecognized vocabulary value."""


class MissingAttributeError(FormatError):
    """A required attribute is absent from its element."""

    def __init__(self, tag: str, attribute: str) -> None:
        self.tag = tag
        self.attribute = attribute
        super().__init__(f"Missing required attribute {attribute!r} on <{tag}>")


class StructureError(DictionaryError):
    """A tag occurs where the schema does not allow it."""

    def __init__(self, tag: str, state: str, *, closing: bool = False) -> None:
        self.tag = tag
        self.state = state
        self.closing = closing
        kind = "closing" if closing else "opening"
        super().__init__(f"Unexpected {kind} tag {tag!r} in state {state!r}")


class UnresolvedReferenceError(DictionaryError):
    """A reference names an entity that has not been declared yet."""

    entity = "entity"

    def __init__(self, key: str | int) -> None:
        self.key = key
        super().__init__(f"No such {self.entity}: {key!r}")


class GrammemeNotFoundError(UnresolvedReferenceError):
    """A grammeme name has no prior declaration."""

    entity = "grammeme"


class LemmaNotFoundError(UnresolvedReferenceError):
    """A lemma id has no prior declaration."""

    entity = "lemma"


class LinkKindNotFoundError(UnresolvedReferenceError):
    """A link type id has no prior declaration (strict mode only)."""

    entity = "link type"


class DuplicateEntityError(DictionaryError):
    """Grammeme name or lemma id declared twice."""


class TruncatedDocumentError(DictionaryError):
    """The event stream ended before the root element was closed."""

    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"Document ended in state {state!r}")


class MarkupError(DictionaryError):
    """The underlying XML tokenizer failed (malformed markup)."""


class ConfigError(DictionaryError):
    """Invalid parser configuration."""
