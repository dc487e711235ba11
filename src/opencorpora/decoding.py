"""Decoding of raw attribute values and text content."""

from __future__ import annotations

from opencorpora.exceptions import EncodingError, FormatError
from opencorpora.models import RestrictionKind, RestrictionScope

RawText = bytes | str


def decode_text(raw: RawText) -> str:
    """Decode raw bytes as strict UTF-8.

    Strings coming from a tokenizer that already decoded them are checked
    to be representable in UTF-8 (no lone surrogates).
    """
    if isinstance(raw, str):
        try:
            raw.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(f"Text is not valid UTF-8: {e}") from e
        return raw
    try:
        return bytes(raw).decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(f"Text is not valid UTF-8: {e}") from e


def decode_int(raw: RawText) -> int:
    """Decode a non-negative decimal integer literal."""
    s = decode_text(raw)
    # int() alone would accept signs and underscores
    if not (s.isascii() and s.isdigit()):
        raise FormatError(f"Invalid integer: {s!r}")
    return int(s)


def parse_restriction_kind(raw: RawText) -> RestrictionKind:
    s = decode_text(raw)
    try:
        return RestrictionKind(s)
    except ValueError:
        raise FormatError(f"Invalid restriction kind: {s!r}") from None


def parse_restriction_scope(raw: RawText) -> RestrictionScope:
    s = decode_text(raw)
    try:
        return RestrictionScope(s)
    except ValueError:
        raise FormatError(f"Invalid restriction scope: {s!r}") from None
