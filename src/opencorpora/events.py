"""Structural markup events and the lxml-backed event source."""

from __future__ import annotations

import bz2
import contextlib
import gzip
import io
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any

from lxml import etree

from opencorpora.config import DEFAULT_CHUNK_SIZE
from opencorpora.decoding import RawText
from opencorpora.exceptions import EncodingError, MarkupError

logger = logging.getLogger(__name__)

Attributes = tuple[tuple[str, RawText], ...]


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StartTag:
    name: str
    attributes: Attributes = ()


@dataclass(frozen=True, slots=True)
class EmptyTag:
    """A self-closing element; equivalent to a StartTag directly followed by its EndTag."""

    name: str
    attributes: Attributes = ()


@dataclass(frozen=True, slots=True)
class EndTag:
    name: str


@dataclass(frozen=True, slots=True)
class Text:
    content: RawText


Event = StartTag | EmptyTag | EndTag | Text


# ---------------------------------------------------------------------------
# lxml adapter
# ---------------------------------------------------------------------------

class _EventCollector:
    """Parser target that queues events instead of building a tree.

    Adjacent character data is merged into a single Text event, emitted
    when the next tag starts or ends.
    """

    def __init__(self) -> None:
        self.depth = 0
        self._events: list[Event] = []
        self._text: list[str] = []

    def start(self, tag: str, attrib: Any, nsmap: Any = None) -> None:
        self._flush_text()
        self._events.append(StartTag(tag, tuple(attrib.items())))
        self.depth += 1

    def end(self, tag: str) -> None:
        self._flush_text()
        self._events.append(EndTag(tag))
        self.depth -= 1

    def data(self, data: str) -> None:
        self._text.append(data)

    def close(self) -> None:
        self._flush_text()

    def drain(self) -> list[Event]:
        events, self._events = self._events, []
        return events

    def _flush_text(self) -> None:
        if self._text:
            self._events.append(Text("".join(self._text)))
            self._text.clear()


def open_source(path: str | Path) -> IO[bytes]:
    """Open a dictionary file for binary reading, decompressing .bz2 and .gz."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix == ".bz2":
        return bz2.open(path, "rb")
    if path.suffix == ".gz":
        return gzip.open(path, "rb")
    return open(path, "rb")


def _stream(source: str | Path | bytes | IO[bytes]) -> contextlib.AbstractContextManager[IO[bytes]]:
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(source)
    if isinstance(source, (str, Path)):
        return open_source(source)
    # Caller-owned stream: not closed here
    return contextlib.nullcontext(source)


# libxml2 reports undecodable input as one of these, depending on its version
_ENCODING_ERROR_MARKERS = ("Invalid bytes in character encoding", "not proper UTF-8")


def _is_encoding_error(e: etree.XMLSyntaxError) -> bool:
    if e.code == etree.ErrorTypes.ERR_INVALID_ENCODING:
        return True
    return any(marker in str(e) for marker in _ENCODING_ERROR_MARKERS)


def _syntax_error(e: etree.XMLSyntaxError) -> EncodingError | MarkupError:
    if _is_encoding_error(e):
        return EncodingError(f"Input is not valid UTF-8: {e}")
    return MarkupError(f"Malformed XML: {e}")


def iter_events(
    source: str | Path | bytes | IO[bytes],
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[Event]:
    """Lazily yield markup events from an XML byte source.

    The source is read ``chunk_size`` bytes at a time and always decoded as
    UTF-8, whatever the XML declaration says. Undecodable bytes raise
    EncodingError and malformed markup raises MarkupError, each once the
    events before it have been yielded. If the input ends while elements
    are still open, the sequence just stops.
    """
    collector = _EventCollector()
    parser = etree.XMLParser(
        target=collector,
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
    )

    with _stream(source) as stream:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            try:
                parser.feed(chunk)
            except etree.XMLSyntaxError as e:
                yield from collector.drain()
                raise _syntax_error(e) from e
            yield from collector.drain()

    open_elements = collector.depth
    try:
        parser.close()
    except etree.XMLSyntaxError as e:
        # Events produced while closing come from a half-read tag
        collector.drain()
        truncated = open_elements > 0 or collector.depth > 0
        if truncated and not _is_encoding_error(e):
            logger.debug("XML input ended with %d open elements: %s", open_elements, e)
            return
        raise _syntax_error(e) from e
    yield from collector.drain()
