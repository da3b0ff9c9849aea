"""
Parse façade: raw text -> canonical feed.

Wires detection, the XML document builder and the dialect root entry points
together. The normalizers themselves only ever return a feed or None; this
layer decides that None is an error for a caller who asked for a document.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from lxml import etree

from feedcanon.core.config import get_settings
from feedcanon.core.logging import get_logger
from feedcanon.models.atom import Feed as AtomFeed
from feedcanon.models.common import ParseOptions
from feedcanon.models.rss import Feed as RssFeed
from feedcanon.services import atom, rss
from feedcanon.services.detect import detect_format
from feedcanon.services.document import build_document

logger = get_logger().bind(module="feedcanon.parse")

ParsedFeed = Union[AtomFeed, RssFeed]


class FeedParseError(Exception):
    """
    Raised when a document cannot be turned into a canonical feed:
    unsupported format, malformed XML, or a root entity that fails its
    presence gate.
    """

    def __init__(self, message: str, raw: Any = None):
        super().__init__(message)
        self.raw = raw


def default_options() -> ParseOptions:
    """Top-level options from Settings (FEEDCANON_PARSE_MODE)."""
    return ParseOptions(mode=get_settings().PARSE_MODE)


def _build_tree(text: Union[str, bytes], dialect: str) -> Dict[str, Any]:
    try:
        return build_document(text)
    except etree.XMLSyntaxError as exc:
        logger.warning("feed_invalid_xml", dialect=dialect, error=str(exc))
        raise FeedParseError("invalid_xml", raw=text) from exc


def _decode(text: Union[str, bytes]) -> str:
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return text


def _finish(feed: Optional[ParsedFeed], dialect: str, text: Union[str, bytes]) -> ParsedFeed:
    if feed is None:
        logger.warning("feed_rejected", dialect=dialect)
        raise FeedParseError("feed_rejected", raw=text)
    logger.info("feed_parsed", dialect=dialect)
    return feed


def parse_atom(text: Union[str, bytes], options: Optional[ParseOptions] = None) -> AtomFeed:
    """
    Parse an Atom document rooted at an unprefixed <feed>.

    A prefixed <atom:feed> root is detected as Atom but not normalized: its
    children carry the "atom:" prefix the Atom extractors reserve for Atom
    elements embedded in other formats. It is reported as unsupported_format.
    """
    tree = _build_tree(text, "atom")
    if "feed" not in tree and "atom:feed" in tree:
        logger.warning("feed_unsupported_format", dialect="atom", root="atom:feed")
        raise FeedParseError("unsupported_format", raw=text)
    feed = atom.retrieve_feed(tree, options or default_options())
    return _finish(feed, "atom", text)


def parse_rss(text: Union[str, bytes], options: Optional[ParseOptions] = None) -> RssFeed:
    tree = _build_tree(text, "rss")
    feed = rss.retrieve_feed(tree, options or default_options())
    return _finish(feed, "rss", text)


def parse_feed(
    text: Union[str, bytes],
    options: Optional[ParseOptions] = None,
) -> Tuple[str, ParsedFeed]:
    """
    Detect the dialect and parse.

    Returns:
        ('atom', AtomFeed) or ('rss', RssFeed); RDF documents are read by the
        RSS normalizer.
    Raises:
        FeedParseError: unsupported_format / invalid_xml / feed_rejected.
    """
    dialect = detect_format(_decode(text))
    logger.debug("feed_detected", dialect=dialect)

    if dialect == "atom":
        return "atom", parse_atom(text, options)
    if dialect in {"rss", "rdf"}:
        return "rss", parse_rss(text, options)

    logger.warning("feed_unsupported_format", dialect=dialect)
    raise FeedParseError("unsupported_format", raw=text)
