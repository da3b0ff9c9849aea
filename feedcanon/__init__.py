"""
feedcanon: normalize RSS / Atom (and their namespace extensions) into one
canonical model, and generate JSON Feed documents.
"""

from feedcanon.models.common import ParseMode, ParseOptions
from feedcanon.services.detect import (
    detect_atom,
    detect_format,
    detect_json_feed,
    detect_rdf,
    detect_rss,
)
from feedcanon.services.json_feed import generate_feed, generate_item
from feedcanon.services.parse import FeedParseError, parse_atom, parse_feed, parse_rss

__all__ = [
    "FeedParseError",
    "ParseMode",
    "ParseOptions",
    "detect_atom",
    "detect_format",
    "detect_json_feed",
    "detect_rdf",
    "detect_rss",
    "generate_feed",
    "generate_item",
    "parse_atom",
    "parse_feed",
    "parse_rss",
]
