"""
Format detection on raw text.

Cheap, stateless heuristics. They are not mutually exclusive; callers that
need a single answer should check them in a fixed order (see parse.py).
"""

from __future__ import annotations

import re
from typing import Any

_ATOM_RE = re.compile(r"<(?:atom:)?feed[\s>]", re.IGNORECASE)
_RSS_RE = re.compile(r"<rss[\s>]", re.IGNORECASE)
_RDF_RE = re.compile(r"<(?:rdf:)?RDF[\s>]", re.IGNORECASE)
_JSON_FEED_RE = re.compile(
    r'"version"\s*:\s*"https?://jsonfeed\.org/version/1(?:\.\d+)?/?"', re.IGNORECASE
)


def detect_atom(value: Any) -> bool:
    return isinstance(value, str) and bool(_ATOM_RE.search(value))


def detect_rss(value: Any) -> bool:
    return isinstance(value, str) and bool(_RSS_RE.search(value))


def detect_rdf(value: Any) -> bool:
    return isinstance(value, str) and bool(_RDF_RE.search(value))


def detect_json_feed(value: Any) -> bool:
    return isinstance(value, str) and bool(_JSON_FEED_RE.search(value))


def detect_format(value: Any) -> str:
    """
    Classify raw text as 'atom', 'rss', 'rdf', 'json' or 'unknown'.

    Atom is checked first: RSS documents routinely embed atom:link, never
    an atom:feed root.
    """
    if detect_atom(value):
        return "atom"
    if detect_rss(value):
        return "rss"
    if detect_rdf(value):
        return "rdf"
    if detect_json_feed(value):
        return "json"
    return "unknown"
