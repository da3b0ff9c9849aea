"""
Atom normalizer (Atom 0.3 and 1.0).

Per-entity extractors turn element-tree nodes into canonical Atom models.
Each extractor returns either the entity or None; a rejected child never
aborts its parent.

The same extractors are reused for Atom elements embedded in other formats
(e.g. atom:link inside RSS) by passing ParseOptions with `as_namespace`.
In that mode gates accept any single field and namespace payloads (dc, sy)
are not attached.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from feedcanon.models.atom import Category, Entry, Feed, Generator, Link, Person, Source
from feedcanon.models.common import ParseMode, ParseOptions
from feedcanon.services.accessors import (
    EntityGate,
    as_number,
    as_sequence_of,
    as_string,
    attribute,
    child,
    date_of,
    first_attribute,
    first_text,
    is_node,
    passes_gate,
    text_of,
    text_value,
)
from feedcanon.services.namespaces.dublincore import retrieve_dublincore
from feedcanon.services.namespaces.syndication import retrieve_syndication

# Fallback chains: Atom 1.0 tag first, then its Atom 0.3 name.
UPDATED_TAGS = ("updated", "modified")
# "created" is not really a publication date, but it is the only date some
# 0.3 entries carry, so it is accepted as the last resort.
PUBLISHED_TAGS = ("published", "issued", "created")
SUBTITLE_TAGS = ("subtitle", "tagline")
PERSON_URI_TAGS = ("uri", "url")
GENERATOR_URI_ATTRIBUTES = ("uri", "url")

LINK_GATE = EntityGate(required=("href",))
PERSON_GATE = EntityGate(required=("name",))
CATEGORY_GATE = EntityGate(required=("term",))
GENERATOR_GATE = EntityGate(required=("text",))
SOURCE_GATE = EntityGate()
# Atom also requires "updated", but it is missing from too many real feeds to
# reject on it.
ENTRY_GATE = EntityGate(required=("id", "title"))
FEED_GATE = EntityGate(required=("id", "title"))

NamespaceRetriever = Callable[[Any, ParseMode], Any]

ENTRY_NAMESPACES: Tuple[Tuple[str, NamespaceRetriever], ...] = (
    ("dc", retrieve_dublincore),
)
FEED_NAMESPACES: Tuple[Tuple[str, NamespaceRetriever], ...] = (
    ("dc", retrieve_dublincore),
    ("sy", retrieve_syndication),
)


def _resolve(options: Optional[ParseOptions]) -> ParseOptions:
    return options if options is not None else ParseOptions()


def _attach_namespaces(
    candidate: Dict[str, Any],
    value: Any,
    options: ParseOptions,
    retrievers: Sequence[Tuple[str, NamespaceRetriever]],
) -> None:
    # Namespace-mode calls never attach payloads; this is what stops a
    # namespace that embeds Atom elements from recursing back into itself.
    if options.in_namespace:
        return
    for key, retrieve in retrievers:
        candidate[key] = retrieve(value, options.mode)


def parse_link(value: Any, options: Optional[ParseOptions] = None) -> Optional[Link]:
    if not is_node(value):
        return None

    options = _resolve(options)
    mode = options.mode
    link = {
        "href": attribute(value, "href", mode),
        "rel": attribute(value, "rel", mode),
        "type": attribute(value, "type", mode),
        "hreflang": attribute(value, "hreflang", mode),
        "title": attribute(value, "title", mode),
        "length": as_number(value.get("@length"), mode),
    }

    if passes_gate(link, LINK_GATE, options):
        return Link(**link)
    return None


def retrieve_person_uri(value: Any, options: Optional[ParseOptions] = None) -> Optional[str]:
    if not is_node(value):
        return None
    return first_text(value, PERSON_URI_TAGS, _resolve(options))


def parse_person(value: Any, options: Optional[ParseOptions] = None) -> Optional[Person]:
    if not is_node(value):
        return None

    options = _resolve(options)
    person = {
        "name": text_of(value, "name", options),
        "uri": retrieve_person_uri(value, options),
        "email": text_of(value, "email", options),
    }

    if passes_gate(person, PERSON_GATE, options):
        return Person(**person)
    return None


def parse_category(value: Any, options: Optional[ParseOptions] = None) -> Optional[Category]:
    if not is_node(value):
        return None

    options = _resolve(options)
    category = {
        "term": attribute(value, "term", options.mode),
        "scheme": attribute(value, "scheme", options.mode),
        "label": attribute(value, "label", options.mode),
    }

    if passes_gate(category, CATEGORY_GATE, options):
        return Category(**category)
    return None


def retrieve_generator_uri(value: Any, options: Optional[ParseOptions] = None) -> Optional[str]:
    if not is_node(value):
        return None
    return first_attribute(value, GENERATOR_URI_ATTRIBUTES, _resolve(options).mode)


def parse_generator(value: Any, options: Optional[ParseOptions] = None) -> Optional[Generator]:
    if not is_node(value):
        return None

    options = _resolve(options)
    generator = {
        "text": as_string(text_value(value), options.mode),
        "uri": retrieve_generator_uri(value, options),
        "version": attribute(value, "version", options.mode),
    }

    if passes_gate(generator, GENERATOR_GATE, options):
        return Generator(**generator)
    return None


def retrieve_published(value: Any, options: Optional[ParseOptions] = None) -> Optional[str]:
    if not is_node(value):
        return None
    return first_text(value, PUBLISHED_TAGS, _resolve(options), reader=date_of)


def retrieve_updated(value: Any, options: Optional[ParseOptions] = None) -> Optional[str]:
    if not is_node(value):
        return None
    return first_text(value, UPDATED_TAGS, _resolve(options), reader=date_of)


def retrieve_subtitle(value: Any, options: Optional[ParseOptions] = None) -> Optional[str]:
    if not is_node(value):
        return None
    return first_text(value, SUBTITLE_TAGS, _resolve(options))


def _people(value: Any, tag: str, options: ParseOptions):
    return as_sequence_of(child(value, tag, options), lambda item: parse_person(item, options))


def _categories(value: Any, options: ParseOptions):
    return as_sequence_of(
        child(value, "category", options), lambda item: parse_category(item, options)
    )


def _links(value: Any, options: ParseOptions):
    return as_sequence_of(child(value, "link", options), lambda item: parse_link(item, options))


def parse_source(value: Any, options: Optional[ParseOptions] = None) -> Optional[Source]:
    if not is_node(value):
        return None

    options = _resolve(options)
    source: Dict[str, Any] = {
        "authors": _people(value, "author", options),
        "categories": _categories(value, options),
        "contributors": _people(value, "contributor", options),
        "generator": parse_generator(child(value, "generator", options), options),
        "icon": text_of(value, "icon", options),
        "id": text_of(value, "id", options),
        "links": _links(value, options),
        "logo": text_of(value, "logo", options),
        "rights": text_of(value, "rights", options),
        "subtitle": retrieve_subtitle(value, options),
        "title": text_of(value, "title", options),
        "updated": retrieve_updated(value, options),
    }
    _attach_namespaces(source, value, options, FEED_NAMESPACES)

    if passes_gate(source, SOURCE_GATE, options):
        return Source(**source)
    return None


def parse_entry(value: Any, options: Optional[ParseOptions] = None) -> Optional[Entry]:
    if not is_node(value):
        return None

    options = _resolve(options)
    entry: Dict[str, Any] = {
        "authors": _people(value, "author", options),
        "categories": _categories(value, options),
        "content": text_of(value, "content", options),
        "contributors": _people(value, "contributor", options),
        "id": text_of(value, "id", options),
        "links": _links(value, options),
        "published": retrieve_published(value, options),
        "rights": text_of(value, "rights", options),
        "source": parse_source(child(value, "source", options), options),
        "summary": text_of(value, "summary", options),
        "title": text_of(value, "title", options),
        "updated": retrieve_updated(value, options),
    }
    _attach_namespaces(entry, value, options, ENTRY_NAMESPACES)

    if passes_gate(entry, ENTRY_GATE, options):
        return Entry(**entry)
    return None


def parse_feed(value: Any, options: Optional[ParseOptions] = None) -> Optional[Feed]:
    if not is_node(value):
        return None

    options = _resolve(options)
    feed: Dict[str, Any] = {
        "authors": _people(value, "author", options),
        "categories": _categories(value, options),
        "contributors": _people(value, "contributor", options),
        "generator": parse_generator(child(value, "generator", options), options),
        "icon": text_of(value, "icon", options),
        "id": text_of(value, "id", options),
        "links": _links(value, options),
        "logo": text_of(value, "logo", options),
        "rights": text_of(value, "rights", options),
        "subtitle": retrieve_subtitle(value, options),
        "title": text_of(value, "title", options),
        "updated": retrieve_updated(value, options),
        "entries": as_sequence_of(
            child(value, "entry", options), lambda item: parse_entry(item, options)
        ),
    }
    _attach_namespaces(feed, value, options, FEED_NAMESPACES)

    if passes_gate(feed, FEED_GATE, options):
        return Feed(**feed)
    return None


def retrieve_feed(value: Any, options: Optional[ParseOptions] = None) -> Optional[Feed]:
    """Root entry point: expects the document tree with a top-level "feed" key."""
    if not is_node(value) or not is_node(value.get("feed")):
        return None
    return parse_feed(value["feed"], options)
