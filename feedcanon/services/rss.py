"""
RSS normalizer (RSS 0.90 through 2.0).

Mirrors the Atom normalizer: one extractor per entity, each returning the
canonical model or None. Embedded atom:* elements are extracted by the Atom
extractors in namespace mode; dc:, sy:, content: and itunes: payloads are
attached to the channel/item they appear on.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from feedcanon.models.common import ParseOptions
from feedcanon.models.rss import Category, Cloud, Enclosure, Feed, Guid, Image, Item, Source, TextInput
from feedcanon.services import atom
from feedcanon.services.accessors import (
    ATTRIBUTE_PREFIX,
    EntityGate,
    as_boolean,
    as_number,
    as_sequence_of,
    as_string,
    attribute,
    child,
    date_of,
    is_node,
    number_of,
    passes_gate,
    text_of,
    text_value,
)
from feedcanon.services.namespaces.content import retrieve_content
from feedcanon.services.namespaces.dublincore import retrieve_dublincore
from feedcanon.services.namespaces.itunes import retrieve_itunes_feed, retrieve_itunes_item
from feedcanon.services.namespaces.syndication import retrieve_syndication

ATOM_PREFIX = "atom:"

CATEGORY_GATE = EntityGate(required=("name",))
ENCLOSURE_GATE = EntityGate(required=("url",))
GUID_GATE = EntityGate(required=("value",))
SOURCE_GATE = EntityGate(required=("title",))
IMAGE_GATE = EntityGate(required=("url",))
TEXT_INPUT_GATE = EntityGate(required=("name", "link"))
CLOUD_GATE = EntityGate(required=("domain",))
# RSS 2.0: "All elements of an item are optional, however at least one of
# title or description must be present."
ITEM_GATE = EntityGate(any_of=("title", "description"))
FEED_GATE = EntityGate(any_of=("title", "link", "description"))

# Containers whose items/image/textinput may sit next to the channel (RSS 0.90, RDF).
CHANNEL_SIBLINGS = ("item", "image", "textinput")


def _resolve(options: Optional[ParseOptions]) -> ParseOptions:
    return options if options is not None else ParseOptions()


def parse_category(value: Any, options: Optional[ParseOptions] = None) -> Optional[Category]:
    if not is_node(value):
        return None

    options = _resolve(options)
    category = {
        "name": as_string(text_value(value), options.mode),
        "domain": attribute(value, "domain", options.mode),
    }

    if passes_gate(category, CATEGORY_GATE, options):
        return Category(**category)
    return None


def parse_enclosure(value: Any, options: Optional[ParseOptions] = None) -> Optional[Enclosure]:
    if not is_node(value):
        return None

    options = _resolve(options)
    enclosure = {
        "url": attribute(value, "url", options.mode),
        "length": as_number(value.get("@length"), options.mode),
        "type": attribute(value, "type", options.mode),
    }

    if passes_gate(enclosure, ENCLOSURE_GATE, options):
        return Enclosure(**enclosure)
    return None


def parse_guid(value: Any, options: Optional[ParseOptions] = None) -> Optional[Guid]:
    if not is_node(value):
        return None

    options = _resolve(options)
    guid = {
        "value": as_string(text_value(value), options.mode),
        "is_perma_link": as_boolean(value.get("@ispermalink"), options.mode),
    }

    if passes_gate(guid, GUID_GATE, options):
        return Guid(**guid)
    return None


def parse_source(value: Any, options: Optional[ParseOptions] = None) -> Optional[Source]:
    if not is_node(value):
        return None

    options = _resolve(options)
    source = {
        "title": as_string(text_value(value), options.mode),
        "url": attribute(value, "url", options.mode),
    }

    if passes_gate(source, SOURCE_GATE, options):
        return Source(**source)
    return None


def parse_image(value: Any, options: Optional[ParseOptions] = None) -> Optional[Image]:
    if not is_node(value):
        return None

    options = _resolve(options)
    image = {
        "url": text_of(value, "url", options),
        "title": text_of(value, "title", options),
        "link": text_of(value, "link", options),
        "description": text_of(value, "description", options),
        "height": number_of(value, "height", options),
        "width": number_of(value, "width", options),
    }

    if passes_gate(image, IMAGE_GATE, options):
        return Image(**image)
    return None


def parse_text_input(value: Any, options: Optional[ParseOptions] = None) -> Optional[TextInput]:
    if not is_node(value):
        return None

    options = _resolve(options)
    text_input = {
        "title": text_of(value, "title", options),
        "description": text_of(value, "description", options),
        "name": text_of(value, "name", options),
        "link": text_of(value, "link", options),
    }

    if passes_gate(text_input, TEXT_INPUT_GATE, options):
        return TextInput(**text_input)
    return None


def parse_cloud(value: Any, options: Optional[ParseOptions] = None) -> Optional[Cloud]:
    if not is_node(value):
        return None

    options = _resolve(options)
    mode = options.mode
    cloud = {
        "domain": attribute(value, "domain", mode),
        "port": as_number(value.get("@port"), mode),
        "path": attribute(value, "path", mode),
        "register_procedure": attribute(value, "registerprocedure", mode),
        "protocol": attribute(value, "protocol", mode),
    }

    if passes_gate(cloud, CLOUD_GATE, options):
        return Cloud(**cloud)
    return None


def parse_skip_hours(value: Any, options: Optional[ParseOptions] = None):
    options = _resolve(options)
    return as_sequence_of(
        child(value, "hour", options), lambda hour: as_number(text_value(hour), options.mode)
    )


def parse_skip_days(value: Any, options: Optional[ParseOptions] = None):
    options = _resolve(options)
    return as_sequence_of(
        child(value, "day", options), lambda day: as_string(text_value(day), options.mode)
    )


def parse_item(value: Any, options: Optional[ParseOptions] = None) -> Optional[Item]:
    if not is_node(value):
        return None

    options = _resolve(options)
    mode = options.mode
    item: Dict[str, Any] = {
        "title": text_of(value, "title", options),
        "link": text_of(value, "link", options),
        "description": text_of(value, "description", options),
        "authors": as_sequence_of(
            child(value, "author", options), lambda author: as_string(text_value(author), mode)
        ),
        "categories": as_sequence_of(
            child(value, "category", options), lambda category: parse_category(category, options)
        ),
        "comments": text_of(value, "comments", options),
        "enclosures": as_sequence_of(
            child(value, "enclosure", options),
            lambda enclosure: parse_enclosure(enclosure, options),
        ),
        "guid": parse_guid(child(value, "guid", options), options),
        "pub_date": date_of(value, "pubdate", options),
        "source": parse_source(child(value, "source", options), options),
    }
    if not options.in_namespace:
        item["atom"] = atom.parse_entry(value, options.with_namespace(ATOM_PREFIX))
        item["content"] = retrieve_content(value, mode)
        item["dc"] = retrieve_dublincore(value, mode)
        item["itunes"] = retrieve_itunes_item(value, mode)

    if passes_gate(item, ITEM_GATE, options):
        return Item(**item)
    return None


def parse_feed(value: Any, options: Optional[ParseOptions] = None) -> Optional[Feed]:
    if not is_node(value):
        return None

    options = _resolve(options)
    mode = options.mode
    feed: Dict[str, Any] = {
        "title": text_of(value, "title", options),
        "link": text_of(value, "link", options),
        "description": text_of(value, "description", options),
        "language": text_of(value, "language", options),
        "copyright": text_of(value, "copyright", options),
        "managing_editor": text_of(value, "managingeditor", options),
        "web_master": text_of(value, "webmaster", options),
        "pub_date": date_of(value, "pubdate", options),
        "last_build_date": date_of(value, "lastbuilddate", options),
        "categories": as_sequence_of(
            child(value, "category", options), lambda category: parse_category(category, options)
        ),
        "generator": text_of(value, "generator", options),
        "docs": text_of(value, "docs", options),
        "cloud": parse_cloud(child(value, "cloud", options), options),
        "ttl": number_of(value, "ttl", options),
        "image": parse_image(child(value, "image", options), options),
        "rating": text_of(value, "rating", options),
        "text_input": parse_text_input(child(value, "textinput", options), options),
        "skip_hours": parse_skip_hours(child(value, "skiphours", options), options),
        "skip_days": parse_skip_days(child(value, "skipdays", options), options),
        "items": as_sequence_of(
            child(value, "item", options), lambda item: parse_item(item, options)
        ),
    }
    if not options.in_namespace:
        feed["atom"] = atom.parse_feed(value, options.with_namespace(ATOM_PREFIX))
        feed["dc"] = retrieve_dublincore(value, mode)
        feed["sy"] = retrieve_syndication(value, mode)
        feed["itunes"] = retrieve_itunes_feed(value, mode)

    if passes_gate(feed, FEED_GATE, options):
        return Feed(**feed)
    return None


def _first_node(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _is_reference(value: Any) -> bool:
    # RSS 1.0 channels point at their image/textinput: <image rdf:resource="..."/>.
    if isinstance(value, (list, tuple)):
        return all(_is_reference(entry) for entry in value)
    return is_node(value) and all(key.startswith(ATTRIBUTE_PREFIX) for key in value)


def _merge_channel_siblings(container: Any, channel: Any) -> Any:
    """
    Return the channel with item/image/textinput taken from its container
    when the channel lacks them or only holds rdf:resource references.
    """
    if not is_node(container) or not is_node(channel):
        return channel
    missing = {
        key: container[key]
        for key in CHANNEL_SIBLINGS
        if key in container and (key not in channel or _is_reference(channel[key]))
    }
    if not missing:
        return channel
    return {**channel, **missing}


def retrieve_feed(value: Any, options: Optional[ParseOptions] = None) -> Optional[Feed]:
    """
    Root entry point.

    Accepts the document tree with a top-level "rss" (wrapping "channel"),
    "rdf:rdf" (RSS 0.90/1.0) or bare "channel" key.
    """
    if not is_node(value):
        return None

    container = _first_node(value.get("rss"))
    if not is_node(container):
        container = _first_node(value.get("rdf:rdf"))
    if not is_node(container):
        container = value

    channel = _first_node(container.get("channel"))
    if not is_node(channel):
        return None
    return parse_feed(_merge_channel_siblings(container, channel), options)
