from __future__ import annotations

from typing import Any, Optional

from feedcanon.models.common import ParseMode, ParseOptions
from feedcanon.models.itunes import ItunesCategory, ItunesFeed, ItunesItem
from feedcanon.services.accessors import (
    as_boolean,
    as_sequence_of,
    attribute,
    boolean_of,
    child,
    is_node,
    number_of,
    require_any,
    text_of,
    text_value,
)
from feedcanon.services.atom import parse_person

PREFIX = "itunes:"


def _options(mode: ParseMode) -> ParseOptions:
    return ParseOptions(mode=mode, as_namespace=PREFIX)


def parse_explicit(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[bool]:
    # Apple accepts "clean" as the pre-2019 spelling of "false".
    raw = text_value(value)
    if isinstance(raw, str) and raw.strip().lower() == "clean":
        return False
    return as_boolean(raw, mode)


def parse_category(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[ItunesCategory]:
    if not is_node(value):
        return None

    category = {
        "text": attribute(value, "text", mode),
        "categories": as_sequence_of(
            value.get(f"{PREFIX}category"), lambda item: parse_category(item, mode)
        ),
    }

    if require_any(category, ["text"]):
        return ItunesCategory(**category)
    return None


def parse_image(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[str]:
    return attribute(value, "href", mode)


def retrieve_itunes_feed(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[ItunesFeed]:
    if not is_node(value):
        return None

    options = _options(mode)
    feed = {
        "author": text_of(value, "author", options),
        "block": boolean_of(value, "block", options),
        "categories": as_sequence_of(
            child(value, "category", options), lambda item: parse_category(item, mode)
        ),
        "complete": boolean_of(value, "complete", options),
        "explicit": parse_explicit(child(value, "explicit", options), mode),
        "image": parse_image(child(value, "image", options), mode),
        "keywords": text_of(value, "keywords", options),
        "new_feed_url": text_of(value, "new-feed-url", options),
        "owner": parse_person(child(value, "owner", options), options),
        "subtitle": text_of(value, "subtitle", options),
        "summary": text_of(value, "summary", options),
        "type": text_of(value, "type", options),
    }

    if require_any(feed, list(feed.keys())):
        return ItunesFeed(**feed)
    return None


def retrieve_itunes_item(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[ItunesItem]:
    if not is_node(value):
        return None

    options = _options(mode)
    item = {
        "author": text_of(value, "author", options),
        "block": boolean_of(value, "block", options),
        "duration": text_of(value, "duration", options),
        "episode": number_of(value, "episode", options),
        "episode_type": text_of(value, "episodetype", options),
        "explicit": parse_explicit(child(value, "explicit", options), mode),
        "image": parse_image(child(value, "image", options), mode),
        "season": number_of(value, "season", options),
        "subtitle": text_of(value, "subtitle", options),
        "summary": text_of(value, "summary", options),
        "title": text_of(value, "title", options),
    }

    if require_any(item, list(item.keys())):
        return ItunesItem(**item)
    return None
