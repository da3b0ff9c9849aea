"""
JSON Feed generation: canonical JSON Feed models -> plain dicts ready for json.dumps.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel

from feedcanon.core.config import get_settings
from feedcanon.models.json_feed import Feed, Item
from feedcanon.services.accessors import omit_absent


def generate_rfc3339_date(value: datetime) -> str:
    """
    Render a datetime as RFC 3339 in UTC with millisecond precision and a "Z"
    suffix, e.g. 2024-01-01T10:00:00.000Z. Naive datetimes are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return generate_rfc3339_date(value)
    if isinstance(value, BaseModel):
        return generate_entity(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def generate_entity(entity: BaseModel) -> Dict[str, Any]:
    """Copy fields in model order, render dates and nested models, drop absent fields."""
    fields = {name: _plain(getattr(entity, name)) for name in type(entity).model_fields}
    return omit_absent(fields)


def generate_item(item: Item) -> Dict[str, Any]:
    return generate_entity(item)


def generate_feed(feed: Feed, version: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the JSON Feed document: "version" first, then the feed fields in
    model order, then "items".
    """
    fields = generate_entity(feed)
    fields.pop("items", None)
    return {
        "version": version or get_settings().JSON_FEED_VERSION,
        **fields,
        "items": [generate_item(item) for item in feed.items],
    }
