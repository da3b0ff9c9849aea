from __future__ import annotations

from typing import Optional, Union

from feedcanon.models.common import CanonicalModel

Number = Union[int, float]


class DublinCore(CanonicalModel):
    """Dublin Core elements (dc:*) attached to feeds, entries and items."""

    title: Optional[str] = None
    creator: Optional[str] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    publisher: Optional[str] = None
    contributor: Optional[str] = None
    date: Optional[str] = None
    type: Optional[str] = None
    format: Optional[str] = None
    identifier: Optional[str] = None
    source: Optional[str] = None
    language: Optional[str] = None
    relation: Optional[str] = None
    coverage: Optional[str] = None
    rights: Optional[str] = None


class Syndication(CanonicalModel):
    """Syndication module (sy:*), feed level only."""

    update_period: Optional[str] = None
    update_frequency: Optional[Number] = None
    update_base: Optional[str] = None


class Content(CanonicalModel):
    encoded: Optional[str] = None
