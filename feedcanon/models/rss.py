from __future__ import annotations

from typing import List, Optional, Union

from feedcanon.models.atom import Entry as AtomEntry
from feedcanon.models.atom import Feed as AtomFeed
from feedcanon.models.common import CanonicalModel
from feedcanon.models.itunes import ItunesFeed, ItunesItem
from feedcanon.models.namespaces import Content, DublinCore, Syndication

Number = Union[int, float]


class Category(CanonicalModel):
    name: Optional[str] = None
    domain: Optional[str] = None


class Enclosure(CanonicalModel):
    url: Optional[str] = None
    length: Optional[Number] = None
    type: Optional[str] = None


class Guid(CanonicalModel):
    value: Optional[str] = None
    is_perma_link: Optional[bool] = None


class Source(CanonicalModel):
    title: Optional[str] = None
    url: Optional[str] = None


class Image(CanonicalModel):
    url: Optional[str] = None
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    height: Optional[Number] = None
    width: Optional[Number] = None


class TextInput(CanonicalModel):
    title: Optional[str] = None
    description: Optional[str] = None
    name: Optional[str] = None
    link: Optional[str] = None


class Cloud(CanonicalModel):
    domain: Optional[str] = None
    port: Optional[Number] = None
    path: Optional[str] = None
    register_procedure: Optional[str] = None
    protocol: Optional[str] = None


class Item(CanonicalModel):
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    authors: Optional[List[str]] = None
    categories: Optional[List[Category]] = None
    comments: Optional[str] = None
    enclosures: Optional[List[Enclosure]] = None
    guid: Optional[Guid] = None
    pub_date: Optional[str] = None
    source: Optional[Source] = None
    atom: Optional[AtomEntry] = None
    content: Optional[Content] = None
    dc: Optional[DublinCore] = None
    itunes: Optional[ItunesItem] = None


class Feed(CanonicalModel):
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    copyright: Optional[str] = None
    managing_editor: Optional[str] = None
    web_master: Optional[str] = None
    pub_date: Optional[str] = None
    last_build_date: Optional[str] = None
    categories: Optional[List[Category]] = None
    generator: Optional[str] = None
    docs: Optional[str] = None
    cloud: Optional[Cloud] = None
    ttl: Optional[Number] = None
    image: Optional[Image] = None
    rating: Optional[str] = None
    text_input: Optional[TextInput] = None
    skip_hours: Optional[List[Number]] = None
    skip_days: Optional[List[str]] = None
    items: Optional[List[Item]] = None
    atom: Optional[AtomFeed] = None
    dc: Optional[DublinCore] = None
    sy: Optional[Syndication] = None
    itunes: Optional[ItunesFeed] = None
