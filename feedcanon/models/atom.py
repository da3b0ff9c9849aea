from __future__ import annotations

from typing import List, Optional, Union

from feedcanon.models.common import CanonicalModel
from feedcanon.models.namespaces import DublinCore, Syndication

# Every field is optional at the model level: top-level extraction enforces the
# required subsets (Person.name, Link.href, ...) while namespace-mode
# extraction only needs one field to be present.


class Person(CanonicalModel):
    name: Optional[str] = None
    uri: Optional[str] = None
    email: Optional[str] = None


class Link(CanonicalModel):
    href: Optional[str] = None
    rel: Optional[str] = None
    type: Optional[str] = None
    hreflang: Optional[str] = None
    title: Optional[str] = None
    length: Optional[Union[int, float]] = None


class Category(CanonicalModel):
    term: Optional[str] = None
    scheme: Optional[str] = None
    label: Optional[str] = None


class Generator(CanonicalModel):
    text: Optional[str] = None
    uri: Optional[str] = None
    version: Optional[str] = None


class Source(CanonicalModel):
    authors: Optional[List[Person]] = None
    categories: Optional[List[Category]] = None
    contributors: Optional[List[Person]] = None
    generator: Optional[Generator] = None
    icon: Optional[str] = None
    id: Optional[str] = None
    links: Optional[List[Link]] = None
    logo: Optional[str] = None
    rights: Optional[str] = None
    subtitle: Optional[str] = None
    title: Optional[str] = None
    updated: Optional[str] = None
    dc: Optional[DublinCore] = None
    sy: Optional[Syndication] = None


class Entry(CanonicalModel):
    authors: Optional[List[Person]] = None
    categories: Optional[List[Category]] = None
    content: Optional[str] = None
    contributors: Optional[List[Person]] = None
    id: Optional[str] = None
    links: Optional[List[Link]] = None
    published: Optional[str] = None
    rights: Optional[str] = None
    source: Optional[Source] = None
    summary: Optional[str] = None
    title: Optional[str] = None
    updated: Optional[str] = None
    dc: Optional[DublinCore] = None


class Feed(CanonicalModel):
    authors: Optional[List[Person]] = None
    categories: Optional[List[Category]] = None
    contributors: Optional[List[Person]] = None
    generator: Optional[Generator] = None
    icon: Optional[str] = None
    id: Optional[str] = None
    links: Optional[List[Link]] = None
    logo: Optional[str] = None
    rights: Optional[str] = None
    subtitle: Optional[str] = None
    title: Optional[str] = None
    updated: Optional[str] = None
    entries: Optional[List[Entry]] = None
    dc: Optional[DublinCore] = None
    sy: Optional[Syndication] = None
