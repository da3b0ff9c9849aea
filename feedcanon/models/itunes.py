from __future__ import annotations

from typing import List, Optional, Union

from feedcanon.models.atom import Person
from feedcanon.models.common import CanonicalModel


class ItunesCategory(CanonicalModel):
    text: Optional[str] = None
    categories: Optional[List["ItunesCategory"]] = None


class ItunesFeed(CanonicalModel):
    author: Optional[str] = None
    block: Optional[bool] = None
    categories: Optional[List[ItunesCategory]] = None
    complete: Optional[bool] = None
    explicit: Optional[bool] = None
    image: Optional[str] = None
    keywords: Optional[str] = None
    new_feed_url: Optional[str] = None
    # itunes:owner carries itunes:name / itunes:email, i.e. an Atom-shaped person.
    owner: Optional[Person] = None
    subtitle: Optional[str] = None
    summary: Optional[str] = None
    type: Optional[str] = None


class ItunesItem(CanonicalModel):
    author: Optional[str] = None
    block: Optional[bool] = None
    duration: Optional[str] = None
    episode: Optional[Union[int, float]] = None
    episode_type: Optional[str] = None
    explicit: Optional[bool] = None
    image: Optional[str] = None
    season: Optional[Union[int, float]] = None
    subtitle: Optional[str] = None
    summary: Optional[str] = None
    title: Optional[str] = None


ItunesCategory.model_rebuild()
