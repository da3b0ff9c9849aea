from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field

from feedcanon.models.common import CanonicalModel


class Author(CanonicalModel):
    name: Optional[str] = None
    url: Optional[str] = None
    avatar: Optional[str] = None


class Attachment(CanonicalModel):
    url: str
    mime_type: str
    title: Optional[str] = None
    size_in_bytes: Optional[Union[int, float]] = None
    duration_in_seconds: Optional[Union[int, float]] = None


class Hub(CanonicalModel):
    type: str
    url: str


class Item(CanonicalModel):
    """
    Single JSON Feed 1.1 item.

    Dates are datetimes here; the generator renders them as RFC 3339 text.
    """

    id: str
    url: Optional[str] = None
    external_url: Optional[str] = None
    title: Optional[str] = None
    content_html: Optional[str] = None
    content_text: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None
    banner_image: Optional[str] = None
    date_published: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    tags: Optional[List[str]] = None
    authors: Optional[List[Author]] = None
    language: Optional[str] = None
    attachments: Optional[List[Attachment]] = None


class Feed(CanonicalModel):
    title: str
    home_page_url: Optional[str] = None
    feed_url: Optional[str] = None
    description: Optional[str] = None
    user_comment: Optional[str] = None
    next_url: Optional[str] = None
    icon: Optional[str] = None
    favicon: Optional[str] = None
    language: Optional[str] = None
    expired: Optional[bool] = None
    hubs: Optional[List[Hub]] = None
    authors: Optional[List[Author]] = None
    items: List[Item] = Field(default_factory=list)
