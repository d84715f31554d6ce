"""Data models for articles flowing through the build."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple

# Name of the subdirectory holding one article.
ArticleIdentifier = str
# Metadata parsed from the YAML block at the top of an article.
FrontMatter = Dict[str, Any]
# Markdown body following the front matter.
RawContent = str
ArticleSource = Tuple[FrontMatter, RawContent]


@dataclass(frozen=True)
class RenderedArticle:
    """A fully assembled article, consumed by the page layer and the feed."""

    slug: ArticleIdentifier
    title: str
    date: str  # Front matter date as written, normalised to an ISO string
    spoiler: str
    published: datetime  # Timezone-aware (UTC), used for ordering and pubDate
    time_to_read: int  # Whole minutes
    hero_image_url: str
    edit_url: str
    discuss_url: str
    content_html: str
    front_matter: FrontMatter = field(default_factory=dict)


@dataclass
class FeedChannel:
    """Channel level data rendered into the RSS template."""

    title: str
    description: str
    site_url: str
    feed_url: str
    managing_editor: str
    web_master: str
    generator: str
    last_build_date: str  # RFC 822


@dataclass
class FeedItem:
    """Data required to render one article as an RSS item."""

    title: str
    description: str
    url: str
    guid: str
    pub_date: str  # RFC 822
    content_html: str
