"""Generates the site's RSS 2.0 feed from assembled articles using a Jinja2 template."""

import logging
import os
import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from . import __version__
from .config import BlogConfig
from .errors import FeedWriteError
from .models import FeedChannel, FeedItem, RenderedArticle

FEED_TEMPLATE_NAME = "rss.xml.j2"
TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

_STATIC_LIST_PATTERN = re.compile(r",\s*/static/")


def rewrite_relative_urls(html: str, site_url: str) -> str:
    """Prefix root-relative URLs in double-quoted attributes with the site URL.

    Plain string substitution: single-quoted attributes are left alone and the
    rewrite is not idempotent, so it must run exactly once per article.
    """
    site = site_url.rstrip("/")
    html = html.replace('href="/', f'href="{site}/')
    html = html.replace('src="/', f'src="{site}/')
    html = html.replace('"/static/', f'"{site}/static/')
    # srcset style lists: "a.jpg 1x, /static/b.jpg 2x"
    return _STATIC_LIST_PATTERN.sub(lambda _: f",{site}/static/", html)


def promotional_footer(article_url: str, config: BlogConfig) -> str:
    return (
        '\n<div style="margin-top: 55px; font-style: italic;">'
        f"(This is an article posted to my blog at {config.site_host}. "
        f'You can read it online by <a href="{article_url}">clicking here</a>.)'
        "</div>\n"
    )


def cdata(text: str) -> Markup:
    """Wrap text in a CDATA section, splitting any embedded terminator."""
    return Markup("<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>")


def _jinja_env() -> Environment:
    env = Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=True)
    env.filters["cdata"] = cdata
    return env


def _rfc822(moment: datetime) -> str:
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def build_feed_items(articles: Sequence[RenderedArticle], config: BlogConfig) -> List[FeedItem]:
    items = []
    for article in articles:
        url = config.base_url + article.slug
        content_html = rewrite_relative_urls(article.content_html, config.base_url)
        items.append(
            FeedItem(
                title=article.title,
                description=article.spoiler,
                url=url,
                guid=url,
                pub_date=_rfc822(article.published),
                content_html=content_html + promotional_footer(url, config),
            )
        )
    return items


def render_feed(
    articles: Sequence[RenderedArticle],
    config: BlogConfig,
    build_date: Optional[datetime] = None,
) -> str:
    """Render the RSS document for articles, keeping their order."""
    channel = FeedChannel(
        title=config.title,
        description=config.description,
        site_url=config.base_url,
        feed_url=config.feed_url,
        managing_editor=config.author,
        web_master=config.author,
        generator=f"manuscript {__version__}",
        last_build_date=_rfc822(build_date or datetime.now(timezone.utc)),
    )
    template = _jinja_env().get_template(FEED_TEMPLATE_NAME)
    return template.render(channel=channel, items=build_feed_items(articles, config))


def generate_feed(
    articles: Sequence[RenderedArticle],
    config: BlogConfig,
    output_path: Optional[str] = None,
    build_date: Optional[datetime] = None,
) -> str:
    """Render the feed and write it to disk, returning the path written.

    Raises:
        FeedWriteError: The output directory or file could not be written.
    """
    output_path = output_path or config.feed_path
    logging.info(f"Generating feed with {len(articles)} item(s)")
    feed_xml = render_feed(articles, config, build_date=build_date)

    try:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(feed_xml)
    except OSError as e:
        raise FeedWriteError(f"Could not write feed to {output_path}: {e}") from e

    logging.info(f'Feed saved to "{output_path}"')
    return output_path
