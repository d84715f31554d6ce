"""Assembles article records from sources, rendered HTML and derived URLs."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Dict, List, Optional
from urllib.parse import quote

from .article_store import ARTICLE_FILE_NAME, ArticleStore
from .config import BlogConfig
from .errors import AggregateError, ParseError
from .interfaces.protocols import ArticleSourceProtocol, MarkdownRendererProtocol
from .markdown_transformer import MarkdownTransformer
from .models import ArticleIdentifier, RenderedArticle
from .reading_time import estimate_reading_time
from .utils.date_parser import DateParserProtocol, FrontMatterDateParser, to_iso_string

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!~*'()"


def hero_image_url(slug: ArticleIdentifier) -> str:
    return f"/hero-images/{slug}.jpg"


def edit_url(slug: ArticleIdentifier, config: BlogConfig) -> str:
    return (
        f"https://github.com/{config.github_username}/{config.github_repo_name}"
        f"/edit/master/src/articles/{slug}/{ARTICLE_FILE_NAME}"
    )


def absolute_url(slug: ArticleIdentifier, config: BlogConfig) -> str:
    return config.base_url + slug


def discuss_url(slug: ArticleIdentifier, config: BlogConfig) -> str:
    return config.discuss_search_url + quote(
        absolute_url(slug, config), safe=_URI_COMPONENT_SAFE
    )


class ArticleAssembler:
    """Turns article identifiers into fully assembled article records."""

    def __init__(
        self,
        config: BlogConfig,
        store: Optional[ArticleSourceProtocol] = None,
        renderer: Optional[MarkdownRendererProtocol] = None,
        date_parser: Optional[DateParserProtocol] = None,
        estimate: Callable[[str], int] = estimate_reading_time,
        max_workers: Optional[int] = None,
    ):
        """Initialize the assembler.

        Args:
            config: Site configuration used to derive URLs
            store: Source of articles, defaults to an ArticleStore on config.articles_dir
            renderer: Markdown renderer, defaults to a MarkdownTransformer for the site host
            date_parser: Parser for front matter dates
            estimate: Reading time estimator taking rendered HTML
            max_workers: Thread pool size for assemble_all (None uses the executor default)
        """
        self.config = config
        self.store = store or ArticleStore(config.articles_dir)
        self.renderer = renderer or MarkdownTransformer(site_host=config.site_host)
        self.date_parser = date_parser or FrontMatterDateParser()
        self.estimate = estimate
        self.max_workers = max_workers

    def assemble(self, slug: ArticleIdentifier) -> RenderedArticle:
        """Load, render and assemble a single article."""
        logging.debug(f"Assembling article {slug}")
        front_matter, content_markdown = self.store.load_article_source(slug)

        title = front_matter.get("title")
        if title is None:
            raise ParseError(f"{slug}: front matter has no title")
        published = self.date_parser.parse_date(front_matter.get("date"))
        if published is None:
            raise ParseError(f"{slug}: front matter date {front_matter.get('date')!r} is invalid")

        content_html = self.renderer.render(content_markdown)
        time_to_read = self.estimate(content_html)

        return RenderedArticle(
            slug=slug,
            title=str(title),
            date=to_iso_string(front_matter["date"]),
            spoiler=str(front_matter.get("spoiler") or ""),
            published=published,
            time_to_read=time_to_read,
            hero_image_url=hero_image_url(slug),
            edit_url=edit_url(slug, self.config),
            discuss_url=discuss_url(slug, self.config),
            content_html=content_html,
            front_matter=dict(front_matter),
        )

    def assemble_all(self) -> List[RenderedArticle]:
        """Assemble every article, newest first.

        All articles are assembled before failures are reported; any failure
        fails the whole batch with an AggregateError.
        """
        slugs = self.store.list_article_identifiers()
        logging.info(f"Assembling {len(slugs)} article(s) from {self.config.articles_dir}")

        articles: List[RenderedArticle] = []
        errors: Dict[ArticleIdentifier, Exception] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {slug: executor.submit(self.assemble, slug) for slug in slugs}
            for slug, future in futures.items():
                try:
                    articles.append(future.result())
                except Exception as e:
                    logging.error(f"Failed to assemble article {slug}: {e}")
                    errors[slug] = e

        if errors:
            raise AggregateError(errors)

        # Stable sort, so equal dates keep listing order
        articles.sort(key=_published_key, reverse=True)
        return articles


def _published_key(article: RenderedArticle) -> datetime:
    return article.published
