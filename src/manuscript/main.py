"""Command-line entry point running a full site build."""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .assemble import ArticleAssembler
from .config import BlogConfig
from .errors import AggregateError, ManuscriptError
from .export import write_articles_json
from .generate_feed import generate_feed
from .models import RenderedArticle


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render markdown articles and write the site's RSS feed."
    )
    parser.add_argument("--articles-dir", help="Directory holding one folder per article")
    parser.add_argument("--feed-path", help="Where to write the RSS feed (default: public/rss.xml)")
    parser.add_argument(
        "--articles-json", help="Also write the assembled articles as JSON to this path"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_site(config: BlogConfig, articles_json: Optional[str] = None) -> List[RenderedArticle]:
    """Assemble all articles and write the build artifacts.

    The feed is written only after every article assembled successfully.
    """
    articles = ArticleAssembler(config=config).assemble_all()
    generate_feed(articles, config)
    if articles_json:
        write_articles_json(articles, articles_json)
    return articles


def main(argv: Optional[List[str]] = None) -> int:
    """Load .env, build the site and return the process exit code."""
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = BlogConfig.from_environment()
    except ValueError as e:
        logging.error(f"Configuration error: {e}")
        return 1

    overrides = {}
    if args.articles_dir:
        overrides["articles_dir"] = args.articles_dir
    if args.feed_path:
        overrides["feed_path"] = args.feed_path
    if overrides:
        config = dataclasses.replace(config, **overrides)

    try:
        articles = build_site(config, articles_json=args.articles_json)
    except AggregateError as e:
        for slug, error in e.errors.items():
            logging.error(f"  {slug}: {error}")
        logging.error(f"Build failed: {len(e.errors)} article(s) could not be assembled.")
        return 1
    except ManuscriptError as e:
        logging.error(f"Build failed: {e}")
        return 1

    logging.info(f"Build finished: {len(articles)} article(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
