"""Reads article sources from the ``{articles_dir}/{identifier}/index.md`` layout."""

import logging
import os
import re
from typing import List

import yaml

from .errors import NotFoundError, ParseError
from .interfaces.protocols import ArticleSourceProtocol
from .models import ArticleIdentifier, ArticleSource

ARTICLE_FILE_NAME = "index.md"

_FRONT_MATTER_OPEN = re.compile(r"\A---[ \t]*\r?\n")
_FRONT_MATTER_CLOSE = re.compile(r"^---[ \t]*(?:\r?\n|\Z)", re.MULTILINE)


def split_front_matter(text: str, source_name: str = "<string>") -> ArticleSource:
    """Split a leading YAML block delimited by ``---`` lines from the markdown body.

    Text without an opening delimiter has no front matter and is returned whole.
    """
    opening = _FRONT_MATTER_OPEN.match(text)
    if not opening:
        return {}, text

    closing = _FRONT_MATTER_CLOSE.search(text, opening.end())
    if not closing:
        raise ParseError(f"{source_name}: front matter has no closing '---' delimiter")

    yaml_text = text[opening.end() : closing.start()]
    try:
        front_matter = yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        raise ParseError(f"{source_name}: invalid front matter: {e}") from e

    if front_matter is None:
        front_matter = {}
    if not isinstance(front_matter, dict):
        raise ParseError(f"{source_name}: front matter must be a mapping")

    body = text[closing.end() :]
    # The body starts after the delimiter line, minus the customary blank line
    body = re.sub(r"\A\r?\n", "", body)
    return front_matter, body


class ArticleStore(ArticleSourceProtocol):
    """Lists and loads articles from a directory of article folders."""

    def __init__(self, articles_dir: str, article_file_name: str = ARTICLE_FILE_NAME):
        self.articles_dir = articles_dir
        self.article_file_name = article_file_name

    def list_article_identifiers(self) -> List[ArticleIdentifier]:
        """Return the names of all subdirectories of the articles root."""
        if not os.path.isdir(self.articles_dir):
            raise NotFoundError(f"Articles directory not found: {self.articles_dir}")

        identifiers = sorted(
            entry
            for entry in os.listdir(self.articles_dir)
            if os.path.isdir(os.path.join(self.articles_dir, entry))
        )
        logging.debug(f"Found {len(identifiers)} article(s) in {self.articles_dir}")
        return identifiers

    def article_path(self, identifier: ArticleIdentifier) -> str:
        return os.path.join(self.articles_dir, identifier, self.article_file_name)

    def load_article_source(self, identifier: ArticleIdentifier) -> ArticleSource:
        """Read one article and split its front matter from the markdown body."""
        path = self.article_path(identifier)
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise NotFoundError(f"Article source not found: {path}") from e

        return split_front_matter(text, source_name=path)
