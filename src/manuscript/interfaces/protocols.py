"""Defines protocols for dependency injection and mocking core components."""

from typing import List, Protocol

from ..models import ArticleIdentifier, ArticleSource


class ArticleSourceProtocol(Protocol):
    """Protocol defining the interface for reading articles from storage."""

    def list_article_identifiers(self) -> List[ArticleIdentifier]:
        """Return the identifiers of every article available."""
        ...

    def load_article_source(self, identifier: ArticleIdentifier) -> ArticleSource:
        """Load the front matter and markdown body of one article."""
        ...


class MarkdownRendererProtocol(Protocol):
    """Protocol defining the interface for markdown to HTML conversion."""

    def render(self, markdown_text: str) -> str:
        """Convert markdown text into an HTML fragment."""
        ...
