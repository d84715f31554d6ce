"""manuscript: markdown articles to HTML and an RSS feed."""

__version__ = "0.1.0"
