"""Site configuration for the manuscript build using dataclasses and environment variables."""

import os
from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_TITLE = "manuscript"
DEFAULT_DESCRIPTION = "A blog by Manuel Unterhofer"
DEFAULT_BASE_URL = "https://manuscript.blog/"
DEFAULT_AUTHOR = "Manuel Unterhofer"
DEFAULT_ARTICLES_DIR = os.path.join("src", "articles")
DEFAULT_FEED_PATH = os.path.join("public", "rss.xml")
DEFAULT_GITHUB_USERNAME = "manu-unter"
DEFAULT_GITHUB_REPO_NAME = "manuscript"
DEFAULT_DISCUSS_SEARCH_URL = "https://mobile.twitter.com/search?q="


def get_env_str(key: str, default: str | None = None) -> str:
    """Get a string environment variable."""
    value = os.environ.get(key)
    if value is None:
        if default is None:
            raise ValueError(f"Required environment variable {key} is not set.")
        return default
    return value


@dataclass(frozen=True)
class BlogConfig:
    """Configuration settings for a manuscript site build."""

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    base_url: str = DEFAULT_BASE_URL  # Always ends with a slash
    author: str = DEFAULT_AUTHOR
    articles_dir: str = DEFAULT_ARTICLES_DIR
    feed_path: str = DEFAULT_FEED_PATH
    github_username: str = DEFAULT_GITHUB_USERNAME
    github_repo_name: str = DEFAULT_GITHUB_REPO_NAME
    discuss_search_url: str = DEFAULT_DISCUSS_SEARCH_URL

    def __post_init__(self):
        if not self.base_url.endswith("/"):
            # Frozen dataclass, so bypass __setattr__
            object.__setattr__(self, "base_url", self.base_url + "/")

    @property
    def site_host(self) -> str:
        """Host name of the site, used to tell internal links from external ones."""
        return urlparse(self.base_url).hostname or ""

    @property
    def feed_url(self) -> str:
        return f"{self.base_url}rss.xml"

    @classmethod
    def from_environment(cls) -> "BlogConfig":
        """Load configuration from environment variables, falling back to the site defaults."""
        return cls(
            title=get_env_str("MANUSCRIPT_TITLE", default=DEFAULT_TITLE),
            description=get_env_str("MANUSCRIPT_DESCRIPTION", default=DEFAULT_DESCRIPTION),
            base_url=get_env_str("MANUSCRIPT_BASE_URL", default=DEFAULT_BASE_URL),
            author=get_env_str("MANUSCRIPT_AUTHOR", default=DEFAULT_AUTHOR),
            articles_dir=get_env_str("MANUSCRIPT_ARTICLES_DIR", default=DEFAULT_ARTICLES_DIR),
            feed_path=get_env_str("MANUSCRIPT_FEED_PATH", default=DEFAULT_FEED_PATH),
            github_username=get_env_str(
                "MANUSCRIPT_GITHUB_USERNAME", default=DEFAULT_GITHUB_USERNAME
            ),
            github_repo_name=get_env_str(
                "MANUSCRIPT_GITHUB_REPO_NAME", default=DEFAULT_GITHUB_REPO_NAME
            ),
            discuss_search_url=get_env_str(
                "MANUSCRIPT_DISCUSS_SEARCH_URL", default=DEFAULT_DISCUSS_SEARCH_URL
            ),
        )
