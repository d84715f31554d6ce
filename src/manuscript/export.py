"""Writes assembled articles as JSON for the page rendering layer."""

import dataclasses
import json
import logging
import os
from datetime import date, datetime
from typing import Any, Dict, List, Sequence

from .errors import FeedWriteError
from .models import RenderedArticle


def _json_default(value: Any) -> str:
    # YAML front matter may carry date objects in arbitrary keys
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def articles_to_dicts(articles: Sequence[RenderedArticle]) -> List[Dict[str, Any]]:
    return [dataclasses.asdict(article) for article in articles]


def write_articles_json(articles: Sequence[RenderedArticle], path: str) -> str:
    """Write the ordered article records to a JSON file and return its path."""
    try:
        output_dir = os.path.dirname(path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(articles_to_dicts(articles), f, indent=2, default=_json_default)
    except OSError as e:
        raise FeedWriteError(f"Could not write article index to {path}: {e}") from e

    logging.info(f'Article index saved to "{path}"')
    return path
