"""Reading time estimation for rendered articles."""

import math
import re

from bs4 import BeautifulSoup

AVERAGE_WORDS_PER_MINUTE = 265

# A run of letters/digits; contractions like "don't" count as one word
_WORD_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def strip_tags(html: str) -> str:
    """Return the text of an HTML fragment, with tags replaced by whitespace."""
    return BeautifulSoup(html, "html.parser").get_text(" ")


def count_words(text: str) -> int:
    return len(_WORD_PATTERN.findall(text))


def estimate_reading_time(html: str, words_per_minute: int = AVERAGE_WORDS_PER_MINUTE) -> int:
    """Estimate whole minutes needed to read an HTML fragment.

    The result is rounded half up and has no lower bound, so very short
    articles estimate to 0 minutes.
    """
    word_count = count_words(strip_tags(html))
    return math.floor(word_count / words_per_minute + 0.5)
