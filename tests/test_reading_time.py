"""Tests for reading time estimation."""

import os
import sys
import unittest

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from manuscript.reading_time import (
    AVERAGE_WORDS_PER_MINUTE,
    count_words,
    estimate_reading_time,
    strip_tags,
)


def paragraph(word_count: int) -> str:
    return "<p>" + " ".join(["word"] * word_count) + "</p>"


class TestReadingTime(unittest.TestCase):
    """Tests for estimate_reading_time and its helpers."""

    def test_average_speed(self):
        """The reading speed constant is 265 words per minute."""
        self.assertEqual(AVERAGE_WORDS_PER_MINUTE, 265)

    def test_short_article_rounds_to_zero(self):
        """There is no lower bound: a few words estimate to 0 minutes."""
        self.assertEqual(estimate_reading_time("<h1>Heading</h1><p>Some <em>text</em>.</p>"), 0)
        self.assertEqual(estimate_reading_time(""), 0)

    def test_rounds_half_up(self):
        """Counts around the half minute mark round to the nearest minute."""
        self.assertEqual(estimate_reading_time(paragraph(132)), 0)
        self.assertEqual(estimate_reading_time(paragraph(133)), 1)
        self.assertEqual(estimate_reading_time(paragraph(265)), 1)
        self.assertEqual(estimate_reading_time(paragraph(397)), 1)
        self.assertEqual(estimate_reading_time(paragraph(398)), 2)

    def test_monotonic_in_word_count(self):
        """More words never estimate to less time."""
        estimates = [estimate_reading_time(paragraph(n)) for n in range(0, 1200, 7)]
        self.assertEqual(estimates, sorted(estimates))

    def test_markup_is_not_counted(self):
        """Tags and attributes do not count as words."""
        html = '<p><a href="https://example.com/some/long/path" class="link">one</a></p>'
        self.assertEqual(count_words(strip_tags(html)), 1)

    def test_adjacent_elements_do_not_merge_words(self):
        """Text in neighbouring elements is counted separately."""
        self.assertEqual(count_words(strip_tags("<p>one</p><p>two</p>")), 2)

    def test_contractions_count_once(self):
        """Apostrophes inside a word do not split it."""
        self.assertEqual(count_words("don't stop, it’s fine"), 4)


if __name__ == "__main__":
    unittest.main()
