"""Tests for reading article sources from disk."""

import datetime
import os
import sys
import tempfile
import unittest

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from manuscript.article_store import ArticleStore, split_front_matter
from manuscript.errors import NotFoundError, ParseError

from test_utils import write_article


class TestSplitFrontMatter(unittest.TestCase):
    """Tests for splitting YAML front matter from the markdown body."""

    def test_front_matter_and_body(self):
        """Front matter keys are parsed and the body follows the closing line."""
        text = "---\ntitle: Hello\ndate: 2020-01-01\nspoiler: Hi\n---\n\n# Heading\n"
        front_matter, body = split_front_matter(text)
        self.assertEqual(front_matter["title"], "Hello")
        self.assertEqual(front_matter["date"], datetime.date(2020, 1, 1))
        self.assertEqual(front_matter["spoiler"], "Hi")
        self.assertEqual(body, "# Heading\n")

    def test_no_front_matter(self):
        """Text without an opening delimiter is all body."""
        front_matter, body = split_front_matter("# Just markdown\n")
        self.assertEqual(front_matter, {})
        self.assertEqual(body, "# Just markdown\n")

    def test_empty_front_matter(self):
        """An empty block yields an empty mapping."""
        front_matter, body = split_front_matter("---\n---\nBody")
        self.assertEqual(front_matter, {})
        self.assertEqual(body, "Body")

    def test_missing_closing_delimiter(self):
        """An unclosed block is a parse error."""
        with self.assertRaises(ParseError):
            split_front_matter("---\ntitle: Hello\n\n# Heading\n")

    def test_invalid_yaml(self):
        """Broken YAML syntax is a parse error."""
        with self.assertRaises(ParseError):
            split_front_matter("---\ntitle: [unclosed\n---\nBody")

    def test_front_matter_must_be_mapping(self):
        """A YAML list is not valid front matter."""
        with self.assertRaises(ParseError):
            split_front_matter("---\n- a\n- b\n---\nBody")

    def test_horizontal_rule_in_body_is_kept(self):
        """Only the first closing delimiter ends the front matter."""
        front_matter, body = split_front_matter("---\ntitle: A\n---\nabove\n\n---\n\nbelow\n")
        self.assertEqual(front_matter, {"title": "A"})
        self.assertEqual(body, "above\n\n---\n\nbelow\n")


class TestArticleStore(unittest.TestCase):
    """Tests for the directory based article store."""

    def setUp(self):
        """Create a temporary articles root."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = self.temp_dir.name
        self.store = ArticleStore(self.root)

    def tearDown(self):
        """Clean up the temporary directory."""
        self.temp_dir.cleanup()

    def test_list_article_identifiers(self):
        """Subdirectories are listed by name; plain files are not articles."""
        write_article(self.root, "second-post", "---\ntitle: B\n---\n")
        write_article(self.root, "first-post", "---\ntitle: A\n---\n")
        with open(os.path.join(self.root, "README.md"), "w") as f:
            f.write("not an article")

        self.assertEqual(self.store.list_article_identifiers(), ["first-post", "second-post"])

    def test_list_missing_root(self):
        """A missing articles root is reported as not found."""
        store = ArticleStore(os.path.join(self.root, "does-not-exist"))
        with self.assertRaises(NotFoundError):
            store.list_article_identifiers()

    def test_load_article_source(self):
        """The article file is read and split."""
        write_article(self.root, "hello", "---\ntitle: Hello\n---\n\nSome *text*.\n")
        front_matter, body = self.store.load_article_source("hello")
        self.assertEqual(front_matter, {"title": "Hello"})
        self.assertEqual(body, "Some *text*.\n")

    def test_load_missing_source_file(self):
        """A directory without index.md raises NotFoundError."""
        os.makedirs(os.path.join(self.root, "empty"))
        with self.assertRaises(NotFoundError):
            self.store.load_article_source("empty")

    def test_load_malformed_front_matter(self):
        """Parse errors name the offending file."""
        path = write_article(self.root, "broken", "---\ntitle: Hello\n")
        with self.assertRaises(ParseError) as ctx:
            self.store.load_article_source("broken")
        self.assertIn(path, str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
