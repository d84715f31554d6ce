"""Markdown to HTML conversion with the blog's fixed extension chain.

The chain, in order: smart punctuation, heading slugs wrapped in self links,
external link annotation, Pygments syntax highlighting (code blocks and
``lang›code`` inline spans), then serialisation to HTML.
"""

import html
import re
from typing import Dict, List
from urllib.parse import urlparse
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.extensions.toc import slugify_unicode
from markdown.treeprocessors import Treeprocessor
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .errors import RenderError
from .interfaces.protocols import MarkdownRendererProtocol

EXTERNAL_LINK_TARGET = "_blank"
EXTERNAL_LINK_REL = "nofollow noopener noreferrer"

# Separates the language from the code in an inline span, e.g. `css›a { color: red }`
INLINE_CODE_SEPARATOR = "›"
_INLINE_CODE_PATTERN = re.compile(
    r"^(?P<lang>[\w#+.-]+)" + re.escape(INLINE_CODE_SEPARATOR) + r"(?P<code>.+)$", re.DOTALL
)


class ExternalLinksTreeprocessor(Treeprocessor):
    """Opens links to other hosts in a new tab without leaking the referrer."""

    def __init__(self, md, site_host: str):
        super().__init__(md)
        self.site_host = site_host.lower()

    def run(self, root: Element) -> None:
        for link in root.iter("a"):
            url = urlparse(link.get("href", ""))
            if url.scheme not in ("http", "https") or not url.netloc:
                continue
            if url.hostname == self.site_host:
                continue
            link.set("target", EXTERNAL_LINK_TARGET)
            link.set("rel", EXTERNAL_LINK_REL)


class ExternalLinksExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "site_host": ["", "Host name of the site; links to any other host are external"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # After inline processing (20) so links exist, before toc (5)
        md.treeprocessors.register(
            ExternalLinksTreeprocessor(md, self.getConfig("site_host")), "external_links", 8
        )


class InlineCodeHighlightTreeprocessor(Treeprocessor):
    """Highlights inline code spans that name their language, like `js›let x = 1`."""

    def __init__(self, md, css_class: str):
        super().__init__(md)
        self.formatter = HtmlFormatter(nowrap=True, cssclass=css_class)

    def run(self, root: Element) -> None:
        parents: Dict[Element, Element] = {
            child: parent for parent in root.iter() for child in parent
        }
        for code in list(root.iter("code")):
            parent = parents.get(code)
            if parent is not None and parent.tag == "pre":
                continue
            match = _INLINE_CODE_PATTERN.match(code.text or "")
            if not match:
                continue
            try:
                lexer = get_lexer_by_name(match.group("lang"))
            except ClassNotFound:
                continue
            # Inline code text arrives HTML-escaped from the backtick processor
            source = html.unescape(match.group("code"))
            highlighted = highlight(source, lexer, self.formatter).rstrip("\n")
            code.text = self.md.htmlStash.store(highlighted)
            code.set("class", f"language-{match.group('lang')}")


class InlineCodeHighlightExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "css_class": ["highlight", "CSS class of highlighted code"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.treeprocessors.register(
            InlineCodeHighlightTreeprocessor(md, self.getConfig("css_class")),
            "inline_code_highlight",
            15,
        )


class MarkdownTransformer(MarkdownRendererProtocol):
    """Renders article markdown into an HTML fragment for direct embedding.

    A new ``markdown.Markdown`` instance is built for every call: instances keep
    per-document state (heading ids, stashed HTML) and are not thread safe.
    """

    def __init__(self, site_host: str = "", highlight_css_class: str = "highlight"):
        self.site_host = site_host
        self.highlight_css_class = highlight_css_class

    def _extensions(self) -> List[object]:
        return [
            "smarty",
            "toc",
            ExternalLinksExtension(site_host=self.site_host),
            "fenced_code",
            "codehilite",
            InlineCodeHighlightExtension(css_class=self.highlight_css_class),
        ]

    def _extension_configs(self) -> Dict[str, Dict[str, object]]:
        return {
            "toc": {"anchorlink": True, "slugify": slugify_unicode},
            "codehilite": {"guess_lang": False, "css_class": self.highlight_css_class},
        }

    def render(self, markdown_text: str) -> str:
        """Convert markdown into HTML. Identical input always yields identical output."""
        md = markdown.Markdown(
            extensions=self._extensions(),
            extension_configs=self._extension_configs(),
            output_format="html",
        )
        try:
            return md.convert(markdown_text)
        except Exception as e:
            raise RenderError(f"Failed to render markdown: {e}") from e
