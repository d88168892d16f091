# === FILE: site_loader/parser/html_parser.py ===
"""HTML extraction utilities for SiteLoader.

Two pure functions turn raw markup into the parts of a
:class:`~site_loader.crawler.models.Document`:

* :func:`extract_text`: visible body text with ``<script>`` contents removed
  and whitespace collapsed to single spaces.
* :func:`extract_metadata`: a small record with ``source`` and, when the
  page declares them, ``title``, ``description`` and ``language``.

Both are total: malformed or partial markup degrades to empty text or
missing keys, never to an exception. The tree is built the HTML5 way, so a
body element exists even when the markup omits it.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Dict, List

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

__all__: Sequence[str] = ("extract_text", "extract_metadata", "make_soup")

_WHITESPACE_RE = re.compile(r"\s+")


def make_soup(html: str) -> BeautifulSoup:
    """Parse *html* into an HTML5 tree; html, head and body always exist."""
    return BeautifulSoup(html, "html5lib")


def _collect_text(element: Tag, out: List[str]) -> None:
    for node in element.children:
        if isinstance(node, Tag):
            if node.name == "script":
                continue
            _collect_text(node, out)
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            # comments, doctypes and CDATA are not text nodes
            out.append(str(node))


def extract_text(html: str) -> str:
    """Return the normalized visible text of the document body.

    Text nodes are joined with a space, newlines and tabs become spaces and
    every whitespace run is collapsed to one space. Text the markup leaves
    outside an explicit ``<body>`` is placed in the body by the HTML5 tree
    builder and is kept.
    """
    body = make_soup(html).body
    if body is None:
        return ""

    fragments: List[str] = []
    _collect_text(body, fragments)

    joined = " ".join(fragments).replace("\n", " ").replace("\t", " ")
    return _WHITESPACE_RE.sub(" ", joined)


def extract_metadata(html: str, url: str) -> Dict[str, str]:
    """Build the metadata record of a page fetched from *url*."""
    soup = make_soup(html)
    metadata: Dict[str, str] = {"source": url}

    title = soup.find("title")
    if isinstance(title, Tag):
        metadata["title"] = title.decode_contents()

    description = soup.find("meta", attrs={"name": "description"})
    if isinstance(description, Tag):
        content = description.get("content")
        if isinstance(content, str):
            metadata["description"] = content

    root = soup.find("html")
    if isinstance(root, Tag):
        lang = root.get("lang")
        if isinstance(lang, str):
            metadata["language"] = lang

    return metadata
