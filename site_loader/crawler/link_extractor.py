# site_loader/crawler/link_extractor.py
"""
Link extraction and filtering for SiteLoader.
"""
from __future__ import annotations

from typing import Collection, List, Optional
from urllib.parse import urljoin, urlsplit

from bs4.element import Tag

from site_loader.logger import logger
from site_loader.parser.html_parser import make_soup
from site_loader.utils import canonical_url, is_excluded, is_non_page_resource

__all__ = ("extract_links", "resolve_href")


def resolve_href(href: str, base_url: str) -> Optional[str]:
    """
    Turn an href into an absolute URL relative to *base_url*.

    Returns None when the href cannot be resolved.
    """
    if href.startswith("http"):
        return href
    try:
        if href.startswith("//"):
            return f"{urlsplit(base_url).scheme}:{href}"
        return urljoin(base_url, href)
    except ValueError as exc:
        logger.debug("Dropping unresolvable href %r on %s: %s", href, base_url, exc)
        return None


def _keep(link: str, base_url: str, exclude_dirs: Collection[str], prevent_outside: bool) -> bool:
    if is_excluded(link, exclude_dirs):
        return False
    if link.startswith(("javascript:", "mailto:")):
        return False
    if is_non_page_resource(link):
        return False
    if prevent_outside and not link.startswith(base_url):
        return False
    return True


def extract_links(
    html: str,
    base_url: str,
    exclude_dirs: Collection[str] = (),
    prevent_outside: bool = True,
) -> List[str]:
    """
    Extract outbound links of a page fetched from *base_url*.

    Links are kept in document order and may repeat. Excluded prefixes,
    javascript:/mailto: links and static resources are dropped; with
    *prevent_outside* only links starting with the canonical form of
    *base_url* (lowercase host, no default port) survive.
    """
    base_url = canonical_url(base_url)
    soup = make_soup(html)
    links: List[str] = []
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        absolute = resolve_href(href_val.strip(), base_url)
        if absolute is None:
            continue
        if _keep(absolute, base_url, exclude_dirs, prevent_outside):
            links.append(absolute)
    return links
