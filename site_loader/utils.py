# File: site_loader/utils.py
"""site_loader.utils: URL helpers shared by link extraction and the crawl orchestrator."""

from __future__ import annotations

from typing import Collection, Sequence
from urllib.parse import urlsplit, urlunsplit

__all__: Sequence[str] = (
    "NON_PAGE_EXTENSIONS",
    "as_directory",
    "canonical_url",
    "is_excluded",
    "is_non_page_resource",
)

#: Suffixes of static resources that never produce a readable page.
NON_PAGE_EXTENSIONS: tuple[str, ...] = (
    ".css",
    ".js",
    ".ico",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def as_directory(url: str) -> str:
    """Return *url* with a trailing slash appended if it has none."""
    return url if url.endswith("/") else url + "/"


def is_excluded(url: str, exclude_dirs: Collection[str]) -> bool:
    """True if *url* starts with any of the excluded prefixes."""
    return any(url.startswith(prefix) for prefix in exclude_dirs)


def is_non_page_resource(url: str) -> bool:
    """True if *url* ends with a known static-resource extension."""
    return url.endswith(NON_PAGE_EXTENSIONS)


def canonical_url(url: str) -> str:
    """
    Lowercase scheme and host, drop the scheme's default port and give an
    empty path a ``/``. Anything unparsable is returned unchanged.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
        port = parts.port
    except ValueError:
        return url
    if not host:
        return url
    scheme = parts.scheme.lower()
    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{port}"
    userinfo, sep, _ = parts.netloc.rpartition("@")
    if sep:
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment))
