# === FILE: site_loader/crawler/crawler.py ===
from __future__ import annotations

import time
from typing import List, Optional, Protocol, Set, Tuple

from aiohttp import ClientSession

from site_loader.config import CrawlConfig
from site_loader.crawler.fetcher import FetchError, Fetcher
from site_loader.crawler.link_extractor import extract_links
from site_loader.crawler.models import Document
from site_loader.logger import logger
from site_loader.parser.html_parser import extract_metadata, extract_text
from site_loader.utils import as_directory, is_excluded

__all__ = ("PageFetcher", "RecursiveLoader")


class PageFetcher(Protocol):
    """Anything able to GET a page body, raising FetchError on failure."""

    async def fetch(self, url: str, timeout: float) -> str: ...


class RecursiveLoader:
    """
    Depth-first recursive loader: fetches the root page, then follows
    same-site links up to ``max_depth`` hops, one request at a time.
    """

    def __init__(self, config: CrawlConfig, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config
        self.fetcher = fetcher
        self.failures: List[FetchError] = []
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> RecursiveLoader:
        if self.fetcher is None:
            self.session = ClientSession(headers={"User-Agent": self.config.user_agent})
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
            self.fetcher = None
        self.session = None

    async def load(self) -> List[Document]:
        """Crawl from the configured root and return all extracted documents."""
        root = self.config.root_url
        logger.info("Start loading: %s (max depth %d)", root, self.config.max_depth)
        start = time.monotonic()
        self.failures = []

        fetched = await self._get_document(root)
        if fetched is None:
            logger.warning("Root page %s is unreachable, nothing loaded", root)
            return []
        root_doc, root_html = fetched

        visited: Set[str] = {root}
        docs = [root_doc]
        docs.extend(await self._expand(root, visited, 0, prefetched=(root, root_html)))

        duration = time.monotonic() - start
        logger.info(
            "Finished: %d documents in %.2f s, %d failed fetches",
            len(docs), duration, len(self.failures),
        )
        return docs

    async def _expand(
        self,
        url: str,
        visited: Set[str],
        depth: int,
        prefetched: Optional[Tuple[str, str]] = None,
    ) -> List[Document]:
        if depth >= self.config.max_depth:
            logger.debug("Depth limit %d reached at %s", self.config.max_depth, url)
            return []

        url = as_directory(url)
        if is_excluded(url, self.config.exclude_dirs):
            logger.debug("Excluded branch %s", url)
            return []

        if prefetched is not None and prefetched[0] == url:
            html = prefetched[1]
        else:
            html = await self._fetch(url)
            if html is None:
                return []

        results: List[Document] = []
        for child in extract_links(html, url, self.config.exclude_dirs, self.config.prevent_outside):
            if child in visited:
                logger.debug("Already visited %s", child)
                continue
            visited.add(child)

            fetched = await self._get_document(child)
            if fetched is None:
                continue
            doc, child_html = fetched
            results.append(doc)

            if child.endswith("/"):
                results.extend(
                    await self._expand(child, visited, depth + 1, prefetched=(child, child_html))
                )
        return results

    async def _get_document(self, url: str) -> Optional[Tuple[Document, str]]:
        html = await self._fetch(url)
        if html is None:
            return None
        doc = Document(page_content=extract_text(html), metadata=extract_metadata(html, url))
        return doc, html

    async def _fetch(self, url: str) -> Optional[str]:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized, use 'async with RecursiveLoader(...)'")
        try:
            return await self.fetcher.fetch(url, self.config.timeout)
        except FetchError as exc:
            logger.warning("Failed %s: %s", exc.url, exc.reason)
            self.failures.append(exc)
            return None
