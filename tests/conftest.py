# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Dict, List, Union

import pytest
import pytest_asyncio
from aiohttp import web

from site_loader.config import CrawlConfig
from site_loader.crawler.fetcher import FetchError
from site_loader.logger import init_logging

#: page body, or an HTTP status to answer with
PageBody = Union[str, int]


@pytest.fixture(autouse=True)
def fresh_logging():
    """Bind the project logger to the streams of the current test."""
    init_logging(level="DEBUG")
    yield


class FakeFetcher:
    """In-memory fetcher: serves *pages* by exact URL and records every call."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str, timeout: float) -> str:
        self.calls.append(url)
        try:
            return self.pages[url]
        except KeyError:
            raise FetchError(url, "HTTP 404") from None


@pytest.fixture()
def fake_fetcher() -> Callable[[Dict[str, str]], FakeFetcher]:
    return FakeFetcher


@pytest.fixture()
def basic_config() -> CrawlConfig:
    """Return a basic valid CrawlConfig with default crawl options."""
    return CrawlConfig(root_url="http://site.test/", user_agent="TestAgent/1.0")


class SiteServer:
    """Base URL of a running test site plus per-path hit counters."""

    def __init__(self, url: str) -> None:
        self.url = url
        self.hits: Counter[str] = Counter()


@pytest_asyncio.fixture
async def serve_site(
    unused_tcp_port_factory,
) -> AsyncIterator[Callable[[Dict[str, PageBody]], Awaitable[SiteServer]]]:
    """
    Start a local aiohttp site from a ``{path: body-or-status}`` mapping.
    Unknown paths answer 404. Servers are cleaned up after the test.
    """
    runners: List[web.AppRunner] = []

    async def start(pages: Dict[str, PageBody]) -> SiteServer:
        port = unused_tcp_port_factory()
        server = SiteServer(f"http://127.0.0.1:{port}")

        async def handle(request: web.Request) -> web.Response:
            server.hits[request.path] += 1
            body = pages.get(request.path)
            if body is None:
                return web.Response(status=404, text="not found")
            if isinstance(body, int):
                return web.Response(status=body)
            return web.Response(text=body, content_type="text/html")

        app = web.Application()
        app.router.add_get("/{tail:.*}", handle)
        runner = web.AppRunner(app)
        await runner.setup()
        await web.TCPSite(runner, "127.0.0.1", port).start()
        runners.append(runner)
        return server

    try:
        yield start
    finally:
        for runner in runners:
            await runner.cleanup()
