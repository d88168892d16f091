# File: tests/test_fetcher.py
"""Tests for the aiohttp transport: every failure surfaces as FetchError."""
import asyncio

import pytest
from aiohttp import ClientSession, web

from site_loader.crawler.fetcher import FetchError, Fetcher


@pytest.mark.asyncio()
async def test_fetch_returns_body(serve_site):
    site = await serve_site({"/": "<html><body>ok</body></html>"})
    async with ClientSession() as session:
        body = await Fetcher(session).fetch(f"{site.url}/", timeout=2.0)
    assert body == "<html><body>ok</body></html>"


@pytest.mark.asyncio()
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_non_success_status_raises(serve_site, status):
    site = await serve_site({"/bad": status})
    async with ClientSession() as session:
        with pytest.raises(FetchError) as exc_info:
            await Fetcher(session).fetch(f"{site.url}/bad", timeout=2.0)
    assert exc_info.value.reason == f"HTTP {status}"
    assert exc_info.value.url == f"{site.url}/bad"


@pytest.mark.asyncio()
async def test_plain_text_content_type_is_accepted(unused_tcp_port):
    app = web.Application()

    async def handle(_):
        return web.Response(text="<html><body>plain</body></html>", content_type="text/plain")

    app.router.add_get("/", handle)
    runner = web.AppRunner(app)
    await runner.setup()
    await web.TCPSite(runner, "127.0.0.1", unused_tcp_port).start()
    try:
        async with ClientSession() as session:
            body = await Fetcher(session).fetch(f"http://127.0.0.1:{unused_tcp_port}/", 2.0)
    finally:
        await runner.cleanup()
    assert "plain" in body


@pytest.mark.asyncio()
async def test_timeout_raises(unused_tcp_port):
    app = web.Application()

    async def slow(_):
        await asyncio.sleep(2)
        return web.Response(text="late", content_type="text/html")

    app.router.add_get("/", slow)
    runner = web.AppRunner(app)
    await runner.setup()
    await web.TCPSite(runner, "127.0.0.1", unused_tcp_port).start()
    try:
        async with ClientSession() as session:
            with pytest.raises(FetchError) as exc_info:
                await Fetcher(session).fetch(f"http://127.0.0.1:{unused_tcp_port}/", timeout=0.2)
    finally:
        await runner.cleanup()
    assert "timed out" in exc_info.value.reason


@pytest.mark.asyncio()
async def test_connection_refused_raises(unused_tcp_port):
    async with ClientSession() as session:
        with pytest.raises(FetchError):
            await Fetcher(session).fetch(f"http://127.0.0.1:{unused_tcp_port}/", timeout=2.0)
