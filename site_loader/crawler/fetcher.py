# site_loader/crawler/fetcher.py
"""
Fetcher module: performs a single HTTP GET with a timeout, no retry.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_loader.logger import logger

__all__ = ("FetchError", "Fetcher")


class FetchError(Exception):
    """A page could not be fetched (network error, bad status or timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class Fetcher:
    """Fetches page bodies over a shared aiohttp session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str, timeout: float) -> str:
        """
        GET *url* and return the decoded body.

        Raises FetchError on any non-2xx status, client error or timeout;
        a partial body is never returned.
        """
        logger.debug("GET %s (timeout %.2f s)", url, timeout)
        try:
            async with self.session.get(url, timeout=ClientTimeout(total=timeout)) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}")
                return await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out after {timeout:.2f} s") from exc
        except ClientError as exc:
            raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc
        except LookupError as exc:
            # unknown charset announced by the server
            raise FetchError(url, f"undecodable body: {exc}") from exc
        except ValueError as exc:
            raise FetchError(url, f"invalid URL: {exc}") from exc
