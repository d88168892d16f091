# === FILE: site_loader/loader.py ===
"""
Wrapper module exposing a one-call crawl.
"""
from typing import List, Optional

from site_loader.config import CrawlConfig
from site_loader.crawler.crawler import PageFetcher, RecursiveLoader
from site_loader.crawler.models import Document


async def load(config: CrawlConfig, fetcher: Optional[PageFetcher] = None) -> List[Document]:
    """
    Run the recursive loader inside its context and return the documents.

    Parameters
    ----------
    config : CrawlConfig
        Crawl configuration.
    fetcher : PageFetcher, optional
        Transport to use instead of the built-in aiohttp fetcher.

    Returns
    -------
    List[Document]
        Root document first, then discovered pages in depth-first order.
    """
    async with RecursiveLoader(config, fetcher) as loader:
        documents = await loader.load()
    return documents

__all__ = ["load"]
