"""
SiteLoader package initializer.
Defines package version and exposes the public crawl API.
"""
__version__ = "0.1.0"

from site_loader.config import CrawlConfig, load_config
from site_loader.crawler.crawler import RecursiveLoader
from site_loader.crawler.fetcher import FetchError, Fetcher
from site_loader.crawler.models import Document
from site_loader.loader import load

__all__ = [
    "__version__",
    "CrawlConfig",
    "Document",
    "FetchError",
    "Fetcher",
    "RecursiveLoader",
    "load",
    "load_config",
]
