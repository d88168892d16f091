"""Crawl orchestration, transport and link discovery."""
