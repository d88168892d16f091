# site_loader/crawler/models.py
"""
Data models for the SiteLoader crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True, slots=True)
class Document:
    """Extracted text and metadata of one fetched page."""

    page_content: str
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def source(self) -> str:
        return self.metadata["source"]

    def to_dict(self) -> Dict[str, Any]:
        return {"page_content": self.page_content, "metadata": dict(self.metadata)}
