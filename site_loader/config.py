# === FILE: site_loader/config.py ===
"""
Loading and validation of SiteLoader crawl configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, FrozenSet, Union
from urllib.parse import urlsplit

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class CrawlConfig(BaseModel):
    """Configuration for a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    root_url: str = Field(..., description="Seed URL the crawl starts from.")
    exclude_dirs: FrozenSet[str] = Field(
        default_factory=frozenset, description="URL prefixes pruned before fetching."
    )
    max_depth: int = Field(2, ge=0, description="Maximum number of link hops from the root.")
    timeout_millis: int = Field(10000, gt=0, description="Timeout of a single fetch (ms).")
    prevent_outside: bool = Field(True, description="Keep only links under the current page URL.")
    user_agent: str = Field("SiteLoader/1.0", min_length=1, description="User-Agent header.")

    @field_validator("root_url")
    @classmethod
    def _check_root_url(cls, v: str) -> str:
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"root_url must be an absolute http(s) URL, got {v!r}")
        return v

    @property
    def timeout(self) -> float:
        """Per-fetch timeout in seconds."""
        return self.timeout_millis / 1000


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path]) -> CrawlConfig:
    """
    Read a YAML or JSON file and return a validated CrawlConfig.
    Raises FileNotFoundError when the file is missing.
    """
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlConfig(**data)


__all__ = ["CrawlConfig", "ValidationError", "load_config"]
