"""site_loader.report: serialization of loaded documents for the CLI and callers."""

from site_loader.report.json_report import render_json

__all__ = ["render_json"]
