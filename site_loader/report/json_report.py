# site_loader/report/json_report.py

"""
JSON output for SiteLoader.

Serializes loaded documents to a file.
"""
import json
from pathlib import Path
from typing import Iterable

from site_loader.crawler.models import Document


def render_json(documents: Iterable[Document], output_path: Path | str) -> Path:
    """
    Save *documents* as a JSON array at the given path.

    :param documents: documents returned by a crawl
    :param output_path: path of the JSON file
    :return: Path of the written file

    Example:
    ```python
    from site_loader.report.json_report import render_json
    report_path = render_json(docs, 'out/docs.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [doc.to_dict() for doc in documents]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
