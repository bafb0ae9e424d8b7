"""Utilities for exporting parsed URLs."""

from __future__ import annotations

import csv
import json
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import yaml

from .constants import EXPORT_KEYS
from .logging_config import get_logger
from .models import ParsedUrl

logger = get_logger(__name__)

EXPORT_FORMATS: Tuple[str, ...] = ("json", "json-min", "yaml", "csv")


def result_to_dict(parsed: ParsedUrl, *, include_url: bool = False) -> Dict[str, Any]:
    payload = parsed.to_dict()
    if include_url:
        payload = {"url": parsed.url, **payload}
    return payload


def result_rows(results: Sequence[ParsedUrl], *, include_url: bool = False) -> List[Dict[str, str]]:
    """Flatten records into string-valued rows suitable for tabular output."""

    rows: List[Dict[str, str]] = []
    for parsed in results:
        row: Dict[str, str] = {}
        for key, value in result_to_dict(parsed, include_url=include_url).items():
            if key == "queryParams":
                row[key] = json.dumps(value, separators=(",", ":"), ensure_ascii=False) if value else ""
            elif value is None:
                row[key] = ""
            else:
                row[key] = str(value)
        rows.append(row)
    logger.debug("Built export rows", extra={"row_count": len(rows)})
    return rows


def render_export(results: Sequence[ParsedUrl], format_key: str, *, include_url: bool = False) -> str:
    format_key = format_key.lower()
    payload = [result_to_dict(parsed, include_url=include_url) for parsed in results]

    if format_key == "json":
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    if format_key == "json-min":
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False) + "\n"
    if format_key == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    if format_key == "csv":
        headers = (["url"] if include_url else []) + list(EXPORT_KEYS)
        return _render_csv(headers, result_rows(results, include_url=include_url))
    raise ValueError(f"Unsupported export format: {format_key}")


def write_export(results: Sequence[ParsedUrl], path: Path, format_key: str, *, include_url: bool = False) -> None:
    rendered = render_export(results, format_key, include_url=include_url)
    path.write_text(rendered, encoding="utf-8")
    logger.info(
        "Export written",
        extra={"path": str(path), "format": format_key, "row_count": len(results)},
    )


def _render_csv(headers: Sequence[str], rows: Sequence[Dict[str, str]]) -> str:
    buffer = StringIO()
    writer = csv.DictWriter(buffer, fieldnames=headers, lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow({key: row.get(key, "") for key in headers})
    return buffer.getvalue()
