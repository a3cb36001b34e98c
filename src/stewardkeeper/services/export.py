"""Flat export rows and CSV/JSON writers.

Rows are plain ``str -> scalar`` dicts with stable keys so they can be written
to CSV or JSON without any flattening.
"""

from __future__ import annotations

import csv
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping

from ..logging_config import get_logger
from .categories import UNKNOWN_RECIPIENT

logger = get_logger(__name__)

DONATION_FIELDS = ("id", "date", "amount", "recipient", "type", "notes")
INCOME_FIELDS = ("id", "date", "amount", "source", "notes", "processed")


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def _json_default(value: Any) -> Any:
    serialized = _serialize_value(value)
    return str(value) if serialized is value else serialized


def donation_rows(donations: Iterable[Any], recipients: Iterable[Any]) -> list[dict[str, Any]]:
    names = {r.id: r.name for r in recipients or () if r.id is not None}
    return [
        {
            "id": d.id,
            "date": d.occurred_on.isoformat(),
            "amount": str(d.amount),
            "recipient": names.get(d.recipient_id, UNKNOWN_RECIPIENT),
            "type": _serialize_value(d.donation_type),
            "notes": d.notes or "",
        }
        for d in donations or ()
    ]


def income_rows(income: Iterable[Any]) -> list[dict[str, Any]]:
    return [
        {
            "id": i.id,
            "date": i.occurred_on.isoformat(),
            "amount": str(i.amount),
            "source": i.source,
            "notes": i.notes or "",
            "processed": bool(i.processed),
        }
        for i in income or ()
    ]


def export_rows_csv(rows: Iterable[Mapping[str, Any]], output_path: Path) -> Path:
    """Write rows to CSV using the first row's keys as the header.

    Raises ``ValueError`` when there is nothing to export.
    """

    rows = list(rows)
    if not rows:
        raise ValueError("No data to export")

    headers = list(rows[0].keys())
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=headers, extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        for row in rows:
            writer.writerow(
                {key: "" if row.get(key) is None else _serialize_value(row.get(key)) for key in headers}
            )

    logger.info("CSV export written", extra={"path": str(output_path), "rows": len(rows)})
    return output_path


def export_rows_json(data: Any, output_path: Path) -> Path:
    """Write ``data`` as indented JSON."""

    if data is None:
        raise ValueError("No data to export")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2, default=_json_default)
        fh.write("\n")
    logger.info("JSON export written", extra={"path": str(output_path)})
    return output_path


__all__ = [
    "DONATION_FIELDS",
    "INCOME_FIELDS",
    "donation_rows",
    "export_rows_csv",
    "export_rows_json",
    "income_rows",
]
