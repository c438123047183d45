"""Mapping utilities to turn anomaly records into export and display rows."""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from anomaly_dashboard.core.models import AnomalyRecord


TEMPLATE_HEADERS = [
    "ID",
    "Title",
    "Severity",
    "Reported_At",
    "Description",
]


def _clean_text(value: str | None) -> str:
    if not value:
        return ""
    return " ".join(value.split())


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_reported_at(value: datetime) -> str:
    """Render a timestamp the way the anomaly list shows it, e.g. ``Mar 5, 2025 - 09:15``."""

    stamp = _as_utc(value)
    return f"{stamp:%b} {stamp.day}, {stamp:%Y - %H:%M}"


def record_to_template_row(record: AnomalyRecord) -> Dict[str, Any]:
    """Convert an AnomalyRecord into the export template dictionary."""

    return {
        "ID": record.id,
        "Title": _clean_text(record.title),
        "Severity": record.severity,
        "Reported_At": _as_utc(record.reported_at).isoformat().replace("+00:00", "Z"),
        "Description": _clean_text(record.description),
    }


def records_to_rows(records: Iterable[AnomalyRecord]) -> List[Dict[str, Any]]:
    """Convert an iterable of AnomalyRecord objects into template-aligned rows."""

    return [record_to_template_row(record) for record in records]
