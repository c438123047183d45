"""Export sinks for snapshots of the anomaly list."""
import csv
import io
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, List, Union

from anomaly_dashboard.reporting.templates import TEMPLATE_HEADERS


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write anomaly rows to a CSV file with consistent headers."""

    rows = list(rows)
    ensure_output_dir(output_path)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TEMPLATE_HEADERS)
        writer.writeheader()
        writer.writerows(rows)


def write_excel(rows: Iterable[Dict[str, Any]], target: Union[Path, BinaryIO]) -> None:
    """Write rows to an Excel workbook (a path or a binary stream) using openpyxl."""

    from openpyxl import Workbook

    rows = list(rows)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "anomalies"
    headers: List[str] = list(TEMPLATE_HEADERS)
    sheet.append(headers)
    for row in rows:
        sheet.append([row.get(header, "") for header in headers])
    if isinstance(target, Path):
        ensure_output_dir(target)
    workbook.save(target)


def rows_to_csv_bytes(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Return CSV content for a download button."""

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=TEMPLATE_HEADERS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def rows_to_excel_bytes(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Return an .xlsx workbook for a download button."""

    buffer = io.BytesIO()
    write_excel(rows, buffer)
    return buffer.getvalue()
